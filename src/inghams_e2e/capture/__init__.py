"""Reader for the failure artifacts saved by the capture plugin."""

from .artifacts import FailureArtifact, FailureCapture, parse_snapshot

__all__ = ["FailureArtifact", "FailureCapture", "parse_snapshot"]
