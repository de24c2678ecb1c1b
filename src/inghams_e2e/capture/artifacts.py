"""Failure artifacts - HTML snapshots and screenshots written when a browser test fails."""

import re
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from bs4 import BeautifulSoup, Comment

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
URL_MARKER = "captured-url:"

_FILE_NAME_RE = re.compile(r"^(?P<name>.+)_(?P<timestamp>\d{8}_\d{6})$")


@dataclass
class FailureArtifact:
    """One failed test with the snapshot files captured for it."""

    test_name: str
    captured_at: datetime
    html_path: Path | None = None
    screenshot_path: Path | None = None
    url: str | None = None
    title: str | None = None
    headings: list[str] = field(default_factory=list)


def snapshot_header(url: str) -> str:
    """HTML comment placed before a snapshot so the reader can tell where it came from."""
    return f"<!-- {URL_MARKER} {url} -->\n"


def parse_snapshot(html: str) -> dict:
    """
    Pull the page URL, title and top-level headings out of a snapshot.

    Returns a dict with `url`, `title` and `headings` keys.
    """
    soup = BeautifulSoup(html, "lxml")

    url = None
    for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
        text = comment.strip()
        if text.startswith(URL_MARKER):
            url = text[len(URL_MARKER):].strip()
            break

    title = soup.title.get_text(strip=True) if soup.title else None
    headings = [h.get_text(" ", strip=True) for h in soup.find_all(["h1", "h2"])]
    return {
        "url": url,
        "title": title or None,
        "headings": [h for h in headings if h][:5],
    }


class FailureCapture:
    """Group the files in a failures directory by test and capture time."""

    def __init__(self, failures_dir: Path = Path("failures")):
        self.failures_dir = failures_dir

    def get_failures(self) -> list[FailureArtifact]:
        """All captured failures, newest first."""
        if not self.failures_dir.exists():
            return []

        artifacts: dict[str, FailureArtifact] = {}
        for path in sorted(self.failures_dir.iterdir()):
            if path.suffix not in (".html", ".png"):
                continue
            if not (match := _FILE_NAME_RE.match(path.stem)):
                continue

            artifact = artifacts.get(path.stem)
            if artifact is None:
                artifact = FailureArtifact(
                    test_name=match.group("name"),
                    captured_at=datetime.strptime(match.group("timestamp"), TIMESTAMP_FORMAT),
                )
                artifacts[path.stem] = artifact

            if path.suffix == ".png":
                artifact.screenshot_path = path
            else:
                artifact.html_path = path
                details = parse_snapshot(path.read_text(encoding="utf-8", errors="replace"))
                artifact.url = details["url"]
                artifact.title = details["title"]
                artifact.headings = details["headings"]

        return sorted(artifacts.values(), key=lambda a: a.captured_at, reverse=True)
