"""CLI entry point for the Inghams E2E suite."""

import logging
from pathlib import Path

import click
from playwright.sync_api import sync_playwright
from rich.table import Table

from .capture import FailureCapture
from .config import Config, load_config
from .data import load_source_paths
from .errors import ConfigError
from .log import console, setup_logging
from .models import Product
from .setup import SYSTEMS, capture_storage_state, cleanup_automation_pages
from .source_paths import build_url, error_url, visit

logger = logging.getLogger(__name__)


def _urls(config: Config):
    try:
        return config.urls
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


def _check_credentials(config: Config, system: str) -> None:
    try:
        if system == "ecms":
            config.ecms_credentials()
        else:
            config.pcms_credentials()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(package_name="inghams-e2e")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Config file path")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Inghams E2E - browser checks for the CMS back-offices and the public site."""
    ctx.ensure_object(dict)
    setup_logging(logging.DEBUG if verbose else logging.INFO)
    ctx.obj["config"] = load_config(Path(config_path) if config_path else None)


@main.command()
@click.pass_context
def envs(ctx: click.Context) -> None:
    """List the environments and their base URLs."""
    config: Config = ctx.obj["config"]

    table = Table(title="Environments")
    table.add_column("Name", style="cyan")
    table.add_column("ECMS")
    table.add_column("PCMS")
    table.add_column("Inghams")
    table.add_column("Explore", style="dim")

    for name, urls in sorted(config.environments.items()):
        label = f"[bold]{name} *[/]" if name == config.env else name
        table.add_row(label, urls.e_cms, urls.p_cms, urls.inghams, urls.en_gb or "-")

    console.print(table)
    console.print(f"[dim]* selected by ENV ({config.env})[/]")


@main.command("setup-auth")
@click.option("--system", "-s", type=click.Choice([*SYSTEMS, "all"]), default="all", help="Back-office to sign into")
@click.option("--headed", is_flag=True, help="Show the browser window")
@click.pass_context
def setup_auth(ctx: click.Context, system: str, headed: bool) -> None:
    """Sign into the back-offices and save their storage state under .auth/."""
    config: Config = ctx.obj["config"]
    _urls(config)
    systems = list(SYSTEMS) if system == "all" else [system]
    for name in systems:
        _check_credentials(config, name)

    with sync_playwright() as p:
        browser = p.chromium.launch(headless=not headed)
        try:
            for name in systems:
                with console.status(f"[yellow]Signing into {name.upper()}...[/]"):
                    path = capture_storage_state(browser, config, name)
                console.print(f"[green]✓[/] {name.upper()} storage state saved to {path}")
        finally:
            browser.close()


@main.command()
@click.option("--headed", is_flag=True, help="Show the browser window")
@click.pass_context
def cleanup(ctx: click.Context, headed: bool) -> None:
    """Delete the ECMS pages created by the component tests."""
    config: Config = ctx.obj["config"]
    _urls(config)
    state = config.storage_state_path("ecms")
    if not state.exists():
        raise click.ClickException(f"No ECMS storage state at {state}, run `inghams-e2e setup-auth` first")

    with sync_playwright() as p:
        browser = p.chromium.launch(headless=not headed)
        context = browser.new_context(storage_state=str(state))
        context.set_default_timeout(config.browser.timeout_ms)
        try:
            removed = cleanup_automation_pages(context.new_page(), config)
        finally:
            context.close()
            browser.close()

    console.print(f"[green]✓[/] Removed {removed} automation pages")


@main.command("check-paths")
@click.option(
    "--product",
    "-p",
    required=True,
    type=click.Choice([product.value for product in Product], case_sensitive=False),
    help="Product the migration CSV belongs to",
)
@click.option("--csv", "csv_path", required=True, type=click.Path(exists=True, dir_okay=False), help="Migration CSV")
@click.option("--limit", "-n", type=int, default=None, help="Only check the first N rows")
@click.pass_context
def check_paths(ctx: click.Context, product: str, csv_path: str, limit: int | None) -> None:
    """Visit every migrated source path and report the ones that do not resolve."""
    config: Config = ctx.obj["config"]
    home = _urls(config).inghams
    selected = Product.parse(product)

    rows = load_source_paths(Path(csv_path))
    if limit is not None:
        rows = rows[:limit]
    if not rows:
        console.print("[yellow]No source paths found[/]")
        return

    results = []
    with sync_playwright() as p:
        browser = p.chromium.launch()
        page = browser.new_page()
        page.set_default_navigation_timeout(config.browser.navigation_timeout_ms)
        try:
            with console.status(f"[yellow]Checking {len(rows)} source paths...[/]"):
                for row in rows:
                    results.append(visit(page, build_url(selected, home, row.source_path), error_url(home)))
        finally:
            browser.close()

    table = Table(title=f"{selected.display_name} source paths")
    table.add_column("URL", style="cyan", overflow="fold")
    table.add_column("Status")
    table.add_column("Result")
    for result in results:
        outcome = "[green]✓[/]" if result.ok else f"[red]✗ {result.error}[/]"
        table.add_row(result.url, str(result.status or "-"), outcome)
    console.print(table)

    failed = [result for result in results if not result.ok]
    console.print(f"\n[bold]Summary:[/] {len(results) - len(failed)} ok, {len(failed)} failed")
    if failed:
        ctx.exit(1)


@main.command()
@click.option("--dir", "failures_dir", type=click.Path(file_okay=False), default=None, help="Failures directory")
@click.pass_context
def failures(ctx: click.Context, failures_dir: str | None) -> None:
    """List the HTML snapshots and screenshots saved for failed tests."""
    config: Config = ctx.obj["config"]
    directory = Path(failures_dir) if failures_dir else config.failures_dir

    artifacts = FailureCapture(directory).get_failures()
    if not artifacts:
        console.print(f"[green]No failures captured in {directory}[/]")
        return

    table = Table(title=f"Captured failures ({directory})")
    table.add_column("Test", style="cyan", max_width=50)
    table.add_column("Captured")
    table.add_column("Page", max_width=40)
    table.add_column("Files", style="dim")
    for artifact in artifacts:
        files = [path.name for path in (artifact.html_path, artifact.screenshot_path) if path]
        table.add_row(
            artifact.test_name,
            artifact.captured_at.strftime("%Y-%m-%d %H:%M:%S"),
            artifact.title or artifact.url or "-",
            ", ".join(files),
        )
    console.print(table)


if __name__ == "__main__":
    main()
