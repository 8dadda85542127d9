#!/usr/bin/env python3
"""kubesite command line: sync, preview and check the kube-rs website."""

from typing import List, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from kubesite.cli.site_manager import SiteManager
from kubesite.config import SiteConfig
from kubesite.errors import KubesiteError
from kubesite.log import configure_logging
from kubesite.site.nav import check_nav
from kubesite.site.props import collect_props
from kubesite.sync.client import UpstreamClient
from kubesite.sync.sources import DEFAULT_SOURCES, select_sources
from kubesite.sync.syncer import ContentSyncer

app = typer.Typer(help="Tools for the kube-rs website", add_completion=False)
console = Console()


def load_config() -> SiteConfig:
    try:
        return SiteConfig.from_env()
    except KubesiteError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
):
    """Tools for the kube-rs website."""
    configure_logging(verbose)


@app.command("sync")
def sync(
    only: Optional[List[str]] = typer.Option(None, "--only", help="Sync only this destination (repeatable)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Fetch and render without writing"),
):
    """Synchronize markdown from other repos in the kube-rs org."""
    config = load_config()
    try:
        sources = select_sources(DEFAULT_SOURCES, only or [])
        with UpstreamClient(timeout=config.sync_timeout) as client:
            results = ContentSyncer(config.docs_dir, client=client, dry_run=dry_run).sync_all(sources)
    except KubesiteError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)

    changed = sum(1 for r in results if r.changed)
    verb = "would change" if dry_run else "changed"
    console.print(f"[green]✅ Synced {len(results)} file(s), {changed} {verb}[/green]")


@app.command("serve")
def serve(
    no_open: bool = typer.Option(False, "--no-open", help="Do not open a browser"),
):
    """Start a development server assuming virtualenv deps have been installed."""
    manager = SiteManager(load_config(), console=console)
    try:
        code = manager.serve(open_browser=not no_open)
    except KubesiteError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)
    raise typer.Exit(code=code)


@app.command("linkcheck")
def linkcheck():
    """Check links in the docs tree with lychee."""
    manager = SiteManager(load_config(), console=console)
    try:
        code = manager.linkcheck()
    except KubesiteError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)
    raise typer.Exit(code=code)


@app.command("dynprops")
def dynprops():
    """Show the state of every synced page."""
    config = load_config()
    table = Table(title=f"Synced pages in {config.docs_dir}")
    table.add_column("Page")
    table.add_column("Size", justify="right")
    table.add_column("Updated")
    table.add_column("Header")
    table.add_column("Upstream", overflow="fold")

    for props in collect_props(config.docs_dir, DEFAULT_SOURCES):
        if not props.exists:
            table.add_row(props.dest, "-", "[red]missing[/red]", "-", props.url)
            continue
        header = "[green]yes[/green]" if props.has_header else "[yellow]no[/yellow]"
        table.add_row(props.dest, props.size_text, props.age_text(), header, props.url)
    console.print(table)


@app.command("navcheck")
def navcheck():
    """Check that every nav entry in mkdocs.yml resolves to a page."""
    config = load_config()
    try:
        report = check_nav(config.mkdocs_config, config.docs_dir)
    except KubesiteError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)

    for page in report.uncovered:
        logger.warning(f"Not in nav: {page}")
    for page in report.broken:
        logger.error(f"Broken nav entry: {page}")

    if not report.ok:
        console.print(f"[red]❌ {len(report.broken)} broken nav entries[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]✅ {len(report.pages)} nav entries resolve[/green]")


def main():
    """Main entry point for the kubesite CLI."""
    app()


if __name__ == "__main__":
    main()
