"""CLI entry point for m3ucatalog."""

import json

import click
from rich.console import Console
from rich.table import Table

from m3ucatalog.config import load_config, save_config, CONFIG_FILE

console = Console()

PROFILE_CHOICES = ["live", "movies", "series", "admin"]


@click.group()
@click.option("--log-level", default=None, help="Logging level (default: from config)")
@click.pass_context
def cli(ctx, log_level: str | None):
    """m3ucatalog - Browse an Extended-M3U playlist by live, movies or series profile."""
    from m3ucatalog.utils.logs import setup_logging
    from m3ucatalog.utils.retry import ConfigError

    ctx.ensure_object(dict)
    try:
        config = load_config()
    except ConfigError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)
    setup_logging(log_level or config.log_level)
    ctx.obj["config"] = config


def _load_text(config, source: str | None, offline: bool) -> str:
    from m3ucatalog.sources.fetcher import fetch_playlist, read_cached, write_cached
    from m3ucatalog.utils.retry import RetrievalError

    if offline:
        text = read_cached(config.cache_file)
        if text is None:
            console.print(f"[red]Error: No cached playlist at {config.cache_file}[/red]")
            raise SystemExit(1)
        return text

    source = source or config.playlist_url
    if not source:
        console.print("[red]Error: No playlist source. Pass --source or run 'm3ucatalog init'.[/red]")
        raise SystemExit(1)

    try:
        text = fetch_playlist(source, timeout=config.request_timeout, max_retries=config.max_retries)
    except RetrievalError as e:
        console.print(f"[red]Connection Error: {e}[/red]")
        raise SystemExit(1)

    config.ensure_dirs()
    write_cached(config.cache_file, text)
    return text


# ─── init ────────────────────────────────────────────────────────────────────

@cli.command()
@click.option("--url", prompt="Playlist URL or path", help="Default M3U playlist source")
@click.pass_context
def init(ctx, url: str):
    """Save the default playlist source."""
    config = ctx.obj["config"]
    config.playlist_url = url
    save_config(config)
    console.print(f"[green]Configuration saved to {CONFIG_FILE}[/green]")
    console.print(f"[green]Playlist source: {config.playlist_url}[/green]")


# ─── browse ──────────────────────────────────────────────────────────────────

@cli.command()
@click.argument("profile", type=click.Choice(PROFILE_CHOICES, case_sensitive=False))
@click.option("--source", "-s", default=None, help="Playlist URL or local path (default: from config)")
@click.option("--search", "-q", default=None, help="Only show entries whose name contains this text")
@click.option("--limit", "-n", type=int, default=None, help="Rows shown per category (default: from config)")
@click.option("--json", "as_json", is_flag=True, help="Print the catalog as JSON")
@click.option("--offline", is_flag=True, help="Use the last cached playlist instead of fetching")
@click.pass_context
def browse(ctx, profile: str, source: str | None, search: str | None, limit: int | None,
           as_json: bool, offline: bool):
    """Show the catalog for one profile."""
    config = ctx.obj["config"]
    text = _load_text(config, source, offline)

    from m3ucatalog.browse.search import filter_categories, preview, summarize
    from m3ucatalog.catalog.engine import parse_in_chunks

    categories = parse_in_chunks(text, profile, chunk_size=config.chunk_size)
    categories = filter_categories(categories, search)

    if as_json:
        click.echo(json.dumps([c.to_dict() for c in categories], indent=2, ensure_ascii=False))
        return

    if not categories:
        console.print(f"[yellow]No entries found for profile '{profile}'.[/yellow]")
        return

    row_limit = config.row_limit if limit is None else limit
    for category in categories:
        table = Table(title=f"{category.label} ({len(category.members)})", title_justify="left")
        table.add_column("Name", style="cyan")
        table.add_column("Kind", style="green")
        table.add_column("Locator", overflow="fold")
        for entry in preview(category, row_limit):
            table.add_row(entry.name, entry.kind.value, entry.locator)
        console.print(table)

    totals = summarize(categories)
    console.print(f"[bold]{totals['entries']} entries in {totals['categories']} categories[/bold]")


# ─── stats ───────────────────────────────────────────────────────────────────

@cli.command()
@click.option("--source", "-s", default=None, help="Playlist URL or local path (default: from config)")
@click.option("--offline", is_flag=True, help="Use the last cached playlist instead of fetching")
@click.pass_context
def stats(ctx, source: str | None, offline: bool):
    """Show category and entry counts for every content profile."""
    config = ctx.obj["config"]
    text = _load_text(config, source, offline)

    from m3ucatalog.browse.search import summarize
    from m3ucatalog.catalog.engine import parse_playlist_subset
    from m3ucatalog.catalog.profiles import CONTENT_PROFILES

    table = Table(title="Playlist Profiles")
    table.add_column("Profile", style="cyan")
    table.add_column("Categories", style="green")
    table.add_column("Entries", style="green")
    for profile in CONTENT_PROFILES:
        totals = summarize(parse_playlist_subset(text, profile))
        table.add_row(profile.value, str(totals["categories"]), str(totals["entries"]))
    console.print(table)


# ─── config ──────────────────────────────────────────────────────────────────

@cli.command("config")
@click.pass_context
def show_config(ctx):
    """Show the effective configuration."""
    config = ctx.obj["config"]

    table = Table(title="Configuration")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")
    for key in config.__dataclass_fields__:
        table.add_row(key, str(getattr(config, key)))
    console.print(table)


if __name__ == "__main__":
    cli()
