"""moderasi CLI — check text and filenames against the moderation catalog."""

import sys

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from moderasi import __version__

console = Console()


def _settings(config_path: str | None):
    from moderasi.config import SettingsError, load_settings

    try:
        return load_settings(config_path)
    except SettingsError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", "config_path", default=None, help="Settings YAML file")
@click.option("--verbose", "-v", is_flag=True, help="Emit JSON debug logs to stderr")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool):
    """moderasi — content moderation for showcase submissions.

    Scans titles, descriptions and image filenames for SARA, pornography,
    violence, hate speech, drugs and gambling terms, including leetspeak
    and spaced-out spellings.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    if verbose:
        from moderasi.logging import configure_logging

        configure_logging("DEBUG")


# ── Check ────────────────────────────────────────────────────────────


@main.command()
@click.argument("title")
@click.argument("description", default="")
def check(title: str, description: str):
    """Moderate a TITLE and optional DESCRIPTION.

    Exits with status 1 when the content is not clean.
    """
    from moderasi.moderation import get_violation_message, moderate_content

    result = moderate_content(title, description)

    if result.is_clean:
        console.print("[green]Clean:[/] no violations found.")
        return

    table = Table(title="Moderation Verdict")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Severity", result.severity.value)
    table.add_row("Violations", "\n".join(result.violations))
    table.add_row("Blocked words", ", ".join(result.blocked_words))
    console.print(table)
    console.print(Panel(get_violation_message(result), title="Message"))
    sys.exit(1)


# ── Image ────────────────────────────────────────────────────────────


@main.command()
@click.argument("filename")
def image(filename: str):
    """Check an image FILENAME before upload. Exits 1 when rejected."""
    from moderasi.moderation import moderate_image_filename

    if moderate_image_filename(filename):
        console.print(f"  [green]v[/] {filename} is acceptable")
        return
    console.print(f"  [red]x[/] {filename} contains inappropriate terms")
    sys.exit(1)


# ── Catalog ──────────────────────────────────────────────────────────


@main.command()
def catalog():
    """Show the keyword catalog per category."""
    from moderasi.moderation.catalog import CATALOG

    table = Table(title="Keyword Catalog")
    table.add_column("Category", style="cyan")
    table.add_column("Label")
    table.add_column("Severity rule")
    table.add_column("Keywords", justify="right", style="green")

    for category, keywords in CATALOG.items():
        table.add_row(
            category.value,
            category.label,
            category.severity_rule.value,
            str(len(keywords)),
        )

    console.print(table)


@main.command()
@click.argument("keyword")
def variants(keyword: str):
    """List every form treated as an occurrence of KEYWORD."""
    from moderasi.moderation.variants import generate_variations

    forms = generate_variations(keyword.lower())
    console.print(f"\n[bold blue]{keyword}[/] — {len(forms)} variants\n")
    for form in forms:
        console.print(f"  {form}")


# ── Events ───────────────────────────────────────────────────────────


@main.command()
@click.option("--scope", default=None, type=click.Choice(["content", "image"]))
@click.option("--action", default=None, type=click.Choice(["allow", "flag", "block"]))
@click.option(
    "--limit", "-n", default=20, show_default=True, type=click.IntRange(min=1),
    help="Maximum events to show",
)
@click.pass_context
def events(ctx: click.Context, scope: str | None, action: str | None, limit: int):
    """Show recent moderation decisions from the event log."""
    from moderasi.moderation.event_log import ModerationEventLog

    settings = _settings(ctx.obj.get("config_path"))
    log = ModerationEventLog(settings.event_dir)
    entries = log.get_events(scope=scope, action=action, limit=limit)

    if not entries:
        console.print("[yellow]No moderation events recorded.[/]")
        return

    table = Table(title=f"Moderation Events ({len(entries)} shown)")
    table.add_column("Time", style="dim")
    table.add_column("Scope")
    table.add_column("Action")
    table.add_column("Severity")
    table.add_column("Subject", style="cyan")
    table.add_column("Violations")

    for e in entries:
        color = "red" if e.action == "block" else "yellow" if e.action == "flag" else "green"
        table.add_row(
            e.timestamp[:19],
            e.scope,
            f"[{color}]{e.action}[/]",
            e.severity,
            e.subject_id or "-",
            ", ".join(e.violations),
        )

    console.print(table)


if __name__ == "__main__":
    main()
