# src/focusmode/cli.py
import logging
from contextlib import contextmanager

import typer

from focusmode.blocker import config
from focusmode.blocker.backup_helper import backup_hosts
from focusmode.blocker.dns_cache import flush_dns_cache
from focusmode.blocker.domains import ensure_domains_file, load_domains
from focusmode.blocker.hosts_blocker import disable, enable, is_active
from focusmode.editor import open_in_editor
from focusmode.errors import FocusError

logger = logging.getLogger(__name__)

# `focus` with no verb prints the usage below and exits with code 2,
# unknown verbs are rejected by click with the same code.
cli = typer.Typer(
    help="Block distracting websites while you work.",
    invoke_without_command=True,
    add_completion=False,
)


@contextmanager
def reported_errors():
    try:
        yield
    except PermissionError as exc:
        logger.debug("Permission denied: %s", exc)
        typer.echo(f"Permission denied: {exc.filename or config.HOSTS_PATH}. Try running with sudo:", err=True)
        typer.echo("  sudo focus on", err=True)
        typer.echo("  sudo focus off", err=True)
        raise typer.Exit(code=1)
    except (FocusError, OSError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)


def _backup(hosts_path):
    try:
        backup_hosts(hosts_path, config.BACKUP_DIR, config.BACKUP_KEEP)
    except OSError as exc:
        logger.warning("Could not back up %s: %s", hosts_path, exc)


def _usage(ctx: typer.Context) -> str:
    lines = ["Usage: focus [OPTIONS] COMMAND", "", "Commands:"]
    for name in ctx.command.list_commands(ctx):
        cmd = ctx.command.get_command(ctx, name)
        lines.append(f"  {name:<6}{cmd.get_short_help_str()}")
    lines.append("")
    lines.append("Run 'focus --help' for details.")
    return "\n".join(lines)


def _after_change():
    if config.FLUSH_DNS:
        flush_dns_cache()


@cli.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        typer.echo(_usage(ctx), err=True)
        raise typer.Exit(code=2)

    try:
        ensure_domains_file(config.DOMAINS_FILE)
    except OSError as exc:
        typer.echo(f"Error creating focus directory: {exc}", err=True)
        raise typer.Exit(code=1)


@cli.command()
def on():
    """Enable focus mode - block all configured domains."""
    with reported_errors():
        domains = load_domains(config.DOMAINS_FILE)
        changed = enable(domains, config.HOSTS_PATH, config.REDIRECT_IP, before_write=_backup)
    if changed:
        _after_change()

    if not domains:
        typer.echo("No domains configured. Run 'focus edit' to add domains.")
        return
    typer.echo(f"Focus mode activated. Blocked {len(domains)} domains:")
    for d in domains:
        typer.echo(f"  - {d}")


@cli.command()
def off():
    """Disable focus mode - unblock all domains."""
    with reported_errors():
        changed = disable(config.HOSTS_PATH, before_write=_backup)
    if not changed:
        typer.echo("Focus mode is not active.")
        return
    _after_change()
    typer.echo("Focus mode deactivated. All sites unblocked.")


@cli.command()
def edit():
    """Edit the list of blocked domains."""
    with reported_errors():
        status = open_in_editor(config.DOMAINS_FILE)
    if status != 0:
        logger.warning("Editor exited with status %d", status)
        return
    typer.echo("Domains file saved. Changes will apply next time you run 'focus on'.")
    if is_active(config.HOSTS_PATH):
        typer.echo("Tip: Run 'focus on' again to apply changes immediately.")


if __name__ == "__main__":
    cli()

# run it from a checkout with:
# python -m focusmode.cli on
