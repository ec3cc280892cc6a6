"""CLI command for showing the effective configuration."""

import typer

from gup.config import get_config_file_path, load_config
from gup.cli.utils import exit_on_error

config_app = typer.Typer(
    name="config",
    help="Inspect gup configuration in ~/.gup/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    with exit_on_error():
        config = load_config()

    config_file = get_config_file_path()
    source = config_file if config_file.exists() else "defaults"
    typer.echo(f"Current gup configuration ({source}):")
    typer.echo()
    typer.echo(f"  Protected branches: {', '.join(config.protected_branches) or 'none'}")
    typer.echo(f"  Default kind: {config.default_kind or 'not set'}")
    typer.echo(f"  Editor: {config.editor or 'not set'}")
    typer.echo(f"  Edit attempts: {config.edit_attempts}")
    typer.echo(f"  Ignored checks: {', '.join(config.ignored_checks) or 'none'}")
    typer.echo(f"  Poll interval: {config.poll_interval:g}s (timeout {config.poll_timeout:g}s)")
    typer.echo(f"  API URL: {config.api_url}")

    token = config.github_token
    if token:
        masked = token[:8] + "..." + token[-4:] if len(token) > 12 else "***"
        typer.echo(f"  GitHub token: {masked}")
    else:
        typer.echo("  GitHub token: not set")
