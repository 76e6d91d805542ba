"""Click CLI entry point for galogger."""
from __future__ import annotations

import json
import logging
import sys

import click

from galogger import __version__
from galogger.consent import default_prompt, request_approval
from galogger.errors import GALoggerError
from galogger.models import DispatchResult
from galogger.session import Session, initialize
from galogger.settings import delete_settings, load_raw, save_settings, settings_path

path_option = click.option(
    "--path", default=None, type=click.Path(dir_okay=False),
    help="Settings file (default: $GALOG_SETTINGS or ~/galog_settings.json)",
)


@click.group()
@click.version_option(version=__version__, prog_name="galog")
@click.option("--verbose", is_flag=True, help="Debug logging")
def cli(verbose: bool) -> None:
    """galog - Google Analytics Measurement Protocol logger."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )


def _session(path: str | None, user_id: str | None) -> Session:
    try:
        session = initialize(path=settings_path(path))
    except GALoggerError as e:
        raise click.ClickException(e.message) from e
    if user_id is not None:
        session.set_user_id(user_id)
    return session


def _report(session: Session, hit_url: str, dry_run: bool) -> None:
    if dry_run:
        click.echo(hit_url)
        return
    try:
        result: DispatchResult = session.send(hit_url)
    except GALoggerError as e:
        raise click.ClickException(e.message) from e
    if result.ok:
        click.echo(f"Sent (HTTP {result.status})")
    else:
        # Best-effort: a failed hit is not a failed command.
        detail = result.error.message if result.error else f"HTTP {result.status}"
        click.echo(f"Warning: hit not delivered: {detail}", err=True)


@cli.group()
def settings() -> None:
    """Manage the settings file."""
    pass


@settings.command("save")
@path_option
@click.option("--tracking-id", default=None, help="Property ID, e.g. UA-XXXXXXXX-X")
@click.option("--hostname", default=None, help="Default hostname for pageviews")
@click.option("--consent/--no-consent", default=None, help="Consent to send data")
def settings_save(path: str | None, tracking_id: str | None, hostname: str | None,
                  consent: bool | None) -> None:
    """Merge values into the settings file."""
    values = {"tracking_id": tracking_id, "hostname": hostname, "consent": consent}
    values = {k: v for k, v in values.items() if v is not None}
    if not values:
        click.echo("Nothing to save. Pass --tracking-id, --hostname or --consent.", err=True)
        sys.exit(1)
    save_settings(path, **values)
    click.echo("Settings have been saved")


@settings.command("show")
@path_option
def settings_show(path: str | None) -> None:
    """Print the settings file."""
    try:
        data = load_raw(path)
    except GALoggerError as e:
        raise click.ClickException(e.message) from e
    click.echo(json.dumps(data, indent=2))


@settings.command("delete")
@path_option
def settings_delete(path: str | None) -> None:
    """Delete the settings file."""
    if delete_settings(path):
        click.echo("Settings have been deleted")
    else:
        click.echo("No settings file to delete")


@cli.command("consent")
@path_option
@click.option("--message", default=None, help="Custom approval message")
@click.option("--yes", "pre_approved", is_flag=True,
              help="Grant consent without asking (you are responsible for compliance)")
def consent_cmd(path: str | None, message: str | None, pre_approved: bool) -> None:
    """Ask for approval and store the answer in the settings file."""
    granted = request_approval(message=message, consent=pre_approved,
                               prompt=default_prompt())
    save_settings(path, consent=granted)


@cli.command()
@click.argument("category", default="stats")
@click.argument("action", default="calculate")
@click.option("--label", default=None, help="Event label")
@click.option("--value", default=None, help="Event value")
@click.option("--user-id", default=None, help="User id for this hit")
@path_option
@click.option("--dry-run", is_flag=True, help="Print the URL instead of sending it")
def event(category: str, action: str, label: str | None, value: str | None,
          user_id: str | None, path: str | None, dry_run: bool) -> None:
    """Send an event hit."""
    session = _session(path, user_id)
    _report(session, session.event_url(category, action, label=label, value=value), dry_run)


@cli.command()
@click.option("--page", default=None, help="Page path, e.g. /home")
@click.option("--page-url", default=None, help="Full page URL")
@click.option("--title", default=None, help="Page title")
@click.option("--hostname", default=None, help="Overrides the saved hostname")
@click.option("--user-id", default=None, help="User id for this hit")
@path_option
@click.option("--dry-run", is_flag=True, help="Print the URL instead of sending it")
def pageview(page: str | None, page_url: str | None, title: str | None,
             hostname: str | None, user_id: str | None, path: str | None,
             dry_run: bool) -> None:
    """Send a pageview hit."""
    session = _session(path, user_id)
    hit_url = session.pageview_url(page_url=page_url, page=page, title=title,
                                   hostname=hostname)
    _report(session, hit_url, dry_run)


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
