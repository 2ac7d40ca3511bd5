"""Shared setup logic for CLI commands."""

from __future__ import annotations

from pathlib import Path

import click

THANKFUL_DIR = Path.home() / ".thankful"
CONFIG_PATH = THANKFUL_DIR / "config.yaml"


class DateParam(click.ParamType):
    """A ``YYYY-MM-DD`` day, converted to :class:`datetime.date`."""

    name = "date"

    def convert(self, value, param, ctx):
        from thankful.journal.dates import parse_date_key

        if not isinstance(value, str):
            return value
        try:
            return parse_date_key(value.strip())
        except ValueError:
            self.fail(f"{value!r} is not a valid YYYY-MM-DD date", param, ctx)


def load_config(config_file: str | None = None, data_dir: str | None = None):
    """Load config from the given file (if it exists) and environment."""
    from thankful.core.config import Config
    from thankful.core.exceptions import ConfigurationError

    try:
        config = Config(config_file=config_file, data_dir=data_dir)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    # An explicit --data-dir beats whatever the config file says.
    if data_dir:
        config.set("paths.data_dir", data_dir)
    return config


def configure_logging(config, verbose: bool = False) -> None:
    from thankful.core.exceptions import ConfigurationError
    from thankful.core.utils.logging import setup_logging_from_config

    try:
        setup_logging_from_config(config, verbose)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e


def get_journal(ctx: click.Context):
    """Build the journal for this invocation from the group's context."""
    from thankful.core.exceptions import ConfigurationError
    from thankful.journal import FixedClock, GratitudeJournal

    obj = ctx.find_root().obj or {}
    today = obj.get("today")
    clock = FixedClock(today) if today else None
    try:
        return GratitudeJournal.from_config(obj["config"], clock=clock)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e
