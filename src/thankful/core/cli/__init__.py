"""Thankful CLI: entry point for writing, reviewing and backing up entries."""

from __future__ import annotations

import click

from thankful import __version__

from .common import CONFIG_PATH, DateParam, configure_logging, load_config


@click.group()
@click.version_option(version=__version__, package_name="thankful")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    default=str(CONFIG_PATH),
    show_default=True,
    envvar="THANKFUL_CONFIG",
    help="YAML or JSON config file.",
)
@click.option("--data-dir", type=click.Path(file_okay=False), default=None, help="Where entries are stored.")
@click.option("--today", type=DateParam(), default=None, help="Treat this YYYY-MM-DD day as today.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def main(ctx: click.Context, config_file: str, data_dir: str | None, today, verbose: bool) -> None:
    """Thankful: a small daily gratitude journal."""
    config = load_config(config_file, data_dir)
    configure_logging(config, verbose)
    ctx.obj = {"config": config, "today": today}


# Register subcommands (lazy imports inside each keep startup fast)
from .backup_cmd import export, import_cmd
from .entries_cmd import add, edit, history, show
from .insights_cmd import look_back, stats

main.add_command(add)
main.add_command(edit)
main.add_command(show)
main.add_command(history)
main.add_command(stats)
main.add_command(look_back)
main.add_command(export)
main.add_command(import_cmd)
