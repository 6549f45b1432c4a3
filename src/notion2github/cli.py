"""CLI entry point for notion2github.

Usage: notion2github <csv-file-path> [config-file-path]
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from notion2github.logging import setup_logging
from notion2github.migrator import migrate_notion_to_github

USAGE = "Usage: notion2github <csv-file-path> [config-file-path]"

logger = logging.getLogger("notion2github.cli")


@click.command()
@click.argument("csv_file", required=False, type=click.Path(path_type=Path))
@click.argument("config_file", required=False, type=click.Path(path_type=Path))
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Also append logs to notion2github.log here (default: $NOTION2GITHUB_LOG_DIR)",
)
@click.version_option(package_name="notion2github")
def main(
    csv_file: Path | None,
    config_file: Path | None,
    verbose: bool,
    log_dir: Path | None,
) -> None:
    """Create GitHub issues from a Notion database CSV export."""
    if csv_file is None:
        click.echo(USAGE, err=True)
        sys.exit(1)

    setup_logging(log_dir=log_dir, level="DEBUG" if verbose else None)

    try:
        migrate_notion_to_github(csv_file, config_file)
    except Exception as e:
        logger.error("Migration failed: %s", e)
        logger.debug("Migration failure details", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
