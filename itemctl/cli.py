import logging
import sys

import click
import tomli

from .dispatch import OPERATIONS, Arguments, perform
from .errors import ItemctlError
from .utils.config import (
    LOG_LEVELS,
    get_config_path,
    load_config,
    set_log_level_default,
)

logger = logging.getLogger(__name__)

CLI_HELP = f"""\
itemctl manages a list of items (id, email, age) stored as a JSON array
in a single file.

\b
Operations:
  list       print the raw file contents
  add        add the item given with -item, unless its id already exists
  findById   print the item with the id given with -id
  remove     remove the item with the id given with -id

\b
Examples:
  itemctl -operation add -item '{{"id":"1","email":"a@x.com","age":30}}' -fileName users.json
  itemctl -operation findById -id 1 -fileName users.json
  itemctl -operation remove -id 1 -fileName users.json
  itemctl -operation list -fileName users.json

Operation must be one of: {", ".join(OPERATIONS)}.
"""


def load_cli_config() -> dict:
    try:
        return load_config()
    except (tomli.TOMLDecodeError, OSError) as e:
        raise click.ClickException(f"Invalid config file {get_config_path()}: {e}")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
        force=True,
    )


@click.group(
    invoke_without_command=True,
    help=CLI_HELP,
    context_settings={"help_option_names": ["-h", "--help"], "max_content_width": 120},
)
@click.option("-operation", "--operation", "operation", default="", help="An operation to do on items")
@click.option("-item", "--item", "item", default="", help="An item as a JSON object")
@click.option("-id", "--id", "record_id", default="", help="An item id")
@click.option("-fileName", "--fileName", "file_name", default="", help="A file name to read from")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level (overrides the config file)",
)
@click.pass_context
def cli(ctx, operation, item, record_id, file_name, log_level):
    config = load_cli_config()
    setup_logging(log_level or config["logging"]["level"])

    if ctx.invoked_subcommand is not None:
        return

    args = Arguments(
        operation=operation,
        item=item,
        id=record_id,
        file_name=file_name,
    )

    out = sys.stdout.buffer
    try:
        perform(args, out)
    except (ItemctlError, OSError) as e:
        logger.debug(f"{args.operation or 'operation'} failed: {e!r}")
        raise click.ClickException(str(e))
    finally:
        out.flush()


@cli.command()
@click.option(
    "--set-log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Store the default log level in the config file",
)
def config(set_log_level):
    """Print config file location and contents."""
    config_path = get_config_path()

    if set_log_level is not None:
        set_log_level_default(set_log_level.lower(), load_cli_config())
        click.echo(f"Log level set to: {set_log_level.lower()}")

    click.echo(f"Config file: {config_path}")
    click.echo()

    if config_path.exists():
        click.echo(config_path.read_text())
    else:
        click.echo("(file does not exist, using defaults)")


if __name__ == "__main__":
    cli()
