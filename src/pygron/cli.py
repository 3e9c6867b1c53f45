"""Command-line interface for pygron."""

import logging
import sys
from typing import Optional

import click

from . import __version__
from .error_handler import ErrorHandler
from .gron_transformer import GronTransformer
from .io import InputReader
from .types import ExitCode, GronError, GronOptions

EPILOG = "\n".join([
    "\b",
    "Exit Codes:",
    *(f"  {line}" for line in ErrorHandler.describe_exit_codes()),
    "",
    "\b",
    "Examples:",
    "  gron /tmp/apiresponse.json",
    "  gron http://jsonplaceholder.typicode.com/users/1",
    "  curl -s http://jsonplaceholder.typicode.com/users/1 | gron",
    "  gron http://jsonplaceholder.typicode.com/users/1 | grep company | gron --ungron",
])


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _fail(exit_code: ExitCode, *messages: str) -> None:
    for message in messages:
        click.echo(message, err=True)
    sys.exit(int(exit_code))


@click.command(epilog=EPILOG)
@click.argument("source", required=False, metavar="[FILE|URL|-]")
@click.option("--ungron", "-u", is_flag=True, help="Reverse the operation (turn assignments back into JSON)")
@click.option("--monochrome", "-m", is_flag=True, help="Monochrome (don't colorize output)")
@click.option("--no-sort", is_flag=True, help="Don't sort output (faster)")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.version_option(version=__version__, prog_name="gron", message="%(prog)s version %(version)s")
def main(source: Optional[str], ungron: bool, monochrome: bool, no_sort: bool, verbose: bool):
    """Transform JSON (from a file, URL, or stdin) into discrete assignments to make it greppable."""
    _configure_logging(verbose)

    # Colour is pointless work when the output is not a terminal
    if not click.get_text_stream("stdout").isatty():
        monochrome = True
    options = GronOptions(sort=not no_sort, monochrome=monochrome)

    try:
        raw_input = InputReader().read(source)
    except GronError as e:
        _fail(ErrorHandler.exit_code_for(e.error_type), str(e))

    transformer = GronTransformer()
    if ungron:
        result = transformer.ungron(raw_input, options)
        output = result.json_string + "\n" if result.success else ""
    else:
        result = transformer.gron(raw_input, options)
        output = result.output

    if not result.success:
        _fail(ErrorHandler.exit_code_for(result.error_type), *(result.errors or []))

    click.echo(output, nl=False)


if __name__ == '__main__':
    main()
