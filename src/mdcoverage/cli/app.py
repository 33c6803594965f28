import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from mdcoverage.cli.report import create_report_command, err_console
from mdcoverage.messages import load_messages

messages = load_messages()

app = typer.Typer(
    name="mdcoverage",
    help="Metadata coverage CLI: report deployment channel support of Salesforce metadata files.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("report")(create_report_command(messages))


def _configure_logging(verbose: bool) -> None:
    package_logger = logging.getLogger("mdcoverage")
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)
    handler = RichHandler(console=err_console, show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback()
def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    _configure_logging(verbose)


def main() -> None:
    app()
