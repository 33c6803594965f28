import asyncio
import contextlib
import json
from collections.abc import Callable, Sequence
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table

from mdcoverage.core.channels import ChannelFlag, channel_flag
from mdcoverage.core.coverage_report import CoverageReportResult, run_coverage_report
from mdcoverage.core.ports.coverage import CoverageMatrixSource
from mdcoverage.messages import Messages
from mdcoverage.project import SfdxProject

console = Console()
err_console = Console(stderr=True)


def _get_coverage_source() -> CoverageMatrixSource:
    from mdcoverage.coverage.client import HttpCoverageMatrixClient

    return HttpCoverageMatrixClient()


def _ignore_status(_: str) -> None:
    return None


def _split_sourcepath(sourcepath: str) -> list[str]:
    return [directory.strip() for directory in sourcepath.split(",") if directory.strip()]


def _render_table(result: CoverageReportResult, messages: Messages) -> None:
    table = Table(show_lines=False)
    table.add_column(messages.get("columnTypeLabel"))
    table.add_column(messages.get("columnNameLabel"))
    table.add_column(messages.get("columnFolderLabel"))
    for channel in result.channels:
        table.add_column(messages.get(channel.column_label))
    for row in result.rows:
        table.add_row(
            row.file.type,
            row.file.file_name,
            row.file.folder,
            *(str(row.coverage[channel.channel_key]).lower() for channel in result.channels),
        )
    console.print(table)


def _print_json(payload: dict[str, Any]) -> None:
    typer.echo(json.dumps(payload, indent=2))


def _channel_option(messages: Messages, flag_name: str) -> Any:
    flag: ChannelFlag = channel_flag(flag_name)
    return typer.Option(f"--{flag.flag_name}", help=messages.get(flag.flag_description))


def create_report_command(messages: Messages) -> Any:
    """Build the ``report`` command with help texts taken from ``messages``."""

    def report(
        sourcepath: Annotated[
            str | None,
            typer.Option("--sourcepath", "-d", help=messages.get("sourcePathFlagDescription")),
        ] = None,
        showuncovered: Annotated[
            bool, typer.Option("--showuncovered", help=messages.get("showUncoveredFlagDescription"))
        ] = False,
        apiversion: Annotated[
            str | None, typer.Option("--apiversion", help=messages.get("apiVersionFlagDescription"))
        ] = None,
        checkmetadataapi: Annotated[bool, _channel_option(messages, "checkmetadataapi")] = False,
        checksourcetracking: Annotated[bool, _channel_option(messages, "checksourcetracking")] = False,
        checkunlockedpackagingwithoutnamespace: Annotated[
            bool, _channel_option(messages, "checkunlockedpackagingwithoutnamespace")
        ] = False,
        checkunlockedpackagingwithnamespace: Annotated[
            bool, _channel_option(messages, "checkunlockedpackagingwithnamespace")
        ] = False,
        checkmanagedpackaging: Annotated[bool, _channel_option(messages, "checkmanagedpackaging")] = False,
        checkchangesets: Annotated[bool, _channel_option(messages, "checkchangesets")] = False,
        json_output: Annotated[bool, typer.Option("--json", help=messages.get("jsonFlagDescription"))] = False,
    ) -> None:
        check_flags = {
            "checkmetadataapi": checkmetadataapi,
            "checksourcetracking": checksourcetracking,
            "checkunlockedpackagingwithoutnamespace": checkunlockedpackagingwithoutnamespace,
            "checkunlockedpackagingwithnamespace": checkunlockedpackagingwithnamespace,
            "checkmanagedpackaging": checkmanagedpackaging,
            "checkchangesets": checkchangesets,
        }
        requested_channels = [channel_flag(name).channel_key for name, checked in check_flags.items() if checked]

        try:
            result = _run_report(messages, sourcepath, apiversion, requested_channels, showuncovered, json_output)
        except Exception as exc:
            if json_output:
                _print_json({"status": 1, "name": type(exc).__name__, "message": str(exc)})
            else:
                err_console.print(messages.get("errorMessage", exc), style="red", markup=False, highlight=False)
            raise typer.Exit(1) from exc

        if not result.metadata_files:
            err_console.print(messages.get("warnNoMetadataFiles"), style="yellow", markup=False)
        if json_output:
            _print_json({"status": 0, "result": [row.to_response() for row in result.rows]})
        elif result.metadata_files:
            _render_table(result, messages)

    report.__doc__ = messages.get("commandDescription")
    return report


def _run_report(
    messages: Messages,
    sourcepath: str | None,
    api_version: str | None,
    requested_channels: Sequence[str],
    show_uncovered: bool,
    quiet: bool,
) -> CoverageReportResult:
    project = SfdxProject.resolve()
    directories = _split_sourcepath(sourcepath) if sourcepath else project.unique_package_directories()
    source = _get_coverage_source()

    async def _run() -> CoverageReportResult:
        with contextlib.ExitStack() as stack:
            on_status: Callable[[str], None] = _ignore_status
            if not quiet:
                on_status = stack.enter_context(err_console.status("")).update
            try:
                result = await run_coverage_report(
                    source,
                    directories,
                    messages,
                    api_version=api_version or project.source_api_version,
                    requested_channels=requested_channels,
                    show_uncovered=show_uncovered,
                    on_status=on_status,
                )
            finally:
                await source.aclose()
        if not quiet and result.metadata_files:
            err_console.print(
                messages.get("statusFindingMetadataCoverageMessage"),
                messages.get("statusFinishedMessage"),
                markup=False,
                highlight=False,
            )
        return result

    return asyncio.run(_run())
