"""Link Typer app factory."""

from pathlib import Path

import typer

from rangelink.api.link.cmd_format import cmd_format
from rangelink.api.link.cmd_parse import cmd_parse
from rangelink.api.link.cmd_scan import cmd_scan
from rangelink.api.link.cmd_validate import cmd_validate
from rangelink.api.link.RangeNotation import RangeNotation
from rangelink.cli._handle_stage_result import _handle_stage_result

_NOTATIONS = {
    "auto": RangeNotation.AUTO,
    "full-line": RangeNotation.ENFORCE_FULL_LINE,
    "positions": RangeNotation.ENFORCE_POSITIONS,
}


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Format, parse and find RangeLinks",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="format")
    def format_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="File path to link to"),
        ranges: list[str] = typer.Argument(..., help="1-based ranges LINE[:COL][-LINE[:COL]]"),
        notation: str | None = typer.Option(None, help="Column handling: auto, full-line or positions"),
        portable: bool = typer.Option(False, "--portable", help="Append the delimiters so the link decodes anywhere"),
    ) -> None:
        """Format a link for one or more ranges in a file."""
        if notation is not None and notation not in _NOTATIONS:
            typer.echo(f"Error: --notation must be one of {', '.join(_NOTATIONS)}, got '{notation}'", err=True)
            raise typer.Exit(1)
        _handle_stage_result(cmd_format, ctx)(
            path=path,
            ranges=ranges,
            notation=_NOTATIONS[notation] if notation else None,
            portable=portable,
        )

    @app.command(name="parse")
    def parse_cmd(
        ctx: typer.Context,
        link_text: str = typer.Argument(..., metavar="LINK", help="Link to parse, e.g. src/file.ts#L10C5-L20C15"),
    ) -> None:
        """Parse a link into its path and range."""
        _handle_stage_result(cmd_parse, ctx)(link=link_text)

    @app.command(name="scan")
    def scan_cmd(
        ctx: typer.Context,
        file: Path = typer.Argument(..., help="Text file to search for links"),
    ) -> None:
        """Find links in a text file."""
        _handle_stage_result(cmd_scan, ctx)(file=file)

    @app.command(name="validate")
    def validate_cmd(
        ctx: typer.Context,
        line: str | None = typer.Option(None, "--line", help="Line marker to check instead of the configured one"),
        position: str | None = typer.Option(None, "--position", help="Column marker to check"),
        range_sep: str | None = typer.Option(None, "--range", help="Range separator to check"),
        hash_sep: str | None = typer.Option(None, "--hash", help="Hash separator to check"),
    ) -> None:
        """Validate the configured (or given) delimiters."""
        _handle_stage_result(cmd_validate, ctx)(line=line, position=position, range=range_sep, hash=hash_sep)

    return app
