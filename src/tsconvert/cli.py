"""Command-line interface for tsconvert."""

from __future__ import annotations

import click

from . import __version__
from .config import CLIConfig
from .engine import convert_timestamp, get_current_time, timestamp_to_time
from .formats import FormatName
from .logging import LogLevel, Profile, configure_logging
from .models import ConversionRequest, ConversionResponse, Mode

__all__ = ["main"]

_EXAMPLE_TIMESTAMP = "1704110400123"
"""Millisecond timestamp used to illustrate each format."""


def _emit(
    ctx: click.Context, response: ConversionResponse, *, as_json: bool
) -> None:
    if as_json:
        click.echo(response.model_dump_json(exclude_none=True))
    elif response.success:
        click.echo(response.result)
    else:
        click.echo(f"Error: {response.error}", err=True)
    if not response.success:
        ctx.exit(1)


def _convert(
    ctx: click.Context,
    mode: Mode,
    value: str,
    unit: str,
    format_name: str | None,
    *,
    as_json: bool,
) -> None:
    request = ConversionRequest(
        input=value, mode=mode.value, unit=unit, format=format_name
    )
    _emit(ctx, convert_timestamp(request), as_json=as_json)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--log-level",
    type=click.Choice([m.value for m in LogLevel], case_sensitive=False),
    default=None,
    help="Log level (overrides TSCONVERT_LOG_LEVEL).",
)
@click.option(
    "--log-profile",
    type=click.Choice([m.value for m in Profile]),
    default=None,
    help="Logging profile (overrides TSCONVERT_PROFILE).",
)
@click.version_option(version=__version__, message="%(version)s")
@click.pass_context
def main(
    ctx: click.Context, log_level: str | None, log_profile: str | None
) -> None:
    """Convert between epoch timestamps and date and time strings.

    Negative timestamps must follow ``--`` so that they are not taken as
    options.
    """
    config = CLIConfig()
    configure_logging(
        profile=log_profile or config.profile,
        log_level=log_level or config.log_level,
    )
    ctx.obj = config


@main.command()
@click.argument("topic", default=None, required=False, nargs=1)
@click.argument("subtopic", default=None, required=False, nargs=1)
@click.pass_context
def help(ctx: click.Context, topic: str | None, subtopic: str | None) -> None:
    """Show help for any command."""
    if not topic:
        if not ctx.parent:
            raise RuntimeError("help called without topic or parent")
        click.echo(ctx.parent.get_help())
        return
    if topic not in main.commands:
        raise click.UsageError(f"Unknown help topic {topic}", ctx)
    command = main.commands[topic]
    if subtopic:
        msg = f"Unknown help topic {topic} {subtopic}"
        raise click.UsageError(msg, ctx)
    ctx.info_name = topic
    click.echo(command.get_help(ctx))


@main.command("to-time")
@click.argument("timestamp")
@click.option(
    "--unit",
    "-u",
    default="seconds",
    show_default=True,
    help="Unit of the timestamp: seconds or milliseconds.",
)
@click.option(
    "--format",
    "-f",
    "format_name",
    default=None,
    help="Output format. Defaults to TSCONVERT_DEFAULT_FORMAT.",
)
@click.option("--json", "as_json", is_flag=True, help="Print JSON response.")
@click.pass_context
def to_time(
    ctx: click.Context,
    timestamp: str,
    unit: str,
    format_name: str | None,
    *,
    as_json: bool,
) -> None:
    """Render an epoch TIMESTAMP as a date and time."""
    config: CLIConfig = ctx.obj
    if format_name is None:
        format_name = config.default_format.value
    _convert(
        ctx,
        Mode.TIMESTAMP_TO_TIME,
        timestamp,
        unit,
        format_name,
        as_json=as_json,
    )


@main.command("to-timestamp")
@click.argument("time")
@click.option(
    "--unit",
    "-u",
    default="seconds",
    show_default=True,
    help="Unit of the result: seconds or milliseconds.",
)
@click.option(
    "--format",
    "-f",
    "format_name",
    default=None,
    help="Input format. Detected automatically if not given.",
)
@click.option("--json", "as_json", is_flag=True, help="Print JSON response.")
@click.pass_context
def to_timestamp(
    ctx: click.Context,
    time: str,
    unit: str,
    format_name: str | None,
    *,
    as_json: bool,
) -> None:
    """Parse a date and TIME into an epoch timestamp.

    Without --format, the input is matched against RFC 3339, ISO 8601,
    RFC 2822, readable, and slash-delimited dates in that order. Ambiguous
    slash dates such as 01/02/2024 are read month first.
    """
    _convert(
        ctx,
        Mode.TIME_TO_TIMESTAMP,
        time,
        unit,
        format_name,
        as_json=as_json,
    )


@main.command()
@click.option(
    "--unit",
    "-u",
    default="seconds",
    show_default=True,
    help="seconds, milliseconds, or formatted.",
)
@click.option(
    "--format",
    "-f",
    "format_name",
    default=None,
    help="Format used with --unit formatted.",
)
@click.option("--json", "as_json", is_flag=True, help="Print JSON response.")
@click.pass_context
def now(
    ctx: click.Context, unit: str, format_name: str | None, *, as_json: bool
) -> None:
    """Show the current time."""
    config: CLIConfig = ctx.obj
    if unit == "formatted" and format_name is None:
        format_name = config.default_format.value
    _emit(ctx, get_current_time(unit, format_name), as_json=as_json)


@main.command()
def formats() -> None:
    """List the supported format names with an example of each."""
    width = max(len(f.value) for f in FormatName)
    for format_name in FormatName:
        example = timestamp_to_time(
            _EXAMPLE_TIMESTAMP, "milliseconds", format_name
        )
        click.echo(f"{format_name.value:<{width}}  {example}")
