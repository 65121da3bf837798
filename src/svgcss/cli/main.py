"""svgcss CLI entry point: Click group with subcommands."""

import click

from svgcss import __version__
from svgcss.config import LOG_LEVELS, CssConfig
from svgcss.errors import ConfigError


@click.group()
@click.version_option(version=__version__, prog_name="svgcss")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (defaults to $SVGCSS_LOG_LEVEL or WARNING).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """svgcss - CSS units and selectors for SVG documents."""
    try:
        config = CssConfig.from_env()
    except ConfigError as exc:
        raise click.UsageError(str(exc)) from None
    if log_level:
        config = CssConfig(dpi=config.dpi, log_level=log_level)
    config.configure_logging()
    ctx.obj = config


# Import and register subcommands
from svgcss.cli.resolve import resolve  # noqa: E402
from svgcss.cli.units import units  # noqa: E402

cli.add_command(resolve)
cli.add_command(units)
