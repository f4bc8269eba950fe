"""CLI command to check the ESH-INF directory of a binding."""

import codecs
from pathlib import Path

import click
from click.core import ParameterSource

from eshinf.cli.report import REPORT_FORMATS, format_result
from eshinf.cli.utils.logging import logger
from eshinf.config import ConfigAccessor, get_charset, is_strict
from eshinf.runner import CheckAbortedError, run_check


@click.command(name="check")
@click.argument("path", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--charset",
    type=str,
    default=None,
    help="Encoding of the descriptor files (default: from config, else utf-8).",
)
@click.option(
    "--strict/--warn",
    default=False,
    help="Abort on the first invalid descriptor, or report it and go on (default: from config, else --warn).",
)
@click.option(
    "--format",
    type=click.Choice(REPORT_FORMATS, case_sensitive=False),
    default="summary",
    help="Output format for the check results.",
)
@click.option(
    "--out",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file to write results to (default: stdout).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="ESHINF_CONFIG",
    help="Configuration file to read defaults from.",
)
@click.pass_context
def check(ctx, path, charset, strict, format, out, config_path):
    """Check the ESH-INF descriptor files below PATH.

    Checks:
    - Descriptor files are not empty
    - thing/, binding/ and config/ descriptors pass their validator

    Files outside ESH-INF and other ESH-INF directories (e.g. i18n) are ignored.
    """
    config = ConfigAccessor(config_path)
    if charset is None:
        charset = get_charset(config)
    try:
        codecs.lookup(charset)
    except LookupError:
        raise click.BadParameter(
            f"unknown encoding: '{charset}'", param_hint="--charset"
        )
    # the config only decides when neither --strict nor --warn was given
    if ctx.get_parameter_source("strict") is ParameterSource.DEFAULT:
        strict = is_strict(config)

    logger.debug(f"Checking ESH-INF descriptors below: {path}")

    try:
        result = run_check(path, charset=charset, strict=strict)
    except CheckAbortedError as e:
        logger.error(f"Error: Check aborted: {e}")
        ctx.exit(1)

    report = format_result(result, format.lower())
    if out:
        out.write_text(report + "\n")
        logger.info(f"Results written to {out}")
    else:
        click.echo(report)

    if not result.ok:
        ctx.exit(1)
