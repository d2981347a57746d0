"""CLI interface for fibbench using Click."""

import logging
import sys

import click

from fibbench import __version__
from fibbench.benchmark import benchmark_and_report
from fibbench.config import OUTPUT_FORMATS, ConfigFileError, build_config, load_file_config
from fibbench.fibonacci import InvalidIndexError
from fibbench.variants import REFERENCE_VARIANT, VARIANTS, get_variant, verify_variants

_CLI_TO_FIELD = {
    "size": "sizes",
    "variant": "variants",
    "output_format": "output_format",
    "repeat": "repeat",
    "number": "number",
}

_VARIANT_CHOICE = click.Choice(list(VARIANTS))


def _collect_explicit_args(ctx: click.Context, **kwargs: object) -> dict[str, object]:
    """Return only the kwargs whose values were explicitly set on the command line."""
    explicit: dict[str, object] = {}
    for param_name, value in kwargs.items():
        source = ctx.get_parameter_source(param_name)
        if source is click.core.ParameterSource.COMMANDLINE:
            field = _CLI_TO_FIELD[param_name]
            if param_name in {"size", "variant"}:
                explicit[field] = tuple(value)
            else:
                explicit[field] = value
    return explicit


@click.group()
@click.version_option(version=__version__, prog_name="fibbench")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose):
    """Compute Fibonacci numbers six ways and compare their cost."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("n", type=int)
@click.option(
    "--variant",
    type=_VARIANT_CHOICE,
    default=REFERENCE_VARIANT,
    show_default=True,
    help="Algorithm to use.",
)
def compute(n, variant):
    """Print the Nth Fibonacci number."""
    chosen = get_variant(variant)
    if not chosen.accepts(n):
        raise click.BadParameter(
            f"variant '{variant}' is capped at n = {chosen.max_size}",
            param_hint="N",
        )
    try:
        value = chosen.func(n)
    except InvalidIndexError as exc:
        raise click.BadParameter(str(exc), param_hint="N") from None
    click.echo(value)


@main.command()
@click.option(
    "--limit",
    type=click.IntRange(min=0),
    default=90,
    show_default=True,
    help="Highest index to cross-check.",
)
def verify(limit):
    """Check that every variant agrees with the iterative one up to LIMIT."""
    mismatches = verify_variants(limit)
    if not mismatches:
        click.echo(f"All {len(VARIANTS)} variants agree for n <= {limit}.")
        return
    for name, indices in mismatches.items():
        click.echo(f"{name}: mismatch at n = {', '.join(map(str, indices))}")
    raise SystemExit(1)


@main.command()
@click.option(
    "--size",
    type=click.IntRange(min=0),
    multiple=True,
    help="Input size to benchmark (repeatable).",
)
@click.option(
    "--variant",
    type=_VARIANT_CHOICE,
    multiple=True,
    help="Restrict to specific variants (repeatable).",
)
@click.option(
    "--repeat",
    type=click.IntRange(min=1),
    default=5,
    show_default=True,
    help="Timing samples per size.",
)
@click.option(
    "--number",
    type=click.IntRange(min=1),
    default=100,
    show_default=True,
    help="Calls per timing sample.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="human",
    show_default=True,
    help="Output format.",
)
@click.pass_context
def bench(ctx, size, variant, repeat, number, output_format):
    """Time each variant across a range of input sizes."""
    cli_overrides = _collect_explicit_args(
        ctx,
        size=size,
        variant=variant,
        repeat=repeat,
        number=number,
        output_format=output_format,
    )

    try:
        file_config = load_file_config()
    except ConfigFileError as exc:
        raise click.ClickException(str(exc)) from None

    config = build_config(cli_overrides, file_config)
    benchmark_and_report(config, out=sys.stdout)
