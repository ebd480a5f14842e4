"""Click-based CLI for the layout style engine."""

import json
import sys
from pathlib import Path
from typing import Any, NoReturn

import click

from .. import __version__
from ..config import StyleEngineConfig, load_style_config
from ..elements import ELEMENT_KINDS, create_element
from ..errors import InvalidLayoutError
from ..layout_logging import LogCategory, get_category_logger, setup_logging
from ..render import load_layout_file, render_layout
from ..styles.registry import StyleRegistry
from ..styles.sanitizer import inspect_css_value
from .errors import InvalidInputError, LayoutFileError, to_cli_error

logger = get_category_logger(LogCategory.CLI)


def parse_assignment(assignment: str) -> tuple[str, Any]:
    """Parse ``key=value``; JSON literals (numbers, true, null) are decoded."""
    key, sep, raw = assignment.partition("=")
    if not sep or not key:
        raise InvalidInputError(
            f"Expected key=value, got {assignment!r}",
            suggestion="Example: poke-layout signature box padding=s2",
        )
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        value = raw
    if isinstance(value, (list, dict)):
        value = raw
    return key.replace("-", "_"), value


def _fail(error: Exception, verbose: bool) -> NoReturn:
    cli_error = to_cli_error(error)
    logger.debug(f"Command failed: {cli_error.message}", exc_info=verbose)
    click.echo(cli_error.format(use_color=sys.stderr.isatty()), err=True)
    sys.exit(cli_error.exit_code)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Configuration file path",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, config_path: Path | None) -> None:
    """Poke Layout - generated, deduplicated styles for layout primitives."""
    if verbose and quiet:
        click.echo("Error: --quiet and --verbose are mutually exclusive", err=True)
        sys.exit(1)
    try:
        settings = load_style_config(config_path=config_path)
    except Exception as e:
        _fail(e, verbose)
    setup_logging(
        level=settings.log_level,
        quiet=quiet,
        verbose=verbose,
        log_format=settings.log_format,
    )
    ctx.obj = {"settings": settings, "verbose": verbose, "quiet": quiet}


@cli.command()
def kinds() -> None:
    """List element kinds and their inputs."""
    for kind, element_cls in sorted(ELEMENT_KINDS.items()):
        inputs = ", ".join(
            f"{name}={default!r}" for name, default in element_cls.inputs_defaults.items()
        )
        click.echo(f"{kind}: {inputs}")


@cli.command()
@click.argument("value")
@click.pass_context
def sanitize(ctx: click.Context, value: str) -> None:
    """Print VALUE as it would be embedded in generated CSS."""
    report = inspect_css_value(value)
    click.echo(report.cleaned)
    if ctx.obj["verbose"] and report.changed:
        click.echo(f"dropped: {report.dropped!r}", err=True)


@cli.command()
@click.argument("kind")
@click.argument("assignments", nargs=-1)
@click.option("--css", is_flag=True, help="Also print the generated CSS")
@click.pass_context
def signature(ctx: click.Context, kind: str, assignments: tuple[str, ...], css: bool) -> None:
    """Print the signature KIND gets for key=value inputs."""
    settings: StyleEngineConfig = ctx.obj["settings"]
    try:
        inputs = dict(parse_assignment(a) for a in assignments)
        registry = StyleRegistry(detect_collisions=settings.detect_collisions)
        element = create_element(kind, registry=registry, settings=settings, **inputs)
        element.mount()
    except Exception as e:
        _fail(e, ctx.obj["verbose"])
    click.echo(element.signature)
    if css:
        click.echo(registry.document.render_head())


@cli.command()
@click.argument("layout_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--stats", is_flag=True, help="Print style node and host counts")
@click.pass_context
def render(ctx: click.Context, layout_file: Path, stats: bool) -> None:
    """Render LAYOUT_FILE to a deduplicated <style> head and host tags."""
    settings: StyleEngineConfig = ctx.obj["settings"]
    try:
        try:
            data = load_layout_file(layout_file)
        except (OSError, json.JSONDecodeError) as e:
            raise LayoutFileError(str(layout_file), str(e)) from e
        try:
            page = render_layout(data, settings=settings)
        except InvalidLayoutError as e:
            raise LayoutFileError(str(layout_file), str(e)) from e
    except Exception as e:
        _fail(e, ctx.obj["verbose"])

    click.echo(page.head())
    for tag in page.host_tags():
        click.echo(tag)
    if stats:
        click.echo(
            f"{page.style_count} style node(s) for {len(page.elements)} element(s)",
            err=True,
        )
        for collision in page.registry.collisions:
            click.echo(f"collision: {collision.signature}", err=True)


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
