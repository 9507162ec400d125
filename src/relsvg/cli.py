"""
Command line interface for relsvg.

Commands:
- render: Build a drawing from a YAML layout and write SVG
- validate: Check a YAML layout for problems
- init: Write a starter layout file

Usage:
    relsvg render diagram.yaml -o diagram.svg
    relsvg render diagram.yaml --width 800 --height 600
    relsvg validate diagram.yaml
    relsvg init diagram.yaml
"""

import logging
from pathlib import Path

import click

from . import __version__
from .errors import RelsvgError
from .layout_schema import CanvasConfig, LayoutConfig, PortRef, ShapeConfig
from .log import setup_logging


@click.group()
@click.version_option(version=__version__)
def cli():
    """relsvg - lay out shapes next to each other and write SVG."""
    pass


@cli.command()
@click.argument("layout_file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path),
    help="Output SVG file path. If not specified, prints to stdout.",
)
@click.option(
    "--width",
    type=float,
    default=None,
    help="Canvas width in pixels (default: the layout's canvas width).",
)
@click.option(
    "--height",
    type=float,
    default=None,
    help="Canvas height in pixels (default: the layout's canvas height).",
)
@click.option("--verbose", "-v", is_flag=True, help="Log layout steps.")
def render(
    layout_file: Path,
    output: Path | None,
    width: float | None,
    height: float | None,
    verbose: bool,
):
    """
    Render a YAML layout to SVG.

    Example:
        relsvg render diagram.yaml -o diagram.svg
    """
    setup_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        config = LayoutConfig.from_yaml(layout_file)
        drawing = config.build()
        svg = drawing.get_svg(
            width if width is not None else config.canvas.width,
            height if height is not None else config.canvas.height,
        )
    except RelsvgError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(svg)
        click.echo(f"Wrote {len(drawing)} shapes to: {output}", err=True)
    else:
        click.echo(svg)


@cli.command()
@click.argument("layout_file", type=click.Path(exists=True, path_type=Path))
def validate(layout_file: Path):
    """
    Validate a YAML layout file.

    Checks ids, kinds, neighbor references and numeric fields.

    Example:
        relsvg validate diagram.yaml
    """
    click.echo(f"\nValidating: {layout_file}")
    click.echo("-" * 50)

    try:
        config = LayoutConfig.from_yaml(layout_file)
    except RelsvgError as e:
        click.echo(f"Error loading layout: {e}", err=True)
        raise SystemExit(1) from None

    errors = config.validate()

    if errors:
        click.echo("\nErrors:")
        for e in errors:
            click.echo(f"  - {e}")
        raise SystemExit(1)

    click.echo("Layout is valid.")
    click.echo(f"  Canvas: {config.canvas.width} x {config.canvas.height}")
    click.echo(f"  Shapes: {len(config.shapes)}")
    for shape in config.shapes:
        neighbors = ", ".join(f"{d.name.lower()} {n}" for d, n in shape.adjacency)
        click.echo(f"    - {shape.id}: {shape.kind}" + (f" ({neighbors})" if neighbors else ""))


@cli.command()
@click.argument("layout_file", type=click.Path(path_type=Path))
@click.option("--force", is_flag=True, help="Overwrite an existing file.")
def init(layout_file: Path, force: bool):
    """
    Write a starter layout: two circles joined by an arrow.

    Example:
        relsvg init diagram.yaml
    """
    if layout_file.exists() and not force:
        click.echo(f"{layout_file} already exists (use --force to overwrite)", err=True)
        raise SystemExit(1)

    config = LayoutConfig(
        canvas=CanvasConfig(width=300, height=100),
        shapes=[
            ShapeConfig(id="source", kind="circle", fill="lightsteelblue", stroke="black"),
            ShapeConfig(id="target", kind="circle", right_of="source", gap=1,
                        fill="lightsteelblue", stroke="black"),
            ShapeConfig(id="arrow", kind="line",
                        start=PortRef("source", "right"), end=PortRef("target", "left"),
                        arrowhead="triangle"),
        ],
    )
    config.to_yaml(layout_file)
    click.echo(f"Layout saved to: {layout_file}")


if __name__ == "__main__":
    cli()
