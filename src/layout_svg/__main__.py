"""CLI entry point for layout-svg."""

import logging
import sys

import click

from layout_svg import render_json
from layout_svg.config import RenderConfig
from layout_svg.types import Interpolation


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--margin", "-m", "margin", type=click.FloatRange(min=0), default=1.0, help="Space around the drawing")
@click.option(
    "--curviness", "-c", "curviness", type=click.FloatRange(0, 1), default=0.0, help="Edge curviness (0 = straight)"
)
@click.option("--bezier", "-b", "bezier", is_flag=True, help="Interpolate bends with Bezier curves instead of fillets")
@click.option("--font-size", "font_size", type=click.IntRange(min=1), default=10, help="Label font size")
@click.option("--font-color", "font_color", type=str, default="#000000", help="Label font color")
@click.option("--font-family", "font_family", type=str, default="Courier", help="Edge label font family")
@click.option("--width", "width", type=str, default="", help="Explicit width attribute of the document")
@click.option("--height", "height", type=str, default="", help="Explicit height attribute of the document")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log rendering details")
def main(
    input: str | None,
    output: str | None,
    margin: float,
    curviness: float,
    bezier: bool,
    font_size: int,
    font_color: str,
    font_family: str,
    width: str,
    height: str,
    verbose: bool,
) -> None:
    """Laid-out graph (JSON snapshot) to SVG output."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s: %(message)s")

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    config = RenderConfig(
        margin=margin,
        curviness=curviness,
        interpolation=Interpolation.Bezier if bezier else Interpolation.Rounded,
        font_size=font_size,
        font_color=font_color,
        font_family=font_family,
        width=width,
        height=height,
    )

    try:
        rendered = render_json(text, config)
    except ValueError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
