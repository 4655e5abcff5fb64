"""Command-line interface for polysweep."""

import logging
import sys

import click

from .geometry import GeometryError, Polygon
from .points_io import format_number, format_points, parse_polygon

logger = logging.getLogger(__name__)


class PolygonParam(click.ParamType):
    """Click parameter holding a polygon written as a coordinate list."""

    name = "polygon"

    def convert(self, value, param, ctx):
        if isinstance(value, Polygon):
            return value
        try:
            return parse_polygon(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


POLYGON = PolygonParam()

precision_option = click.option(
    '--precision', '-p', default=6, type=click.IntRange(0, 17),
    help='Decimal places in printed coordinates (default: 6)')


def _run(operation, *args):
    """Call a geometry operation, reporting input errors the way the CLI does."""
    try:
        return operation(*args)
    except GeometryError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(package_name='polysweep')
@click.option('--verbose', '-v', is_flag=True, help='Log operation details to stderr')
def main(verbose):
    """polysweep: scanline polygon operations.

    Polygons are given as coordinate lists, in the same syntax as the SVG
    points attribute.

    Examples:

        polysweep union "0,0 2,0 2,2 0,2" "1,1 3,1 3,3 1,3"

        polysweep hull "0,0 2,0 1,1 2,2 0,2"
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(name)s - %(levelname)s - %(message)s',
            stream=sys.stderr,
        )


@main.command()
@click.argument('first', type=POLYGON)
@click.argument('second', type=POLYGON)
@precision_option
def union(first, second, precision):
    """Print the union point set of FIRST and SECOND, in x-then-y order."""
    result = _run(first.union, second)
    click.echo(format_points(result, precision))


@main.command()
@click.argument('first', type=POLYGON)
@click.argument('second', type=POLYGON)
@precision_option
def difference(first, second, precision):
    """Print FIRST with its vertices inside SECOND removed."""
    result = _run(first.difference, second)
    click.echo(format_points(result, precision))


@main.command()
@click.argument('first', type=POLYGON)
@click.argument('second', type=POLYGON)
@precision_option
def split(first, second, precision):
    """Print the pieces of FIRST left after cutting SECOND out, one per line."""
    fragments = _run(first.split_difference, second)
    logger.debug("printing %d fragments", len(fragments))
    for fragment in fragments:
        click.echo(format_points(fragment, precision))


@main.command()
@click.argument('polygon', type=POLYGON)
@precision_option
def hull(polygon, precision):
    """Print the convex hull of POLYGON."""
    result = _run(polygon.convex_hull)
    click.echo(format_points(result, precision))


@main.command()
@click.argument('polygon', type=POLYGON)
@precision_option
def bbox(polygon, precision):
    """Print the bounding box of POLYGON as: min_x min_y max_x max_y."""
    box = _run(polygon.bounding_box)
    click.echo(" ".join(format_number(v, precision) for v in box))


@main.command()
@click.argument('polygon', type=POLYGON)
@precision_option
def centroid(polygon, precision):
    """Print the vertex centroid of POLYGON."""
    point = _run(polygon.centroid)
    click.echo(format_points([point], precision))


if __name__ == '__main__':
    main()
