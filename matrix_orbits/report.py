"""
Text Reports
============

ASCII rendering of permutation matrices, imprints and orbit censuses.

Functions:
    render_image    -- one image as a grid of '*' and '-'
    render_dots     -- any collection of dots as a grid
    render_census   -- every representative of a census
    imprint_report  -- representatives beside their imprints, with tallies
    census_summary  -- count lines for one census
    census_table    -- scaling table over several orders

Author: Carmen Esteban
License: MIT
"""

import numpy as np


SEPARATOR = "-" * 21


def _grid_lines(grid):
    return [" ".join(row) + " " for row in grid]


def render_dots(dots, n):
    """Draw a set of dots as an n x n ASCII grid, one line per row x."""
    grid = np.full((n, n), "-", dtype="<U1")
    for x, y in dots:
        grid[x, y] = "*"
    return "\n".join(_grid_lines(grid))


def render_image(img):
    n = img.size
    grid = np.full((n, n), "-", dtype="<U1")
    grid[np.arange(n), img.dots] = "*"
    return "\n".join(_grid_lines(grid))


def render_census(census):
    blocks = []
    for img in census.representatives():
        blocks.append(render_image(img))
        blocks.append(SEPARATOR)
    return "\n".join(blocks)


def imprint_kind(img):
    """'sole', 'dispersed' or 'overlapping' from the imprint size.

    sole        -- imprint has n dots: the image is fixed by a quarter turn
    dispersed   -- imprint has 4n dots: the four rotations share no cell
    overlapping -- anything in between
    """
    n = img.size
    k = len(img.imprint())
    if k == n:
        return 'sole'
    if k == 4 * n:
        return 'dispersed'
    return 'overlapping'


def imprint_report(census):
    """Each representative next to its imprint, followed by totals.

    Returns
    -------
    dict
        'text'   : str, the rendered report
        'totals' : dict with 'sole', 'dispersed', 'overlapping' counts
    """
    n = census.order
    totals = {'sole': 0, 'dispersed': 0, 'overlapping': 0}
    lines = ["{}x{}: {}".format(n, n, census.count())]

    for img in census.representatives():
        kind = imprint_kind(img)
        totals[kind] += 1
        left = render_image(img).split("\n")
        right = render_dots(img.imprint(), n).split("\n")
        lines.append("{} {}".format(kind.capitalize(), img.dots.tolist()))
        for a, b in zip(left, right):
            lines.append(a + "   " + b)
        lines.append(SEPARATOR)

    lines.append("Sole:{}, Dispersed:{}, Overlapping:{}".format(
        totals['sole'], totals['dispersed'], totals['overlapping']))
    return {'text': "\n".join(lines), 'totals': totals}


def census_summary(census):
    n = census.order
    lines = ["Number of {} images for {}x{} matrix: {}".format(
        "unique" if census.unique else "all", n, n, census.count())]
    if census.unique:
        lines.append("Sole image: {}".format(census.n_sole))
        lines.append("Twin image: {}".format(census.n_twin))
        lines.append("Quad image: {}".format(census.n_quad))
    return "\n".join(lines)


def census_table(censuses):
    """ASCII table of orbit counts, one row per census."""
    lines = []
    lines.append("=" * 64)
    lines.append("  ROTATION ORBIT CENSUS")
    lines.append("=" * 64)
    lines.append("")
    lines.append("  {:>4}  {:>8}  {:>10}  {:>8}  {:>8}  {:>8}  {:>6}".format(
        "n", "mode", "images", "Sole", "Twin", "Quad", "sec"))
    lines.append("  " + "-" * 60)

    for c in censuses:
        if c.unique:
            sole, twin, quad = str(c.n_sole), str(c.n_twin), str(c.n_quad)
        else:
            sole = twin = quad = "N/A"
        lines.append("  {:>4}  {:>8}  {:>10}  {:>8}  {:>8}  {:>8}  {:>6.2f}".format(
            c.order, "unique" if c.unique else "all", c.count(),
            sole, twin, quad, c.elapsed))

    lines.append("")
    lines.append("=" * 64)
    return "\n".join(lines)
