"""Sphgeom - Computational geometry on the unit circle and the unit sphere.

Sphgeom represents spherical regions as binary space partitioning trees of
great circle cuts. Regions can be combined with boolean set operations,
split by great circles, decomposed into convex areas and measured (area,
boundary length and centroid).

Example:
    >>> from sphgeom.core import GreatArcPath, PrecisionContext
    >>> from sphgeom.domain import Point2S
    >>> precision = PrecisionContext(1e-10)
    >>> tree = GreatArcPath.from_vertex_loop(
    ...     [Point2S.PLUS_I, Point2S.PLUS_J, Point2S.PLUS_K], precision
    ... ).to_tree()
    >>> round(tree.size, 6)
    1.570796
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
