"""Core geometric algorithms for sphgeom.

This module contains the main algorithms for spherical geometry:

- PrecisionContext: Tolerance-aware floating point comparisons
- CutAngle / AngularInterval: One-dimensional geometry on the circle
- GreatCircle / GreatArc: Hyperplanes and convex subsets of the sphere
- GreatArcPath: Connected chains of arcs
- ConvexArea2S: Convex regions with exact area and centroid
- RegionBSPTree2S: Arbitrary regions supporting boolean operations
- RegionProcessor: Batch measurement of region definitions
"""

from sphgeom.core.angular import AngularInterval, ConvexAngularInterval, CutAngle
from sphgeom.core.arc import GreatArc
from sphgeom.core.bsp import RegionBSPTree, RegionCutBoundary, RegionNode
from sphgeom.core.circle import GreatCircle
from sphgeom.core.connector import (
    InteriorAngleGreatArcConnector,
    connect_maximized,
    connect_minimized,
)
from sphgeom.core.convex import ConvexArea2S
from sphgeom.core.path import GreatArcPath
from sphgeom.core.precision import PrecisionContext
from sphgeom.core.processor import RegionProcessor
from sphgeom.core.subset import GreatCircleSubset
from sphgeom.core.tree import RegionBSPTree2S, RegionNode2S

__all__ = [
    "AngularInterval",
    "ConvexAngularInterval",
    "ConvexArea2S",
    "CutAngle",
    "GreatArc",
    "GreatArcPath",
    "GreatCircle",
    "GreatCircleSubset",
    "InteriorAngleGreatArcConnector",
    "PrecisionContext",
    "RegionBSPTree",
    "RegionBSPTree2S",
    "RegionCutBoundary",
    "RegionNode",
    "RegionNode2S",
    "RegionProcessor",
    "connect_maximized",
    "connect_minimized",
]
