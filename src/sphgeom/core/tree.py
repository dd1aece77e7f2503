"""Arbitrary regions of the sphere as BSP trees of great circle cuts."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

import numpy as np

from sphgeom.core.arc import GreatArc
from sphgeom.core.bsp import RegionBSPTree, RegionNode
from sphgeom.core.connector import connect_minimized
from sphgeom.core.convex import FULL_SIZE, ConvexArea2S
from sphgeom.core.path import GreatArcPath
from sphgeom.core.subset import GreatCircleSubset
from sphgeom.domain import Point2S, polar_azimuth_key

logger = logging.getLogger(__name__)


class RegionNode2S(RegionNode):
    """Node of a ``RegionBSPTree2S``."""

    __slots__ = ()

    @property
    def node_region(self) -> ConvexArea2S | None:
        """The convex area covered by this node, from the cuts of its ancestors."""
        area: ConvexArea2S | None = ConvexArea2S.full()
        child: RegionNode = self
        parent = self.parent
        while parent is not None and area is not None:
            split = area.split(parent.cut_hyperplane)
            area = split.minus if child.is_minus() else split.plus
            child = parent
            parent = parent.parent
        return area


class RegionBSPTree2S(RegionBSPTree):
    """A region of the sphere, possibly non-convex or disconnected.

    Cuts are great arcs; the region lies on the minus (pole) side of each
    inserted boundary arc.

    Examples:
        >>> precision = PrecisionContext(1e-6)
        >>> tree = GreatArcPath.from_vertex_loop(
        ...     [Point2S.PLUS_I, Point2S.PLUS_J, Point2S.PLUS_K], precision
        ... ).to_tree()
        >>> round(tree.size / math.pi, 6)
        0.5
    """

    def __init__(self, full: bool = False) -> None:
        self._boundary_paths: list[GreatArcPath] | None = None
        super().__init__(full)

    @classmethod
    def empty(cls) -> RegionBSPTree2S:
        return cls(full=False)

    @classmethod
    def full(cls) -> RegionBSPTree2S:
        return cls(full=True)

    @classmethod
    def from_boundaries(cls, boundaries: Iterable[GreatArc], full: bool = False) -> RegionBSPTree2S:
        """Create a tree by inserting ``boundaries`` into an empty or full tree."""
        tree = cls(full=full)
        tree.insert(list(boundaries))
        return tree

    def _create_node(self) -> RegionNode2S:
        return RegionNode2S(self)

    def _invalidate(self) -> None:
        super()._invalidate()
        self._boundary_paths = None

    def _merge_fragments(self, cut: GreatArc, fragments: list[GreatArc]) -> list[GreatArc]:
        if len(fragments) < 2:
            return fragments
        return GreatCircleSubset.from_arcs(cut.circle, fragments).to_convex()

    @property
    def boundary_paths(self) -> list[GreatArcPath]:
        """Boundary arcs connected into paths."""
        if self._boundary_paths is None:
            self._boundary_paths = connect_minimized(self.boundaries)
        return list(self._boundary_paths)

    def to_convex(self) -> list[ConvexArea2S]:
        """Decompose the region into disjoint convex areas, one per inside leaf."""
        result: list[ConvexArea2S] = []
        self._to_convex_recursive(self.root, ConvexArea2S.full(), result)
        return result

    def _to_convex_recursive(self, node: RegionNode, area: ConvexArea2S, result: list[ConvexArea2S]) -> None:
        if node.is_leaf():
            if node.is_inside():
                result.append(area)
            return

        split = area.split(node.cut_hyperplane)
        if split.minus is not None:
            self._to_convex_recursive(node.minus, split.minus, result)
        if split.plus is not None:
            self._to_convex_recursive(node.plus, split.plus, result)

    def _compute_size_properties(self) -> tuple[float, Point2S | None]:
        if self.is_full():
            return FULL_SIZE, None
        if self.is_empty():
            return 0.0, None

        sizes = []
        weighted = np.zeros(3)
        for area in self.to_convex():
            sizes.append(area.size)
            vector = area.weighted_centroid_vector
            if vector is not None:
                weighted = weighted + vector

        precision = next(node.cut.precision for node in self.nodes() if node.is_internal())
        centroid = None if precision.is_zero_vector(weighted) else Point2S.from_vector(weighted)
        size = math.fsum(sizes)
        logger.debug("Computed region size %.6f from %d convex areas", size, len(sizes))
        return size, centroid

    def _disambiguate_closest(self, target: Point2S, a: Point2S, b: Point2S) -> Point2S:
        return min(a, b, key=polar_azimuth_key)
