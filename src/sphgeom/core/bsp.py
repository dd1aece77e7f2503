"""Generic binary space partitioning trees for regions.

The tree is written against two small duck-typed capability sets so that
it can be reused for any space:

Hyperplanes provide ``classify(point)``, ``offset(point)``, ``span()``,
``reverse()`` and ``similar_orientation(other)``.

Convex hyperplane subsets provide ``hyperplane``, ``split(hyperplane)``
(returning a ``Split``), ``reverse()``, ``transform(t)``, ``closest(point)``
and ``size``.

Each internal node stores its cut as a convex subset trimmed to the node's
region. Leaves carry an INSIDE or OUTSIDE location. Boolean operations
merge two trees node by node; the result is written into the receiving
tree and condensed.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, TypeVar

from sphgeom.domain import HyperplaneLocation, RegionCutRule, RegionLocation, Split, SplitLocation
from sphgeom.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

TreeT = TypeVar("TreeT", bound="RegionBSPTree")


@dataclass
class RegionCutBoundary:
    """Portions of a node cut that lie on the region boundary.

    Outside-facing pieces have the region on their minus side; inside-facing
    pieces have it on their plus side.
    """

    inside_facing: list[Any] = field(default_factory=list)
    outside_facing: list[Any] = field(default_factory=list)

    @property
    def size(self) -> float:
        return math.fsum(sub.size for sub in self.inside_facing) + math.fsum(
            sub.size for sub in self.outside_facing
        )

    def is_empty(self) -> bool:
        return not self.inside_facing and not self.outside_facing

    def closest(self, point: Any) -> Any:
        """Return the boundary point closest to ``point``, or None if the boundary is empty."""
        closest = None
        closest_dist = math.inf
        for sub in (*self.inside_facing, *self.outside_facing):
            candidate = sub.closest(point)
            dist = point.distance(candidate)
            if closest is None or dist < closest_dist:
                closest = candidate
                closest_dist = dist
        return closest


class RegionNode:
    """A node of a region BSP tree.

    A node is either a leaf with a location, or cut by a convex hyperplane
    subset into a minus child and a plus child. Internal nodes also keep a
    location value, which is used when the node is condensed or a cut rule
    inherits it.
    """

    __slots__ = (
        "tree",
        "parent",
        "cut",
        "minus",
        "plus",
        "location",
        "_cut_boundary",
        "_cache_version",
    )

    def __init__(self, tree: RegionBSPTree) -> None:
        self.tree = tree
        self.parent: RegionNode | None = None
        self.cut: Any = None
        self.minus: RegionNode | None = None
        self.plus: RegionNode | None = None
        self.location = RegionLocation.OUTSIDE
        self._cut_boundary: RegionCutBoundary | None = None
        self._cache_version = -1

    @property
    def cut_hyperplane(self) -> Any:
        return self.cut.hyperplane if self.cut is not None else None

    def is_leaf(self) -> bool:
        return self.cut is None

    def is_internal(self) -> bool:
        return self.cut is not None

    def is_inside(self) -> bool:
        return self.is_leaf() and self.location == RegionLocation.INSIDE

    def is_outside(self) -> bool:
        return self.is_leaf() and self.location == RegionLocation.OUTSIDE

    def is_minus(self) -> bool:
        return self.parent is not None and self.parent.minus is self

    def is_plus(self) -> bool:
        return self.parent is not None and self.parent.plus is self

    @property
    def depth(self) -> int:
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    @property
    def height(self) -> int:
        if self.is_leaf():
            return 0
        return max(self.minus.height, self.plus.height) + 1

    def count(self) -> int:
        return sum(1 for _ in self.nodes())

    def nodes(self) -> Iterator[RegionNode]:
        """Iterate over this node and its descendants, minus subtrees first."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.is_internal():
                stack.append(node.plus)
                stack.append(node.minus)

    def set_location(self, location: RegionLocation) -> None:
        """Set the location of the node.

        Raises:
            InvalidArgumentError: If ``location`` is BOUNDARY
        """
        if location not in (RegionLocation.INSIDE, RegionLocation.OUTSIDE):
            raise InvalidArgumentError(f"Invalid node location: {location}")
        if self.location != location:
            self.location = location
            self.tree._invalidate()

    def insert_cut(self, cutter: Any, cut_rule: RegionCutRule = RegionCutRule.MINUS_INSIDE) -> bool:
        """Cut this node with ``cutter`` trimmed to the node region.

        Any existing subtree is discarded. Returns False (and leaves the node
        as a leaf) when the cutter does not pass through the node region.
        """
        return self.tree._cut_node_with_hyperplane(self, cutter, cut_rule)

    def clear_cut(self) -> bool:
        """Remove the cut and subtree of this node; return True if it had a cut."""
        had_cut = self.cut is not None
        self.tree._set_node_cut(self, None, None)
        return had_cut

    @property
    def cut_boundary(self) -> RegionCutBoundary | None:
        """Portions of the cut that separate inside and outside leaves, None for leaves."""
        if self.is_leaf():
            return None
        version = self.tree._version
        if self._cache_version != version or self._cut_boundary is None:
            self._cut_boundary = self.tree._compute_cut_boundary(self)
            self._cache_version = version
        return self._cut_boundary

    def _set_subtree(self, cut: Any, minus: RegionNode | None, plus: RegionNode | None) -> None:
        self.cut = cut
        if cut is None:
            minus = plus = None
        if minus is not None:
            minus.parent = self
        if plus is not None:
            plus.parent = self
        self.minus = minus
        self.plus = plus

    def __repr__(self) -> str:
        return f"{type(self).__name__}[cut= {self.cut}, location= {self.location.name}]"


class RegionBSPTree:
    """A region of space represented as a BSP tree.

    Subclasses supply size and centroid computation and may merge the
    boundary fragments of each cut.

    Args:
        full: Start with the whole space (True) or the empty region (False)
    """

    def __init__(self, full: bool = False) -> None:
        self._version = 0
        self._boundaries: list[Any] | None = None
        self._boundary_size: float | None = None
        self._size_properties: tuple[float, Any] | None = None
        self.root = self._create_node()
        self.root.location = RegionLocation.INSIDE if full else RegionLocation.OUTSIDE

    # Structure

    def _create_node(self) -> RegionNode:
        return RegionNode(self)

    def _set_root(self, root: RegionNode) -> None:
        root.parent = None
        self.root = root
        self._invalidate()

    def _invalidate(self) -> None:
        self._version += 1
        self._boundaries = None
        self._boundary_size = None
        self._size_properties = None

    def __iter__(self) -> Iterator[RegionNode]:
        return self.root.nodes()

    def nodes(self) -> Iterator[RegionNode]:
        return self.root.nodes()

    def count(self) -> int:
        return self.root.count()

    def height(self) -> int:
        return self.root.height

    def copy(self: TreeT) -> TreeT:
        """Return a deep copy of the tree structure."""
        result = type(self)(full=False)
        result._set_root(result._copy_subtree(self.root))
        return result

    def _copy_node(self, src: RegionNode) -> RegionNode:
        node = self._create_node()
        node.location = src.location
        return node

    def _copy_subtree(self, src: RegionNode) -> RegionNode:
        dst = self._copy_node(src)
        if src.is_internal():
            dst._set_subtree(src.cut, self._copy_subtree(src.minus), self._copy_subtree(src.plus))
        return dst

    def _set_node_cut(self, node: RegionNode, cut: Any, cut_rule: RegionCutRule | None) -> None:
        if cut is None:
            node._set_subtree(None, None, None)
        else:
            minus = self._create_node()
            plus = self._create_node()
            node._set_subtree(cut, minus, plus)
            self._initialize_children(node, cut_rule or RegionCutRule.MINUS_INSIDE)
        self._invalidate()

    @staticmethod
    def _initialize_children(node: RegionNode, cut_rule: RegionCutRule) -> None:
        if cut_rule == RegionCutRule.INHERIT:
            node.minus.location = node.location
            node.plus.location = node.location
        elif cut_rule == RegionCutRule.PLUS_INSIDE:
            node.minus.location = RegionLocation.OUTSIDE
            node.plus.location = RegionLocation.INSIDE
        else:
            node.minus.location = RegionLocation.INSIDE
            node.plus.location = RegionLocation.OUTSIDE

    def _cut_node_with_hyperplane(self, node: RegionNode, cutter: Any, cut_rule: RegionCutRule) -> bool:
        cut = self.trim_to_node(node, cutter.span())
        self._set_node_cut(node, cut, cut_rule)
        return cut is not None

    def trim_to_node(self, node: RegionNode, sub: Any) -> Any:
        """Trim ``sub`` to the region of ``node``, or return None if nothing remains.

        A subset lying on an ancestor cut with the same orientation adds no
        information and is trimmed away.
        """
        result = sub
        current = node
        parent = node.parent
        while parent is not None and result is not None:
            split = result.split(parent.cut_hyperplane)
            if split.location == SplitLocation.NEITHER:
                if result.hyperplane.similar_orientation(parent.cut_hyperplane):
                    result = None
            else:
                result = split.plus if current.is_plus() else split.minus
            current = parent
            parent = parent.parent
        return result

    # Region state

    def is_full(self) -> bool:
        return not any(node.is_outside() for node in self.nodes())

    def is_empty(self) -> bool:
        return not any(node.is_inside() for node in self.nodes())

    def set_full(self) -> None:
        self.root.clear_cut()
        self.root.location = RegionLocation.INSIDE
        self._invalidate()

    def set_empty(self) -> None:
        self.root.clear_cut()
        self.root.location = RegionLocation.OUTSIDE
        self._invalidate()

    def insert(self, subsets: Any, cut_rule: RegionCutRule = RegionCutRule.MINUS_INSIDE) -> None:
        """Insert hyperplane subsets into the tree as cuts.

        Accepts a single subset (split into its convex parts) or an iterable
        of subsets. Leaves reached by an inserted subset are cut and their
        new children located with ``cut_rule``.
        """
        if hasattr(subsets, "to_convex"):
            subsets = subsets.to_convex()
        for sub in subsets:
            self._insert_recursive(self.root, sub, sub.hyperplane.span(), cut_rule)

    def _insert_recursive(self, node: RegionNode, insert: Any, trimmed: Any, cut_rule: RegionCutRule) -> None:
        if node.is_leaf():
            if trimmed is not None:
                self._set_node_cut(node, trimmed, cut_rule)
            return

        insert_split = insert.split(node.cut_hyperplane)
        if insert_split.minus is None and insert_split.plus is None:
            return

        trimmed_split = trimmed.split(node.cut_hyperplane) if trimmed is not None else Split()
        if insert_split.minus is not None:
            self._insert_recursive(node.minus, insert_split.minus, trimmed_split.minus, cut_rule)
        if insert_split.plus is not None:
            self._insert_recursive(node.plus, insert_split.plus, trimmed_split.plus, cut_rule)

    def classify(self, point: Any) -> RegionLocation:
        """Classify ``point`` as INSIDE, OUTSIDE or on the BOUNDARY of the region.

        Points on a cut are classified against both children; the result is
        BOUNDARY when the children disagree. NaN and infinite points are
        OUTSIDE.
        """
        if not point.is_finite():
            return RegionLocation.OUTSIDE
        return self._classify_recursive(self.root, point)

    def _classify_recursive(self, node: RegionNode, point: Any) -> RegionLocation:
        if node.is_leaf():
            return node.location

        location = node.cut_hyperplane.classify(point)
        if location == HyperplaneLocation.MINUS:
            return self._classify_recursive(node.minus, point)
        if location == HyperplaneLocation.PLUS:
            return self._classify_recursive(node.plus, point)

        minus_loc = self._classify_recursive(node.minus, point)
        plus_loc = self._classify_recursive(node.plus, point)
        return minus_loc if minus_loc == plus_loc else RegionLocation.BOUNDARY

    def contains(self, point: Any) -> bool:
        return self.classify(point) != RegionLocation.OUTSIDE

    def find_node(self, point: Any) -> RegionNode:
        """Return the deepest node containing ``point``; points on a cut stop at that node."""
        node = self.root
        while node.is_internal():
            location = node.cut_hyperplane.classify(point)
            if location == HyperplaneLocation.MINUS:
                node = node.minus
            elif location == HyperplaneLocation.PLUS:
                node = node.plus
            else:
                break
        return node

    # Boolean operations

    def complement(self, other: RegionBSPTree | None = None) -> None:
        """Complement this tree in place, or set it to the complement of ``other``."""
        if other is not None:
            self._set_root(self._copy_subtree(other.root))
        self._complement_subtree(self.root)
        self._invalidate()

    @staticmethod
    def _complement_subtree(node: RegionNode) -> None:
        for current in node.nodes():
            current.location = (
                RegionLocation.OUTSIDE
                if current.location == RegionLocation.INSIDE
                else RegionLocation.INSIDE
            )

    def union(self, a: RegionBSPTree, b: RegionBSPTree | None = None) -> None:
        """Set this tree to ``self | a``, or to ``a | b`` when both are given."""
        _UnionOperator().apply(*self._operands(a, b), self)

    def intersection(self, a: RegionBSPTree, b: RegionBSPTree | None = None) -> None:
        """Set this tree to ``self & a``, or to ``a & b`` when both are given."""
        _IntersectionOperator().apply(*self._operands(a, b), self)

    def difference(self, a: RegionBSPTree, b: RegionBSPTree | None = None) -> None:
        """Set this tree to ``self - a``, or to ``a - b`` when both are given."""
        _DifferenceOperator().apply(*self._operands(a, b), self)

    def xor(self, a: RegionBSPTree, b: RegionBSPTree | None = None) -> None:
        """Set this tree to ``self ^ a``, or to ``a ^ b`` when both are given."""
        _XorOperator().apply(*self._operands(a, b), self)

    def _operands(self, a: RegionBSPTree, b: RegionBSPTree | None) -> tuple[RegionBSPTree, RegionBSPTree]:
        return (self, a) if b is None else (a, b)

    def condense(self) -> bool:
        """Collapse internal nodes whose children are leaves with the same location.

        Returns True if the tree was modified.
        """
        before = self.count()
        self._condense_recursive(self.root)
        if self.count() != before:
            self._invalidate()
            return True
        return False

    def _condense_recursive(self, node: RegionNode) -> RegionLocation | None:
        if node.is_leaf():
            return node.location

        minus_loc = self._condense_recursive(node.minus)
        plus_loc = self._condense_recursive(node.plus)
        if minus_loc is not None and minus_loc == plus_loc:
            node.location = minus_loc
            node._set_subtree(None, None, None)
            return minus_loc
        return None

    # Splitting and transforms

    def split_subtree(self, node: RegionNode, partitioner: Any) -> RegionNode:
        """Return a new node cut by ``partitioner`` whose children hold the parts of ``node``.

        ``partitioner`` must already be trimmed to the region of ``node``.
        """
        if node.is_leaf():
            parent = self._create_node()
            parent._set_subtree(partitioner, self._copy_node(node), self._copy_node(node))
            return parent
        return self._split_internal_node(node, partitioner)

    def _split_internal_node(self, node: RegionNode, partitioner: Any) -> RegionNode:
        partitioner_split = partitioner.split(node.cut_hyperplane)
        node_cut_split = node.cut.split(partitioner.hyperplane)
        partitioner_side = partitioner_split.location
        node_cut_side = node_cut_split.location

        if partitioner_side == SplitLocation.PLUS:
            plus_split = self.split_subtree(node.plus, partitioner)
            if node_cut_side == SplitLocation.PLUS:
                result_minus = plus_split.minus
                result_plus = self._copy_node(node)
                result_plus._set_subtree(node.cut, self._copy_subtree(node.minus), plus_split.plus)
            else:
                result_minus = self._copy_node(node)
                result_minus._set_subtree(node.cut, self._copy_subtree(node.minus), plus_split.minus)
                result_plus = plus_split.plus
        elif partitioner_side == SplitLocation.MINUS:
            minus_split = self.split_subtree(node.minus, partitioner)
            if node_cut_side == SplitLocation.MINUS:
                result_minus = self._copy_node(node)
                result_minus._set_subtree(node.cut, minus_split.minus, self._copy_subtree(node.plus))
                result_plus = minus_split.plus
            else:
                result_minus = minus_split.minus
                result_plus = self._copy_node(node)
                result_plus._set_subtree(node.cut, minus_split.plus, self._copy_subtree(node.plus))
        elif partitioner_side == SplitLocation.BOTH:
            minus_split = self.split_subtree(node.minus, partitioner_split.minus)
            plus_split = self.split_subtree(node.plus, partitioner_split.plus)
            result_minus = self._joined(node, node_cut_split.minus, minus_split.minus, plus_split.minus)
            result_plus = self._joined(node, node_cut_split.plus, minus_split.plus, plus_split.plus)
        else:
            # the partitioner lies on the node cut hyperplane
            same = partitioner.hyperplane.similar_orientation(node.cut_hyperplane)
            result_minus = self._copy_subtree(node.minus if same else node.plus)
            result_plus = self._copy_subtree(node.plus if same else node.minus)

        result = self._create_node()
        result._set_subtree(partitioner, result_minus, result_plus)
        return result

    def _joined(self, node: RegionNode, cut: Any, minus: RegionNode, plus: RegionNode) -> RegionNode:
        if cut is None:
            # the node cut does not reach this side of the partitioner
            return minus
        joined = self._copy_node(node)
        joined._set_subtree(cut, minus, plus)
        return joined

    def split(self, splitter: Any) -> Split:
        """Split the region by ``splitter`` into new minus and plus trees.

        Either side is None when no part of the region lies on it.
        """
        split_root = self.split_subtree(self.root, splitter.span())

        minus = type(self)(full=False)
        minus_root = minus._copy_node(split_root)
        minus_root._set_subtree(
            split_root.cut, minus._copy_subtree(split_root.minus), minus._create_node()
        )
        minus_root.plus.location = RegionLocation.OUTSIDE
        minus._set_root(minus_root)
        minus.condense()

        plus = type(self)(full=False)
        plus_root = plus._copy_node(split_root)
        plus_root._set_subtree(
            split_root.cut, plus._create_node(), plus._copy_subtree(split_root.plus)
        )
        plus_root.minus.location = RegionLocation.OUTSIDE
        plus._set_root(plus_root)
        plus.condense()

        result = Split(None if minus.is_empty() else minus, None if plus.is_empty() else plus)
        logger.debug("Split region tree: %s", result.location.name)
        return result

    def transform(self, transform: Any) -> None:
        """Apply ``transform`` to every cut in place.

        Transforms that reverse orientation swap the children of each node so
        that inside stays inside.
        """
        swap = not transform.preserves_orientation()
        for node in list(self.nodes()):
            if node.is_internal():
                minus, plus = (node.plus, node.minus) if swap else (node.minus, node.plus)
                node._set_subtree(node.cut.transform(transform), minus, plus)
        self._invalidate()

    # Boundaries

    def _compute_cut_boundary(self, node: RegionNode) -> RegionCutBoundary:
        minus_in: list[Any] = []
        minus_out: list[Any] = []
        self._characterize(node.cut, node.minus, minus_in, minus_out)

        inside_facing: list[Any] = []
        outside_facing: list[Any] = []
        for fragment in minus_in:
            # inside below the cut, outside above it
            self._characterize(fragment, node.plus, None, outside_facing)
        for fragment in minus_out:
            self._characterize(fragment, node.plus, inside_facing, None)

        return RegionCutBoundary(
            inside_facing=self._merge_fragments(node.cut, inside_facing),
            outside_facing=self._merge_fragments(node.cut, outside_facing),
        )

    def _characterize(
        self, sub: Any, node: RegionNode, inside: list[Any] | None, outside: list[Any] | None
    ) -> None:
        if sub is None:
            return
        if node.is_leaf():
            if node.is_inside() and inside is not None:
                inside.append(sub)
            elif node.is_outside() and outside is not None:
                outside.append(sub)
            return

        split = sub.split(node.cut_hyperplane)
        if split.location == SplitLocation.NEITHER:
            self._characterize(sub, node.plus, inside, outside)
            self._characterize(sub, node.minus, inside, outside)
        else:
            self._characterize(split.plus, node.plus, inside, outside)
            self._characterize(split.minus, node.minus, inside, outside)

    def _merge_fragments(self, cut: Any, fragments: list[Any]) -> list[Any]:
        """Combine boundary fragments lying on the hyperplane of ``cut``."""
        return fragments

    @property
    def boundaries(self) -> list[Any]:
        """Boundary pieces oriented with the region on their minus side."""
        if self._boundaries is None:
            result = []
            for node in self.nodes():
                boundary = node.cut_boundary
                if boundary is None:
                    continue
                result.extend(boundary.outside_facing)
                result.extend(sub.reverse() for sub in boundary.inside_facing)
            self._boundaries = result
        return list(self._boundaries)

    @property
    def boundary_size(self) -> float:
        if self._boundary_size is None:
            self._boundary_size = math.fsum(
                node.cut_boundary.size for node in self.nodes() if node.is_internal()
            )
        return self._boundary_size

    def project(self, point: Any) -> Any:
        """Return the boundary point closest to ``point``, or None if there is no boundary."""
        projected = None
        min_dist = math.inf
        for node in self.nodes():
            if node.is_leaf():
                continue
            if projected is not None and abs(node.cut_hyperplane.offset(point)) > min_dist:
                continue
            candidate = node.cut_boundary.closest(point)
            if candidate is None:
                continue
            dist = candidate.distance(point)
            if projected is None or dist < min_dist:
                projected = candidate
                min_dist = dist
            elif dist == min_dist:
                projected = self._disambiguate_closest(point, projected, candidate)
        return projected

    def _disambiguate_closest(self, target: Any, a: Any, b: Any) -> Any:
        return a

    # Size properties

    @property
    def size(self) -> float:
        return self._get_size_properties()[0]

    @property
    def centroid(self) -> Any:
        return self._get_size_properties()[1]

    def _get_size_properties(self) -> tuple[float, Any]:
        if self._size_properties is None:
            self._size_properties = self._compute_size_properties()
        return self._size_properties

    def _compute_size_properties(self) -> tuple[float, Any]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}[count= {self.count()}, height= {self.height()}]"


class _MergeOperator:
    """Merges two trees into an output tree, resolving leaves with ``merge_leaf``."""

    def __init__(self) -> None:
        self.output: RegionBSPTree | None = None

    def apply(self, tree1: RegionBSPTree, tree2: RegionBSPTree, output: RegionBSPTree) -> None:
        self.output = output
        root = self._merge_recursive(tree1.root, tree2.root)
        output._set_root(root)
        output.condense()
        logger.debug(
            "%s merge produced %d nodes", type(self).__name__.strip("_"), output.count()
        )

    def _merge_recursive(self, node1: RegionNode, node2: RegionNode) -> RegionNode:
        if node1.is_leaf() or node2.is_leaf():
            return self.output._copy_subtree(self.merge_leaf(node1, node2))

        partitioned = self.output.split_subtree(node2, node1.cut)
        minus = self._merge_recursive(node1.minus, partitioned.minus)
        plus = self._merge_recursive(node1.plus, partitioned.plus)

        result = self.output._copy_node(node1)
        result._set_subtree(node1.cut, minus, plus)
        return result

    def _complemented_copy(self, node: RegionNode) -> RegionNode:
        copied = self.output._copy_subtree(node)
        RegionBSPTree._complement_subtree(copied)
        return copied

    def merge_leaf(self, node1: RegionNode, node2: RegionNode) -> RegionNode:
        raise NotImplementedError


class _UnionOperator(_MergeOperator):
    def merge_leaf(self, node1: RegionNode, node2: RegionNode) -> RegionNode:
        if node1.is_leaf():
            return node1 if node1.is_inside() else node2
        return self.merge_leaf(node2, node1)


class _IntersectionOperator(_MergeOperator):
    def merge_leaf(self, node1: RegionNode, node2: RegionNode) -> RegionNode:
        if node1.is_leaf():
            return node2 if node1.is_inside() else node1
        return self.merge_leaf(node2, node1)


class _DifferenceOperator(_MergeOperator):
    def merge_leaf(self, node1: RegionNode, node2: RegionNode) -> RegionNode:
        if node1.is_inside():
            # keep only what is not in the second tree
            return self._complemented_copy(node2)
        if node2.is_inside():
            outside = self.output._create_node()
            outside.location = RegionLocation.OUTSIDE
            return outside
        return node1


class _XorOperator(_MergeOperator):
    def merge_leaf(self, node1: RegionNode, node2: RegionNode) -> RegionNode:
        if node1.is_leaf():
            if node1.is_inside():
                return self._complemented_copy(node2)
            return node2
        return self.merge_leaf(node2, node1)

