# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeProtocol - the capability set of a simple tree and the algorithms built on it.

A simple tree is any object that can answer a handful of primitive
questions (root, membership, size, parent, children, data) and perform two
primitive mutations (insert a node, remove a leaf). Every structural query
in this module is written against those primitives only, so any class that
implements them gets ancestors, descendants, siblings, leaves, levels,
subtree extraction and traversal for free.

Capabilities (abstract):
    - root: the root node, or None for an empty tree
    - contains(node), size()
    - get_parent(node), get_children(node)
    - get_data(node), set_data(node, data)
    - insert(parent, node, data), remove(node), clear()
    - new_empty(): an empty tree of the same kind

Derived operations:
    - is_leaf, level, ancestor, descendants, siblings, leaves
    - subtree, push, append, delete, empty
    - iter_nodes / nodes with depth-first or breadth-first order
    - walk, as_dict, render, structural equality

Every enumeration follows the stored order of children, which is the
order in which they were inserted.

Example:
    >>> tree = TreeCore()
    >>> tree.insert(None, 'A', 1)
    >>> tree.insert('A', 'B', 2)
    >>> tree.insert('A', 'C', 3)
    >>> tree.insert('B', 'D', 4)
    >>> tree.descendants('A')
    ['B', 'D', 'C']
    >>> tree.leaves()
    ['D', 'C']
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from collections import deque
from enum import Enum
from typing import Any, Hashable, Iterator

from .exceptions import DuplicateNodeError, InvalidOperationError, NotFoundError

logger = logging.getLogger(__name__)

#: Level value selecting the whole descendant subtree.
ALL = math.inf


class TreeOrder(str, Enum):
    """Traversal order for node iteration."""

    DEPTH = 'depth'
    WIDTH = 'width'


class TreeProtocol(ABC):
    """Abstract simple tree keyed by node identifiers.

    Subclasses provide storage by implementing the abstract capability
    methods; everything else is derived from them and never touches
    storage directly.
    """

    __slots__ = ()

    # ==================== Capabilities ====================

    @property
    @abstractmethod
    def root(self) -> Hashable | None:
        """The root node, or None if the tree is empty."""

    @abstractmethod
    def contains(self, node: Hashable) -> bool:
        """True if node belongs to the tree."""

    @abstractmethod
    def size(self) -> int:
        """Number of nodes in the tree."""

    @abstractmethod
    def get_parent(self, node: Hashable) -> Hashable | None:
        """Parent of node, None for the root."""

    @abstractmethod
    def get_children(self, node: Hashable) -> list[Hashable]:
        """Children of node in insertion order."""

    @abstractmethod
    def get_data(self, node: Hashable) -> Any:
        """Data attached to node."""

    @abstractmethod
    def set_data(self, node: Hashable, data: Any) -> None:
        """Replace the data attached to node."""

    @abstractmethod
    def insert(self, parent: Hashable | None, node: Hashable, data: Any = None) -> None:
        """Add node under parent, or as root when parent is None."""

    @abstractmethod
    def remove(self, node: Hashable) -> Any:
        """Remove a leaf node and return its data."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every node."""

    @abstractmethod
    def new_empty(self) -> TreeProtocol:
        """Return a new, empty tree of the same kind."""

    # ==================== Special Methods ====================

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, node: Hashable) -> bool:
        return self.contains(node)

    def __iter__(self) -> Iterator[Hashable]:
        """Iterate over nodes in depth-first pre-order."""
        return self.iter_nodes()

    def __getitem__(self, node: Hashable) -> Any:
        return self.get_data(node)

    def __setitem__(self, node: Hashable, data: Any) -> None:
        self.set_data(node, data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.nodes()!r})"

    def __eq__(self, other: object) -> bool:
        """Structural equality: same root, same children order, equal data."""
        if not isinstance(other, TreeProtocol):
            return NotImplemented
        if self.size() != other.size() or self.root != other.root:
            return False
        for node in self.iter_nodes():
            if not other.contains(node):
                return False
            if self.get_children(node) != other.get_children(node):
                return False
            if self.get_data(node) != other.get_data(node):
                return False
        return True

    # ==================== Helpers ====================

    def _require(self, node: Hashable) -> None:
        """Raise NotFoundError if node is not in the tree."""
        if not self.contains(node):
            raise NotFoundError(f"Node {node!r} not found")

    # ==================== Structural Queries ====================

    def is_leaf(self, node: Hashable) -> bool:
        """True if node has no children."""
        return not self.get_children(node)

    def level(self, node: Hashable, reference: Hashable | None = None) -> int:
        """Number of parent hops from node up to reference.

        Args:
            node: Starting node.
            reference: An ancestor of node (or node itself). Defaults to root.

        Returns:
            0 if node is reference, otherwise the hop count.

        Raises:
            NotFoundError: If node or reference is not in the tree.
            InvalidOperationError: If reference is not an ancestor of node.
        """
        self._require(node)
        if reference is None:
            reference = self.root
        else:
            self._require(reference)

        count = 0
        current = node
        while current != reference:
            current = self.get_parent(current)
            if current is None:
                raise InvalidOperationError(
                    f"Node {reference!r} is not an ancestor of {node!r}"
                )
            count += 1
        return count

    def ancestor(self, node: Hashable, generation: int = 1) -> Hashable:
        """Walk up from node generation times.

        Raises:
            NotFoundError: If node is not in the tree.
            InvalidOperationError: If generation is negative or larger
                than the level of node.
        """
        self._require(node)
        if generation < 0:
            raise InvalidOperationError(f"generation must be >= 0, got {generation}")

        current = node
        for _ in range(generation):
            parent = self.get_parent(current)
            if parent is None:
                raise InvalidOperationError(
                    f"Generation {generation} walks past the root from {node!r}"
                )
            current = parent
        return current

    def descendants(self, node: Hashable, level: int | float = ALL) -> list[Hashable]:
        """Nodes below node.

        Args:
            node: Starting node (never part of the result).
            level: Exact number of downward hops, or ALL for the whole
                subtree. Level 0 yields an empty list.

        Returns:
            Nodes in depth-first pre-order, children in stored order.
        """
        self._require(node)
        if level < 0:
            raise InvalidOperationError(f"level must be >= 0, got {level}")

        result: list[Hashable] = []
        stack = [(child, 1) for child in reversed(self.get_children(node))]
        while stack:
            current, depth = stack.pop()
            if level == ALL or depth == level:
                result.append(current)
            if depth < level:
                stack.extend(
                    (child, depth + 1) for child in reversed(self.get_children(current))
                )
        return result

    def siblings(self, node: Hashable) -> list[Hashable]:
        """Other children of the parent of node, in stored order.

        Raises:
            InvalidOperationError: If node is the root.
        """
        parent = self.get_parent(node)
        if parent is None:
            raise InvalidOperationError(f"Root node {node!r} has no siblings")
        return [child for child in self.get_children(parent) if child != node]

    def leaves(self, node: Hashable | None = None) -> list[Hashable]:
        """Leaf nodes of the subtree rooted at node (default: root), pre-order."""
        return [current for current in self.iter_nodes(start=node) if self.is_leaf(current)]

    # ==================== Iteration ====================

    def iter_nodes(
        self,
        order: TreeOrder | str = TreeOrder.DEPTH,
        start: Hashable | None = None,
    ) -> Iterator[Hashable]:
        """Iterate over the subtree rooted at start (default: root).

        Args:
            order: TreeOrder.DEPTH for pre-order, TreeOrder.WIDTH for
                level-by-level.
            start: First node of the traversal.

        Raises:
            NotFoundError: If start is given and not in the tree.
            ValueError: If order is not a valid TreeOrder.
        """
        order = TreeOrder(order)
        if start is None:
            start = self.root
        else:
            self._require(start)

        def _depth_gen(first: Hashable) -> Iterator[Hashable]:
            stack = [first]
            while stack:
                current = stack.pop()
                yield current
                stack.extend(reversed(self.get_children(current)))

        def _width_gen(first: Hashable) -> Iterator[Hashable]:
            queue = deque([first])
            while queue:
                current = queue.popleft()
                yield current
                queue.extend(self.get_children(current))

        if start is None:
            return iter(())
        if order is TreeOrder.WIDTH:
            return _width_gen(start)
        return _depth_gen(start)

    def iter_values(
        self, order: TreeOrder | str = TreeOrder.DEPTH, start: Hashable | None = None
    ) -> Iterator[Any]:
        """Iterate over node data in traversal order."""
        return (self.get_data(node) for node in self.iter_nodes(order, start))

    def iter_items(
        self, order: TreeOrder | str = TreeOrder.DEPTH, start: Hashable | None = None
    ) -> Iterator[tuple[Hashable, Any]]:
        """Iterate over (node, data) pairs in traversal order."""
        return ((node, self.get_data(node)) for node in self.iter_nodes(order, start))

    def nodes(
        self, order: TreeOrder | str = TreeOrder.DEPTH, start: Hashable | None = None
    ) -> list[Hashable]:
        """Return nodes in traversal order."""
        return list(self.iter_nodes(order, start))

    def values(
        self, order: TreeOrder | str = TreeOrder.DEPTH, start: Hashable | None = None
    ) -> list[Any]:
        """Return node data in traversal order."""
        return list(self.iter_values(order, start))

    def items(
        self, order: TreeOrder | str = TreeOrder.DEPTH, start: Hashable | None = None
    ) -> list[tuple[Hashable, Any]]:
        """Return (node, data) pairs in traversal order."""
        return list(self.iter_items(order, start))

    def walk(self, start: Hashable | None = None) -> Iterator[tuple[Hashable, int]]:
        """Walk the tree in pre-order, yielding (node, level) pairs.

        Levels are relative to start, which defaults to the root.

        Example:
            >>> for node, level in tree.walk():
            ...     print('  ' * level, node)
        """
        if start is None:
            start = self.root
        else:
            self._require(start)

        def _walk_gen(first: Hashable) -> Iterator[tuple[Hashable, int]]:
            stack = [(first, 0)]
            while stack:
                current, depth = stack.pop()
                yield current, depth
                stack.extend(
                    (child, depth + 1) for child in reversed(self.get_children(current))
                )

        if start is None:
            return iter(())
        return _walk_gen(start)

    # ==================== Conversion ====================

    def as_dict(self) -> dict[Hashable, Any]:
        """Convert to a nested dict.

        Each node maps to ``{'data': ..., 'children': {...}}``; the result
        can be passed back as the source of a new tree.
        """
        def _entry(node: Hashable) -> dict[str, Any]:
            return {
                'data': self.get_data(node),
                'children': {child: _entry(child) for child in self.get_children(node)},
            }

        if self.root is None:
            return {}
        return {self.root: _entry(self.root)}

    def render(self) -> str:
        """Return an indented text rendering, one ``node: data`` line per node."""
        return '\n'.join(
            f"{'  ' * depth}{node!r}: {self.get_data(node)!r}"
            for node, depth in self.walk()
        )

    # ==================== Mutation Helpers ====================

    def subtree(self, node: Hashable) -> TreeProtocol:
        """Copy node and its descendants into a new independent tree.

        The source tree is left untouched; node becomes the new root.
        """
        self._require(node)
        tree = self.new_empty()
        for current in self.iter_nodes(start=node):
            parent = None if current == node else self.get_parent(current)
            tree.insert(parent, current, self.get_data(current))
        return tree

    def push(self, parent: Hashable, node: Hashable, data: Any = None) -> None:
        """Add node as the last child of parent."""
        if parent is None:
            raise InvalidOperationError("push requires a parent node, use insert for the root")
        self.insert(parent, node, data)

    def append(self, parent: Hashable, other: TreeProtocol) -> None:
        """Graft a copy of the whole tree other under parent.

        Raises:
            NotFoundError: If parent is not in this tree.
            DuplicateNodeError: If any node of other is already here. Nothing
                is inserted in that case.
        """
        self._require(parent)
        if other.root is None:
            return
        collisions = [node for node in other.iter_nodes() if self.contains(node)]
        if collisions:
            raise DuplicateNodeError(f"Nodes already present: {collisions!r}")
        for node in other.iter_nodes():
            node_parent = parent if node == other.root else other.get_parent(node)
            self.insert(node_parent, node, other.get_data(node))

    def delete(self, node: Hashable) -> None:
        """Remove node together with all its descendants, bottom-up."""
        self._require(node)
        doomed = self.nodes(start=node)
        logger.debug("Deleting %r with %d descendants", node, len(doomed) - 1)
        # Reversed pre-order removes every descendant before its parent.
        for current in reversed(doomed):
            self.remove(current)

    def empty(self) -> None:
        """Reset to the empty tree."""
        self.clear()


def move(
    source: TreeProtocol,
    node: Hashable,
    target: TreeProtocol,
    new_parent: Hashable,
) -> None:
    """Relocate the subtree rooted at node from source under new_parent in target.

    source and target may be the same tree. All checks run before source is
    modified, so a failed move leaves both trees unchanged.

    Raises:
        NotFoundError: If node is not in source.
        InvalidOperationError: If new_parent is not in target, or when moving
            within one tree, if node is its root or new_parent lies inside
            the moved subtree.
        DuplicateNodeError: If a moved node already exists in target.
    """
    if not source.contains(node):
        raise NotFoundError(f"Node {node!r} not found")
    if not target.contains(new_parent):
        raise InvalidOperationError(f"Target parent {new_parent!r} not found in target tree")

    moved = source.nodes(start=node)
    if source is target:
        if node == source.root:
            raise InvalidOperationError(f"Cannot move root {node!r} within its own tree")
        if new_parent in set(moved):
            raise InvalidOperationError(
                f"Cannot move {node!r} under its own descendant {new_parent!r}"
            )
    else:
        collisions = [current for current in moved if target.contains(current)]
        if collisions:
            raise DuplicateNodeError(f"Nodes already present in target: {collisions!r}")

    records = [
        (None if current == node else source.get_parent(current), current, source.get_data(current))
        for current in moved
    ]
    source.delete(node)
    for parent, current, data in records:
        target.insert(new_parent if parent is None else parent, current, data)
    logger.debug("Moved %r (%d nodes) under %r", node, len(records), new_parent)
