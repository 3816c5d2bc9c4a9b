# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeCore - the concrete storage of a simple tree.

The tree is kept as a root plus three dicts keyed by node identifier:

    - contents: node -> data
    - parent:   node -> parent node (the root has no entry)
    - children: node -> list of child nodes, in insertion order

Nodes are plain hashable values looked up by equality; there are no linked
node objects. ``None`` is reserved to mean "no parent" and cannot be used
as a node identifier.

Every mutation validates its preconditions before touching any dict, so a
failed call leaves the tree exactly as it was.

Example:
    >>> tree = TreeCore()
    >>> tree.insert(None, 'A', 'root data')
    >>> tree.insert('A', 'B', 'child data')
    >>> tree.root
    'A'
    >>> tree.get_children('A')
    ['B']
    >>> tree.remove('B')
    'child data'
"""

from __future__ import annotations

import logging
from typing import Any, Hashable

from .exceptions import DuplicateNodeError, InvalidOperationError, NotFoundError
from .loading import load_from_dict, load_from_list, load_from_tree
from .protocol import TreeProtocol

logger = logging.getLogger(__name__)


class TreeCore(TreeProtocol):
    """The default simple tree: root plus contents, parent and children maps.

    Args:
        source: Optional initial data. Can be:
            - TreeProtocol: any tree, copied node by node
            - dict: nested ``{node: {'data': ..., 'children': {...}}}``
              as produced by as_dict()
            - list: ``(parent, node)`` or ``(parent, node, data)`` tuples,
              parents listed before their children; the root has
              parent None

    Example:
        >>> TreeCore([(None, 'A', 1), ('A', 'B', 2)])
        TreeCore(['A', 'B'])
        >>> TreeCore({'A': {'data': 1, 'children': {}}})
        TreeCore(['A'])
    """

    __slots__ = ('_root', '_contents', '_parent', '_children')

    def __init__(self, source: TreeProtocol | dict | list | None = None) -> None:
        self._root: Hashable | None = None
        self._contents: dict[Hashable, Any] = {}
        self._parent: dict[Hashable, Hashable] = {}
        self._children: dict[Hashable, list[Hashable]] = {}

        if source is not None:
            self._load_source(source)

    def _load_source(self, source: TreeProtocol | dict | list) -> None:
        """Load source into this (empty) tree.

        Raises:
            TypeError: If source is not a tree, dict or list.
        """
        if isinstance(source, TreeProtocol):
            load_from_tree(self, source)
        elif isinstance(source, dict):
            load_from_dict(self, source)
        elif isinstance(source, list):
            load_from_list(self, source)
        else:
            raise TypeError(
                f"source must be dict, list, or TreeProtocol, not {type(source).__name__}"
            )

    # ==================== Accessors ====================

    @property
    def root(self) -> Hashable | None:
        """The root node, or None if the tree is empty."""
        return self._root

    def contains(self, node: Hashable) -> bool:
        return node in self._contents

    def size(self) -> int:
        return len(self._contents)

    def get_parent(self, node: Hashable) -> Hashable | None:
        """Return the parent of node (None for the root).

        Raises:
            NotFoundError: If node is not in the tree.
        """
        self._require(node)
        return self._parent.get(node)

    def get_children(self, node: Hashable) -> list[Hashable]:
        """Return a copy of the children of node, in insertion order.

        Raises:
            NotFoundError: If node is not in the tree.
        """
        self._require(node)
        return list(self._children[node])

    def get_data(self, node: Hashable) -> Any:
        self._require(node)
        return self._contents[node]

    def set_data(self, node: Hashable, data: Any) -> None:
        self._require(node)
        self._contents[node] = data

    # ==================== Mutation ====================

    def insert(self, parent: Hashable | None, node: Hashable, data: Any = None) -> None:
        """Add node to the tree.

        Args:
            parent: Existing node to append node under, or None to make node
                the root of an empty tree.
            node: New node identifier.
            data: Data to attach.

        Raises:
            InvalidOperationError: If parent is None and the tree is not
                empty, or node is None.
            NotFoundError: If parent is not in the tree.
            DuplicateNodeError: If node is already in the tree.
        """
        if node is None:
            raise InvalidOperationError("None cannot be used as a node identifier")
        if parent is None:
            if self._contents:
                raise InvalidOperationError(
                    f"Tree already has root {self._root!r}, cannot add root {node!r}"
                )
        else:
            self._require(parent)
        # Raises TypeError for unhashable ids before any mutation.
        if node in self._contents:
            raise DuplicateNodeError(f"Node {node!r} already in tree")

        if parent is None:
            self._root = node
        else:
            self._children[parent].append(node)
            self._parent[node] = parent

        self._children[node] = []
        self._contents[node] = data
        logger.debug("Inserted %r under %r", node, parent)

    def remove(self, node: Hashable) -> Any:
        """Remove a leaf node and return its data.

        Raises:
            NotFoundError: If node is not in the tree.
            InvalidOperationError: If node has children. Use delete() to
                remove a whole branch.
        """
        self._require(node)
        if self._children[node]:
            raise InvalidOperationError(
                f"Node {node!r} has {len(self._children[node])} children, only leaves can be removed"
            )

        parent = self._parent.pop(node, None)
        if parent is None:
            self._root = None
        else:
            self._children[parent].remove(node)
        del self._children[node]
        logger.debug("Removed %r from %r", node, parent)
        return self._contents.pop(node)

    def clear(self) -> None:
        """Remove all nodes."""
        self._root = None
        self._contents.clear()
        self._parent.clear()
        self._children.clear()
        logger.debug("Cleared tree")

    def new_empty(self) -> TreeCore:
        return type(self)()
