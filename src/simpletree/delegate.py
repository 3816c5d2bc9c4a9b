# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeDelegate - give a host class the tree protocol by embedding a tree.

A host that keeps a tree in one of its attributes subclasses TreeDelegate
and gets the full protocol: each capability is forwarded verbatim to the
embedded tree, and all derived operations come from TreeProtocol. Nothing
is added on top, so failures are exactly those of the embedded tree.

The attribute name defaults to ``tree`` and can be chosen with a class
keyword:

    >>> class Lattice(TreeDelegate, field='cells'):
    ...     def __init__(self, name='lattice'):
    ...         self.name = name
    ...         self.cells = TreeCore()
    >>> lattice = Lattice()
    >>> lattice.insert(None, 'origin', (0, 0))
    >>> lattice.root
    'origin'

subtree() builds its result with new_empty(), which calls the host class
without arguments; hosts whose constructor needs arguments override it.
"""

from __future__ import annotations

from typing import Any, Hashable

from .protocol import TreeProtocol


class TreeDelegate(TreeProtocol):
    """Base class forwarding every tree capability to an embedded tree."""

    _tree_field: str = 'tree'

    def __init_subclass__(cls, field: str | None = None, **kwargs: Any) -> None:
        """Record the attribute holding the embedded tree."""
        super().__init_subclass__(**kwargs)
        if field is not None:
            cls._tree_field = field

    @property
    def _tree(self) -> TreeProtocol:
        return getattr(self, self._tree_field)

    @property
    def root(self) -> Hashable | None:
        return self._tree.root

    def contains(self, node: Hashable) -> bool:
        return self._tree.contains(node)

    def size(self) -> int:
        return self._tree.size()

    def get_parent(self, node: Hashable) -> Hashable | None:
        return self._tree.get_parent(node)

    def get_children(self, node: Hashable) -> list[Hashable]:
        return self._tree.get_children(node)

    def get_data(self, node: Hashable) -> Any:
        return self._tree.get_data(node)

    def set_data(self, node: Hashable, data: Any) -> None:
        self._tree.set_data(node, data)

    def insert(self, parent: Hashable | None, node: Hashable, data: Any = None) -> None:
        self._tree.insert(parent, node, data)

    def remove(self, node: Hashable) -> Any:
        return self._tree.remove(node)

    def clear(self) -> None:
        self._tree.clear()

    def new_empty(self) -> TreeDelegate:
        return type(self)()
