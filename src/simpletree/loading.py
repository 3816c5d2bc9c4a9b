# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Functions for populating a tree from dict, list or another tree.

All loaders insert through the tree protocol, so they work for any
TreeProtocol implementation and honour its validation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Hashable

if TYPE_CHECKING:
    from .protocol import TreeProtocol


def load_from_tree(tree: TreeProtocol, source: TreeProtocol) -> None:
    """Copy every node of source into tree, preserving structure and order."""
    for node in source.iter_nodes():
        tree.insert(source.get_parent(node), node, source.get_data(node))


def load_from_dict(tree: TreeProtocol, source: dict[Hashable, Any]) -> None:
    """Load a nested dict in the as_dict() format.

    Args:
        tree: Target tree.
        source: ``{root: {'data': ..., 'children': {child: {...}}}}``. Both
            keys are optional; an entry may also be None for a childless
            node without data.

    Raises:
        ValueError: If source has more than one root, or an entry or its
            children are not dicts.
    """
    if len(source) > 1:
        raise ValueError(f"dict source must have a single root, got {len(source)}")

    def _load(parent: Hashable | None, entries: dict[Hashable, Any]) -> None:
        for node, entry in entries.items():
            if entry is None:
                entry = {}
            if not isinstance(entry, dict):
                raise ValueError(
                    f"Entry for node {node!r} must be a dict or None, "
                    f"got {type(entry).__name__}"
                )
            tree.insert(parent, node, entry.get('data'))
            children = entry.get('children') or {}
            if not isinstance(children, dict):
                raise ValueError(
                    f"Children of node {node!r} must be a dict, got {type(children).__name__}"
                )
            _load(node, children)

    _load(None, source)


def load_from_list(tree: TreeProtocol, source: list[tuple]) -> None:
    """Load a list of ``(parent, node)`` or ``(parent, node, data)`` tuples.

    Parents must appear before their children; the first tuple has parent
    None and becomes the root.

    Raises:
        ValueError: If a tuple has the wrong number of elements.
    """
    for item in source:
        if len(item) == 2:
            parent, node = item
            data = None
        elif len(item) == 3:
            parent, node, data = item
        else:
            raise ValueError(
                f"List items must be (parent, node) or (parent, node, data), "
                f"got {len(item)} elements"
            )
        tree.insert(parent, node, data)
