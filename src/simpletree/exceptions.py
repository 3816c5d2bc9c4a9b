# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""SimpleTree exceptions."""

from __future__ import annotations


class SimpleTreeError(Exception):
    """Base exception for SimpleTree errors."""

    pass


class NotFoundError(SimpleTreeError, KeyError):
    """Raised when an operation references a node that is not in the tree.

    Unlike a plain KeyError, the message is shown without quotes.
    """

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ''


class DuplicateNodeError(SimpleTreeError, ValueError):
    """Raised when an insertion would add a node that is already present."""

    pass


class InvalidOperationError(SimpleTreeError, ValueError):
    """Raised for structurally illegal requests.

    Examples are a second root, removing a non-leaf through the core
    primitive, walking past the root, or asking for the siblings of the root.
    """

    pass
