# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""SimpleTree - generic trees keyed by node identifiers.

A lightweight, zero-dependency library providing a mutable tree stored as
parent, children and data maps, with ancestor, descendant, sibling, leaf,
subtree and move operations built on a small capability protocol.
"""

import logging

__version__ = "0.1.0"

from .core import TreeCore
from .delegate import TreeDelegate
from .exceptions import (
    DuplicateNodeError,
    InvalidOperationError,
    NotFoundError,
    SimpleTreeError,
)
from .protocol import ALL, TreeOrder, TreeProtocol, move

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core classes
    "TreeCore",
    "TreeProtocol",
    "TreeDelegate",
    # Operations
    "move",
    "ALL",
    "TreeOrder",
    # Exceptions
    "SimpleTreeError",
    "NotFoundError",
    "DuplicateNodeError",
    "InvalidOperationError",
]
