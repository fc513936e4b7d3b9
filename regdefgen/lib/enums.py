# SPDX-FileCopyrightText: © 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0

# pyright: strict

from __future__ import annotations
from enum import Enum, auto


class MyEnum(Enum):

    def __str__(self):
        return f"{self.name}"


class ValueTag(MyEnum):
    "Classification of a ``#define`` value, selects the emitted type label"

    NUMERIC = auto()
    STRING = auto()


class LineKind(MyEnum):
    """
    Result of classifying a single input line.

    ``SKIPPED_DEFINE`` is a ``#define`` that no rule recognized. It produces no output but is counted.
    """

    GUARD = auto()
    COMMENT = auto()
    BLANK = auto()
    OTHER = auto()
    DEFINE = auto()
    SKIPPED_DEFINE = auto()
