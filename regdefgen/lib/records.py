# SPDX-FileCopyrightText: © 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass

from regdefgen.lib.enums import ValueTag


@dataclass(frozen=True)
class DefinitionRecord:
    """
    One recognized ``#define``. Lives in a ``SectionBuffer`` until the section is flushed.

    :param name: macro name
    :param tag: value classification, rendered to a type label at flush time
    :param value: literal text emitted as the constant's value
    :param lineno: 1-based input line the record came from
    """

    name: str
    tag: ValueTag
    value: str
    lineno: int = 0
