# SPDX-FileCopyrightText: © 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0

import logging
from typing import Callable, Iterator

from regdefgen.lib.enums import ValueTag
from regdefgen.lib.records import DefinitionRecord

log = logging.getLogger(__name__)


class SectionBuffer:
    """
    Ordered run of recognized ``#define`` records between two flush points (comment, blank line or end of input).

    Flushing renders every record with the name and type columns padded to the widest entry of this section only:

    .. code-block:: text

        const FOO    : u32 = 0x1;
        const BARBAZ : u32 = 0x22;
    """

    def __init__(self):
        self._records: list[DefinitionRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return len(self._records) > 0

    def __iter__(self) -> Iterator[DefinitionRecord]:
        return iter(self._records)

    def append(self, record: DefinitionRecord):
        self._records.append(record)

    def clear(self):
        self._records.clear()

    def flush(self, label: Callable[[ValueTag], str], keyword: str = "const") -> list[str]:
        """
        Render and clear the section. Returns no lines if the section is empty.

        :param label: maps a record's ``ValueTag`` to its type label
        :param keyword: declaration keyword placed before each name
        """
        if not self._records:
            return []

        labels = [label(record.tag) for record in self._records]
        name_width = max(len(record.name) for record in self._records)
        type_width = max(len(text) for text in labels)

        lines = []
        for record, type_label in zip(self._records, labels):
            lines.append(f"{keyword} {record.name.ljust(name_width)} : {type_label.ljust(type_width)} = {record.value};")

        log.debug(f"Flushed section of {len(lines)} definitions starting at line {self._records[0].lineno}")
        self.clear()
        return lines
