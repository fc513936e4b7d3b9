# SPDX-FileCopyrightText: © 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass, field


@dataclass
class TranscodeReport:
    """
    Counters collected over one run. Skipped ``#define`` lines don't change the output, they are only reported here.
    """

    lines_read: int = 0
    definitions: int = 0
    sections: int = 0
    guards_dropped: int = 0
    ignored_lines: int = 0
    skipped_defines: list[tuple[int, str]] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped_defines)

    def summary(self) -> str:
        return (
            f"{self.lines_read} lines read, {self.definitions} definitions in {self.sections} sections, "
            f"{self.guards_dropped} guard lines dropped, {self.ignored_lines} other lines ignored, "
            f"{self.skipped_count} unrecognized #define lines skipped"
        )
