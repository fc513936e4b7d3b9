# SPDX-FileCopyrightText: © 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0

from enum import Enum, auto
from typing import Optional
from dataclasses import dataclass, field


class TranscoderFailureType(Enum):
    SKIPPED_DEFINES = auto()
    BAD_CONFIG = auto()


@dataclass
class TranscoderError(Exception):
    """
    Raised by the CLI when a run can't be accepted. Pattern mismatches are only an error in strict mode.

    :param kind: type of failure
    :type kind: TranscoderFailureType
    :param error_text: detail message
    :type error_text: str
    :param skipped: ``(lineno, line)`` pairs for ``SKIPPED_DEFINES``
    :type skipped: list[tuple[int, str]]
    """

    kind: TranscoderFailureType
    error_text: Optional[str] = None
    skipped: list[tuple[int, str]] = field(default_factory=list)

    def __str__(self):
        if self.kind == TranscoderFailureType.SKIPPED_DEFINES:
            err = f"{len(self.skipped)} #define lines were not recognized"
            for lineno, line in self.skipped:
                err += f"\n\tline {lineno}: {line}"
        elif self.kind == TranscoderFailureType.BAD_CONFIG:
            err = "Bad configuration"
            err += f"\n{self.error_text}"
        else:
            err = "Unknown failure"
        return err
