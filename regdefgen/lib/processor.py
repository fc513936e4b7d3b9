# SPDX-FileCopyrightText: © 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0

import logging
from typing import Optional, Sequence

from regdefgen.config import TranscoderCfg
from regdefgen.lib.enums import LineKind
from regdefgen.lib.records import DefinitionRecord
from regdefgen.lib.report import TranscodeReport
from regdefgen.lib.rules import DEFAULT_RULES, DEFINE_PREFIX, DefineRule, is_blank, is_comment, is_guard, match_define
from regdefgen.lib.section import SectionBuffer

log = logging.getLogger(__name__)


class HeaderProcessor:
    """
    Stateful line sink. Feed it input lines in order, it returns the output lines each one produces.

    Lines are checked in this order:

    1. header guards - dropped
    2. ``//`` comments - flush the section, then passed through
    3. blank lines - flush the section, then passed through
    4. anything not starting with ``#define`` - dropped
    5. ``#define`` matched by a rule - buffered in the current section
    6. any other ``#define`` - dropped and counted as skipped

    :param cfg: type labels and declaration keyword
    :param rules: ordered ``DefineRule`` list, first match wins
    """

    def __init__(self, cfg: Optional[TranscoderCfg] = None, rules: Sequence[DefineRule] = DEFAULT_RULES):
        self.cfg = cfg if cfg is not None else TranscoderCfg()
        self.rules = tuple(rules)
        self.section = SectionBuffer()
        self.report = TranscodeReport()

    def classify(self, line: str) -> LineKind:
        "Classification only, doesn't touch the section or the report"
        kind, _ = self._classify(line, 0)
        return kind

    def _classify(self, line: str, lineno: int) -> tuple[LineKind, Optional[DefinitionRecord]]:
        if is_guard(line):
            return LineKind.GUARD, None
        if is_comment(line):
            return LineKind.COMMENT, None
        if is_blank(line):
            return LineKind.BLANK, None
        if not line.startswith(DEFINE_PREFIX):
            return LineKind.OTHER, None
        record = match_define(line, lineno, self.rules)
        if record is None:
            return LineKind.SKIPPED_DEFINE, None
        return LineKind.DEFINE, record

    def feed(self, line: str) -> list[str]:
        """
        Process one input line.

        :param line: input line, with or without its trailing newline
        :returns: output lines without newlines, possibly empty
        """
        line = line.rstrip("\n")
        self.report.lines_read += 1
        lineno = self.report.lines_read

        kind, record = self._classify(line, lineno)
        if kind == LineKind.GUARD:
            self.report.guards_dropped += 1
            return []

        if kind in (LineKind.COMMENT, LineKind.BLANK):
            out = self.flush()
            out.append(line)
            return out

        if kind == LineKind.OTHER:
            self.report.ignored_lines += 1
            return []

        if record is None:
            log.debug(f"line {lineno}: no rule matched {line!r}")
            self.report.skipped_defines.append((lineno, line))
            return []

        self.section.append(record)
        return []

    def flush(self) -> list[str]:
        if not self.section:
            return []
        lines = self.section.flush(self.cfg.label, self.cfg.keyword)
        self.report.sections += 1
        self.report.definitions += len(lines)
        return lines

    def finish(self) -> list[str]:
        "End of input, flushes whatever is left in the section"
        return self.flush()
