# SPDX-FileCopyrightText: © 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0

"""
Line matchers used by ``HeaderProcessor``.

``#define`` lines are handled by an ordered list of ``DefineRule`` objects. The first rule whose pattern matches builds the record.
New vendor macro shapes are supported by adding a rule, e.g.:

.. code-block:: python

    import re
    from regdefgen.config import TranscoderCfg
    from regdefgen.lib.processor import HeaderProcessor
    from regdefgen.lib.rules import DEFAULT_RULES, DefineRule, numeric_record

    hex_rule = DefineRule("bare_hex", re.compile(r"^#define\\s+(\\w+)\\s+(0x[0-9a-fA-F]+)"), numeric_record)
    cfg = TranscoderCfg()
    processor = HeaderProcessor(cfg, rules=DEFAULT_RULES + (hex_rule,))
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from regdefgen.lib.enums import ValueTag
from regdefgen.lib.records import DefinitionRecord


GUARD_RE = re.compile(r"^#ifndef|^#define.*_DEFINED|^#endif")
COMMENT_RE = re.compile(r"^\s*//")
DEFINE_PREFIX = "#define"

_QUOTED_RE = re.compile(r'^".*"$')


def is_guard(line: str) -> bool:
    "Header guard lines (``#ifndef X``, ``#define X_DEFINED``, ``#endif``) are dropped"
    return GUARD_RE.match(line) is not None


def is_comment(line: str) -> bool:
    return COMMENT_RE.match(line) is not None


def is_blank(line: str) -> bool:
    return line.strip() == ""


def classify_value(value: str) -> ValueTag:
    """
    Quoted literals (including the ``"-"`` placeholder) are strings, everything else is treated as a 32-bit number.
    No check is made that a numeric value is a well-formed literal.
    """
    if _QUOTED_RE.match(value.strip()):
        return ValueTag.STRING
    return ValueTag.NUMERIC


def wrapped_value_record(match: "re.Match[str]", lineno: int) -> DefinitionRecord:
    "``#define NAME _u(VALUE)``"
    value = match.group(2).strip()
    return DefinitionRecord(name=match.group(1), tag=classify_value(value), value=value, lineno=lineno)


def string_record(match: "re.Match[str]", lineno: int) -> DefinitionRecord:
    "``#define NAME \"STRING\"`` - the literal is re-quoted"
    return DefinitionRecord(name=match.group(1), tag=ValueTag.STRING, value=f'"{match.group(2)}"', lineno=lineno)


def numeric_record(match: "re.Match[str]", lineno: int) -> DefinitionRecord:
    "Generic builder for custom rules, group 1 is the name and group 2 the value"
    return DefinitionRecord(name=match.group(1), tag=ValueTag.NUMERIC, value=match.group(2).strip(), lineno=lineno)


@dataclass(frozen=True)
class DefineRule:
    """
    Maps a ``#define`` shape to a record constructor.

    :param name: rule name, used in debug logging
    :param pattern: regex anchored at the start of the line
    :param build: called with the match and line number
    """

    name: str
    pattern: "re.Pattern[str]"
    build: Callable[["re.Match[str]", int], DefinitionRecord]

    def apply(self, line: str, lineno: int) -> Optional[DefinitionRecord]:
        match = self.pattern.match(line)
        if match is None:
            return None
        return self.build(match, lineno)


DEFAULT_RULES: tuple[DefineRule, ...] = (
    DefineRule("wrapped_value", re.compile(r"^#define\s+(\w+)\s+_u\(([^)]+)\)"), wrapped_value_record),
    DefineRule("string_literal", re.compile(r'^#define\s+(\w+)\s+"([^"]+)"'), string_record),
)


def match_define(line: str, lineno: int, rules: Sequence[DefineRule] = DEFAULT_RULES) -> Optional[DefinitionRecord]:
    "Returns the record built by the first matching rule, or None if no rule matches"
    for rule in rules:
        record = rule.apply(line, lineno)
        if record is not None:
            return record
    return None
