#!/usr/bin/env python3

# SPDX-FileCopyrightText: © 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0

import unittest

from regdefgen.config import TranscoderCfg
from regdefgen.lib.enums import ValueTag
from regdefgen.lib.records import DefinitionRecord
from regdefgen.lib.section import SectionBuffer


class TestSectionBuffer(unittest.TestCase):
    """
    Test Suite for SectionBuffer
    Checks column alignment and that flushing empties the buffer
    """

    def setUp(self):
        self.cfg = TranscoderCfg()
        self.section = SectionBuffer()

    def add(self, name: str, tag: ValueTag, value: str):
        self.section.append(DefinitionRecord(name, tag, value, len(self.section) + 1))

    def test_empty_flush(self):
        self.assertFalse(self.section)
        self.assertEqual(self.section.flush(self.cfg.label), [])

    def test_name_alignment(self):
        self.add("FOO", ValueTag.NUMERIC, "0x1")
        self.add("BARBAZ", ValueTag.NUMERIC, "0x22")
        lines = self.section.flush(self.cfg.label)
        self.assertEqual(
            lines,
            [
                "const FOO    : u32 = 0x1;",
                "const BARBAZ : u32 = 0x22;",
            ],
        )

    def test_type_alignment(self):
        self.add("A", ValueTag.NUMERIC, "0x1")
        self.add("B_ACCESS", ValueTag.STRING, '"RW"')
        lines = self.section.flush(self.cfg.label)
        self.assertEqual(
            lines,
            [
                "const A        : u32  = 0x1;",
                'const B_ACCESS : &str = "RW";',
            ],
        )
        # every '=' lines up within a section
        self.assertEqual(len(set(line.index("=") for line in lines)), 1)

    def test_insertion_order_kept(self):
        for name in ["ZZZ", "AAA", "MMM"]:
            self.add(name, ValueTag.NUMERIC, "0")
        names = [line.split()[1] for line in self.section.flush(self.cfg.label)]
        self.assertEqual(names, ["ZZZ", "AAA", "MMM"])

    def test_flush_clears(self):
        self.add("FOO", ValueTag.NUMERIC, "0x1")
        self.assertEqual(len(self.section), 1)
        self.section.flush(self.cfg.label)
        self.assertEqual(len(self.section), 0)
        self.assertEqual(self.section.flush(self.cfg.label), [])

    def test_sections_aligned_independently(self):
        self.add("A_VERY_LONG_NAME", ValueTag.NUMERIC, "0x1")
        self.section.flush(self.cfg.label)
        self.add("B", ValueTag.NUMERIC, "0x2")
        self.assertEqual(self.section.flush(self.cfg.label), ["const B : u32 = 0x2;"])

    def test_custom_labels(self):
        cfg = TranscoderCfg(numeric_type="uint32_t", string_type="char *", keyword="constexpr")
        self.add("FOO", ValueTag.NUMERIC, "0x1")
        self.add("FOO_ACCESS", ValueTag.STRING, '"RO"')
        self.assertEqual(
            self.section.flush(cfg.label, cfg.keyword),
            [
                "constexpr FOO        : uint32_t = 0x1;",
                'constexpr FOO_ACCESS : char *   = "RO";',
            ],
        )


if __name__ == "__main__":
    unittest.main(verbosity=2)
