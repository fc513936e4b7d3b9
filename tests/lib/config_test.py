#!/usr/bin/env python3

# SPDX-FileCopyrightText: © 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0

import json
import argparse
import tempfile
import unittest
from pathlib import Path

from regdefgen.config import TranscoderCfg
from regdefgen.lib.enums import ValueTag


class TestTranscoderCfg(unittest.TestCase):
    "Defaults, dictionary / JSON loading and command line overrides"

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.tmp_path = Path(self.tmp_dir.name)

    def tearDown(self):
        self.tmp_dir.cleanup()

    def parse(self, args: list[str]) -> argparse.Namespace:
        parser = argparse.ArgumentParser()
        TranscoderCfg.add_arguments(parser)
        return parser.parse_args(args)

    def test_defaults(self):
        cfg = TranscoderCfg()
        self.assertEqual(cfg.label(ValueTag.NUMERIC), "u32")
        self.assertEqual(cfg.label(ValueTag.STRING), "&str")
        self.assertEqual(cfg.keyword, "const")
        self.assertFalse(cfg.strict)

    def test_from_dict(self):
        cfg = TranscoderCfg.from_dict({"_comment": "ignored", "numeric_type": "uint32_t", "strict": True})
        self.assertEqual(cfg.numeric_type, "uint32_t")
        self.assertEqual(cfg.string_type, "&str")
        self.assertTrue(cfg.strict)

    def test_from_dict_rejects_unknown(self):
        with self.assertRaises(ValueError):
            TranscoderCfg.from_dict({"numeric": "u64"})

    def test_from_dict_rejects_bad_values(self):
        with self.assertRaises(ValueError):
            TranscoderCfg.from_dict({"keyword": ""})
        with self.assertRaises(ValueError):
            TranscoderCfg.from_dict({"numeric_type": 32})
        with self.assertRaises(ValueError):
            TranscoderCfg.from_dict({"strict": "yes"})

    def test_from_json(self):
        path = self.tmp_path / "cfg.json"
        path.write_text(json.dumps({"string_type": "&'static str"}))
        self.assertEqual(TranscoderCfg.from_json(path).string_type, "&'static str")

    def test_from_json_invalid(self):
        path = self.tmp_path / "cfg.json"
        path.write_text("{not json")
        with self.assertRaises(ValueError):
            TranscoderCfg.from_json(path)
        path.write_text("[1, 2]")
        with self.assertRaises(ValueError):
            TranscoderCfg.from_json(path)

    def test_with_args_defaults(self):
        self.assertEqual(TranscoderCfg().with_args(self.parse([])), TranscoderCfg())

    def test_with_args_rejects_empty_values(self):
        "Command line overrides are checked like config file values"
        for args in [["--keyword", ""], ["--numeric_type", "  "], ["--string_type", ""]]:
            with self.assertRaises(ValueError):
                TranscoderCfg().with_args(self.parse(args))

    def test_with_args_overrides_config(self):
        path = self.tmp_path / "cfg.json"
        path.write_text(json.dumps({"numeric_type": "uint32_t", "keyword": "constexpr"}))
        cfg = TranscoderCfg().with_args(self.parse(["--config", str(path), "--numeric_type", "u64", "--strict"]))
        self.assertEqual(cfg.numeric_type, "u64")
        self.assertEqual(cfg.keyword, "constexpr")
        self.assertTrue(cfg.strict)


if __name__ == "__main__":
    unittest.main(verbosity=2)
