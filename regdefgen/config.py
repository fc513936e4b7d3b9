# SPDX-FileCopyrightText: © 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations
import json
import argparse
from dataclasses import dataclass, fields, replace
from pathlib import Path

from regdefgen.lib.enums import ValueTag


@dataclass(frozen=True)
class TranscoderCfg:
    """
    Output configuration. Defaults emit Rust constants, e.g. ``const FOO : u32 = 0x1;`` and ``const BAR : &str = "-";``

    JSON config files use the field names as keys. Keys starting with an underscore are ignored:

    .. code-block:: json

        {
            "_comment": "Emit C++ constants",
            "numeric_type": "uint32_t",
            "string_type": "char *",
            "keyword": "constexpr"
        }
    """

    numeric_type: str = "u32"
    string_type: str = "&str"
    keyword: str = "const"
    strict: bool = False

    def label(self, tag: ValueTag) -> str:
        if tag == ValueTag.STRING:
            return self.string_type
        return self.numeric_type

    @classmethod
    def from_json(cls, path: Path) -> TranscoderCfg:
        """
        Load a TranscoderCfg from a json file.

        :raises ValueError: on invalid JSON or unsupported keys
        """
        with path.open() as f:
            try:
                cfg = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Couldn't parse config file {path}: {e}") from e
        if not isinstance(cfg, dict):
            raise ValueError(f"Expected a JSON object in {path}, got {type(cfg).__name__}")
        return cls.from_dict(cfg)

    @classmethod
    def from_dict(cls, cfg: dict) -> TranscoderCfg:
        "Construct from a dictionary. Ignores fields starting with underscore"
        field_names = set(f.name for f in fields(cls))
        valid_fields = {}
        for k, v in cfg.items():
            if k.startswith("_"):
                continue
            if k not in field_names:
                raise ValueError(f"TranscoderCfg does not support field {k}")
            cls.check_value(k, v)
            valid_fields[k] = v
        return cls(**valid_fields)

    @staticmethod
    def check_value(name: str, value) -> None:
        "Type labels and the keyword must be non-empty strings, strict must be a bool"
        if name == "strict":
            if not isinstance(value, bool):
                raise ValueError(f"Expected a bool for {name}, got {value!r}")
        elif not isinstance(value, str) or value.strip() == "":
            raise ValueError(f"Expected a non-empty string for {name}, got {value!r}")

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser):
        transcoder_args = parser.add_argument_group("Transcoder", "Arguments that control the generated declarations")
        transcoder_args.add_argument("--config", type=Path, default=None, help="JSON file with output configuration. Command line arguments take precedence")
        transcoder_args.add_argument("--numeric_type", type=str, default=None, help="Type label for numeric values (default: u32)")
        transcoder_args.add_argument("--string_type", type=str, default=None, help="Type label for string values (default: &str)")
        transcoder_args.add_argument("--keyword", type=str, default=None, help="Declaration keyword (default: const)")
        transcoder_args.add_argument(
            "--strict",
            action="store_true",
            default=None,
            help="Fail if any #define line wasn't recognized. Output is still generated, but --output is not replaced",
        )

    def with_args(self, args: argparse.Namespace) -> TranscoderCfg:
        """
        Apply command line arguments. A ``--config`` file is loaded first, explicit arguments override it.

        Returns a new TranscoderCfg.
        """
        cfg = self
        if getattr(args, "config", None) is not None:
            cfg = TranscoderCfg.from_json(args.config)

        overrides = {}
        for name in ("numeric_type", "string_type", "keyword", "strict"):
            value = getattr(args, name, None)
            if value is not None:
                self.check_value(name, value)
                overrides[name] = value
        return replace(cfg, **overrides)
