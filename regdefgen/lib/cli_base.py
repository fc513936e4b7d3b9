#! /usr/bin/env python3
# SPDX-FileCopyrightText: © 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0

import argparse
import abc
from pathlib import Path
from typing import Any, Optional

"""
Base CLI class

**Template for Extending:**

.. code-block:: python

from regdefgen.lib.cli_base import CliBase

class Foo(CliBase):
    prog = "foo"
    description = "Does foo"

    @staticmethod
    def add_arguments(parser):
        parser.add_argument("--foo", type=str, help="Some helpful help message")

    @classmethod
    def run_cli(cls, args=None):
        cl_args = cls.parse_args(args)
        ...

def main():
    Foo.run_cli()
"""


class CliBase(abc.ABC):
    prog = "SomeCliScript"
    description = ""

    @staticmethod
    @abc.abstractmethod
    def add_arguments(parser: argparse.ArgumentParser):
        pass

    @classmethod
    def parser(cls) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog=cls.prog, description=cls.description, formatter_class=argparse.RawTextHelpFormatter)
        cls.add_arguments(parser)
        return parser

    @classmethod
    def parse_args(cls, args: Optional[list[str]] = None) -> argparse.Namespace:
        "Parse ``args``, or ``sys.argv`` if None"
        return cls.parser().parse_args(args)

    @classmethod
    @abc.abstractmethod
    def run_cli(cls, args: Optional[list[str]] = None, **kwargs) -> Any:
        pass

    # common helper methods
    @staticmethod
    def check_valid_file(filepath: Path) -> Path:
        if not filepath.exists():
            raise FileNotFoundError(f"No file {filepath.name} at path {filepath}")
        return filepath
