# SPDX-FileCopyrightText: © 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0

import io
import sys
import logging
import argparse
from pathlib import Path
from typing import Iterable, Optional, Sequence, TextIO

import regdefgen.lib.logger as RegdefLogger
from regdefgen.config import TranscoderCfg
from regdefgen.lib.cli_base import CliBase
from regdefgen.lib.exceptions import TranscoderError, TranscoderFailureType
from regdefgen.lib.processor import HeaderProcessor
from regdefgen.lib.report import TranscodeReport
from regdefgen.lib.rules import DEFAULT_RULES, DefineRule


log = logging.getLogger("regdefgen")  # special case because transcoder can be a main module


class Transcoder(CliBase):
    """
    Converts a vendor C register header into column-aligned constant declarations.

    Only ``#define NAME _u(VALUE)`` and ``#define NAME "STRING"`` are recognized. Comments and blank lines are copied through and
    split the definitions into independently aligned sections. Everything else is dropped; unrecognized ``#define`` lines are
    counted and logged so they can be caught when reviewing the generated file.

    .. code-block:: python

        from regdefgen import Transcoder
        print(Transcoder().transcode_text(header_text))

    :param cfg: output configuration, defaults to Rust ``u32`` / ``&str`` constants
    :param rules: ordered ``#define`` rules
    """

    prog = "regdefgen"
    description = "Generate aligned constant declarations from a C register header. Reads FILE or stdin, writes to stdout"

    def __init__(self, cfg: Optional[TranscoderCfg] = None, rules: Sequence[DefineRule] = DEFAULT_RULES):
        self.cfg = cfg if cfg is not None else TranscoderCfg()
        self.rules = tuple(rules)

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser):
        parser.add_argument("input", type=Path, nargs="?", default=None, help="Header file to read. Reads stdin if omitted or '-'")
        parser.add_argument("--output", "-o", type=Path, default=None, help="Write to this file instead of stdout. Replaced only after a successful run")
        TranscoderCfg.add_arguments(parser)
        RegdefLogger.add_arguments(parser)

    @classmethod
    def run_cli(cls, args: Optional[list[str]] = None, **kwargs) -> TranscodeReport:
        "Parse command line arguments, set up logging and run a single transcode"
        cl_args = cls.parse_args(args)
        RegdefLogger.from_args(cl_args)

        try:
            cfg = TranscoderCfg().with_args(cl_args)
        except (ValueError, OSError) as e:
            raise TranscoderError(TranscoderFailureType.BAD_CONFIG, str(e)) from e
        transcoder = cls(cfg)

        if cl_args.input is None or str(cl_args.input) == "-":
            log.debug("Reading from stdin")
            # same decoding as input files
            sys.stdin.reconfigure(encoding="utf-8")
            return transcoder.run(sys.stdin, cl_args.output)

        input_path = cls.check_valid_file(cl_args.input)
        with input_path.open("r", encoding="utf-8") as f:
            return transcoder.run(f, cl_args.output)

    def run(self, lines: Iterable[str], output: Optional[Path] = None) -> TranscodeReport:
        "Transcode to ``output`` if set, otherwise to stdout"
        if output is None:
            return self.transcode(lines, sys.stdout)
        return self.transcode_to_path(lines, output)

    def transcode(self, lines: Iterable[str], out: TextIO) -> TranscodeReport:
        """
        Single pass over ``lines``, each output line is written as soon as it is known.

        :raises TranscoderError: in strict mode, after all output has been written, if any ``#define`` was skipped
        """
        processor = HeaderProcessor(self.cfg, self.rules)
        for line in lines:
            for out_line in processor.feed(line):
                out.write(out_line + "\n")
        for out_line in processor.finish():
            out.write(out_line + "\n")

        report = processor.report
        log.info(report.summary())
        if report.skipped_defines:
            log.warning(f"{report.skipped_count} #define lines didn't match any rule and were dropped, rerun with --logger_level DEBUG to list them")
            if self.cfg.strict:
                raise TranscoderError(TranscoderFailureType.SKIPPED_DEFINES, skipped=list(report.skipped_defines))
        return report

    def transcode_file(self, path: Path, out: TextIO) -> TranscodeReport:
        "Transcode a header file. Raises ``FileNotFoundError`` if it doesn't exist"
        path = self.check_valid_file(path)
        with path.open("r", encoding="utf-8") as f:
            return self.transcode(f, out)

    def transcode_to_path(self, lines: Iterable[str], output: Path) -> TranscodeReport:
        """
        Write to ``<output>.new`` and move it over ``output`` once the whole input is processed.
        On any error the temporary file is removed and ``output`` is left as it was.
        """
        tmp = output.with_name(output.name + ".new")
        try:
            with tmp.open("w", encoding="utf-8") as out:
                report = self.transcode(lines, out)
        except Exception:
            tmp.unlink(missing_ok=True)
            raise
        tmp.replace(output)
        log.info(f"Wrote {output}")
        return report

    def transcode_text(self, text: str) -> str:
        out = io.StringIO()
        self.transcode(text.splitlines(keepends=True), out)
        return out.getvalue()


def main():
    try:
        Transcoder.run_cli()
    except (TranscoderError, OSError, UnicodeDecodeError) as e:
        log.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
