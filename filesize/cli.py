#!/usr/bin/env python3

from __future__ import annotations

import argparse
import sys
from typing import NoReturn, Sequence, TextIO

from .commands.convert_command import ConvertCommand
from .core.errors import UsageError
from .core.formatter import SizeFormatter
from .core.normalizer import ByteNormalizer
from .core.protocols import FormatterProtocol, NormalizerProtocol, SizeParserProtocol
from .core.size_parser import SizeParser

_POSITIONALS = ("file_size", "unit")


class FileSizeArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(f"{self.prog}: error: {message}", self.format_usage())


class CliApplication:
    def __init__(
        self,
        *,
        size_parser: SizeParserProtocol | None = None,
        normalizer: NormalizerProtocol | None = None,
        formatter: FormatterProtocol | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self._size_parser = size_parser or SizeParser()
        self._normalizer = normalizer or ByteNormalizer()
        self._formatter = formatter or SizeFormatter()
        self._stdout = stdout
        self._stderr = stderr

    def build_parser(self) -> FileSizeArgumentParser:
        parser = FileSizeArgumentParser(
            prog="filesize",
            usage="%(prog)s <file_size> <unit (bytes/kb/mb/gb)>",
            description="Show a file size in bytes, kilobytes, megabytes and gigabytes",
        )
        parser.add_argument(
            _POSITIONALS[0],
            help="Non-negative size, e.g. 1.5",
        )
        parser.add_argument(
            _POSITIONALS[1],
            help="Unit of file_size: bytes, kb, mb or gb (case-insensitive)",
        )
        return parser

    def run(self, argv: Sequence[str] | None = None) -> int:
        arguments = list(sys.argv[1:] if argv is None else argv)
        try:
            self._check_argument_count(arguments)
        except UsageError as exc:
            stderr = self._stderr if self._stderr is not None else sys.stderr
            print(exc.usage, end="", file=stderr)
            print(exc, file=stderr)
            return exc.exit_code

        # Both values go through exactly as typed; "-h", "--" and "-1e3" are data here.
        magnitude_text, unit_text = arguments
        command = ConvertCommand(
            magnitude_text,
            unit_text,
            self._size_parser,
            self._normalizer,
            self._formatter,
            stdout=self._stdout,
            stderr=self._stderr,
        )
        return command.run()

    def _check_argument_count(self, arguments: list[str]) -> None:
        if len(arguments) == len(_POSITIONALS):
            return
        parser = self.build_parser()
        if len(arguments) < len(_POSITIONALS):
            missing = ", ".join(_POSITIONALS[len(arguments):])
            parser.error(f"the following arguments are required: {missing}")
        extra = " ".join(arguments[len(_POSITIONALS):])
        parser.error(f"unrecognized arguments: {extra}")


def main() -> int:
    app = CliApplication()
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
