from __future__ import annotations

import sys
from typing import TextIO

from ..core.errors import FileSizeError
from ..core.protocols import FormatterProtocol, NormalizerProtocol, SizeParserProtocol


class ConvertCommand:
    def __init__(
        self,
        magnitude_text: str,
        unit_text: str,
        parser: SizeParserProtocol,
        normalizer: NormalizerProtocol,
        formatter: FormatterProtocol,
        *,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self._magnitude_text = magnitude_text
        self._unit_text = unit_text
        self._parser = parser
        self._normalizer = normalizer
        self._formatter = formatter
        self._stdout = stdout if stdout is not None else sys.stdout
        self._stderr = stderr if stderr is not None else sys.stderr

    @property
    def echoed_input(self) -> str:
        return f"{self._magnitude_text} {self._unit_text}"

    def run(self) -> int:
        try:
            raw_size = self._parser.parse(self._magnitude_text, self._unit_text)
        except FileSizeError as exc:
            print(exc, file=self._stderr)
            return exc.exit_code

        sizes = self._formatter.format(self._normalizer.normalize(raw_size))

        print(f"file size ({self.echoed_input}):", file=self._stdout)
        for line in sizes.lines():
            print(line, file=self._stdout)
        return 0
