from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import pytest

from filesize.cli import CliApplication


@dataclass
class CliResult:
    code: int
    out: str
    err: str


@pytest.fixture
def run_cli(capsys: pytest.CaptureFixture[str]) -> Callable[..., CliResult]:
    def _run(*argv: str) -> CliResult:
        code = CliApplication().run(list(argv))
        captured = capsys.readouterr()
        return CliResult(code=code, out=captured.out, err=captured.err)

    return _run


@pytest.fixture
def expected_report() -> Callable[[str, str, str, str, str], str]:
    def _report(echoed: str, size_bytes: str, kb: str, mb: str, gb: str) -> str:
        return (
            f"file size ({echoed}):\n"
            f"   bytes: {size_bytes} bytes\n"
            f"   kilobytes: {kb} kb\n"
            f"   megabytes: {mb} mb\n"
            f"   gigabytes: {gb} gb\n"
        )

    return _report
