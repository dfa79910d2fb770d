from __future__ import annotations
import sys
from pathlib import Path
from typing import TextIO

def read_text_file(path: Path) -> str:
    return Path(path).read_text(encoding="utf-8", errors="replace")

def read_input(
    input_path: Path | None = None,
    string: str | None = None,
    stdin: TextIO | None = None,
) -> str:
    """
    A literal string wins over a file, which wins over stdin.
    """
    if string is not None:
        return string
    if input_path is not None:
        return read_text_file(input_path)
    return (stdin or sys.stdin).read()
