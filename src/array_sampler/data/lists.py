from __future__ import annotations

from pathlib import Path

from ..errors import FileReadError


def _strip_line_ending(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def read_lines(path: Path, strip_newlines: bool = False) -> list[str]:
    """Read a list file in full.

    Lines keep their terminators exactly as stored (no universal-newline
    translation), so ``"a\\r\\n"`` and ``"a\\n"`` are different entries unless
    ``strip_newlines`` is set. Bytes that are not UTF-8 come through as
    surrogate escapes and are written back unchanged by the CLI.
    """
    try:
        with path.open("r", encoding="utf-8", errors="surrogateescape", newline="") as f:
            lines = f.readlines()
    except OSError as exc:
        raise FileReadError(path, exc.strerror or str(exc)) from exc

    if strip_newlines:
        return [_strip_line_ending(line) for line in lines]
    return lines


def read_all(paths: list[Path], strip_newlines: bool = False) -> list[list[str]]:
    return [read_lines(p, strip_newlines=strip_newlines) for p in paths]
