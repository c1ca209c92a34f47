from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def list_file(tmp_path: Path) -> Callable[..., Path]:
    """Write a list file with exact bytes; ``lines`` are joined as given."""
    counter = {"n": 0}

    def _make(*lines: str, name: str | None = None) -> Path:
        counter["n"] += 1
        path = tmp_path / (name or f"list_{counter['n']}.txt")
        path.write_bytes("".join(lines).encode("utf-8"))
        return path

    return _make
