from __future__ import annotations

from pathlib import Path


class SamplerError(Exception):
    """Base class for errors that should end a run with a message."""


class ConfigError(SamplerError, ValueError):
    pass


class FileReadError(SamplerError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read list file '{path}': {reason}")


class InsufficientPopulationError(SamplerError):
    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient population: requested {requested} sample(s) "
            f"but only {available} entr{'y' if available == 1 else 'ies'} available."
        )
