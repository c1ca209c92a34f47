from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from ..data.lists import read_all
from ..errors import InsufficientPopulationError
from .population import apply_exclusions, build_population


@dataclass(frozen=True)
class SampleRun:
    population_size: int
    filtered_size: int
    samples: Iterator[str]


def make_rng(seed: int | None = None) -> random.Random:
    # None seeds from os.urandom.
    return random.Random(seed)


def _draw(pool: list[str], n: int, rng: random.Random) -> Iterator[str]:
    for _ in range(n):
        index = rng.randrange(len(pool))
        yield pool.pop(index)


def draw_samples(population: list[str], n: int, rng: random.Random) -> Iterator[str]:
    """Draw ``n`` distinct entries uniformly at random, one at a time.

    Size checks happen on call, before anything is yielded. The caller's list
    is left untouched.
    """
    if n < 0:
        raise ValueError(f"Sample count must be >= 0, got {n}.")
    if n > len(population):
        raise InsufficientPopulationError(requested=n, available=len(population))
    return _draw(list(population), n, rng)


def sample_from_files(
    include: list[Path],
    exclude: list[Path],
    n: int,
    seed: int | None = None,
    strip_newlines: bool = False,
) -> SampleRun:
    """Read every list, build and filter the population, then start the draw.

    All reads and the size check happen here; ``samples`` only yields.
    """
    population = build_population(read_all(include, strip_newlines=strip_newlines))
    filtered = apply_exclusions(population, read_all(exclude, strip_newlines=strip_newlines))
    return SampleRun(
        population_size=len(population),
        filtered_size=len(filtered),
        samples=draw_samples(filtered, n, make_rng(seed)),
    )
