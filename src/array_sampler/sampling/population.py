from __future__ import annotations

from typing import Iterable


def _dedup(lines: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(lines))


def build_population(include_lists: Iterable[list[str]]) -> list[str]:
    """Merge include lists into one ordered population of distinct lines.

    Dedup runs on the running accumulator after each list is appended, so the
    first occurrence of a line (in file order) fixes its position.
    """
    population: list[str] = []
    for lines in include_lists:
        population = _dedup([*population, *lines])
    return population


def apply_exclusions(population: list[str], exclude_lists: Iterable[list[str]]) -> list[str]:
    filtered = list(population)
    for lines in exclude_lists:
        excluded = set(lines)
        filtered = [line for line in filtered if line not in excluded]
    return filtered
