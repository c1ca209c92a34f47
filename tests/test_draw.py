from __future__ import annotations

import random

import pytest

from array_sampler.errors import InsufficientPopulationError
from array_sampler.sampling.draw import draw_samples, make_rng


def test_draws_distinct_members() -> None:
    population = [f"item{i}\n" for i in range(20)]
    drawn = list(draw_samples(population, 10, make_rng(7)))
    assert len(drawn) == 10
    assert len(set(drawn)) == 10
    assert set(drawn) <= set(population)


def test_full_draw_is_a_permutation() -> None:
    population = ["apple\n", "cherry\n"]
    drawn = list(draw_samples(population, 2, make_rng(1)))
    assert sorted(drawn) == sorted(population)


def test_caller_population_not_mutated() -> None:
    population = ["a", "b", "c"]
    list(draw_samples(population, 3, make_rng(0)))
    assert population == ["a", "b", "c"]


def test_same_seed_same_draw() -> None:
    population = [str(i) for i in range(50)]
    first = list(draw_samples(population, 5, make_rng(42)))
    second = list(draw_samples(population, 5, make_rng(42)))
    assert first == second


def test_draw_order_follows_randrange_then_delete() -> None:
    population = ["a", "b", "c", "d"]
    rng = random.Random(3)
    expected_rng = random.Random(3)
    pool = list(population)
    expected = []
    for _ in range(3):
        expected.append(pool.pop(expected_rng.randrange(len(pool))))
    assert list(draw_samples(population, 3, rng)) == expected


def test_zero_samples_from_empty_population() -> None:
    assert list(draw_samples([], 0, make_rng(0))) == []


def test_insufficient_population_raises_before_iteration() -> None:
    with pytest.raises(InsufficientPopulationError) as excinfo:
        draw_samples(["only\n"], 2, make_rng(0))
    assert excinfo.value.requested == 2
    assert excinfo.value.available == 1


def test_empty_population_is_insufficient() -> None:
    with pytest.raises(InsufficientPopulationError):
        draw_samples([], 1, make_rng(0))


def test_negative_count_rejected() -> None:
    with pytest.raises(ValueError):
        draw_samples(["a"], -1, make_rng(0))
