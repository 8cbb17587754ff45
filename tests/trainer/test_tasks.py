"""Tests for ledger-free random task generation."""

import copy
import random

from pickingtrainer.trainer import Task, generate_random_task, generate_random_tasks


def test_generate_random_task_skips_out_of_stock(sample_products, sequence_rng) -> None:
    # available: A001, A002, B001, C001 (B002 has stock 0)
    task = generate_random_task(sample_products, rng=sequence_rng(choices=[3], ints=[2]))
    assert task == Task(product=sample_products[4], quantity=2, completed=False, found=None)


def test_quantity_is_capped_by_stock(sample_products, sequence_rng) -> None:
    task = generate_random_task(sample_products, rng=sequence_rng(choices=[1], ints=[3]))
    assert task.product["code"] == "A002"
    assert task.quantity == 1


def test_missing_stock_counts_as_99(sequence_rng) -> None:
    task = generate_random_task([{"code": "X"}], rng=sequence_rng(ints=[3]))
    assert task.quantity == 3


def test_generate_random_task_returns_none_when_depleted() -> None:
    assert generate_random_task([{"code": "A", "stock": 0}]) is None
    assert generate_random_task([]) is None


def test_generate_random_task_does_not_touch_stock(sample_products, rng) -> None:
    original = copy.deepcopy(sample_products)
    for _ in range(50):
        task = generate_random_task(sample_products, rng=rng)
        assert 1 <= task.quantity <= 3
        assert task.product["code"] != "B002"
    assert sample_products == original


def test_generate_random_tasks_allows_repeats(rng) -> None:
    products = [{"code": "A", "stock": 1}]
    tasks = generate_random_tasks(products, 5, rng=rng)
    assert len(tasks) == 5
    assert all(t.product["code"] == "A" and t.quantity == 1 for t in tasks)


def test_generate_random_tasks_empty_when_no_stock() -> None:
    assert generate_random_tasks([{"code": "A", "stock": 0}], 3) == []
    assert generate_random_tasks([{"code": "A"}], 0) == []


def test_generate_random_tasks_is_deterministic_with_seed(sample_products) -> None:
    first = generate_random_tasks(sample_products, 10, rng=random.Random(7))
    second = generate_random_tasks(sample_products, 10, rng=random.Random(7))
    assert first == second
