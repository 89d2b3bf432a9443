import random

import pytest

from catalog.integrations.contracts.interfaces import SortOption
from catalog.sorting import sort_products
from tests.conftest import make_product


NAMES = ["apple", "Apple", "banana", "Banana", "cherry", "Éclair", "eclair", "zebra", "Zed"]


def _random_collection(rng: random.Random):
    size = rng.randint(0, 12)
    return [make_product(i, rng.choice(NAMES), rng.randint(0, 5)) for i in range(1, size + 1)]


def _ids(products):
    return [p.id for p in products]


def test_alphabetical_orders_by_name_then_count(products):
    extra = make_product(5, "Notebook", 1)
    result = sort_products(products + [extra], "alphabetical")
    assert [p.name for p in result] == ["Bookshelf", "ceramic mug", "Desk Lamp", "Notebook", "Notebook"]
    assert [p.count for p in result if p.name == "Notebook"] == [1, 12]


def test_count_orders_by_count_then_name(products):
    result = sort_products(products, SortOption.COUNT)
    assert _ids(result) == [3, 1, 4, 2]


def test_count_tie_break_is_name_ascending():
    a = make_product(1, "Zulu", 7)
    b = make_product(2, "alpha", 7)
    assert _ids(sort_products([a, b], "count")) == [2, 1]
    assert _ids(sort_products([b, a], "count")) == [2, 1]


def test_name_comparison_ignores_case_and_accents():
    result = sort_products(
        [make_product(1, "zebra", 1), make_product(2, "Éclair", 1), make_product(3, "apple", 1)],
        "alphabetical",
    )
    assert [p.name for p in result] == ["apple", "Éclair", "zebra"]


def test_sort_does_not_mutate_input(products):
    before = _ids(products)
    result = sort_products(products, "count")
    assert _ids(products) == before
    assert result is not products


def test_empty_input_gives_empty_output():
    assert sort_products([], "alphabetical") == []
    assert sort_products([], "count") == []


def test_unknown_sort_key_is_rejected(products):
    with pytest.raises(ValueError):
        sort_products(products, "price")


@pytest.mark.parametrize("sort_by", ["alphabetical", "count"])
def test_sort_is_idempotent_and_preserves_elements(sort_by):
    rng = random.Random(20240301)
    for _ in range(200):
        collection = _random_collection(rng)
        once = sort_products(collection, sort_by)
        assert sort_products(once, sort_by) == once
        assert sorted(_ids(once)) == sorted(_ids(collection))
        assert len(once) == len(collection)


@pytest.mark.parametrize("sort_by", ["alphabetical", "count"])
def test_output_does_not_depend_on_input_order(sort_by):
    rng = random.Random(7)
    for _ in range(100):
        collection = _random_collection(rng)
        shuffled = list(collection)
        rng.shuffle(shuffled)
        assert _ids(sort_products(collection, sort_by)) == _ids(sort_products(shuffled, sort_by))
