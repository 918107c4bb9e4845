import logging
import random

import pytest

from core.categories import Category
from core.cycler import NO_SUGGESTION, CycleStateError, SuggestionCycler
from core.presentation import PresentationConfig


@pytest.fixture
def cycler(sample_pools, seeded_rng):
    return SuggestionCycler(sample_pools, PresentationConfig(), rng=seeded_rng)


@pytest.mark.unit
def test_construction_shuffles_every_category(zero_rng):
    c = SuggestionCycler({"location": ["a", "b", "c"], "word": ["x", "y"]}, rng=zero_rng)
    loc = c.state(Category.LOCATION)
    assert loc.cursor == 0
    # ZeroRng on [0, 1, 2]: swap(2, 0) then swap(1, 0)
    assert loc.order == [1, 2, 0]
    assert c.state("word").order == [1, 0]
    assert not loc.exhausted


@pytest.mark.unit
def test_draws_follow_the_shuffled_order_then_reshuffle(zero_rng):
    c = SuggestionCycler({Category.LOCATION: ["a", "b", "c"]}, rng=zero_rng)
    first_cycle = [c.draw(Category.LOCATION) for _ in range(3)]
    assert first_cycle == ["b", "c", "a"]
    assert c.state(Category.LOCATION).exhausted

    # The reshuffle starts from the previous order [1, 2, 0] -> [2, 0, 1]
    second_cycle = [c.draw(Category.LOCATION) for _ in range(3)]
    assert second_cycle == ["c", "a", "b"]


@pytest.mark.unit
def test_no_repeat_before_exhaustion_even_with_duplicate_values(seeded_rng):
    pool = ["Cafe", "Cafe", "Bank", "Zoo", "Bank"]
    c = SuggestionCycler({"location": pool}, rng=seeded_rng)
    order = c.state("location").order
    drawn = [c.draw("location") for _ in range(len(pool))]

    # Compare by index, not value: the draws are exactly the pool in shuffled order.
    assert sorted(order) == list(range(len(pool)))
    assert drawn == [pool[i] for i in order]


@pytest.mark.unit
def test_draw_after_exhaustion_returns_a_pool_item(cycler, sample_pools):
    k = len(sample_pools[Category.WORD])
    for _ in range(k):
        cycler.draw(Category.WORD)
    nxt = cycler.draw(Category.WORD)
    assert nxt in sample_pools[Category.WORD]
    assert cycler.state(Category.WORD).cursor == 1


@pytest.mark.unit
def test_every_cycle_is_a_full_pass(sample_pools):
    c = SuggestionCycler(sample_pools, rng=random.Random(5))
    pool = sample_pools[Category.RELATIONSHIP]
    for _ in range(6):
        cycle = [c.draw(Category.RELATIONSHIP) for _ in range(len(pool))]
        assert sorted(cycle) == sorted(pool)


@pytest.mark.unit
def test_categories_keep_separate_cursors(cycler):
    cycler.draw(Category.LOCATION)
    cycler.draw(Category.RELATIONSHIP)
    cycler.draw(Category.RELATIONSHIP)
    cycler.draw(Category.LOCATION)
    cycler.draw(Category.RELATIONSHIP)

    assert cycler.state(Category.LOCATION).cursor == 2
    assert cycler.state(Category.RELATIONSHIP).cursor == 3
    assert cycler.state(Category.WORD).cursor == 0

    # Exhausting location (3 items) must not disturb relationship (5 items).
    rel_before = cycler.state(Category.RELATIONSHIP)
    cycler.draw(Category.LOCATION)
    cycler.draw(Category.LOCATION)
    assert cycler.state(Category.LOCATION).cursor == 1
    assert cycler.state(Category.RELATIONSHIP) == rel_before


@pytest.mark.unit
def test_unknown_category_is_reported_and_changes_nothing(seeded_rng):
    errors = []
    c = SuggestionCycler(
        {"location": ["a", "b"], "word": ["x"]},
        rng=seeded_rng,
        on_error=errors.append,
    )
    before = {cat: c.state(cat) for cat in c.categories}

    assert c.draw("relationship") is NO_SUGGESTION
    assert c.draw(Category.UNRECOGNIZED) is NO_SUGGESTION
    assert c.draw("banana") is NO_SUGGESTION

    assert len(errors) == 3
    assert "relationship" in errors[0]
    assert {cat: c.state(cat) for cat in c.categories} == before


@pytest.mark.unit
def test_unknown_category_without_handler_logs_an_error(caplog):
    c = SuggestionCycler({"word": ["x"]})
    with caplog.at_level(logging.ERROR, logger="core.cycler"):
        assert c.draw("location") is None
    assert "Unknown suggestion category" in caplog.text


@pytest.mark.unit
def test_unknown_pool_key_is_rejected():
    with pytest.raises(ValueError):
        SuggestionCycler({"weather": ["Rain"]})


@pytest.mark.unit
def test_empty_pool_returns_no_suggestion_forever():
    c = SuggestionCycler({"location": [], "word": ["x"]})
    for _ in range(5):
        assert c.draw("location") is NO_SUGGESTION
    st = c.state("location")
    assert st.order == []
    assert st.cursor == 0
    assert c.remaining("location") == 0


@pytest.mark.unit
def test_single_item_pool_repeats_it():
    c = SuggestionCycler({"word": ["Solo"]})
    assert [c.draw("word") for _ in range(3)] == ["Solo", "Solo", "Solo"]


@pytest.mark.unit
def test_pools_are_copied(seeded_rng):
    source = ["a", "b"]
    c = SuggestionCycler({"location": source}, rng=seeded_rng)
    source.append("c")
    source[0] = "zzz"
    drawn = {c.draw("location") for _ in range(2)}
    assert drawn == {"a", "b"}


@pytest.mark.unit
def test_new_cycler_never_returns_items_from_the_old_one(seeded_rng):
    a = SuggestionCycler({"location": ["Old 1", "Old 2"]}, rng=seeded_rng)
    a.draw("location")
    b = SuggestionCycler({"location": ["New 1", "New 2", "New 3"]}, rng=seeded_rng)
    for _ in range(10):
        assert b.draw("location").startswith("New")


@pytest.mark.unit
def test_remaining_counts_down(cycler):
    assert cycler.remaining(Category.LOCATION) == 3
    cycler.draw(Category.LOCATION)
    assert cycler.remaining(Category.LOCATION) == 2
    assert cycler.remaining(Category.UNRECOGNIZED) == 0


@pytest.mark.unit
def test_state_is_a_copy(cycler):
    st = cycler.state(Category.LOCATION)
    st.cursor = 99
    st.order.clear()
    assert cycler.state(Category.LOCATION).cursor == 0
    assert len(cycler.state(Category.LOCATION).order) == 3


@pytest.mark.unit
def test_corrupt_cursor_raises(cycler):
    cycler._states[Category.LOCATION].cursor = 7
    with pytest.raises(CycleStateError):
        cycler.draw(Category.LOCATION)


@pytest.mark.unit
def test_default_config():
    c = SuggestionCycler({"word": ["x"]})
    assert c.config == PresentationConfig()
    assert c.categories == [Category.WORD]
