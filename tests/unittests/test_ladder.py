# Copyright The Lightning team.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
from collections import Counter, OrderedDict

import pytest

from chrf_ladder import NgramLadder, new_ladder
from chrf_ladder.ladder import _NgramCounter


def _all_counts(ladder: NgramLadder) -> dict:
    return {order: dict(ladder.counts(order)) for order in range(1, ladder.max_order + 1)}


def test_new_ladder_is_empty():
    """Test that a fresh ladder holds one empty counter per order."""
    ladder = new_ladder()
    assert ladder.max_order == 6
    assert [counter.order for counter in ladder.counters()] == [6, 5, 4, 3, 2, 1]
    assert all(ladder.total(order) == 0 for order in range(1, 7))


def test_feed_counts_every_order():
    """Test that a single pass fills the counters of all orders with overlapping n-grams."""
    ladder = NgramLadder.from_text("aoeu33")

    assert dict(ladder.counts(1)) == {("a",): 1, ("o",): 1, ("e",): 1, ("u",): 1, ("3",): 2}
    assert dict(ladder.counts(2)) == {("a", "o"): 1, ("o", "e"): 1, ("e", "u"): 1, ("u", "3"): 1, ("3", "3"): 1}
    assert dict(ladder.counts(5)) == {("a", "o", "e", "u", "3"): 1, ("o", "e", "u", "3", "3"): 1}
    assert dict(ladder.counts(6)) == {("a", "o", "e", "u", "3", "3"): 1}
    assert [ladder.total(order) for order in range(1, 7)] == [6, 5, 4, 3, 2, 1]


@pytest.mark.parametrize("text", ["", "a", "abc", "abcde"])
def test_short_sequence_leaves_higher_orders_empty(text):
    """Test that a sequence shorter than an order never produces an n-gram of that order."""
    ladder = NgramLadder.from_text(text)
    for order in range(1, 7):
        assert ladder.total(order) == max(len(text) - order + 1, 0)
        assert all(len(ngram) == order for ngram in ladder.counts(order))


def test_feed_text_drops_only_spaces():
    """Test that only the space character is removed from text."""
    ladder = NgramLadder.from_text(" a b ", max_order=2)
    assert dict(ladder.counts(2)) == {("a", "b"): 1}

    ladder = NgramLadder.from_text("a\tb\n", max_order=2)
    assert ladder.total(1) == 4
    assert ("a", "\t") in ladder.counts(2)


def test_feed_is_additive():
    """Test that feeding accumulates counts and that n-grams never span two feed calls."""
    ladder = NgramLadder(max_order=3)
    ladder.feed_text("ab")
    ladder.feed_text("c")
    assert [ladder.total(order) for order in (1, 2, 3)] == [3, 1, 0]
    assert dict(ladder.counts(2)) == {("a", "b"): 1}

    concatenated = NgramLadder.from_text("abc", max_order=3)
    assert [concatenated.total(order) for order in (1, 2, 3)] == [3, 2, 1]

    ladder.feed_text("ab")
    assert ladder.counts(1)[("a",)] == 2
    assert ladder.counts(2)[("a", "b")] == 2


def test_feed_returns_ladder():
    """Test that feeding can be chained."""
    ladder = NgramLadder(max_order=2)
    assert ladder.feed_from("ab").feed_text("c d") is ladder
    assert ladder.total(1) == 4


def test_clear_resets_every_order():
    """Test that clearing a ladder empties the counters of all orders."""
    ladder = NgramLadder.from_text("the cat is on the mat")
    assert ladder.total(1) > 0
    ladder.clear()
    assert all(ladder.total(order) == 0 for order in range(1, 7))
    assert all(len(ladder.counts(order)) == 0 for order in range(1, 7))

    ladder.feed_text("ab")
    assert ladder.total(2) == 1


def test_generic_symbols():
    """Test that any hashable symbols can be counted."""
    ladder = NgramLadder.from_symbols([1, 2, 1, 2, None], max_order=2)
    assert dict(ladder.counts(2)) == {(1, 2): 2, (2, 1): 1, (2, None): 1}
    assert ladder.counts(1)[(None,)] == 1

    words = NgramLadder.from_symbols("the cat the cat".split(), max_order=2)
    assert words.counts(2)[("the", "cat")] == 2

    raw = NgramLadder.from_symbols(b"aab", max_order=1)
    assert dict(raw.counts(1)) == {(97,): 2, (98,): 1}


@pytest.mark.parametrize("counter_factory", [dict, Counter, OrderedDict])
def test_counter_factory_does_not_change_counts(counter_factory):
    """Test that the mapping backing the counters is a pure performance knob."""
    text = "he read the book because he was interested in world history"
    ladder = NgramLadder.from_text(text, counter_factory=counter_factory)
    assert isinstance(next(ladder.counters()).ngrams, counter_factory)
    assert _all_counts(ladder) == _all_counts(NgramLadder.from_text(text))


def test_counter_factory_must_return_empty_mapping():
    """Test that a counter factory returning a filled or non mapping object is rejected."""
    with pytest.raises(ValueError, match="Expected argument `counter_factory` to return an empty mutable mapping"):
        NgramLadder(counter_factory=lambda: {("a",): 1})
    with pytest.raises(ValueError, match="Expected argument `counter_factory` to return an empty mutable mapping"):
        NgramLadder(counter_factory=list)


@pytest.mark.parametrize("max_order", [0, -1, 1.5, "6", True, None])
def test_invalid_max_order(max_order):
    """Test that a ladder or counter without a positive integer order cannot be created."""
    with pytest.raises(ValueError, match="Expected argument `max_order` to be an integer greater than or equal to 1"):
        NgramLadder(max_order=max_order)


def test_order_zero_counter_is_rejected():
    """Test that a counter of order 0 cannot be instantiated."""
    with pytest.raises(ValueError, match="greater than or equal to 1"):
        _NgramCounter(0)


def test_counter_window_shorter_than_order():
    """Test that a window shorter than the counter order breaks an internal invariant."""
    counter = _NgramCounter(3)
    with pytest.raises(AssertionError):
        counter._feed_window(3, ["a", "b"])


@pytest.mark.parametrize("order", [0, 7, -1])
def test_counts_of_unknown_order(order):
    """Test that only orders present in the ladder can be inspected."""
    ladder = NgramLadder()
    with pytest.raises(ValueError, match="Expected argument `order` to be an integer between 1 and 6"):
        ladder.counts(order)
    with pytest.raises(ValueError, match="Expected argument `order` to be an integer between 1 and 6"):
        ladder.total(order)


def test_counts_view_is_read_only():
    """Test that the counts can not be modified from the outside."""
    ladder = NgramLadder.from_text("ab", max_order=2)
    with pytest.raises(TypeError):
        ladder.counts(1)[("z",)] = 1


def test_repr():
    """Test the string representation of ladders and counters."""
    ladder = NgramLadder.from_text("abc", max_order=2)
    assert repr(ladder) == "NgramLadder(max_order=2, totals={2: 2, 1: 3})"
    assert repr(next(ladder.counters())) == "_NgramCounter(order=2, distinct=2, total=2)"
