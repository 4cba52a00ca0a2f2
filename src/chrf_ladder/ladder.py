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
from collections.abc import Hashable, Iterable, Iterator, Mapping, MutableMapping
from types import MappingProxyType
from typing import Callable

from chrf_ladder.utilities.checks import _check_max_order
from chrf_ladder.utilities.prints import rank_zero_debug

_NGRAM_TYPE = tuple[Hashable, ...]
_COUNTER_FACTORY_TYPE = Callable[[], MutableMapping]


class _NgramCounter:
    """Occurrence counts of all n-grams of a single order.

    Args:
        order: length of every n-gram stored in this counter
        counter_factory: callable returning the empty mapping used to store the counts

    Raises:
        ValueError:
            If ``order`` is not an integer greater than or equal to 1.
        ValueError:
            If ``counter_factory`` does not return an empty mapping.

    """

    def __init__(self, order: int, counter_factory: _COUNTER_FACTORY_TYPE = dict) -> None:
        _check_max_order(order)
        self.order = order
        self.ngrams: MutableMapping[_NGRAM_TYPE, int] = counter_factory()
        if not isinstance(self.ngrams, MutableMapping) or len(self.ngrams):
            raise ValueError(
                f"Expected argument `counter_factory` to return an empty mutable mapping, but got {self.ngrams!r}."
            )

    def _feed_window(self, count: int, window: list[Hashable]) -> None:
        """Count the trailing ``order`` symbols of the shared window once enough symbols were seen."""
        assert len(window) >= self.order
        if count >= self.order:
            ngram = tuple(window[len(window) - self.order :])
            self.ngrams[ngram] = self.ngrams.get(ngram, 0) + 1

    def total(self) -> int:
        """Return the number of n-grams counted, with multiplicity."""
        return sum(self.ngrams.values())

    def clear(self) -> None:
        self.ngrams.clear()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(order={self.order}, distinct={len(self.ngrams)}, total={self.total()})"


class NgramLadder:
    """Counts of all n-grams of orders ``max_order`` down to 1 of one or more symbol sequences.

    Every order keeps its own counter. All of them are filled in a single pass over the input: one sliding window of
    ``max_order`` symbols is shared by the whole ladder and the counter of order ``k`` takes the trailing ``k``
    symbols of that window as its n-gram. Feeding is additive, each call to :meth:`feed_from` or :meth:`feed_text`
    adds to the existing counts. N-grams never span two separate calls.

    Symbols can be any hashable objects (characters, bytes, token ids, ...). Both ladders compared by
    :func:`~chrf_ladder.functional.chrf` have to be built with the same ``max_order``.

    Args:
        max_order: the largest n-gram order counted by the ladder. ``max_order=6`` is the order used by chrF3.
        counter_factory: callable returning an empty mutable mapping, used for every per-order counter. Swapping the
            mapping type only changes performance, never the counts.

    Raises:
        ValueError:
            If ``max_order`` is not an integer greater than or equal to 1.
        ValueError:
            If ``counter_factory`` does not return an empty mutable mapping.

    Example:
        >>> from chrf_ladder import NgramLadder
        >>> ladder = NgramLadder.from_text("abab", max_order=2)
        >>> dict(ladder.counts(2))
        {('a', 'b'): 2, ('b', 'a'): 1}
        >>> ladder.total(1), ladder.total(2)
        (4, 3)
        >>> ladder.clear()
        >>> ladder.total(1)
        0

    """

    def __init__(self, max_order: int = 6, counter_factory: _COUNTER_FACTORY_TYPE = dict) -> None:
        _check_max_order(max_order)
        self.max_order = max_order
        self.counter_factory = counter_factory
        # highest order first, order 1 is the last counter of the ladder
        self._counters = [_NgramCounter(order, counter_factory) for order in range(max_order, 0, -1)]
        rank_zero_debug(f"Created n-gram ladder with orders {max_order}..1 backed by `{counter_factory!r}`.")

    @classmethod
    def from_symbols(
        cls, symbols: Iterable[Hashable], max_order: int = 6, counter_factory: _COUNTER_FACTORY_TYPE = dict
    ) -> "NgramLadder":
        """Create a ladder and feed it with ``symbols``."""
        return cls(max_order, counter_factory).feed_from(symbols)

    @classmethod
    def from_text(cls, text: str, max_order: int = 6, counter_factory: _COUNTER_FACTORY_TYPE = dict) -> "NgramLadder":
        """Create a ladder and feed it with the characters of ``text`` except spaces."""
        return cls(max_order, counter_factory).feed_text(text)

    def feed_from(self, symbols: Iterable[Hashable]) -> "NgramLadder":
        """Add all overlapping n-grams of orders ``max_order`` down to 1 found in ``symbols``.

        Args:
            symbols: any iterable of hashable symbols, possibly empty

        Returns:
            The ladder itself, to allow chaining.

        """
        window: list[Hashable] = [None] * self.max_order
        count = 0
        for symbol in symbols:
            del window[0]
            window.append(symbol)
            count += 1
            for counter in self._counters:
                counter._feed_window(count, window)
        return self

    def feed_text(self, text: str) -> "NgramLadder":
        """Add the n-grams of the characters of ``text``, leaving out every space character.

        Only ``" "`` is dropped. Other whitespace, casing and punctuation are kept as they are.

        """
        return self.feed_from(ch for ch in text if ch != " ")

    def clear(self) -> None:
        """Remove all counted n-grams of every order."""
        for counter in self._counters:
            counter.clear()

    def counters(self) -> Iterator[_NgramCounter]:
        """Iterate over the per-order counters, from ``max_order`` down to 1."""
        return iter(self._counters)

    def _counter(self, order: int) -> _NgramCounter:
        if isinstance(order, bool) or not isinstance(order, int) or not 1 <= order <= self.max_order:
            raise ValueError(
                f"Expected argument `order` to be an integer between 1 and {self.max_order}, but got {order}."
            )
        return self._counters[self.max_order - order]

    def counts(self, order: int) -> Mapping[_NGRAM_TYPE, int]:
        """Return a read-only view of the n-gram counts of the given ``order``."""
        return MappingProxyType(self._counter(order).ngrams)

    def total(self, order: int) -> int:
        """Return the number of n-grams of the given ``order`` counted so far, with multiplicity."""
        return self._counter(order).total()

    def __repr__(self) -> str:
        totals = ", ".join(f"{counter.order}: {counter.total()}" for counter in self._counters)
        return f"{self.__class__.__name__}(max_order={self.max_order}, totals={{{totals}}})"


def new_ladder(max_order: int = 6, counter_factory: _COUNTER_FACTORY_TYPE = dict) -> NgramLadder:
    """Create an empty :class:`NgramLadder`."""
    return NgramLadder(max_order, counter_factory)
