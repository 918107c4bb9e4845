from __future__ import annotations

import random
from typing import Any, List, MutableSequence, Optional, Protocol


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def shuffle(items: MutableSequence[Any], rng: Optional[RandomSource] = None) -> MutableSequence[Any]:
    """Shuffle `items` in place (Fisher-Yates) and return the same object.

    `rng` only needs `randrange`; pass a seeded `random.Random` for a
    repeatable order. Without one the module-level `random` is used.
    """
    source = rng or random
    for i in range(len(items) - 1, 0, -1):
        j = source.randrange(i + 1)
        items[i], items[j] = items[j], items[i]
    return items


def shuffled_indices(n: int, rng: Optional[RandomSource] = None) -> List[int]:
    """Return a random permutation of range(n)."""
    order = list(range(n))
    shuffle(order, rng)
    return order
