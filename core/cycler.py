"""Suggestion cycling: shuffle-without-replacement per category.

Each category keeps a shuffled order of pool indices and a cursor into it.
A draw reads the item under the cursor and advances it; once every item of
the current order has been drawn the category is exhausted and the next
draw reshuffles the full index range and starts again at 0. So within one
cycle every item comes up exactly once before anything repeats.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Union

from core.categories import Category
from core.presentation import PresentationConfig
from core.shuffle import RandomSource, shuffle

logger = logging.getLogger(__name__)

NO_SUGGESTION = None


class CycleStateError(RuntimeError):
    """Raised when a category's order/cursor no longer fits its pool."""


@dataclass
class CycleState:
    order: List[int] = field(default_factory=list)
    cursor: int = 0

    @property
    def exhausted(self) -> bool:
        return self.cursor >= len(self.order)


class SuggestionCycler:
    def __init__(
        self,
        pools: Mapping[Union[str, Category], Sequence[str]],
        config: Optional[PresentationConfig] = None,
        *,
        rng: Optional[RandomSource] = None,
        on_error: Optional[Callable[[str], None]] = None,
    ):
        self.config = config or PresentationConfig()
        self._rng = rng
        self._on_error = on_error
        self._pools: Dict[Category, List[str]] = {}
        self._states: Dict[Category, CycleState] = {}

        for key, items in (pools or {}).items():
            category = Category.parse(key)
            if category is Category.UNRECOGNIZED:
                raise ValueError(f"Unknown suggestion category: {key!r}")
            self._pools[category] = list(items or [])

        # Shuffle everything up front so the first draw is already random.
        for category, items in self._pools.items():
            order = list(range(len(items)))
            shuffle(order, self._rng)
            self._states[category] = CycleState(order=order, cursor=0)

    @property
    def categories(self) -> List[Category]:
        return list(self._pools.keys())

    def state(self, category: Union[str, Category]) -> Optional[CycleState]:
        """Copy of the cycle state for `category`, or None if not pooled."""
        st = self._states.get(Category.parse(category))
        if st is None:
            return None
        return CycleState(order=list(st.order), cursor=st.cursor)

    def remaining(self, category: Union[str, Category]) -> int:
        st = self._states.get(Category.parse(category))
        if st is None:
            return 0
        return len(st.order) - st.cursor

    def _report(self, message: str) -> None:
        if self._on_error is not None:
            logger.debug("%s", message)
            self._on_error(message)
        else:
            logger.error("%s", message)

    def _check(self, category: Category, st: CycleState) -> None:
        pool_len = len(self._pools[category])
        if len(st.order) != pool_len or not 0 <= st.cursor <= len(st.order):
            raise CycleStateError(
                f"Corrupt cycle state for {category.value}: "
                f"cursor={st.cursor} order={len(st.order)} pool={pool_len}"
            )

    def draw(self, category: Union[str, Category]) -> Optional[str]:
        """Return the next suggestion for `category`.

        Unknown categories are reported to the error channel and return
        NO_SUGGESTION without touching any state. An empty pool returns
        NO_SUGGESTION on every call.
        """
        cat = Category.parse(category)
        st = self._states.get(cat)
        if st is None:
            self._report(f"Unknown suggestion category: {category!r}")
            return NO_SUGGESTION

        self._check(cat, st)
        pool = self._pools[cat]
        if not pool:
            return NO_SUGGESTION

        if st.exhausted:
            shuffle(st.order, self._rng)
            st.cursor = 0
            logger.debug("Reshuffled %s (%d items)", cat.value, len(pool))

        choice = pool[st.order[st.cursor]]
        st.cursor += 1
        return choice
