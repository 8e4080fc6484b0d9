"""
Module: selection.selector

Purpose:
    Uniform random selection of one fortune from a collection.

    Every entry has the same probability regardless of which file it
    came from: the collection is already flat, so a single index is
    drawn over all entries rather than first picking a file.

Key Functions:
    - select_fortune(): Main entry point for selection

Key Classes:
    - Selector: Holds the random source across draws

Dependencies:
    - random (std)
    - fortune_kind.core.models: FortuneCollection, SelectionResult

Used By:
    - controller: Pipeline orchestration
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from fortune_kind.core.models import FortuneCollection, SelectionResult

logger = logging.getLogger(__name__)


def select_fortune(
    collection: FortuneCollection,
    *,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> SelectionResult:
    """
    Pick one fortune uniformly at random.

    Args:
        collection: Fortunes to choose from
        rng: Random source to draw with (takes precedence over seed)
        seed: Seed for a fresh random source; None uses system entropy

    Returns:
        SelectionResult with the chosen entry, or the empty outcome when
        the collection has no entries

    Invariants:
        - Same seed and same collection always yield the same entry

    Example:
        >>> result = select_fortune(collection, seed=7)
        >>> result.is_empty
        False
    """
    selector = Selector(rng=rng if rng is not None else random.Random(seed))
    return selector.pick(collection)


@dataclass
class Selector:
    """
    Random fortune picker.

    Attributes:
        rng: Random source; injectable so tests can fix the sequence
    """

    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def seeded(cls, seed: int) -> Selector:
        return cls(rng=random.Random(seed))

    def pick(self, collection: FortuneCollection) -> SelectionResult:
        """Draw one entry, or return the empty outcome for no entries."""
        count = len(collection)
        if count == 0:
            logger.debug("No fortunes to select from")
            return SelectionResult.empty()

        index = self.rng.randrange(count)
        logger.debug(f"Selected fortune {index + 1} of {count}")
        return SelectionResult.chosen(collection[index], candidate_count=count, index=index)
