"""Hand classification carried across the events of one hand."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .card import Card
from .combination import Combination, detect
from .event import Round

logger = logging.getLogger(__name__)


@dataclass
class ClassifierState:
    """Best combination confirmed so far in the current hand.

    The combination only moves up between two calls to :meth:`reset`.
    """

    combination: Combination = Combination.HIGH_CARD
    previous_round: Round | None = None

    def reset(self) -> None:
        """Start a new hand."""
        self.combination = Combination.HIGH_CARD


def merge_cards(hole_cards: Sequence[Card], board: Sequence[Card]) -> list[Card]:
    """Hole cards followed by board cards, sorted by suit."""
    return sorted([*hole_cards, *board])


def classify(
    hole_cards: Sequence[Card],
    board: Sequence[Card],
    state: ClassifierState,
) -> Combination:
    """Classify the best combination and advance ``state.combination``.

    Scans from the state's current combination up to a royal flush, so
    categories already confirmed earlier in the hand are never lost.
    """
    cards = merge_cards(hole_cards, board)
    start = state.combination

    for combination in Combination:
        if combination < start:
            continue
        if detect(combination, cards):
            state.combination = combination

    if state.combination != start:
        logger.debug("Combination %s -> %s with %s", start, state.combination, cards)
    return state.combination
