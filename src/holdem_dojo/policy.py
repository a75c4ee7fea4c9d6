"""Round-aware betting policy.

A fixed heuristic: the action depends only on the betting round, the
classified combination and whether that combination improved since the
agent last looked at its hand. Raises are sized from the agent's balance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .action import NO_ACTION, Action, ActionType
from .classifier import ClassifierState, classify
from .combination import Combination
from .event import Round, RoundEvent

logger = logging.getLogger(__name__)

# (balance threshold, stake), largest first. A tier applies once the
# balance exceeds twice its threshold.
STAKE_TIERS: tuple[tuple[int, int], ...] = (
    (10000, 2500),
    (5000, 1250),
    (1000, 250),
    (500, 125),
    (100, 25),
    (50, 5),
)

_MADE_HANDS = frozenset({
    Combination.ROYAL_FLUSH,
    Combination.STRAIGHT_FLUSH,
    Combination.FOUR_OF_A_KIND,
    Combination.FULL_HOUSE,
})

_DRAWN_HANDS = frozenset({
    Combination.FLUSH,
    Combination.STRAIGHT,
    Combination.THREE_OF_A_KIND,
})

_PAIRS = frozenset({
    Combination.TWO_PAIR,
    Combination.ONE_PAIR,
})


def stake_for_balance(balance: int) -> int:
    """Raise amount for a given balance, 0 if no tier applies."""
    for threshold, stake in STAKE_TIERS:
        if balance > threshold * 2:
            return stake
    return 0


def decide(
    game_round: Round,
    combination: Combination,
    changed: bool,
    stake: int,
) -> Action:
    """Pick an action from the decision table."""
    if game_round == Round.BLIND:
        if combination == Combination.TWO_PAIR:
            return Action(ActionType.RAISE, stake)
        return Action(ActionType.CALL)

    if combination in _MADE_HANDS:
        # On the final round strong hands always raise
        if changed or game_round == Round.FINAL:
            return Action(ActionType.RAISE, stake)
        return Action(ActionType.CHECK)

    if combination in _DRAWN_HANDS:
        return Action(ActionType.CALL if changed else ActionType.CHECK)

    if combination in _PAIRS:
        return Action(ActionType.CHECK)

    # High card
    if game_round == Round.THREE_CARDS:
        return Action(ActionType.CHECK)
    return Action(ActionType.FOLD)


@dataclass(frozen=True)
class Decision:
    """What the policy chose for one event, and why.

    Attributes:
        action: The chosen action (NONE when the agent should stay silent).
        reasoning: Human-readable explanation.
        combination: Classified combination, None if no classification ran.
        changed: Whether the combination improved with this event.
    """

    action: Action
    reasoning: str
    combination: Combination | None = None
    changed: bool = False


@dataclass
class BettingPolicy:
    """Decision state machine for one agent seat.

    Owns the :class:`ClassifierState` of the seat; events must be fed
    one at a time in the order the server sends them.
    """

    name: str
    state: ClassifierState = field(default_factory=ClassifierState)

    def resolve(self, event: RoundEvent) -> Decision:
        if event.starts_hand:
            logger.info("New hand started, dealer %s", event.dealer)
            self.state.reset()

        if self.state.previous_round != event.game_round:
            logger.info("Round %s", event.game_round)
        self.state.previous_round = event.game_round

        if event.mover != self.name and not event.invites_move:
            return Decision(NO_ACTION, f"Waiting for {event.mover} to move")

        me = event.player(self.name)
        if me is None or not me.cards:
            return Decision(NO_ACTION, f"No cards dealt to {self.name}")

        previous = self.state.combination
        combination = classify(me.cards, event.board, self.state)
        changed = combination != previous

        action = decide(
            event.game_round,
            combination,
            changed,
            stake_for_balance(me.balance),
        )
        reasoning = f"{combination} on {event.game_round}"
        if changed:
            reasoning += f" (improved from {previous})"
        logger.debug("%s: %s", reasoning, action)
        return Decision(action, reasoning, combination, changed)
