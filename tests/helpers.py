"""Shared helpers for building cards and events."""

from holdem_dojo.card import card
from holdem_dojo.event import PlayerSnapshot, Round, RoundEvent

AGENT = "user"


def cards(s: str) -> tuple:
    """Parse space separated cards like '10s Vs Qs'."""
    return tuple(card(p) for p in s.split())


def make_event(
    game_round: Round = Round.THREE_CARDS,
    hole: str = "",
    board: str = "",
    mover: str = AGENT,
    log: tuple[str, ...] = ("Next move.",),
    balance: int = 1000,
) -> RoundEvent:
    players = (
        PlayerSnapshot(AGENT, balance, 0, "NotMoved", cards(hole)),
        PlayerSnapshot("bot", 1000, 0, "Check"),
    )
    return RoundEvent(
        game_round=game_round,
        dealer="bot",
        mover=mover,
        log=log,
        players=players,
        board=cards(board),
    )


