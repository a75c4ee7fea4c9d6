"""Round events pushed by the game server, and their JSON parsing."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Self

from .action import PlayerMove
from .card import Card
from .exceptions import MalformedEvent

HAND_STARTED = "BLIND game round started."
MOVES_SUFFIX = "moves."


class Round(IntEnum):
    """Betting rounds of one hand, in order."""

    BLIND = 0
    THREE_CARDS = 1
    FOUR_CARDS = 2
    FIVE_CARDS = 3
    FINAL = 4

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass(frozen=True)
class PlayerSnapshot:
    """One seat as seen in an event.

    ``cards`` is empty for every seat except the agent's own.
    """

    name: str
    balance: int
    pot: int
    status: str
    cards: tuple[Card, ...] = ()

    @property
    def last_move(self) -> PlayerMove:
        return PlayerMove.from_status(self.status)

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        data = _require_object(data, "player")
        return cls(
            name=_require(data, "name", str),
            balance=_require(data, "balance", int),
            pot=_require(data, "pot", int),
            status=_require(data, "status", str),
            cards=_cards(data.get("cards"), "player cards"),
        )


@dataclass(frozen=True)
class RoundEvent:
    """Snapshot of the table delivered on every game update."""

    game_round: Round
    dealer: str
    mover: str
    log: tuple[str, ...]
    players: tuple[PlayerSnapshot, ...]
    combination: str = ""
    game_status: str = ""
    board: tuple[Card, ...] = field(default_factory=tuple)
    pot: int = 0

    @property
    def lead_line(self) -> str:
        """The log line describing what triggered this event."""
        return self.log[0] if self.log else ""

    @property
    def starts_hand(self) -> bool:
        return self.lead_line == HAND_STARTED

    @property
    def invites_move(self) -> bool:
        return self.lead_line.endswith(MOVES_SUFFIX)

    def player(self, name: str) -> PlayerSnapshot | None:
        """Find a seat by player name."""
        for p in self.players:
            if p.name == name:
                return p
        return None

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        """Build an event from a decoded JSON object.

        Raises:
            MalformedEvent: a required field is missing or has the wrong type.
            UnknownCardToken: a card carries an unrecognized rank or suit.
        """
        data = _require_object(data, "event")

        round_name = _require(data, "gameRound", str)
        try:
            game_round = Round[round_name]
        except KeyError:
            raise MalformedEvent(f"Unknown game round: {round_name!r}") from None

        log = _require(data, "event", list)
        if not all(isinstance(line, str) for line in log):
            raise MalformedEvent("Field 'event' must be a list of strings")

        players = _require(data, "players", list)

        return cls(
            game_round=game_round,
            dealer=_require(data, "dealer", str),
            mover=_require(data, "mover", str),
            log=tuple(log),
            players=tuple(PlayerSnapshot.from_dict(p) for p in players),
            combination=_optional(data, "combination", str, ""),
            game_status=_optional(data, "gameStatus", str, ""),
            board=_cards(data.get("deskCards"), "desk cards"),
            pot=_optional(data, "deskPot", int, 0),
        )

    @classmethod
    def from_json(cls, text: str) -> Self:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedEvent(f"Invalid JSON: {e}") from e
        return cls.from_dict(data)


def card_from_dict(data: Any) -> Card:
    """Parse a ``{"cardValue": ..., "cardSuit": ...}`` object."""
    data = _require_object(data, "card")
    return Card.from_tokens(
        _require(data, "cardValue", str),
        _require(data, "cardSuit", str),
    )


def _cards(data: Any, what: str) -> tuple[Card, ...]:
    if data is None:
        return ()
    if not isinstance(data, list):
        raise MalformedEvent(f"Expected a list of {what}, got {type(data).__name__}")
    return tuple(card_from_dict(c) for c in data)


def _require_object(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise MalformedEvent(f"Expected {what} object, got {type(data).__name__}")
    return data


def _check_type(key: str, value: Any, kind: type) -> Any:
    # bool is an int subclass but never a valid amount
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise MalformedEvent(
            f"Field {key!r} must be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _require(data: dict[str, Any], key: str, kind: type) -> Any:
    if data.get(key) is None:
        raise MalformedEvent(f"Missing required field: {key!r}")
    return _check_type(key, data[key], kind)


def _optional(data: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    if data.get(key) is None:
        return default
    return _check_type(key, data[key], kind)
