"""Agent actions, seat moves reported by the server, and the wire encoding."""

from dataclasses import dataclass
from enum import Enum


class ActionType(Enum):
    """Actions the agent can take."""

    FOLD = "Fold"
    CHECK = "Check"
    CALL = "Call"
    RAISE = "Rise"
    ALL_IN = "AllIn"
    NONE = "None"


@dataclass(frozen=True)
class Action:
    """A concrete action.

    Attributes:
        type: The action type.
        amount: Chips added for raises, 0 otherwise.
    """

    type: ActionType
    amount: int = 0

    @property
    def is_noop(self) -> bool:
        return self.type == ActionType.NONE

    def __str__(self) -> str:
        if self.type == ActionType.RAISE:
            return f"Raise {self.amount}"
        if self.type == ActionType.ALL_IN:
            return "All-in"
        return self.type.name.replace("_", " ").capitalize()


NO_ACTION = Action(ActionType.NONE)


class PlayerMove(Enum):
    """Last move of a seat, as reported in its status token."""

    FOLD = "Fold"
    CHECK = "Check"
    CALL = "Call"
    RISE = "Rise"
    ALL_IN = "AllIn"
    NOT_MOVED = "NotMoved"
    # The server misspells the small blind token.
    SMALL_BLIND = "SmallBLind"
    BIG_BLIND = "BigBlind"
    NONE = "None"

    @classmethod
    def from_status(cls, status: str) -> "PlayerMove":
        """Map a status token to a move; anything unrecognized is NONE."""
        try:
            return cls(status)
        except ValueError:
            return cls.NONE


def encode(action: Action) -> str:
    """Render an action as the directive sent to the server.

    An empty string means nothing should be sent.
    """
    if action.type == ActionType.FOLD:
        return "Fold"
    elif action.type == ActionType.CHECK:
        return "Check"
    elif action.type == ActionType.CALL:
        return "Call"
    elif action.type == ActionType.RAISE:
        return f"Rise,{action.amount}"
    elif action.type == ActionType.ALL_IN:
        return "AllIn"
    elif action.type == ActionType.NONE:
        return ""
    raise ValueError(f"Unknown action type: {action.type!r}")
