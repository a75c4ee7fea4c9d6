"""Holdem-dojo - decision core of a hold'em playing agent."""

__version__ = "0.1.0"

from .action import NO_ACTION, Action, ActionType, PlayerMove, encode
from .card import Card, Rank, Suit, card
from .classifier import ClassifierState, classify, merge_cards
from .combination import Combination, Detection, detect
from .event import PlayerSnapshot, Round, RoundEvent
from .exceptions import DojoError, MalformedEvent, UnknownCardToken
from .listener import EventListener
from .policy import BettingPolicy, Decision, decide, stake_for_balance

__all__ = [
    "Action",
    "ActionType",
    "BettingPolicy",
    "Card",
    "ClassifierState",
    "Combination",
    "Decision",
    "Detection",
    "DojoError",
    "EventListener",
    "MalformedEvent",
    "NO_ACTION",
    "PlayerMove",
    "PlayerSnapshot",
    "Rank",
    "Round",
    "RoundEvent",
    "Suit",
    "UnknownCardToken",
    "card",
    "classify",
    "decide",
    "detect",
    "encode",
    "merge_cards",
    "stake_for_balance",
]
