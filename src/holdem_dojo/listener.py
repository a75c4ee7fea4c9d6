"""Turns raw server messages into directives for one agent session."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .action import encode
from .event import RoundEvent
from .exceptions import DojoError
from .policy import BettingPolicy, Decision

logger = logging.getLogger(__name__)


@dataclass
class EventListener:
    """Message handler for a single agent session.

    Messages are processed to completion one at a time. A message that
    fails to parse is logged and skipped; the session carries on.
    """

    policy: BettingPolicy
    last_event: RoundEvent | None = field(default=None, init=False)
    last_decision: Decision | None = field(default=None, init=False)

    @classmethod
    def for_agent(cls, name: str) -> "EventListener":
        return cls(BettingPolicy(name))

    def handle(self, event: RoundEvent) -> str | None:
        """Resolve a parsed event to a directive, None if nothing should be sent."""
        decision = self.policy.resolve(event)
        self.last_event = event
        self.last_decision = decision
        if decision.action.is_noop:
            return None
        return encode(decision.action)

    def on_message(self, text: str) -> str | None:
        """Parse and handle one raw message."""
        try:
            event = RoundEvent.from_json(text)
        except DojoError as e:
            logger.warning("Skipping event: %s", e)
            self.last_event = None
            self.last_decision = None
            return None
        logger.debug("Event %s", event)
        return self.handle(event)
