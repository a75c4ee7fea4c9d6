"""Tests for event parsing."""

import json

import pytest
from holdem_dojo.action import PlayerMove
from holdem_dojo.card import card
from holdem_dojo.event import HAND_STARTED, Round, RoundEvent, card_from_dict
from holdem_dojo.exceptions import MalformedEvent, UnknownCardToken


def _payload(**overrides) -> dict:
    data = {
        "gameRound": "THREE_CARDS",
        "dealer": "bot",
        "mover": "user",
        "event": ["user moves."],
        "players": [
            {
                "name": "user",
                "balance": 950,
                "pot": 50,
                "status": "Call",
                "cards": [
                    {"cardValue": "V", "cardSuit": "♥"},
                    {"cardValue": "10", "cardSuit": "♠"},
                ],
            },
            {"name": "bot", "balance": 900, "pot": 100, "status": "Rise", "cards": []},
        ],
        "combination": "",
        "gameStatus": "Running",
        "deskCards": [
            {"cardValue": "2", "cardSuit": "♦"},
            {"cardValue": "A", "cardSuit": "♣"},
            {"cardValue": "Q", "cardSuit": "♠"},
        ],
        "deskPot": 150,
    }
    data.update(overrides)
    return data


class TestParse:
    def test_full_event(self):
        event = RoundEvent.from_json(json.dumps(_payload()))
        assert event.game_round == Round.THREE_CARDS
        assert event.mover == "user"
        assert event.lead_line == "user moves."
        assert event.invites_move
        assert not event.starts_hand
        assert event.board == (card("2d"), card("Ac"), card("Qs"))
        assert event.pot == 150
        assert event.game_status == "Running"

    def test_players(self):
        event = RoundEvent.from_dict(_payload())
        me = event.player("user")
        assert me.cards == (card("Vh"), card("10s"))
        assert me.balance == 950
        assert me.last_move == PlayerMove.CALL
        assert event.player("bot").cards == ()
        assert event.player("nobody") is None

    def test_optional_fields(self):
        data = _payload(deskCards=None, gameStatus=None, combination=None)
        del data["deskPot"]
        del data["players"][1]["cards"]
        event = RoundEvent.from_dict(data)
        assert event.board == ()
        assert event.pot == 0
        assert event.combination == ""
        assert event.player("bot").cards == ()

    def test_hand_start(self):
        event = RoundEvent.from_dict(_payload(gameRound="BLIND", event=[HAND_STARTED, "x"]))
        assert event.starts_hand

    def test_empty_log(self):
        event = RoundEvent.from_dict(_payload(event=[]))
        assert event.lead_line == ""
        assert not event.invites_move

    def test_card_from_dict(self):
        assert card_from_dict({"cardValue": "K", "cardSuit": "♦"}) == card("Kd")


class TestMalformed:
    def test_invalid_json(self):
        with pytest.raises(MalformedEvent):
            RoundEvent.from_json("{not json")

    def test_not_an_object(self):
        with pytest.raises(MalformedEvent):
            RoundEvent.from_json("[1, 2]")

    def test_missing_field(self):
        data = _payload()
        del data["mover"]
        with pytest.raises(MalformedEvent, match="mover"):
            RoundEvent.from_dict(data)

    def test_unknown_round(self):
        with pytest.raises(MalformedEvent, match="round"):
            RoundEvent.from_dict(_payload(gameRound="SIX_CARDS"))

    def test_wrong_type(self):
        data = _payload()
        data["players"][0]["balance"] = "950"
        with pytest.raises(MalformedEvent, match="balance"):
            RoundEvent.from_dict(data)

    def test_bool_is_not_an_amount(self):
        with pytest.raises(MalformedEvent):
            RoundEvent.from_dict(_payload(deskPot=True))

    def test_log_lines_must_be_strings(self):
        with pytest.raises(MalformedEvent):
            RoundEvent.from_dict(_payload(event=["ok", 3]))

    def test_unknown_card_token(self):
        data = _payload()
        data["deskCards"][0]["cardValue"] = "J"
        with pytest.raises(UnknownCardToken):
            RoundEvent.from_dict(data)
