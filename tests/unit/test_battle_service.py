"""Tests for BattleService validation, loading and logging."""

from __future__ import annotations

import logging

import pytest

from pokebattle.domain import models as dm
from pokebattle.domain.effectiveness import FactorFound, FactorMissing
from pokebattle.domain.enums import Winner
from pokebattle.services.battle_service import BattleService
from pokebattle.services.errors import InvalidRequestError, NotFoundError


def _combatant(key: str, *, power: int = 50, type_id: str = "fire") -> dm.Combatant:
    return dm.Combatant(
        id=dm.PokemonID(key),
        name=key.title(),
        type_id=dm.TypeID(type_id),
        type_name=type_id.title(),
        power=power,
        life=50,
        image=f"https://img.example/{key}.png",
    )


class FakeRoster:
    def __init__(self, teams: dict[str, dm.BattleTeam]) -> None:
        self.teams = teams
        self.loaded: list[str] = []

    def load_team(self, team_id):
        self.loaded.append(team_id)
        try:
            return self.teams[team_id]
        except KeyError:
            raise NotFoundError(f"Team {team_id} not found") from None


class NeutralResolver:
    def factor(self, attacker, defender):
        return FactorFound(1.0)


class EmptyResolver:
    def factor(self, attacker, defender):
        return FactorMissing("chart empty")


def _roster() -> FakeRoster:
    return FakeRoster(
        {
            "red": dm.BattleTeam.from_sequence(
                "red", "Red", [_combatant(f"r{i}", power=60) for i in range(6)]
            ),
            "blue": dm.BattleTeam.from_sequence(
                "blue", "Blue", [_combatant(f"b{i}", power=40) for i in range(6)]
            ),
        }
    )


def test_run_battle_returns_log_for_stored_teams():
    service = BattleService(_roster(), NeutralResolver())

    log = service.run_battle(dm.TeamID("red"), dm.TeamID("blue"))

    assert log.winner is Winner.TEAM_1
    assert log.team1.id == "red"
    assert log.team2.name == "Blue"
    assert log.rounds[0].damage1 == 60
    assert log.rounds[0].damage2 == 40


def test_self_battle_is_rejected_before_loading():
    roster = _roster()
    service = BattleService(roster, NeutralResolver())

    with pytest.raises(InvalidRequestError, match="Teams cannot battle themselves"):
        service.run_battle(dm.TeamID("red"), dm.TeamID("red"))
    assert roster.loaded == []


def test_blank_identifiers_are_rejected():
    service = BattleService(_roster(), NeutralResolver())

    with pytest.raises(InvalidRequestError, match="Missing required fields"):
        service.run_battle(dm.TeamID(""), dm.TeamID("blue"))


@pytest.mark.parametrize(
    ("team1", "team2", "message"),
    [
        ("ghost", "blue", "Team 1 not found or has no Pokemon"),
        ("red", "ghost", "Team 2 not found or has no Pokemon"),
    ],
)
def test_missing_team_names_the_side(team1, team2, message):
    service = BattleService(_roster(), NeutralResolver())

    with pytest.raises(NotFoundError) as excinfo:
        service.run_battle(dm.TeamID(team1), dm.TeamID(team2))
    assert str(excinfo.value) == message


def test_fallbacks_are_logged_as_warnings(caplog):
    service = BattleService(_roster(), EmptyResolver())

    with caplog.at_level(logging.WARNING, logger="pokebattle.services.battle_service"):
        log = service.run_battle(dm.TeamID("red"), dm.TeamID("blue"))

    assert log.rounds[0].type_factor1 == 1.0
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert warnings
    assert "chart empty" in warnings[0].getMessage()


def test_to_battle_dict_shapes_json_payload():
    service = BattleService(_roster(), NeutralResolver())
    log = service.run_battle(dm.TeamID("red"), dm.TeamID("blue"))

    payload = BattleService.to_battle_dict(log)

    assert payload["winner"] == "Team 1"
    assert payload["team1"]["pokemon_ids"] == [f"r{i}" for i in range(6)]
    assert payload["team1"]["total_power"] == 360
    first = payload["rounds"][0]
    assert first["round"] == 1
    assert first["pokemon1"]["type"] == "Fire"
    assert first["pokemon1"]["image"] == "https://img.example/r0.png"
    assert first["type_factor2"] == 1.0
    assert len(payload["team1_remaining"]) == len(log.team1_remaining)
