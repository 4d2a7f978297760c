"""Tests for the SQLAlchemy repositories and battle data sources."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from pokebattle.domain import models as dm
from pokebattle.domain.effectiveness import FactorFound, FactorMissing
from pokebattle.models import Team, TeamMember
from pokebattle.repository import (
    PokemonRepository,
    SqlEffectivenessResolver,
    SqlRosterSource,
    TeamRepository,
    TypeRepository,
    WeaknessRepository,
)
from pokebattle.services.errors import NotFoundError


def test_types_are_listed_by_name(session):
    names = [t.name for t in TypeRepository(session).list_types()]

    assert names == ["Fire", "Grass", "Water"]


def test_ids_by_name_maps_every_type(session, types):
    mapping = TypeRepository(session).ids_by_name()

    assert mapping == {name: t.id for name, t in types.items()}


def test_pokemon_listing_loads_types(session, make_pokemon):
    make_pokemon("Squirtle", type_name="Water")
    make_pokemon("Bulbasaur", type_name="Grass")

    listed = PokemonRepository(session).list_with_types()

    assert [(p.name, p.type.name) for p in listed] == [
        ("Bulbasaur", "Grass"),
        ("Squirtle", "Water"),
    ]


def test_get_many_ignores_unknown_and_duplicate_ids(session, make_pokemon):
    pikachu = make_pokemon("Pikachu")

    found = PokemonRepository(session).get_many([pikachu.id, pikachu.id, "missing"])

    assert list(found) == [pikachu.id]
    assert PokemonRepository(session).get_many([]) == {}


def test_team_insert_keeps_slot_order_and_duplicates(session, make_pokemon):
    first = make_pokemon("First", power=10)
    second = make_pokemon("Second", power=20)
    ids = [second.id, first.id, second.id, first.id, first.id, first.id]

    team = TeamRepository(session).insert("Mixed", ids)
    session.commit()

    reloaded = TeamRepository(session).get(team.id)
    assert reloaded.pokemon_ids == ids
    assert [m.position for m in reloaded.members] == list(range(6))
    assert reloaded.total_power == 20 + 10 + 20 + 10 + 10 + 10


def test_team_replace_swaps_all_slots(session, make_team, make_pokemon):
    team = make_team("Before")
    newcomer = make_pokemon("Newcomer", power=90)
    repo = TeamRepository(session)

    repo.replace(team, "After", [newcomer.id] * 6)
    session.commit()

    reloaded = repo.get(team.id)
    assert reloaded.name == "After"
    assert reloaded.pokemon_ids == [newcomer.id] * 6
    assert session.query(TeamMember).filter_by(team_id=team.id).count() == 6


def test_team_delete_removes_slots(session, make_team):
    team = make_team()
    repo = TeamRepository(session)

    repo.delete(team)
    session.commit()

    assert repo.get(team.id) is None
    assert session.query(TeamMember).count() == 0


def test_teams_are_ranked_by_total_power(session, make_team):
    make_team("Weak", [{"power": 10}] * 6)
    make_team("Strong", [{"power": 90}] * 6)
    make_team("Middle", [{"power": 50}] * 6)

    ranked = TeamRepository(session).list_by_power()

    assert [t.name for t in ranked] == ["Strong", "Middle", "Weak"]
    assert [t.total_power for t in ranked] == [540, 300, 60]


def test_weakness_lookup_returns_seeded_chart(session, types):
    repo = WeaknessRepository(session)

    assert repo.type_factor(types["Water"].id, types["Fire"].id) == 2.0
    assert repo.type_factor(types["Fire"].id, types["Water"].id) == 0.5
    assert repo.type_factor(types["Grass"].id, types["Grass"].id) == 1.0
    assert repo.type_factor(types["Fire"].id, "nope") is None


def test_roster_source_builds_ordered_battle_team(session, make_team):
    team = make_team("Ordered", [{"power": 10 + i * 10, "type_name": "Water"} for i in range(6)])

    battle_team = SqlRosterSource(session).load_team(dm.TeamID(team.id))

    assert battle_team.id == team.id
    assert battle_team.name == "Ordered"
    assert [c.power for c in battle_team.combatants] == [10, 20, 30, 40, 50, 60]
    assert {c.type_name for c in battle_team.combatants} == {"Water"}


def test_roster_source_raises_for_missing_or_empty_team(session):
    source = SqlRosterSource(session)
    empty = Team(name="Empty")
    session.add(empty)
    session.commit()

    with pytest.raises(NotFoundError):
        source.load_team(dm.TeamID("missing"))
    with pytest.raises(NotFoundError, match="no Pokemon"):
        source.load_team(dm.TeamID(empty.id))


def test_sql_resolver_wraps_results(session, types):
    resolver = SqlEffectivenessResolver(session)

    found = resolver.factor(dm.TypeID(types["Grass"].id), dm.TypeID(types["Water"].id))
    missing = resolver.factor(dm.TypeID(types["Grass"].id), dm.TypeID("electric"))

    assert found == FactorFound(2.0)
    assert isinstance(missing, FactorMissing)


def test_sql_resolver_reports_storage_errors(session, monkeypatch):
    resolver = SqlEffectivenessResolver(session)

    def boom(*_args):
        raise OperationalError("SELECT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(WeaknessRepository, "type_factor", boom)

    result = resolver.factor(dm.TypeID("a"), dm.TypeID("b"))

    assert isinstance(result, FactorMissing)
    assert "OperationalError" in result.reason
