from __future__ import annotations

import pytest

from treesync.adapters.fixture import FixtureLoader
from treesync.adapters.google_sheet import GoogleSheetLoader
from treesync.adapters.loading import get_loader
from treesync.adapters.magdeburg import MagdeburgLoader
from treesync.domain.errors import UnknownSourceError
from treesync.domain.ports.loading import LoadingStrategy, TreeLoader


@pytest.mark.parametrize(
    ("key", "loader_type"),
    [
        ("magdeburg", MagdeburgLoader),
        ("google-sheet", GoogleSheetLoader),
        (LoadingStrategy.FIXTURE, FixtureLoader),
    ],
)
def test_registry_returns_loader(key: str, loader_type: type) -> None:
    loader = get_loader(key)

    assert isinstance(loader, loader_type)
    assert isinstance(loader, TreeLoader)


def test_registry_rejects_unknown_key() -> None:
    with pytest.raises(UnknownSourceError, match="test") as excinfo:
        get_loader("test")

    assert excinfo.value.kind == "loading strategy"
    assert "google-sheet" in str(excinfo.value)


def test_fixture_loader_yields_three_sorbus_trees() -> None:
    trees = FixtureLoader().load({})

    assert [tree.ref for tree in trees] == ["1", "2", "3"]
    assert [(tree.lat, tree.lon) for tree in trees] == [
        (52.123, 11.123),
        (52.124, 11.124),
        (52.122, 11.122),
    ]
    for tree in trees:
        assert tree.location == "Testgebiet"
        assert tree.address == "Teststraße"
        assert tree.genus == "Sorbus"
        assert tree.species == "Sorbus aucuparia"
        assert tree.common == "Eberesche (Vogelbeere)"
        assert (tree.height, tree.crown, tree.dbh, tree.planted) == (10, 10, 10, 2020)


def test_fixture_loader_issues_fresh_internal_refs() -> None:
    first = FixtureLoader().load({})
    second = FixtureLoader().load({})

    assert {tree.internal_ref for tree in first}.isdisjoint(tree.internal_ref for tree in second)
