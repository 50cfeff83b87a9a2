from __future__ import annotations

import pytest

from treesync.domain.classification import classify
from treesync.domain.genera import GENUS_MAP, lookup_genus
from treesync.domain.model import TreeClassification


def test_classify_scientific_and_common_name() -> None:
    result = classify("Tilia cordata, Winter-Linde")

    assert result == TreeClassification(
        fullname="Tilia cordata, Winter-Linde",
        genus="Tilia",
        species="cordata",
        variety=None,
        scientific="Tilia cordata",
        common="Winter-Linde",
    )


def test_classify_keeps_parenthesised_common_name() -> None:
    result = classify("Sorbus aucuparia, Eberesche (Vogelbeere)")

    assert result.genus == "Sorbus"
    assert result.species == "aucuparia"
    assert result.variety is None
    assert result.scientific == "Sorbus aucuparia"
    assert result.common == "Eberesche (Vogelbeere)"


def test_classify_quoted_cultivar_is_variety() -> None:
    result = classify('Tilia europaea "Pallida", Kaiser-Linde')

    assert result.genus == "Tilia"
    assert result.species == "europaea"
    assert result.variety == "Pallida"
    assert result.scientific == 'Tilia europaea "Pallida"'
    assert result.common == "Kaiser-Linde"


def test_classify_hybrid_marker() -> None:
    result = classify("Platanus x hispanica, Ahornblättrige Platane")

    assert result.genus == "Platanus"
    assert result.species == "x hispanica"
    assert result.variety is None


@pytest.mark.parametrize("text", ["Tilia x europaea", "Tilia X europaea"])
def test_classify_hybrid_marker_ignores_case(text: str) -> None:
    result = classify(text)

    assert result.genus == "Tilia"
    assert result.species == "x europaea"
    assert result.variety is None
    assert result.scientific == text


def test_classify_hybrid_with_cultivar() -> None:
    result = classify("Tilia x europaea Pallida Nova")

    assert result.species == "x europaea"
    assert result.variety == "Pallida Nova"


def test_common_name_falls_back_to_scientific() -> None:
    result = classify("Acer platanoides")

    assert result.common == "Acer platanoides"
    assert result.scientific == "Acer platanoides"


def test_genus_only() -> None:
    result = classify("Quercus")

    assert result.genus == "Quercus"
    assert result.species is None
    assert result.variety is None


@pytest.mark.parametrize("text", [None, ""])
def test_empty_input_yields_empty_classification(text: str | None) -> None:
    assert classify(text) == TreeClassification()


def test_repeated_spaces_are_ignored() -> None:
    result = classify("Acer  campestre , Feld-Ahorn")

    assert result.species == "campestre"
    assert result.common == "Feld-Ahorn"


def test_lookup_known_genus() -> None:
    genus = lookup_genus("Sorbus")

    assert genus is not None
    assert genus.display_name == "Eberesche"
    assert GENUS_MAP["Tilia"].display_name == "Linde"


@pytest.mark.parametrize("name", [None, "", "Unbekannt", "tilia"])
def test_lookup_unknown_genus(name: str | None) -> None:
    assert lookup_genus(name) is None
