from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from treesync.adapters.magdeburg import MAGDEBURG_2022, MAGDEBURG_2023, read_magdeburg
from treesync.adapters.magdeburg.reader import fix_planting_year, fix_street
from treesync.domain.errors import LoadError

if TYPE_CHECKING:
    from pathlib import Path

HEADER_2023 = (
    "fid;Baumnummer;Gattung;gebiet;strasse;Hoehe;Kronendurchm;Stammumfang;pflanzjahr;"
    "longitude;latitude"
)
HEADER_2022 = (
    "fid;Baumnummer;Gattung;gebiet;strasse;Hoehe;Kronendurchm;Stammdurchm;pflanzjahr;"
    "longitude;latitude"
)


def _write(tmp_path: Path, header: str, *rows: str) -> Path:
    path = tmp_path / "export.csv"
    path.write_text("\n".join((header, *rows)) + "\n", encoding="utf-8")
    return path


def test_reads_2023_row(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        HEADER_2023,
        "1;1234;Tilia cordata, Winter-Linde;Öffentliches Grün;Breiter Weg/KGA;12,5;6;94;1985;"
        "11.6283;52.1270",
    )

    [tree] = read_magdeburg(path, MAGDEBURG_2023)

    assert tree.ref == "G1234"
    assert tree.location == "Öffentliches Grün"
    assert tree.address == "Breiter Weg"
    assert tree.lat == "52.1270"
    assert tree.lon == "11.6283"
    assert tree.genus == "Tilia"
    assert tree.species == "Tilia cordata"
    assert tree.common == "Winter-Linde"
    assert tree.height == 12.5
    assert tree.crown == 6
    assert tree.dbh == pytest.approx(94 / 3.141592653589793)
    assert tree.planted == 1985


def test_reads_2022_diameter(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        HEADER_2022,
        "1;555;Acer platanoides, Spitz-Ahorn;AMT 66;Hasselbachplatz;8;4;30;2001;11.6;52.1",
    )

    [tree] = read_magdeburg(path, MAGDEBURG_2022)

    assert tree.ref == "S555"
    assert tree.dbh == 30


def test_filters_invalid_rows(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        HEADER_2023,
        "1;12;Tilia cordata;Spielplatz;Weg;1;1;1;2000;11.6;52.1",
        "2;300;Tilia cordata;Spielplatz;Testgebiet;1;1;1;2000;11.6;52.1",
        "3;301;Leerstelle;Spielplatz;Weg;1;1;1;2000;11.6;52.1",
        "4;302;Tilia cordata;Spielplatz;Weg;1;1;1;2000;11.6;52.1",
        "5;302;Tilia cordata;Spielplatz;Weg;1;1;1;2000;11.6;52.1",
        "6;302;Tilia cordata;Liegenschaftsservice;Weg;1;1;1;2000;11.6;52.1",
        "7;303;Tilia cordata;Spielplatz;Weg;1;1;1;2000;11.6;52.1",
    )

    trees = read_magdeburg(path, MAGDEBURG_2023)

    assert [tree.ref for tree in trees] == ["L302", "K303"]


def test_placeholder_genus_is_nulled(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        HEADER_2022,
        "1;301;unbekannt;Spielplatz;Weg;1;1;1;2000;11.6;52.1",
    )

    [tree] = read_magdeburg(path, MAGDEBURG_2022)

    assert tree.genus is None
    assert tree.species is None
    assert tree.common is None


def test_genus_spelling_is_translated(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        HEADER_2023,
        "1;400;Ostrya carpinifolia - Hopfenbuche;Öffentliches Grün;Weg;1;1;1;2000;11.6;52.1",
    )

    [tree] = read_magdeburg(path, MAGDEBURG_2023)

    assert tree.genus == "Ostrya"
    assert tree.species == "Ostrya carpinifolia"
    assert tree.common == "Hopfenbuche"


def test_blank_values_become_none(tmp_path: Path) -> None:
    path = _write(tmp_path, HEADER_2023, "1;401;;Öffentliches Grün;Weg;;;;;;")

    [tree] = read_magdeburg(path, MAGDEBURG_2023)

    assert tree.genus is None
    assert tree.height is None
    assert tree.crown is None
    assert tree.dbh is None
    assert tree.planted is None
    assert tree.lat is None
    assert tree.lon is None


def test_unknown_area_raises(tmp_path: Path) -> None:
    path = _write(tmp_path, HEADER_2023, "1;402;Tilia;Friedhof;Weg;1;1;1;2000;11.6;52.1")

    with pytest.raises(LoadError, match="gebiet=Friedhof"):
        read_magdeburg(path, MAGDEBURG_2023)


def test_unreadable_file_raises(tmp_path: Path) -> None:
    with pytest.raises(LoadError, match="Cannot read"):
        read_magdeburg(tmp_path / "missing.csv", MAGDEBURG_2023)


def test_fix_street_strips_ignored_words() -> None:
    assert fix_street("Bäume - Liegenschaftsservice Am Park") == "Am Park"
    assert fix_street("Klosterwuhne/SP ") == "Klosterwuhne"
    assert fix_street("Breiter Weg") == "Breiter Weg"


@pytest.mark.parametrize(("year", "expected"), [(1599, None), (1600, 1600), (None, None)])
def test_fix_planting_year(year: int | None, expected: int | None) -> None:
    assert fix_planting_year(year) == expected
