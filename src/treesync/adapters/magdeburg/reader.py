"""Read the Magdeburg tree cadastre CSV exports into tree records."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final

from pydantic import ValidationError

from treesync.adapters.csv_parsing import iter_csv_rows
from treesync.domain.classification import classify
from treesync.domain.errors import LoadError
from treesync.domain.model import TreeRecord

from .schema import MagdeburgRow2022, MagdeburgRow2023

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

log = getLogger(__name__)

type MagdeburgRowModel = type[MagdeburgRow2022] | type[MagdeburgRow2023]
type MagdeburgRowType = MagdeburgRow2022 | MagdeburgRow2023

IGNORED_ADDRESS_WORDS: Final[tuple[str, ...]] = (
    "Bäume - Liegenschaftsservice",
    "/KGA",
    "/LSG",
    "/PPL",
    "/SBG",
    "/SF",
    "/SP",
)

AREA_PREFIXES: Final[dict[str, str]] = {
    "Öffentliches Grün": "G",
    "AMT 66": "S",
    "Spielplatz": "K",
    "Liegenschaftsservice": "L",
}

TEST_STREET: Final[str] = "Testgebiet"
MIN_TREE_NUMBER_LENGTH: Final[int] = 3
MIN_PLANTING_YEAR: Final[int] = 1600


@dataclass(frozen=True, slots=True)
class MagdeburgFormat:
    """Differences between the yearly export formats."""

    version: str
    row_model: MagdeburgRowModel
    genus_translations: Mapping[str, str | None] = field(default_factory=dict[str, str | None])
    excluded_genera: frozenset[str] = frozenset()


MAGDEBURG_2022 = MagdeburgFormat(
    version="2022",
    row_model=MagdeburgRow2022,
    genus_translations={
        'Tilia europaea "Pallida"; Kaiser-Linde': 'Tilia europaea "Pallida", Kaiser-Linde',
        "Ostrya carpinifolia - Hopfenbuche": "Ostrya carpinifolia, Hopfenbuche",
        "unbekannt": None,
        "waldartiger Bestand": None,
    },
)

MAGDEBURG_2023 = MagdeburgFormat(
    version="2023",
    row_model=MagdeburgRow2023,
    genus_translations={
        "Ostrya carpinifolia - Hopfenbuche": "Ostrya carpinifolia, Hopfenbuche",
        "unbekannt": None,
        "Unbekannt": None,
        "waldartiger Bestand": None,
        "Leerstelle": None,
        "Baumgruppe": None,
    },
    excluded_genera=frozenset({"Leerstelle"}),
)

MAGDEBURG_FORMATS: Final[dict[str, MagdeburgFormat]] = {
    fmt.version: fmt for fmt in (MAGDEBURG_2022, MAGDEBURG_2023)
}


def read_magdeburg(path: Path, fmt: MagdeburgFormat) -> list[TreeRecord]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"Cannot read Magdeburg export {path}: {exc}") from exc

    rows = parse_rows(text, fmt)
    valid_rows = filter_invalid_rows(rows, fmt)
    log.info(
        "Read %s rows from %s (format %s), %s valid",
        len(rows),
        path,
        fmt.version,
        len(valid_rows),
    )
    return [to_tree_record(fix_row(row, fmt)) for row in valid_rows]


def parse_rows(text: str, fmt: MagdeburgFormat) -> list[MagdeburgRowType]:
    rows: list[MagdeburgRowType] = []
    for line_number, raw in iter_csv_rows(text):
        try:
            rows.append(fmt.row_model.model_validate(raw))
        except ValidationError as exc:
            raise LoadError(f"Malformed row at line {line_number}: {exc}") from exc
    return rows


def filter_invalid_rows(
    rows: list[MagdeburgRowType],
    fmt: MagdeburgFormat,
) -> list[MagdeburgRowType]:
    """Drop placeholder and test rows, and every row whose tree number is not unique."""

    counts = Counter((row.area, row.tree_number) for row in rows)
    return [
        row
        for row in rows
        if len(row.tree_number) >= MIN_TREE_NUMBER_LENGTH
        and row.street != TEST_STREET
        and row.genus_text not in fmt.excluded_genera
        and counts[(row.area, row.tree_number)] == 1
    ]


def fix_row(row: MagdeburgRowType, fmt: MagdeburgFormat) -> MagdeburgRowType:
    return row.model_copy(
        update={
            "street": fix_street(row.street),
            "genus_text": fix_genus(row.genus_text, fmt),
            "planted": fix_planting_year(row.planted),
        }
    )


def fix_street(street: str) -> str:
    result = street
    for word in IGNORED_ADDRESS_WORDS:
        result = result.replace(word, "", 1).strip()
    return result


def fix_genus(genus_text: str | None, fmt: MagdeburgFormat) -> str | None:
    if genus_text is not None and genus_text in fmt.genus_translations:
        return fmt.genus_translations[genus_text]
    return genus_text


def fix_planting_year(planted: int | None) -> int | None:
    if planted is None or planted < MIN_PLANTING_YEAR:
        return None
    return planted


def tree_ref(row: MagdeburgRowType) -> str:
    prefix = AREA_PREFIXES.get(row.area)
    if prefix is None:
        raise LoadError(
            f"Could not create tree ref (Baumnummer={row.tree_number}, gebiet={row.area})"
        )
    return f"{prefix}{row.tree_number}"


def to_tree_record(row: MagdeburgRowType) -> TreeRecord:
    classification = classify(row.genus_text)
    return TreeRecord(
        ref=tree_ref(row),
        location=row.area,
        address=row.street,
        lat=row.latitude,
        lon=row.longitude,
        genus=classification.genus,
        species=classification.scientific,
        common=classification.common,
        height=row.height,
        crown=row.crown,
        dbh=row.dbh,
        planted=row.planted,
    )
