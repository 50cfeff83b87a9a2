"""Split free-text botanical names into genus, species and variety."""

from __future__ import annotations

import csv
from typing import Final

from .model import TreeClassification

HYBRID_MARKER: Final[str] = "x"

_EMPTY = TreeClassification()


def classify(text: str | None) -> TreeClassification:
    """Classify ``"<scientific name>, <common name>"`` strings.

    The scientific name is tokenized on spaces (double quotes group cultivar
    names such as ``"Pallida"``). A second token equal to ``x`` marks a hybrid,
    in which case the species is ``"x <epithet>"``.
    """

    if not text:
        return _EMPTY

    parts = text.split(",")
    scientific = parts[0].strip()
    common = parts[1].strip() if len(parts) > 1 else scientific

    tokens = _tokenize(scientific)
    genus = tokens[0] if tokens else None
    species: str | None = None
    variety_tokens: list[str] = []
    if len(tokens) > 1:
        if tokens[1].lower() == HYBRID_MARKER:
            species = f"{HYBRID_MARKER} {tokens[2]}" if len(tokens) > 2 else HYBRID_MARKER
            variety_tokens = tokens[3:]
        else:
            species = tokens[1]
            variety_tokens = tokens[2:]

    return TreeClassification(
        fullname=text,
        genus=genus,
        species=species,
        variety=" ".join(variety_tokens) or None,
        scientific=scientific or None,
        common=common or None,
    )


def _tokenize(scientific: str) -> list[str]:
    if not scientific:
        return []
    row = next(csv.reader([scientific], delimiter=" ", quotechar='"'), [])
    return [token for token in row if token]
