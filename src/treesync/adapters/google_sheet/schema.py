"""Pydantic model for rows of the published tree spreadsheet."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

from treesync.adapters.csv_parsing import blank_to_none, parse_decimal_comma, parse_int_prefix
from treesync.domain.conversion import round_half_up


class SheetRow(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    ref: str = Field(alias="Id")
    address: str | None = Field(default=None, alias="Adresse")
    latitude: float | None = Field(default=None, alias="Latitude")
    longitude: float | None = Field(default=None, alias="Longitude")
    genus: str | None = Field(default=None, alias="Gattung")
    species: str | None = Field(default=None, alias="Art")
    common: str | None = Field(default=None, alias="AllgemeinerName")
    height: float | None = Field(default=None, alias="Baumhoehe")
    crown: float | None = Field(default=None, alias="Kronendurchmesser")
    trunk_girth: float | None = Field(default=None, alias="Stammumfang")
    planted: int | None = Field(default=None, alias="Pflanzjahr")

    @field_validator("ref", mode="before")
    @classmethod
    def _require_ref(cls, value: object) -> object:
        value = blank_to_none(value)
        if value is None:
            raise ValueError("tree id is required")
        return value

    _normalize_blanks = field_validator("address", "genus", "species", "common", mode="before")(
        blank_to_none
    )

    @field_validator(
        "latitude",
        "longitude",
        "height",
        "crown",
        "trunk_girth",
        mode="before",
    )
    @classmethod
    def _parse_decimal(cls, value: str | None) -> float | None:
        return parse_decimal_comma(value)

    @field_validator("planted", mode="before")
    @classmethod
    def _parse_planted(cls, value: str | None) -> int | None:
        return parse_int_prefix(value)

    @property
    def dbh(self) -> float | None:
        """Trunk diameter in whole centimetres, as stored by earlier imports."""

        if self.trunk_girth is None:
            return None
        return float(round_half_up(self.trunk_girth / math.pi))
