"""Pydantic models describing rows of the Magdeburg tree cadastre CSV exports."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

from treesync.adapters.csv_parsing import (
    blank_to_none,
    parse_decimal_comma,
    parse_float_prefix,
    parse_int_prefix,
)


class MagdeburgBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class MagdeburgRow(MagdeburgBaseModel):
    """Columns shared by all export years."""

    fid: str | None = None
    tree_number: str = Field(default="", alias="Baumnummer")
    height: float | None = Field(default=None, alias="Hoehe")
    genus_text: str | None = Field(default=None, alias="Gattung")
    area: str = Field(default="", alias="gebiet")
    crown: float | None = Field(default=None, alias="Kronendurchm")
    planted: int | None = Field(default=None, alias="pflanzjahr")
    street: str = Field(default="", alias="strasse")
    longitude: str | None = None
    latitude: str | None = None

    _normalize_blanks = field_validator("fid", "longitude", "latitude", mode="before")(
        blank_to_none
    )

    @field_validator("height", mode="before")
    @classmethod
    def _parse_height(cls, value: str | None) -> float | None:
        return parse_decimal_comma(value)

    @field_validator("crown", mode="before")
    @classmethod
    def _parse_crown(cls, value: str | None) -> float | None:
        return parse_float_prefix(value)

    @field_validator("planted", mode="before")
    @classmethod
    def _parse_planted(cls, value: str | None) -> int | None:
        return parse_int_prefix(value)


class MagdeburgRow2022(MagdeburgRow):
    """2022 exports carry the trunk diameter."""

    trunk_diameter: int | None = Field(default=None, alias="Stammdurchm")

    @field_validator("trunk_diameter", mode="before")
    @classmethod
    def _parse_trunk_diameter(cls, value: str | None) -> int | None:
        return parse_int_prefix(value)

    @property
    def dbh(self) -> float | None:
        return self.trunk_diameter


class MagdeburgRow2023(MagdeburgRow):
    """2023 exports carry the trunk girth instead of the diameter."""

    trunk_girth: int | None = Field(default=None, alias="Stammumfang")

    @field_validator("trunk_girth", mode="before")
    @classmethod
    def _parse_trunk_girth(cls, value: str | None) -> int | None:
        return parse_int_prefix(value)

    @property
    def dbh(self) -> float | None:
        if self.trunk_girth is None:
            return None
        return self.trunk_girth / math.pi
