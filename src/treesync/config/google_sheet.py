"""Google Sheets (published CSV) configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .http_resilience import ResilienceConfig

GOOGLE_SHEET_TIMEOUT_SECONDS = 20.0


def _default_resilience() -> ResilienceConfig:
    return ResilienceConfig(
        name="google-sheet",
        timeout_seconds=GOOGLE_SHEET_TIMEOUT_SECONDS,
        default_headers={"Accept": "text/csv"},
    )


@dataclass(frozen=True, slots=True)
class GoogleSheetConfig:
    """Holds settings for fetching a published spreadsheet as CSV."""

    resilience: ResilienceConfig = field(default_factory=_default_resilience)
    encoding: str = "utf-8"


def get_google_sheet_config(*, resilience: ResilienceConfig | None = None) -> GoogleSheetConfig:
    return GoogleSheetConfig(resilience=resilience or _default_resilience())
