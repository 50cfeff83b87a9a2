"""Loading strategy for trees maintained in a published Google spreadsheet."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from treesync.adapters.csv_parsing import blank_to_none, iter_csv_rows
from treesync.adapters.http_resilience import ResilientClient
from treesync.config.google_sheet import GoogleSheetConfig, get_google_sheet_config
from treesync.domain.errors import LoadError

from .schema import SheetRow
from .translator import parse_tree

if TYPE_CHECKING:
    from collections.abc import Callable

    from treesync.config.http_resilience import ResilienceConfig
    from treesync.domain.model import TreeRecord
    from treesync.domain.ports.loading import LoadOptions

log = getLogger(__name__)


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


def parse_sheet(text: str) -> list[TreeRecord]:
    trees: list[TreeRecord] = []
    for line_number, raw in iter_csv_rows(text):
        if blank_to_none(raw.get("Id")) is None:
            log.warning("Skipping spreadsheet row at line %s without tree id", line_number)
            continue
        try:
            row = SheetRow.model_validate(raw)
        except ValidationError as exc:
            raise LoadError(f"Malformed spreadsheet row at line {line_number}: {exc}") from exc
        trees.append(parse_tree(row))
    return trees


@dataclass(slots=True)
class GoogleSheetLoader:
    """Load a spreadsheet published as CSV; options: ``url``."""

    config: GoogleSheetConfig = field(default_factory=get_google_sheet_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def load(self, options: LoadOptions) -> list[TreeRecord]:
        url = options.get("url")
        if not url:
            raise LoadError("Google sheet loader requires a 'url' option")
        text = asyncio.run(self._fetch_csv(url))
        trees = parse_sheet(text)
        log.info("Loaded %s trees from spreadsheet", len(trees))
        return trees

    async def _fetch_csv(self, url: str) -> str:
        async with self.client_factory(self.config.resilience) as client:
            try:
                response = await client.get(url)
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                raise LoadError(
                    f"Spreadsheet request failed with status {exc.response.status_code}"
                ) from exc
            except httpx.HTTPError as exc:
                raise LoadError(f"Spreadsheet request failed: {exc}") from exc
        return response.content.decode(self.config.encoding, errors="replace")
