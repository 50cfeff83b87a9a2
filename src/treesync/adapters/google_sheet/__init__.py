from __future__ import annotations

from .loader import GoogleSheetLoader, parse_sheet
from .schema import SheetRow
from .translator import parse_tree

__all__ = ["GoogleSheetLoader", "SheetRow", "parse_sheet", "parse_tree"]
