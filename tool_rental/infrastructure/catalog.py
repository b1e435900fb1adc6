"""In-memory tool catalog loaded from JSON tool data"""

import json
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from tool_rental.domain.exceptions import RentalValidationError, ToolCatalogInitializationError
from tool_rental.domain.models import Tool, ToolType

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[1] / "data" / "tools.json"

logger = logging.getLogger(__name__)


class ToolCatalog:
    """Read-only map of tool code to Tool. First occurrence of a code wins."""

    def __init__(self, tools: Iterable[Tool]):
        self._tools: Dict[str, Tool] = {}
        for tool in tools:
            if tool.tool_code in self._tools:
                logger.debug("Ignoring duplicate tool code", extra={"tool_code": tool.tool_code})
                continue
            self._tools[tool.tool_code] = tool

    def lookup(self, tool_code: str) -> Optional[Tool]:
        if tool_code is None:
            return None
        return self._tools.get(tool_code)

    def list_tools(self) -> List[Tool]:
        return list(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, tool_code: object) -> bool:
        return tool_code in self._tools


def _flag(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected boolean charge flag, got {value!r}")
    return value


def parse_tool(entry: Dict[str, Any]) -> Tool:
    """
    Build a Tool from one catalog entry.

    Expected shape:
        {"toolCode": "LADW", "brandName": "Werner",
         "toolType": {"name": "Ladder", "dailyCharge": "1.99",
                      "hasWeekdayCharge": true, "hasWeekendCharge": true,
                      "hasHolidayCharge": false}}
    """
    tool_type = entry["toolType"]
    return Tool(
        tool_code=entry["toolCode"],
        tool_type=ToolType(
            name=tool_type["name"],
            daily_charge=Decimal(str(tool_type["dailyCharge"])),
            has_weekday_charge=_flag(tool_type["hasWeekdayCharge"]),
            has_weekend_charge=_flag(tool_type["hasWeekendCharge"]),
            has_holiday_charge=_flag(tool_type["hasHolidayCharge"]),
        ),
        brand_name=entry["brandName"],
    )


def load_tool_catalog(path: Path | str | None = None) -> ToolCatalog:
    """
    Load the tool catalog from a JSON file.

    Raises:
        ToolCatalogInitializationError: On a missing/unreadable file, invalid
            JSON, or malformed tool entries
    """
    catalog_path = Path(path) if path is not None else DEFAULT_CATALOG_PATH

    try:
        data = json.loads(catalog_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ToolCatalogInitializationError(f"Failed to read tool data from {catalog_path}") from e
    except json.JSONDecodeError as e:
        raise ToolCatalogInitializationError(f"Invalid JSON in tool data {catalog_path}: {e}") from e

    if not isinstance(data, list):
        raise ToolCatalogInitializationError(f"Tool data in {catalog_path} must be a list of tools")

    try:
        catalog = ToolCatalog(parse_tool(entry) for entry in data)
    except (KeyError, ValueError, TypeError, InvalidOperation, RentalValidationError) as e:
        raise ToolCatalogInitializationError(f"Invalid tool entry in {catalog_path}: {e}") from e

    logger.info("Tool catalog loaded", extra={"path": str(catalog_path), "tool_count": len(catalog)})
    return catalog
