"""Talent directory endpoint - filtered list of online models."""

import json
import asyncio
from pydantic import ValidationError

from src.models.talent import AdvancedFilters, TalentCategory
from src.services.talent_directory import load_talents, load_thumbnails
from src.services.talent_filters import DirectoryView
from src.utils.errors import ElgraceError
from src.utils.logging import get_structured_logger, correlation_context, setup_logging

setup_logging()
logger = get_structured_logger(__name__)


def _response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def _flag(value) -> bool:
    return str(value or "").lower() in ("1", "true", "yes")


def _int_param(query: dict, name: str, default: int) -> int:
    """Integer query parameter; missing or blank means ``default``."""
    value = str(query.get(name) or "").strip()
    return int(value) if value else default


def build_view(query: dict) -> DirectoryView:
    """Directory filter state from query parameters.

    Raises ValueError (or ValidationError) on malformed values.
    """
    view = DirectoryView()
    if _flag(query.get("advanced")):
        view.toggle_advanced()
        view.filters = AdvancedFilters(
            location=query.get("location") or "",
            min_age=_int_param(query, "min_age", 0),
            max_age=_int_param(query, "max_age", 80),
            gender=query.get("gender") or "All",
            min_height=_int_param(query, "min_height", 0),
        )
    # Category is applied after the panel toggle, which resets it to All.
    view.select_category(query.get("category", TalentCategory.ALL.value))
    return view


async def list_talents(query: dict) -> list[dict]:
    view = build_view(query)
    talents = await load_talents()
    if _flag(query.get("thumbnails")):
        talents = await load_thumbnails(talents)
    return [talent.model_dump(mode="json") for talent in view.apply(talents)]


def handler(request):
    """List talents matching the category and optional advanced filters."""
    with correlation_context():
        query = request.get("query", {}) or {}
        try:
            build_view(query)
        except (ValueError, ValidationError) as e:
            logger.warning("Invalid talent filter", error=str(e))
            return _response(400, {"error": "invalid filter", "detail": str(e)})

        try:
            try:
                loop = asyncio.get_event_loop()
                if loop.is_closed():
                    raise RuntimeError("event loop is closed")
            except RuntimeError:
                loop = asyncio.new_event_loop()
                asyncio.set_event_loop(loop)

            talents = loop.run_until_complete(list_talents(query))
        except ElgraceError as e:
            logger.error("Failed to load talents", error=str(e))
            return _response(502, {"error": "failed to load talents"})
        except Exception as e:
            logger.error("Unexpected error listing talents", exc_info=True, error=str(e))
            return _response(500, {"error": "internal error"})

        return _response(200, {"talents": talents, "count": len(talents)})
