"""Model code allocation (M-1000001, M-1000002, ...)."""

import re
import time
from typing import Any, Optional

from src.services.supabase_client import SupabaseClient, PROFILE_TABLE
from src.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)

MODEL_CODE_PREFIX = "M-"
FIRST_MODEL_CODE = "M-1000001"
NEXT_CODE_RPC = "next_model_code"

_MODEL_CODE = re.compile(r"^M-(\d+)$")


def parse_model_code(code: Any) -> Optional[int]:
    """Numeric suffix of an ``M-<digits>`` code, or None."""
    if not isinstance(code, str):
        return None
    match = _MODEL_CODE.match(code.strip())
    return int(match.group(1)) if match else None


def format_model_code(number: int) -> str:
    return f"{MODEL_CODE_PREFIX}{number}"


def _timestamp_code() -> str:
    return format_model_code(int(time.time()))


def _rpc_value(data: Any) -> Optional[str]:
    """Pull the code out of an RPC payload (scalar, row or list of rows)."""
    if isinstance(data, list):
        data = data[0] if data else None
    if isinstance(data, dict):
        data = next(iter(data.values()), None)
    if data is None:
        return None
    code = str(data).strip()
    return code or None


async def _allocate_from_rpc(client) -> Optional[str]:
    result = client.rpc(NEXT_CODE_RPC, {}).execute()
    return _rpc_value(result.data)


async def _allocate_from_scan(client) -> Optional[str]:
    # Racy under concurrent writers; only used when the RPC is unavailable.
    # Codes are compared numerically: as text "M-999" sorts above "M-1000005".
    result = (
        client.table(PROFILE_TABLE)
        .select("model_code")
        .like("model_code", f"{MODEL_CODE_PREFIX}%")
        .execute()
    )
    numbers = [parse_model_code(row.get("model_code")) for row in result.data or []]
    numbers = [number for number in numbers if number is not None]
    if not numbers:
        return None
    highest = max(numbers)
    return format_model_code(highest + 1)


async def get_next_model_code() -> str:
    """Allocate the next model code.

    Tries the atomic server-side counter, then a scan of existing codes, then
    a timestamp code. Never raises.
    """
    try:
        async with SupabaseClient() as client:
            try:
                code = await _allocate_from_rpc(client)
                if code:
                    logger.info("Allocated model code from RPC", model_code=code)
                    return code
                logger.warning("Model code RPC returned no value")
            except Exception as e:
                logger.warning("Model code RPC failed, scanning existing codes", error=str(e))

            try:
                code = await _allocate_from_scan(client)
                if code:
                    logger.info("Allocated model code from scan", model_code=code)
                    return code
                logger.warning("No existing model codes found")
            except Exception as e:
                logger.warning("Model code scan failed", error=str(e))
    except Exception as e:
        logger.error("Supabase unavailable for model code allocation", error=str(e))

    code = _timestamp_code()
    logger.warning("Falling back to timestamp model code", model_code=code)
    return code
