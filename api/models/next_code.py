"""Next model code endpoint used by the admin entry form."""

import json
import asyncio

from src.services.model_codes import get_next_model_code
from src.utils.logging import correlation_context, setup_logging

setup_logging()


def handler(request):
    """Return the next model code. Allocation never fails; it degrades."""
    with correlation_context():
        try:
            loop = asyncio.get_event_loop()
            if loop.is_closed():
                raise RuntimeError("event loop is closed")
        except RuntimeError:
            loop = asyncio.new_event_loop()
            asyncio.set_event_loop(loop)

        model_code = loop.run_until_complete(get_next_model_code())

        return {
            "statusCode": 200,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps({"model_code": model_code}),
        }
