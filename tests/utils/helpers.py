"""Test helper functions."""

import json
from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import httpx


def make_query(data=None, error: Optional[Exception] = None) -> MagicMock:
    """Chainable Supabase query mock whose execute() returns ``data``."""
    query = MagicMock()
    for method in ("select", "eq", "like", "order", "limit", "is_", "insert", "update", "upsert"):
        getattr(query, method).return_value = query
    if error is not None:
        query.execute.side_effect = error
    else:
        query.execute.return_value = MagicMock(data=data)
    return query


def make_rpc(data=None, error: Optional[Exception] = None) -> MagicMock:
    """Mock for ``client.rpc(...)`` returning an executable call."""
    call = MagicMock()
    if error is not None:
        call.execute.side_effect = error
    else:
        call.execute.return_value = MagicMock(data=data)
    return MagicMock(return_value=call)


def mock_http_client(handler) -> httpx.AsyncClient:
    """AsyncClient whose requests are answered by ``handler(request)``."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def create_vercel_request(
    method: str = "GET",
    path: str = "/api/talents",
    query: Dict[str, str] = None,
    body: Dict[str, Any] = None,
) -> Dict[str, Any]:
    """Create a Vercel request object for testing."""
    return {
        "method": method,
        "path": path,
        "headers": {"content-type": "application/json"},
        "body": json.dumps(body) if body is not None else "",
        "query": query or {},
    }
