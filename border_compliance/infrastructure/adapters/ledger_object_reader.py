"""Read-only access to ledger objects over JSON-RPC.

Only the declared fields of a Move object are returned. Callers read
public identifiers and state flags; they never touch owner or
commercial content.
"""

from __future__ import annotations

from itertools import count
from typing import Any

import httpx

from border_compliance.application.services.base import LoggingMixin

GET_OBJECT_METHOD = "iota_getObject"
MOVE_OBJECT = "moveObject"


class MalformedLedgerResponseError(ValueError):
    """The node answered, but not with a JSON-RPC object response."""


class LedgerObjectReader(LoggingMixin):
    """Fetches Move object fields from a ledger RPC node.

    Example:
        async with LedgerObjectReader("https://api.testnet.iota.cafe") as reader:
            fields = await reader.get_object_fields("0xabc...")
    """

    def __init__(
        self,
        rpc_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.rpc_url = rpc_url
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)
        self._request_ids = count(1)
        self._init_logger(component="ledger")

    async def __aenter__(self) -> LedgerObjectReader:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def get_object_fields(self, object_id: str) -> dict[str, Any] | None:
        """Fetch the fields of a Move object.

        Args:
            object_id: Ledger object id (0x-prefixed hex).

        Returns:
            The object's field map, or None if the object does not exist
            or is not a Move object.

        Raises:
            httpx.HTTPError: If the node cannot be reached or answers
                with an error status.
            MalformedLedgerResponseError: If the body is not JSON or is
                not shaped like an object response.
        """
        log = self._log_operation("get_object", object_id=object_id)
        response = await self._client.post(
            self.rpc_url,
            json={
                "jsonrpc": "2.0",
                "id": next(self._request_ids),
                "method": GET_OBJECT_METHOD,
                "params": [object_id, {"showContent": True}],
            },
        )
        response.raise_for_status()
        try:
            body = response.json()
        except ValueError as exc:
            log.error("invalid_rpc_response", status_code=response.status_code)
            raise MalformedLedgerResponseError("invalid JSON response") from exc

        content = _lookup(body, "result", "data", "content")
        if not content or content.get("dataType") != MOVE_OBJECT:
            rpc_error = body.get("error") if isinstance(body, dict) else None
            log.info("object_not_found", rpc_error=rpc_error)
            return None

        fields = content.get("fields") or {}
        if not isinstance(fields, dict):
            log.error("invalid_object_fields", fields_type=type(fields).__name__)
            raise MalformedLedgerResponseError("object fields are not a JSON object")
        return dict(fields)


def _lookup(body: Any, *path: str) -> dict[str, Any] | None:
    """Follow nested keys, or raise if a present level is not a JSON object."""
    node = body
    for key in path:
        if not isinstance(node, dict):
            raise MalformedLedgerResponseError(
                f"expected a JSON object, got {type(node).__name__}"
            )
        node = node.get(key)
        if not node:
            return None
    if not isinstance(node, dict):
        raise MalformedLedgerResponseError(
            f"expected a JSON object, got {type(node).__name__}"
        )
    return node
