"""HTTP client for the driver identity backend.

The backend verifies the driver's verifiable presentation and answers
POST /driver/verify with:

    {"valid": bool, "holder": "<did>", "credential_count": int}
"""

from __future__ import annotations

from typing import Any

import httpx

from border_compliance.application.ports.identity_verifier import (
    IdentityVerifierProtocol,
)
from border_compliance.application.services.base import LoggingMixin
from border_compliance.domain.errors.verification import VerifierUnavailableError
from border_compliance.domain.models.compliance_state import IDENTITY_DOMAIN
from border_compliance.domain.models.verification import DriverIdentityResult

VERIFY_PATH = "/driver/verify"


class HttpIdentityVerifier(IdentityVerifierProtocol, LoggingMixin):
    """Identity verifier backed by the identity service.

    Example:
        async with HttpIdentityVerifier("http://localhost:3002") as verifier:
            result = await verifier.verify_driver()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize client.

        Args:
            base_url: Identity service base URL.
            timeout: Request timeout in seconds.
            transport: Optional transport override (tests).
        """
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )
        self._init_logger(component="identity")

    async def __aenter__(self) -> HttpIdentityVerifier:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def verify_driver(self) -> DriverIdentityResult:
        url = f"{self.base_url}{VERIFY_PATH}"
        log = self._log_operation("verify_driver", url=url)
        try:
            response = await self._client.post(VERIFY_PATH)
        except httpx.HTTPError as exc:
            log.error("identity_service_unreachable", error=str(exc))
            raise VerifierUnavailableError(IDENTITY_DOMAIN, url, str(exc)) from exc

        if response.is_error:
            detail = f"HTTP {response.status_code}"
            if response.text:
                detail = f"{detail} - {response.text}"
            log.error("identity_service_error", status_code=response.status_code)
            raise VerifierUnavailableError(IDENTITY_DOMAIN, url, detail)

        try:
            data: Any = response.json()
        except ValueError as exc:
            raise VerifierUnavailableError(IDENTITY_DOMAIN, url, "invalid JSON response") from exc

        if not isinstance(data, dict):
            log.error("identity_service_bad_payload", payload_type=type(data).__name__)
            raise VerifierUnavailableError(IDENTITY_DOMAIN, url, "response is not a JSON object")

        try:
            credential_count = int(data.get("credential_count", 0))
        except (TypeError, ValueError) as exc:
            raise VerifierUnavailableError(
                IDENTITY_DOMAIN, url, "credential_count is not an integer"
            ) from exc

        return DriverIdentityResult(
            verified=bool(data.get("valid", False)),
            driver_did=str(data.get("holder", "")),
            credential_count=credential_count,
        )
