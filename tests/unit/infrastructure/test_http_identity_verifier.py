"""Unit tests for HttpIdentityVerifier against httpx.MockTransport."""

import json

import httpx
import pytest

from border_compliance.domain.errors import VerifierUnavailableError
from border_compliance.infrastructure.adapters import HttpIdentityVerifier

BASE_URL = "http://identity.test"


def _verifier(handler) -> HttpIdentityVerifier:
    return HttpIdentityVerifier(BASE_URL, timeout=1.0, transport=httpx.MockTransport(handler))


class TestVerifyDriver:
    async def test_posts_to_verify_endpoint(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={"valid": True, "holder": "did:iota:tst:0xabc", "credential_count": 2},
            )

        async with _verifier(handler) as verifier:
            result = await verifier.verify_driver()

        assert seen[0].method == "POST"
        assert str(seen[0].url) == f"{BASE_URL}/driver/verify"
        assert result.verified is True
        assert result.driver_did == "did:iota:tst:0xabc"
        assert result.credential_count == 2

    async def test_invalid_presentation(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"valid": False, "holder": "", "credential_count": 0})

        async with _verifier(handler) as verifier:
            result = await verifier.verify_driver()

        assert result.verified is False

    async def test_error_status(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="backend starting")

        async with _verifier(handler) as verifier:
            with pytest.raises(VerifierUnavailableError) as exc_info:
                await verifier.verify_driver()

        assert exc_info.value.domain == "identity"
        assert "HTTP 503 - backend starting" in exc_info.value.detail

    async def test_unreachable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _verifier(handler) as verifier:
            with pytest.raises(VerifierUnavailableError) as exc_info:
                await verifier.verify_driver()

        assert exc_info.value.endpoint == f"{BASE_URL}/driver/verify"
        assert "connection refused" in str(exc_info.value)

    async def test_invalid_json(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"not json")

        async with _verifier(handler) as verifier:
            with pytest.raises(VerifierUnavailableError, match="invalid JSON"):
                await verifier.verify_driver()

    async def test_html_gateway_page(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>gateway</html>")

        async with _verifier(handler) as verifier:
            with pytest.raises(VerifierUnavailableError) as exc_info:
                await verifier.verify_driver()

        assert exc_info.value.domain == "identity"

    async def test_list_payload(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[])

        async with _verifier(handler) as verifier:
            with pytest.raises(VerifierUnavailableError, match="not a JSON object"):
                await verifier.verify_driver()

    @pytest.mark.parametrize("count", ["many", None, [1]])
    async def test_non_integer_credential_count(self, count: object) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            body = {"valid": True, "holder": "d", "credential_count": count}
            return httpx.Response(200, json=body)

        async with _verifier(handler) as verifier:
            with pytest.raises(VerifierUnavailableError, match="credential_count"):
                await verifier.verify_driver()

    async def test_trailing_slash_in_base_url(self) -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, content=json.dumps({"valid": True, "holder": "d"}))

        verifier = HttpIdentityVerifier(
            f"{BASE_URL}/", transport=httpx.MockTransport(handler)
        )
        result = await verifier.verify_driver()
        await verifier.close()

        assert seen == [f"{BASE_URL}/driver/verify"]
        assert result.credential_count == 0
