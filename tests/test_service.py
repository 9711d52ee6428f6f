"""Unit tests for dispatch and the response envelope."""

import pytest
from unittest.mock import patch

from src.ai import AIUnavailableError
from src.bfhl.schemas import BfhlResponse, OperationKey, ValidatedRequest
from src.bfhl.service import dispatch
from src.exceptions import InvalidRequestError


class CannedProvider:
    name = "canned"

    async def generate(self, system_prompt: str, question: str):
        return "Mars."


class TestDispatch:
    """Tests for routing validated requests."""

    @pytest.mark.asyncio
    async def test_fibonacci(self):
        request = ValidatedRequest(OperationKey.fibonacci, 5)
        assert await dispatch(request, None) == [0, 1, 1, 2, 3]

    @pytest.mark.asyncio
    async def test_prime(self):
        request = ValidatedRequest(OperationKey.prime, [2, 3, 4, 5, 9, 11])
        assert await dispatch(request, None) == [2, 3, 5, 11]

    @pytest.mark.asyncio
    async def test_hcf(self):
        request = ValidatedRequest(OperationKey.hcf, [12, 18, 24])
        assert await dispatch(request, None) == 6

    @pytest.mark.asyncio
    async def test_lcm(self):
        request = ValidatedRequest(OperationKey.lcm, [4, 6])
        assert await dispatch(request, None) == 12

    @pytest.mark.asyncio
    async def test_ai(self):
        request = ValidatedRequest(OperationKey.ai, "Which planet is red?")
        assert await dispatch(request, CannedProvider()) == "Mars"

    @pytest.mark.asyncio
    async def test_ai_without_provider(self):
        request = ValidatedRequest(OperationKey.ai, "Which planet is red?")

        with pytest.raises(AIUnavailableError):
            await dispatch(request, None)

    @pytest.mark.asyncio
    async def test_unknown_key_rejected(self):
        request = ValidatedRequest("square", 4)

        with pytest.raises(InvalidRequestError) as exc_info:
            await dispatch(request, None)

        assert exc_info.value.message == "Unhandled key"

    @pytest.mark.asyncio
    async def test_kernel_failure_becomes_invalid_request(self):
        """Unexpected kernel errors surface as 400-class errors with their message."""
        request = ValidatedRequest(OperationKey.hcf, [12, 18])

        with patch.dict(
            "src.bfhl.service.KERNEL_HANDLERS",
            {OperationKey.hcf: lambda values: 1 // 0},
        ):
            with pytest.raises(InvalidRequestError) as exc_info:
                await dispatch(request, None)

        assert "division" in exc_info.value.message


class TestBfhlResponse:
    """Tests for the envelope shape."""

    def test_success_shape(self):
        body = BfhlResponse.success("me@example.com", [0, 1]).render()

        assert body == {"is_success": True, "official_email": "me@example.com", "data": [0, 1]}

    def test_success_with_zero_result(self):
        body = BfhlResponse.success("me@example.com", 0).render()
        assert body["data"] == 0

    def test_success_without_data(self):
        body = BfhlResponse.success("me@example.com").render()
        assert body == {"is_success": True, "official_email": "me@example.com"}

    def test_failure_shape(self):
        body = BfhlResponse.failure(None, "Unsupported key provided").render()

        assert body == {
            "is_success": False,
            "official_email": None,
            "error": "Unsupported key provided",
        }

    def test_failure_with_details(self):
        body = BfhlResponse.failure("me@example.com", "AI service error", details="HTTP 500").render()

        assert body["details"] == "HTTP 500"
        assert "data" not in body
