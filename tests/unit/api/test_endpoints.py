"""Tests for the preview API endpoints."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from swapcore.amm.pricing import ConstantProductAMM
from swapcore.api.endpoints import get_amm
from swapcore.api.main import app
from swapcore.config import AmmConfig
from tests.helpers.constants import TOKEN_A, TOKEN_B, TOKEN_C


@pytest.fixture
def client(monkeypatch) -> Iterator[TestClient]:
    for name in ("SWAPCORE_FEE_NUMERATOR", "SWAPCORE_FEE_DENOMINATOR"):
        monkeypatch.delenv(name, raising=False)
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealth:
    def test_reports_fee(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "fee": "997/1000"}


class TestSwapPreviewEndpoint:
    """Tests for POST /swap/preview."""

    def test_forward(self, client: TestClient) -> None:
        response = client.post(
            "/swap/preview",
            json={
                "mode": "forward",
                "amount": "1000",
                "reserveIn": "1000000",
                "reserveOut": "2000000",
            },
        )

        assert response.status_code == 200
        assert response.json() == {
            "amountIn": "1000",
            "amountOut": "1992",
            "minAmountOut": "1982",
            "error": None,
        }

    def test_reverse(self, client: TestClient) -> None:
        response = client.post(
            "/swap/preview",
            json={"mode": "reverse", "amount": "90", "reserveIn": "1000", "reserveOut": "1000"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["amountIn"] == "100"
        assert data["minAmountOut"] == "0"

    def test_missing_amount(self, client: TestClient) -> None:
        response = client.post("/swap/preview", json={"reserveIn": "1000", "reserveOut": "1000"})

        assert response.status_code == 200
        assert response.json()["error"] == "missing_liquidity_or_input"

    def test_reverse_beyond_reserve_is_conflict(self, client: TestClient) -> None:
        response = client.post(
            "/swap/preview",
            json={"mode": "reverse", "amount": "1000", "reserveIn": "1000", "reserveOut": "1000"},
        )

        assert response.status_code == 409
        assert response.json()["error"] == "insufficient_liquidity"
        assert "detail" in response.json()

    def test_conflict_body_is_documented(self, client: TestClient) -> None:
        schema = client.get("/openapi.json").json()

        responses = schema["paths"]["/swap/preview"]["post"]["responses"]
        assert responses["409"]["content"]["application/json"]["schema"] == {
            "$ref": "#/components/schemas/ErrorResponse"
        }
        assert set(schema["components"]["schemas"]["ErrorResponse"]["required"]) == {
            "error",
            "detail",
        }

    def test_slippage_out_of_range(self, client: TestClient) -> None:
        response = client.post(
            "/swap/preview",
            json={"amount": "1", "reserveIn": "1", "reserveOut": "1", "slippageBps": 10_001},
        )

        assert response.status_code == 422

    def test_negative_amount_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/swap/preview",
            json={"amount": "-1", "reserveIn": "1000", "reserveOut": "1000"},
        )

        assert response.status_code == 422

    def test_fee_tier_override(self, client: TestClient) -> None:
        config = AmmConfig(fee_numerator=9975, fee_denominator=10_000)
        app.dependency_overrides[get_amm] = lambda: ConstantProductAMM(config)

        response = client.post(
            "/swap/preview",
            json={"amount": "10000", "reserveIn": "1000000", "reserveOut": "1000000"},
        )

        assert response.json()["amountOut"] == "9876"


class TestLiquidityPlanEndpoint:
    """Tests for POST /liquidity/plan."""

    def test_plan(self, client: TestClient) -> None:
        response = client.post(
            "/liquidity/plan",
            json={
                "amountADesired": "1000",
                "amountBDesired": "2001",
                "reserveA": "1000",
                "reserveB": "2000",
            },
        )

        assert response.status_code == 200
        assert response.json() == {
            "amountA": "1000",
            "amountB": "2000",
            "amountAMin": "995",
            "amountBMin": "1990",
        }

    def test_infeasible_ratio(self, client: TestClient) -> None:
        response = client.post(
            "/liquidity/plan",
            json={
                "amountADesired": "50",
                "amountBDesired": "200",
                "reserveA": "1000",
                "reserveB": "2000",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["error"] == "ratio_infeasible"
        assert "amountA" not in data

    def test_missing_input_reports_message(self, client: TestClient) -> None:
        """A rejected plan carries the error and message and no amounts."""
        response = client.post(
            "/liquidity/plan",
            json={
                "amountADesired": "0",
                "amountBDesired": "0",
                "reserveA": "1000",
                "reserveB": "2000",
            },
        )

        assert response.status_code == 200
        assert response.json() == {
            "error": "missing_input",
            "message": "At least one token amount is required.",
        }


class TestRouteEndpoint:
    """Tests for POST /route."""

    def test_multihop(self, client: TestClient) -> None:
        response = client.post(
            "/route",
            json={
                "pools": [
                    {"token0": TOKEN_A, "token1": TOKEN_B},
                    {"token0": TOKEN_B, "token1": TOKEN_C},
                ],
                "tokenIn": TOKEN_A,
                "tokenOut": TOKEN_C,
            },
        )

        assert response.status_code == 200
        assert response.json() == {"path": [TOKEN_A, TOKEN_B, TOKEN_C], "isMultihop": True}

    def test_no_route(self, client: TestClient) -> None:
        response = client.post(
            "/route",
            json={"pools": [{"token0": TOKEN_A, "token1": TOKEN_B}], "tokenIn": TOKEN_A, "tokenOut": TOKEN_C},
        )

        assert response.status_code == 200
        assert response.json() == {"path": None, "isMultihop": False}

    def test_invalid_address(self, client: TestClient) -> None:
        response = client.post(
            "/route",
            json={"pools": [], "tokenIn": "0x1234", "tokenOut": TOKEN_C},
        )

        assert response.status_code == 422
