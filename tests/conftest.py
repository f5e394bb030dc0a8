"""Test fixtures for Crypto Pro-Trader tests."""

from datetime import datetime, timezone
from typing import Any, Callable
from unittest.mock import MagicMock

import pytest
import requests

from protrader.models import HistoricalSeries


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Build a fake requests.Response with a status code and JSON body."""
    def _make(payload: Any = None, status_code: int = 200) -> MagicMock:
        response = MagicMock(spec=requests.Response)
        response.status_code = status_code
        response.ok = status_code < 400
        response.json.return_value = payload
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.HTTPError(
                f"{status_code} Client Error", response=response
            )
        else:
            response.raise_for_status.return_value = None
        return response

    return _make


@pytest.fixture
def sample_market_rows() -> list[dict]:
    """Sample /coins/markets response."""
    return [
        {
            "id": "bitcoin",
            "name": "Bitcoin",
            "symbol": "btc",
            "image": "https://assets.coingecko.com/coins/images/1/large/bitcoin.png",
            "current_price": 67_250.12,
            "price_change_percentage_24h": 2.41,
            "total_volume": 31_000_000_000,
            "market_cap": 1_320_000_000_000,
        },
        {
            "id": "ethereum",
            "name": "Ethereum",
            "symbol": "eth",
            "image": "https://assets.coingecko.com/coins/images/279/large/ethereum.png",
            "current_price": 3_480.55,
            "price_change_percentage_24h": -1.12,
            "total_volume": 15_000_000_000,
            "market_cap": 418_000_000_000,
        },
        {
            "id": "solana",
            "name": "Solana",
            "symbol": "sol",
            "image": "",
            "current_price": 145.3,
            "price_change_percentage_24h": None,
            "total_volume": 2_100_000_000,
            "market_cap": 67_000_000_000,
        },
    ]


@pytest.fixture
def sample_coin_payload() -> dict:
    """Sample /coins/{id} response (market data only)."""
    return {
        "id": "bitcoin",
        "symbol": "btc",
        "name": "Bitcoin",
        "market_cap_rank": 1,
        "market_data": {
            "current_price": {"usd": 67_000.0, "eur": 62_000.0},
            "price_change_percentage_24h": 2.5,
            "market_cap": {"usd": 1_320_000_000_000},
            "fully_diluted_valuation": {"usd": 1_410_000_000_000},
            "total_volume": {"usd": 31_000_000_000},
            "circulating_supply": 19_700_000.0,
            "total_supply": 21_000_000.0,
            "max_supply": 21_000_000.0,
            "low_24h": {"usd": 65_000.0},
            "high_24h": {"usd": 69_000.0},
            "ath": {"usd": 73_750.0},
        },
    }


@pytest.fixture
def sample_market_chart() -> dict:
    """Sample /market_chart response: 30 daily points, rising then falling."""
    base_ts = int(datetime(2025, 1, 1, tzinfo=timezone.utc).timestamp() * 1000)
    day_ms = 86_400_000

    prices, market_caps, volumes = [], [], []
    for i in range(30):
        ts = base_ts + i * day_ms
        if i <= 20:
            price = 100.0 + i * 5  # 100 -> 200
        else:
            price = 200.0 - (i - 20) * 4  # 200 -> 164
        prices.append([ts, price])
        market_caps.append([ts, price * 1_000_000])
        volumes.append([ts, 1_000_000 + i * 50_000])

    return {"prices": prices, "market_caps": market_caps, "total_volumes": volumes}


@pytest.fixture
def sample_history(sample_market_chart: dict) -> HistoricalSeries:
    return HistoricalSeries.from_api(sample_market_chart)


@pytest.fixture
def flat_history() -> HistoricalSeries:
    """History with a constant price and constant volume."""
    base_ts = int(datetime(2025, 1, 1, tzinfo=timezone.utc).timestamp() * 1000)
    points = [[base_ts + i * 86_400_000, 50.0] for i in range(30)]
    return HistoricalSeries(
        prices=points,
        market_caps=[[ts, 5_000_000.0] for ts, _ in points],
        total_volumes=[[ts, 250_000.0] for ts, _ in points],
    )
