"""Fetch market data from the public CoinGecko API.

Every function performs a single GET and returns the parsed JSON payload, or
None on any failure (non-2xx status, network error, malformed body). Errors
are logged, never raised: callers treat None as "data unavailable".
"""

import logging
from typing import Any, Optional

import requests

from protrader.config import (
    COIN_ID_MAP,
    COINGECKO_API_URL,
    HISTORY_DAYS,
    LOG_DIR,
    REQUEST_TIMEOUT,
    TRACKED_COIN_IDS,
    VS_CURRENCY,
)
from protrader.models import CoinSummary, HistoricalSeries

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Configure logging to both console and file."""
    root_logger = logging.getLogger()
    # Streamlit reruns the page script; attach handlers only once
    if any(isinstance(h, logging.FileHandler) for h in root_logger.handlers):
        return

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = LOG_DIR / "protrader.log"

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(formatter)
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.INFO)

    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)


def resolve_coin_id(coin_id: str) -> str:
    """Map ticker shorthands (``btc``) to CoinGecko ids (``bitcoin``)."""
    return COIN_ID_MAP.get(coin_id.lower(), coin_id.lower())


def _get_json(path: str, params: dict[str, Any], what: str) -> Optional[Any]:
    url = f"{COINGECKO_API_URL}{path}"
    try:
        response = requests.get(url, params=params, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
        return response.json()
    except requests.RequestException as e:
        logger.error("Error fetching %s: %s", what, e)
        return None
    except ValueError as e:
        logger.error("Malformed %s response: %s", what, e)
        return None


def get_crypto_data() -> Optional[list[dict[str, Any]]]:
    """Fetch market summaries for the tracked coins.

    Returns:
        List of ``/coins/markets`` rows ordered by market cap, or None.
    """
    params = {
        "vs_currency": VS_CURRENCY,
        "ids": ",".join(TRACKED_COIN_IDS),
        "order": "market_cap_desc",
        "per_page": len(TRACKED_COIN_IDS),
        "page": 1,
        "sparkline": "false",
        "price_change_percentage": "24h",
        "locale": "en",
    }
    return _get_json("/coins/markets", params, "crypto data")


def get_coin_summaries() -> list[CoinSummary]:
    """Tracked coin summaries, or an empty list when the API is unavailable."""
    data = get_crypto_data()
    if not data:
        return []
    summaries = []
    for row in data:
        try:
            summaries.append(CoinSummary.from_api(row))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping malformed market row: %s", e)
    return summaries


def get_detailed_coin_data(coin_id: str) -> Optional[dict[str, Any]]:
    """Fetch the detail payload for one coin.

    Args:
        coin_id: CoinGecko id or ticker shorthand (e.g. "btc").

    Returns:
        Parsed ``/coins/{id}`` payload, or None.
    """
    mapped_id = resolve_coin_id(coin_id)
    params = {
        "localization": "false",
        "tickers": "false",
        "market_data": "true",
        "community_data": "false",
        "developer_data": "false",
        "sparkline": "false",
    }
    return _get_json(f"/coins/{mapped_id}", params, "detailed coin data")


def get_historical_data(coin_id: str, days: int = HISTORY_DAYS) -> Optional[HistoricalSeries]:
    """Fetch daily-ish price/market-cap/volume history.

    Args:
        coin_id: CoinGecko id or ticker shorthand.
        days: Look-back window in days.

    Returns:
        HistoricalSeries, or None.
    """
    params = {"vs_currency": VS_CURRENCY, "days": days}
    data = _get_json(
        f"/coins/{resolve_coin_id(coin_id)}/market_chart", params, "historical data"
    )
    if not isinstance(data, dict):
        return None
    return HistoricalSeries.from_api(data)


def get_chart_data(
    coin_id: str,
    days: str = "1",
    interval: Optional[str] = None,
) -> Optional[HistoricalSeries]:
    """Fetch market-chart data for the trading chart.

    Args:
        coin_id: CoinGecko id or ticker shorthand.
        days: Look-back window as accepted by the API ("1", "7", "max").
        interval: Optional granularity, e.g. "daily".

    Returns:
        HistoricalSeries, or None.
    """
    params: dict[str, Any] = {"vs_currency": VS_CURRENCY, "days": days}
    if interval:
        params["interval"] = interval
    data = _get_json(
        f"/coins/{resolve_coin_id(coin_id)}/market_chart", params, "chart data"
    )
    if not isinstance(data, dict):
        return None
    return HistoricalSeries.from_api(data)
