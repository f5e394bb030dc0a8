"""Load-state helpers shared by the Streamlit pages."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

import pandas as pd

from protrader.config import HISTORY_DAYS
from protrader.market_data import get_detailed_coin_data, get_historical_data
from protrader.models import DetailedCoinData, HistoricalSeries

logger = logging.getLogger(__name__)


class LoadState(str, Enum):
    LOADED = "loaded"
    ERROR = "error"


@dataclass
class CoinDetailView:
    state: LoadState
    coin: Optional[DetailedCoinData] = None
    history: Optional[pd.DataFrame] = None


def load_coin_view(
    coin_id: str,
    fetch_detail: Callable[[str], Optional[dict]] = get_detailed_coin_data,
    fetch_history: Callable[..., Optional[HistoricalSeries]] = get_historical_data,
    days: int = HISTORY_DAYS,
) -> CoinDetailView:
    """Fetch everything the coin detail page shows.

    A missing payload, or one without market data, resolves to the ERROR
    state. Missing history only leaves the price chart empty.
    """
    payload = fetch_detail(coin_id)
    coin = DetailedCoinData.from_api(payload) if payload else None
    if coin is None:
        logger.warning("No market data for coin %s", coin_id)
        return CoinDetailView(state=LoadState.ERROR)

    series = fetch_history(coin.id or coin_id, days=days)
    history = series.to_frame() if series is not None else None
    return CoinDetailView(state=LoadState.LOADED, coin=coin, history=history)
