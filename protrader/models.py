"""View-model records built from CoinGecko payloads and simulator runs."""

from dataclasses import dataclass
from typing import Any, Optional

import pandas as pd


def _usd(block: Any) -> Optional[float]:
    """Pull the USD figure out of a ``{"usd": ...}`` block."""
    if isinstance(block, dict):
        block = block.get("usd")
    if block is None:
        return None
    return float(block)


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


@dataclass
class CoinSummary:
    """One row of the ``/coins/markets`` response."""
    id: str
    name: str
    symbol: str
    image: str
    current_price: float
    price_change_percentage_24h: Optional[float]
    total_volume: float
    market_cap: float

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "CoinSummary":
        return cls(
            id=payload["id"],
            name=payload.get("name", payload["id"]),
            symbol=payload.get("symbol", ""),
            image=payload.get("image", ""),
            current_price=float(payload.get("current_price") or 0),
            price_change_percentage_24h=_optional_float(
                payload.get("price_change_percentage_24h")
            ),
            total_volume=float(payload.get("total_volume") or 0),
            market_cap=float(payload.get("market_cap") or 0),
        )


@dataclass
class DetailedCoinData:
    """Market data section of the ``/coins/{id}`` response."""
    id: str
    symbol: str
    name: str
    current_price: float
    price_change_percentage_24h: Optional[float] = None
    market_cap_rank: Optional[int] = None
    market_cap: Optional[float] = None
    fully_diluted_valuation: Optional[float] = None
    total_volume: Optional[float] = None
    circulating_supply: Optional[float] = None
    total_supply: Optional[float] = None
    max_supply: Optional[float] = None
    low_24h: Optional[float] = None
    high_24h: Optional[float] = None
    ath: Optional[float] = None

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> Optional["DetailedCoinData"]:
        """Build from a coin payload, or None when it carries no market data."""
        market = payload.get("market_data")
        if not market:
            return None

        current_price = _usd(market.get("current_price"))
        if current_price is None:
            return None

        return cls(
            id=payload.get("id", ""),
            symbol=payload.get("symbol", ""),
            name=payload.get("name", ""),
            current_price=current_price,
            price_change_percentage_24h=_optional_float(
                market.get("price_change_percentage_24h")
            ),
            market_cap_rank=payload.get("market_cap_rank"),
            market_cap=_usd(market.get("market_cap")),
            fully_diluted_valuation=_usd(market.get("fully_diluted_valuation")),
            total_volume=_usd(market.get("total_volume")),
            circulating_supply=_optional_float(market.get("circulating_supply")),
            total_supply=_optional_float(market.get("total_supply")),
            max_supply=_optional_float(market.get("max_supply")),
            low_24h=_usd(market.get("low_24h")),
            high_24h=_usd(market.get("high_24h")),
            ath=_usd(market.get("ath")),
        )

    def range_position(self) -> Optional[float]:
        """Position of the current price inside the 24h range, 0-100.

        Returns None when the range is missing or has zero width.
        """
        if self.low_24h is None or self.high_24h is None:
            return None
        width = self.high_24h - self.low_24h
        if width <= 0:
            return None
        position = (self.current_price - self.low_24h) / width * 100
        return min(max(position, 0.0), 100.0)


@dataclass
class HistoricalSeries:
    """Parallel ``[timestamp_ms, value]`` pairs from ``/market_chart``."""
    prices: list[list[float]]
    market_caps: list[list[float]]
    total_volumes: list[list[float]]

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "HistoricalSeries":
        return cls(
            prices=list(payload.get("prices") or []),
            market_caps=list(payload.get("market_caps") or []),
            total_volumes=list(payload.get("total_volumes") or []),
        )

    def price_values(self) -> list[float]:
        return [float(p[1]) for p in self.prices]

    def volume_values(self) -> list[float]:
        return [float(v[1]) for v in self.total_volumes]

    def to_frame(self) -> pd.DataFrame:
        """Align the three series on timestamp.

        Returns:
            DataFrame with columns: date, price, market_cap, volume.
        """
        if not self.prices:
            return pd.DataFrame(columns=["date", "price", "market_cap", "volume"])

        df = pd.DataFrame(self.prices, columns=["timestamp", "price"])
        for name, series in (("market_cap", self.market_caps),
                             ("volume", self.total_volumes)):
            if not series:
                df[name] = float("nan")
                continue
            other = pd.DataFrame(series, columns=["timestamp", name])
            other = other.drop_duplicates(subset=["timestamp"])
            df = df.merge(other, on="timestamp", how="left")

        df["date"] = pd.to_datetime(df["timestamp"], unit="ms", utc=True)
        df = df.drop(columns=["timestamp"]).sort_values("date")
        df.reset_index(drop=True, inplace=True)
        return df[["date", "price", "market_cap", "volume"]]


@dataclass
class SimulationParams:
    """Simulator form input."""
    amount: float
    timeframe: str = "1 month"
    crypto: str = "BTC"
    investment_type: str = "one-time"
    risk_tolerance: float = 50


@dataclass
class SimulationResult:
    """Simulator output shown in the result cards."""
    total_invested: float
    projected_value: float
    potential_return: float
    best_case: float
    best_case_return: float
    worst_case: float
    worst_case_return: float
    volatility: float
    risk_level: str
    confidence: float
    confidence_label: str
    market_timing: str
    safety_recommendation: str
