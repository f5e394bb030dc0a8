"""Unit tests for models module."""

from dataclasses import fields

import pandas as pd
import pytest

from protrader.models import CoinSummary, DetailedCoinData, HistoricalSeries, SimulationResult


class TestCoinSummary:
    """Tests for CoinSummary.from_api."""

    def test_parses_row(self, sample_market_rows: list[dict]) -> None:
        """Test a market row is parsed."""
        coin = CoinSummary.from_api(sample_market_rows[0])
        assert coin.id == "bitcoin"
        assert coin.symbol == "btc"
        assert coin.market_cap == 1_320_000_000_000

    def test_missing_change(self, sample_market_rows: list[dict]) -> None:
        """Test a missing 24h change stays None."""
        coin = CoinSummary.from_api(sample_market_rows[2])
        assert coin.price_change_percentage_24h is None

    def test_missing_id_raises(self) -> None:
        """Test a row without an id is rejected."""
        with pytest.raises(KeyError):
            CoinSummary.from_api({"name": "Nameless"})


class TestDetailedCoinData:
    """Tests for DetailedCoinData."""

    def test_parses_usd_blocks(self, sample_coin_payload: dict) -> None:
        """Test USD figures are read from the market data blocks."""
        coin = DetailedCoinData.from_api(sample_coin_payload)
        assert coin.current_price == 67_000.0
        assert coin.market_cap == 1_320_000_000_000
        assert coin.low_24h == 65_000.0
        assert coin.high_24h == 69_000.0
        assert coin.ath == 73_750.0
        assert coin.market_cap_rank == 1
        assert coin.max_supply == 21_000_000.0

    def test_missing_market_data(self) -> None:
        """Test a payload without market data gives None."""
        assert DetailedCoinData.from_api({"id": "x", "name": "X", "symbol": "x"}) is None

    def test_optional_fields_default_none(self, sample_coin_payload: dict) -> None:
        """Test absent optional figures stay None."""
        market = sample_coin_payload["market_data"]
        del market["max_supply"]
        del market["ath"]
        market["fully_diluted_valuation"] = {}
        coin = DetailedCoinData.from_api(sample_coin_payload)
        assert coin.max_supply is None
        assert coin.ath is None
        assert coin.fully_diluted_valuation is None

    def test_range_position(self, sample_coin_payload: dict) -> None:
        """Test the price position inside the 24h range."""
        coin = DetailedCoinData.from_api(sample_coin_payload)
        # 67k inside 65k..69k
        assert coin.range_position() == pytest.approx(50.0)

    def test_range_position_degenerate(self) -> None:
        """Test a zero-width range has no position."""
        coin = DetailedCoinData(id="x", symbol="x", name="X", current_price=1.0,
                                low_24h=1.0, high_24h=1.0)
        assert coin.range_position() is None

    def test_range_position_clamped(self) -> None:
        """Test prices outside the range are clamped to 0-100."""
        coin = DetailedCoinData(id="x", symbol="x", name="X", current_price=12.0,
                                low_24h=8.0, high_24h=10.0)
        assert coin.range_position() == 100.0


class TestHistoricalSeries:
    """Tests for HistoricalSeries."""

    def test_to_frame(self, sample_history: HistoricalSeries) -> None:
        """Test series are merged into one frame by timestamp."""
        df = sample_history.to_frame()
        assert list(df.columns) == ["date", "price", "market_cap", "volume"]
        assert len(df) == 30
        assert df["price"].iloc[0] == 100.0
        assert df["date"].is_monotonic_increasing
        assert str(df["date"].dt.tz) == "UTC"

    def test_to_frame_missing_volumes(self) -> None:
        """Test missing volumes become a NaN column."""
        series = HistoricalSeries(prices=[[0, 1.0], [86_400_000, 2.0]],
                                  market_caps=[], total_volumes=[])
        df = series.to_frame()
        assert len(df) == 2
        assert df["volume"].isna().all()

    def test_to_frame_empty(self) -> None:
        """Test an empty series gives an empty frame with columns."""
        df = HistoricalSeries([], [], []).to_frame()
        assert df.empty
        assert list(df.columns) == ["date", "price", "market_cap", "volume"]

    def test_values(self, sample_history: HistoricalSeries) -> None:
        """Test price and volume values are extracted from the pairs."""
        assert sample_history.price_values()[-1] == 164.0
        assert len(sample_history.volume_values()) == 30

    def test_from_api_tolerates_missing_keys(self) -> None:
        """Test missing series default to empty lists."""
        series = HistoricalSeries.from_api({"prices": [[0, 1.0]]})
        assert series.total_volumes == []
        assert isinstance(series.to_frame(), pd.DataFrame)


class TestSimulationResult:
    """Tests for SimulationResult."""

    def test_fields_are_result_card_values(self) -> None:
        """Test the record holds exactly the values the result cards show."""
        assert [f.name for f in fields(SimulationResult)] == [
            "total_invested", "projected_value", "potential_return",
            "best_case", "best_case_return", "worst_case", "worst_case_return",
            "volatility", "risk_level", "confidence", "confidence_label",
            "market_timing", "safety_recommendation",
        ]
