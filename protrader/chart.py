"""Trading chart: indicator columns, signals, analysis tabs and the figure.

The chart runs on live CoinGecko market-chart data when it is available and
falls back to a small built-in sample series otherwise.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional

import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from protrader.config import EMA_PERIOD, RSI_PERIOD, SMA_PERIOD
from protrader.formatting import format_currency
from protrader.indicators import ema, loss_free, macd, rsi, sma
from protrader.market_data import get_chart_data
from protrader.models import HistoricalSeries

logger = logging.getLogger(__name__)


class Indicator(str, Enum):
    """Toggleable chart overlays, in button order."""
    MACD = "macd"
    RSI = "rsi"
    VOLUME = "volume"

    @property
    def label(self) -> str:
        return self.value.upper()


class AnalysisType(str, Enum):
    """Analysis tabs, in display order."""
    TREND = "trend"
    MOMENTUM = "momentum"
    VOLUME = "volume"


@dataclass
class Analysis:
    title: str
    content: str
    recommendation: str


# label -> days of history
TIMEFRAMES = {"1D": 1, "1W": 7, "1M": 30}

OVERBOUGHT = 70
OVERSOLD = 30
HIGH_VOLUME_RATIO = 1.2
LOW_VOLUME_RATIO = 0.8

SAMPLE_TRADING_DATA = [
    {"day": "1", "price": 42000, "volume": 28000, "macd": 100, "signal": "wait",
     "rsi": 45, "sma20": 41800, "ema50": 41600, "ai_confidence": 65},
    {"day": "2", "price": 42500, "volume": 30000, "macd": 120, "signal": "buy",
     "rsi": 55, "sma20": 42000, "ema50": 41800, "ai_confidence": 70},
    {"day": "3", "price": 43000, "volume": 35000, "macd": 150, "signal": "buy",
     "rsi": 60, "sma20": 42300, "ema50": 42000, "ai_confidence": 75},
    {"day": "4", "price": 42800, "volume": 25000, "macd": 130, "signal": "hold",
     "rsi": 58, "sma20": 42500, "ema50": 42200, "ai_confidence": 60},
    {"day": "5", "price": 43500, "volume": 40000, "macd": 180, "signal": "buy",
     "rsi": 65, "sma20": 42800, "ema50": 42400, "ai_confidence": 80},
]

# Shown when a tab cannot be derived from the data
DEFAULT_ANALYSIS = {
    AnalysisType.TREND: Analysis(
        "Market Trend",
        "We've spotted a strong upward trend. The next resistance level is around $43,500.",
        "Consider buying on small dips",
    ),
    AnalysisType.MOMENTUM: Analysis(
        "Market Momentum",
        "The market is showing positive momentum. There's still room for growth.",
        "Stay optimistic, but be cautious",
    ),
    AnalysisType.VOLUME: Analysis(
        "Trading Volume",
        "We're seeing higher than average trading volume, which supports the "
        "current price movement.",
        "Watch for continued high volume",
    ),
}


def sample_frame() -> pd.DataFrame:
    """The built-in sample series with its precomputed indicators."""
    df = pd.DataFrame(SAMPLE_TRADING_DATA)
    df["date"] = "Day " + df["day"]
    return df.drop(columns=["day"])


def _signal_for(row: pd.Series) -> str:
    value = row["rsi"]
    if pd.isna(value):
        return "wait"
    if value <= OVERSOLD:
        return "buy"
    if value >= OVERBOUGHT:
        return "sell"
    if pd.notna(row["sma20"]) and pd.notna(row["macd"]):
        if row["price"] > row["sma20"] and row["macd"] > 0:
            return "buy"
        if row["price"] < row["sma20"] and row["macd"] < 0:
            return "wait"
    return "hold"


def build_indicator_frame(frame: pd.DataFrame) -> pd.DataFrame:
    """Add indicator, signal and confidence columns to a price frame.

    Args:
        frame: DataFrame with at least ``price``; ``volume`` and ``date`` are
            carried through.

    Returns:
        Copy with columns sma20, ema50, rsi, macd, macd_signal,
        macd_histogram, signal and ai_confidence added.
    """
    df = frame.copy().reset_index(drop=True)
    prices = df["price"]

    df["sma20"] = sma(prices, SMA_PERIOD)
    df["ema50"] = ema(prices, EMA_PERIOD)
    # a window with no losing delta is fully overbought whatever the price scale
    df["rsi"] = rsi(prices, RSI_PERIOD).mask(loss_free(prices, RSI_PERIOD), 100.0)
    macd_df = macd(prices)
    df["macd"] = macd_df["macd"]
    df["macd_signal"] = macd_df["signal"]
    df["macd_histogram"] = macd_df["histogram"]

    if df.empty:
        df["signal"] = pd.Series(dtype=str)
        df["ai_confidence"] = pd.Series(dtype=float)
        return df

    df["signal"] = df.apply(_signal_for, axis=1)
    # distance from a neutral RSI reads as conviction
    df["ai_confidence"] = (50 + (df["rsi"] - 50).abs()).clip(upper=95).round()
    return df


def load_chart_frame(
    coin_id: str,
    timeframe: str,
    fetch: Callable[..., Optional[HistoricalSeries]] = get_chart_data,
) -> tuple[pd.DataFrame, bool]:
    """Fetch chart history and compute indicators.

    Returns:
        Tuple of (frame, is_live). Falls back to the sample series when the
        fetch fails or returns no prices.
    """
    days = TIMEFRAMES.get(timeframe, TIMEFRAMES["1D"])
    history = fetch(coin_id, days=str(days))
    if history is None or not history.prices:
        logger.info("Chart data unavailable for %s, showing sample data", coin_id)
        return sample_frame(), False
    return build_indicator_frame(history.to_frame()), True


def _latest(frame: pd.DataFrame, column: str) -> Optional[float]:
    if column not in frame.columns:
        return None
    values = frame[column].dropna()
    if values.empty:
        return None
    return float(values.iloc[-1])


def _trend_analysis(frame: pd.DataFrame) -> Optional[Analysis]:
    price = _latest(frame, "price")
    average = _latest(frame, "sma20")
    if price is None or average is None or average == 0:
        return None

    gap = (price - average) / average
    resistance = format_currency(float(frame["price"].max()))
    if gap >= 0:
        return Analysis(
            "Market Trend",
            f"We've spotted an upward trend: price is {gap:.1%} above its "
            f"{SMA_PERIOD}-period average. The next resistance level is around {resistance}.",
            "Consider buying on small dips",
        )
    return Analysis(
        "Market Trend",
        f"Price is {abs(gap):.1%} below its {SMA_PERIOD}-period average, "
        "so the short-term trend is down.",
        "Wait for the trend to turn before adding",
    )


def _momentum_analysis(frame: pd.DataFrame) -> Optional[Analysis]:
    value = _latest(frame, "rsi")
    if value is None:
        return None
    if value >= OVERBOUGHT:
        return Analysis(
            "Market Momentum",
            f"RSI is {value:.0f}, which is overbought territory.",
            "Stay cautious, a pullback is likely",
        )
    if value <= OVERSOLD:
        return Analysis(
            "Market Momentum",
            f"RSI is {value:.0f}, which is oversold territory.",
            "Look for a rebound before buying",
        )
    mood = "positive" if value >= 50 else "negative"
    return Analysis(
        "Market Momentum",
        f"The market is showing {mood} momentum (RSI {value:.0f}). "
        "There's still room to move either way.",
        "Stay optimistic, but be cautious" if mood == "positive" else "Be patient",
    )


def _volume_analysis(frame: pd.DataFrame) -> Optional[Analysis]:
    if "volume" not in frame.columns:
        return None
    volumes = frame["volume"].dropna()
    if len(volumes) < 2 or volumes.mean() <= 0:
        return None

    ratio = float(volumes.iloc[-1] / volumes.mean())
    if ratio >= HIGH_VOLUME_RATIO:
        return Analysis(
            "Trading Volume",
            f"Volume is {ratio:.1f}x its average, which supports the current price movement.",
            "Watch for continued high volume",
        )
    if ratio <= LOW_VOLUME_RATIO:
        return Analysis(
            "Trading Volume",
            f"Volume is only {ratio:.1f}x its average; the move lacks conviction.",
            "Wait for volume to confirm",
        )
    return Analysis(
        "Trading Volume",
        "Trading volume is close to its average.",
        "No volume signal either way",
    )


_ANALYSERS = {
    AnalysisType.TREND: _trend_analysis,
    AnalysisType.MOMENTUM: _momentum_analysis,
    AnalysisType.VOLUME: _volume_analysis,
}


def market_analysis(frame: pd.DataFrame) -> dict[AnalysisType, Analysis]:
    """Build the analysis tabs from the latest indicator values."""
    result = {}
    for analysis_type in AnalysisType:
        analysis = _ANALYSERS[analysis_type](frame)
        result[analysis_type] = analysis or DEFAULT_ANALYSIS[analysis_type]
    return result


def build_figure(frame: pd.DataFrame, indicators: Iterable[Indicator]) -> go.Figure:
    """Price chart with moving averages and the enabled indicators.

    Args:
        frame: Output of build_indicator_frame() or sample_frame().
        indicators: Enabled toggles.

    Returns:
        Plotly figure with one row for price (and volume) plus one row per
        enabled RSI / MACD panel.
    """
    enabled = set(indicators)
    panels = [ind for ind in (Indicator.RSI, Indicator.MACD) if ind in enabled]
    rows = 1 + len(panels)
    heights = [0.6] + [0.4 / len(panels)] * len(panels) if panels else [1.0]

    fig = make_subplots(
        rows=rows,
        cols=1,
        shared_xaxes=True,
        vertical_spacing=0.04,
        row_heights=heights,
        specs=[[{"secondary_y": True}]] + [[{}] for _ in panels],
    )
    x = frame["date"]

    fig.add_trace(go.Scatter(x=x, y=frame["price"], name="Price",
                             line=dict(color="#3b82f6", width=2)),
                  row=1, col=1, secondary_y=False)
    fig.add_trace(go.Scatter(x=x, y=frame["sma20"], name=f"SMA {SMA_PERIOD}",
                             line=dict(color="#22c55e", width=1, dash="dash")),
                  row=1, col=1, secondary_y=False)
    fig.add_trace(go.Scatter(x=x, y=frame["ema50"], name=f"EMA {EMA_PERIOD}",
                             line=dict(color="#eab308", width=1, dash="dash")),
                  row=1, col=1, secondary_y=False)

    if Indicator.VOLUME in enabled and "volume" in frame.columns:
        fig.add_trace(go.Bar(x=x, y=frame["volume"], name="Volume",
                             marker_color="#3b82f6", opacity=0.3),
                      row=1, col=1, secondary_y=True)

    for row, panel in enumerate(panels, start=2):
        if panel is Indicator.RSI:
            fig.add_trace(go.Scatter(x=x, y=frame["rsi"], name="RSI",
                                     line=dict(color="#a855f7")),
                          row=row, col=1)
            fig.add_hline(y=OVERBOUGHT, line_dash="dot", line_color="#ef4444", row=row, col=1)
            fig.add_hline(y=OVERSOLD, line_dash="dot", line_color="#22c55e", row=row, col=1)
        else:
            fig.add_trace(go.Scatter(x=x, y=frame["macd"], name="MACD",
                                     line=dict(color="#db2777")),
                          row=row, col=1)
            if "macd_histogram" in frame.columns:
                fig.add_trace(go.Bar(x=x, y=frame["macd_histogram"], name="Histogram",
                                     marker_color="#64748b", opacity=0.5),
                              row=row, col=1)
            if "macd_signal" in frame.columns:
                fig.add_trace(go.Scatter(x=x, y=frame["macd_signal"], name="Signal",
                                         line=dict(color="#f97316", dash="dot")),
                              row=row, col=1)

    fig.update_layout(
        height=500 + 120 * len(panels),
        hovermode="x unified",
        template="plotly_dark",
        margin=dict(t=20, r=30, l=20, b=5),
    )
    return fig
