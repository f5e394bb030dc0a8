"""Technical indicator arithmetic over price series.

Every helper returns a pandas Series aligned with its input: entries without
enough trailing history are NaN, later entries hold the windowed statistic.
Degenerate input (empty series, non-positive period) never raises; it yields
NaN values that callers guard before display.
"""

import logging
import math
from typing import Sequence, Union

import pandas as pd

from protrader.config import RSI_PERIOD

logger = logging.getLogger(__name__)

Values = Union[Sequence[float], pd.Series]


def _as_series(values: Values) -> pd.Series:
    if isinstance(values, pd.Series):
        return values.astype(float).reset_index(drop=True)
    return pd.Series(list(values), dtype=float)


def _empty_like(series: pd.Series) -> pd.Series:
    return pd.Series([math.nan] * len(series), dtype=float)


def sma(values: Values, period: int) -> pd.Series:
    """Simple moving average over a trailing window.

    Args:
        values: Price samples, oldest first.
        period: Window length.

    Returns:
        Series of the same length; the first ``period - 1`` entries are NaN.
    """
    series = _as_series(values)
    if period <= 0:
        return _empty_like(series)
    return series.rolling(window=period, min_periods=period).mean()


def ema(values: Values, period: int) -> pd.Series:
    """Exponential moving average seeded with the first window's SMA.

    Uses the recurrence ``ema[i] = (x[i] - ema[i-1]) * k + ema[i-1]`` with
    ``k = 2 / (period + 1)``.

    Args:
        values: Price samples, oldest first.
        period: Smoothing period.

    Returns:
        Series of the same length; the first ``period - 1`` entries are NaN.
    """
    series = _as_series(values)
    result = _empty_like(series)
    if period <= 0 or len(series) < period:
        return result

    k = 2 / (period + 1)
    prev = float(series.iloc[:period].mean())
    result.iloc[period - 1] = prev
    for i in range(period, len(series)):
        prev = (float(series.iloc[i]) - prev) * k + prev
        result.iloc[i] = prev
    return result


def _average_moves(series: pd.Series, period: int) -> tuple[pd.Series, pd.Series]:
    """Mean gain and mean absolute loss over the trailing ``period`` samples."""
    window = period - 1
    deltas = series.diff()
    gains = deltas.clip(lower=0).rolling(window=window, min_periods=window).mean()
    losses = (-deltas).clip(lower=0).rolling(window=window, min_periods=window).mean()
    return gains, losses


def rsi(values: Values, period: int = RSI_PERIOD) -> pd.Series:
    """Relative strength index over a trailing window of ``period`` samples.

    RS is the mean gain over the mean absolute loss of the ``period - 1``
    deltas inside the window; a zero mean loss is replaced by 1. The first
    ``period - 1`` entries are NaN.
    """
    series = _as_series(values)
    if period <= 1:
        return _empty_like(series)

    avg_gain, avg_loss = _average_moves(series, period)
    avg_loss = avg_loss.mask(avg_loss == 0, 1.0)

    rs = avg_gain / avg_loss
    return 100 - 100 / (1 + rs)


def loss_free(values: Values, period: int = RSI_PERIOD) -> pd.Series:
    """True where the RSI window rose without a single losing delta.

    On such windows ``rsi`` divides by the substituted loss of 1, so its value
    depends on the price scale; callers read these windows as fully overbought.
    """
    series = _as_series(values)
    if period <= 1:
        return pd.Series([False] * len(series), dtype=bool)

    avg_gain, avg_loss = _average_moves(series, period)
    return (avg_loss == 0) & (avg_gain > 0)


def macd(
    values: Values,
    fast: int = 12,
    slow: int = 26,
    signal: int = 9,
) -> pd.DataFrame:
    """MACD line, signal line and histogram.

    Returns:
        DataFrame with columns: macd, signal, histogram.
    """
    series = _as_series(values)
    line = ema(series, fast) - ema(series, slow)

    signal_line = _empty_like(series)
    valid = line.dropna()
    if not valid.empty:
        smoothed = ema(valid, signal)
        smoothed.index = valid.index
        signal_line.loc[valid.index] = smoothed

    return pd.DataFrame({
        "macd": line,
        "signal": signal_line,
        "histogram": line - signal_line,
    })


def calculate_volatility(prices: Sequence) -> float:
    """Population standard deviation of period-over-period returns.

    Args:
        prices: Either plain price values or ``[timestamp, price]`` pairs.

    Returns:
        Volatility as a fraction (0.02 means 2% per period), 0.0 when fewer
        than two samples are given.
    """
    values = [p[1] if isinstance(p, (list, tuple)) else p for p in prices]
    if len(values) < 2:
        return 0.0

    series = _as_series(values)
    returns = (series.diff() / series.shift(1)).iloc[1:]
    volatility = float(returns.std(ddof=0))
    if math.isnan(volatility) or math.isinf(volatility):
        logger.debug("Volatility undefined for %d samples", len(values))
    return volatility
