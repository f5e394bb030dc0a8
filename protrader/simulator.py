"""Heuristic investment-outcome simulator.

This is a marketing toy, not a pricing model. It blends:
- a time-horizon scaling (fraction of a year),
- a risk multiplier from the 0-100 risk tolerance slider,
- a market-conditions term derived from the recent price and volume trend,
- volatility-scaled best/worst case bounds.

The constants below are business heuristics and carry no financial meaning.
"""

import logging
import math
from typing import Callable, Optional

from protrader.config import HISTORY_DAYS, SIMULATOR_ASSETS
from protrader.indicators import calculate_volatility
from protrader.market_data import get_historical_data
from protrader.models import HistoricalSeries, SimulationParams, SimulationResult

logger = logging.getLogger(__name__)

BASE_ANNUAL_RETURN = 1.2  # 10% per month
RISK_SPREAD = 0.5
DEFAULT_VOLATILITY = 0.03  # used when no usable history is available

TREND_WEIGHT = 2.0
VOLUME_WEIGHT = 0.5
MARKET_FACTOR_MIN = 0.5
MARKET_FACTOR_MAX = 1.5
BULLISH_TREND = 0.05
BEARISH_TREND = -0.05

CONFIDENCE_MIN = 10.0
CONFIDENCE_MAX = 95.0
CONFIDENCE_VOLATILITY_PENALTY = 500
CONFIDENCE_RISK_PENALTY = 0.2

HOURS_PER_YEAR = 24 * 365
DAYS_PER_YEAR = 365
WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12

_UNIT_TO_YEARS = {
    "hour": 1 / HOURS_PER_YEAR,
    "day": 1 / DAYS_PER_YEAR,
    "week": 1 / WEEKS_PER_YEAR,
    "month": 1 / MONTHS_PER_YEAR,
    "year": 1.0,
}

RISK_LEVELS = ("Conservative", "Moderate", "Aggressive")


def timeframe_to_years(timeframe: str) -> float:
    """Convert an "N unit" timeframe to a fraction of a year.

    Unknown units or malformed strings fall back to one month.
    """
    parts = timeframe.strip().lower().split()
    if len(parts) != 2:
        logger.warning("Unrecognised timeframe %r, assuming 1 month", timeframe)
        return 1 / MONTHS_PER_YEAR

    value, unit = parts
    try:
        count = float(value)
    except ValueError:
        logger.warning("Unrecognised timeframe %r, assuming 1 month", timeframe)
        return 1 / MONTHS_PER_YEAR

    per_unit = _UNIT_TO_YEARS.get(unit.rstrip("s"))
    if per_unit is None or count <= 0:
        logger.warning("Unrecognised timeframe %r, assuming 1 month", timeframe)
        return 1 / MONTHS_PER_YEAR
    return count * per_unit


def risk_level_for(risk_tolerance: float) -> str:
    if risk_tolerance < 33:
        return RISK_LEVELS[0]
    if risk_tolerance < 66:
        return RISK_LEVELS[1]
    return RISK_LEVELS[2]


def assess_market_conditions(history: Optional[HistoricalSeries]) -> tuple[float, float, str]:
    """Derive a market multiplier from the recent price and volume trend.

    Args:
        history: Recent market-chart history, or None.

    Returns:
        Tuple of (market factor, price trend, market-timing message).
    """
    prices = history.price_values() if history else []
    if len(prices) < 2 or prices[0] <= 0:
        return 1.0, 0.0, "Live market data unavailable; projection assumes neutral conditions"

    price_trend = (prices[-1] - prices[0]) / prices[0]

    volume_trend = 0.0
    volumes = history.volume_values()
    if len(volumes) >= 2:
        half = len(volumes) // 2
        earlier = sum(volumes[:half]) / half
        recent = sum(volumes[half:]) / (len(volumes) - half)
        if earlier > 0:
            volume_trend = recent / earlier - 1

    factor = 1 + price_trend * TREND_WEIGHT + volume_trend * VOLUME_WEIGHT
    factor = min(max(factor, MARKET_FACTOR_MIN), MARKET_FACTOR_MAX)

    if price_trend >= BULLISH_TREND:
        message = (f"Prices are up {price_trend:.1%} recently; "
                   "momentum favours your strategy")
    elif price_trend <= BEARISH_TREND:
        message = (f"Prices are down {abs(price_trend):.1%} recently; "
                   "consider staggering your entry")
    else:
        message = "The market is moving sideways; timing is neutral"

    if volume_trend > 0.2:
        message += ", backed by rising trading volume"

    return factor, price_trend, message


def _confidence(volatility: float, risk_tolerance: float) -> tuple[float, str]:
    score = (CONFIDENCE_MAX
             - volatility * CONFIDENCE_VOLATILITY_PENALTY
             - risk_tolerance * CONFIDENCE_RISK_PENALTY)
    score = min(max(score, CONFIDENCE_MIN), CONFIDENCE_MAX)
    if score >= 70:
        label = "High"
    elif score >= 40:
        label = "Medium"
    else:
        label = "Low"
    return round(score, 1), label


def _safety_recommendation(risk_level: str, volatility: float) -> str:
    advice = f"Consider a strategy that matches your {risk_level.lower()} risk profile"
    if volatility > 0.05:
        advice += "; volatility is elevated, so size positions carefully"
    return advice


def run_simulation(
    params: SimulationParams,
    history: Optional[HistoricalSeries] = None,
) -> SimulationResult:
    """Project an investment outcome.

    Args:
        params: Form input.
        history: Recent history of the chosen asset, or None.

    Returns:
        SimulationResult with projected, best and worst case values.
    """
    amount = max(float(params.amount), 0.0)
    risk_tolerance = min(max(float(params.risk_tolerance), 0.0), 100.0)
    risk_multiplier = risk_tolerance / 100

    years = timeframe_to_years(params.timeframe)
    factor, _, market_timing = assess_market_conditions(history)

    volatility = DEFAULT_VOLATILITY
    if history and len(history.prices) >= 2:
        measured = calculate_volatility(history.prices)
        if math.isfinite(measured):
            volatility = measured
        else:
            logger.warning("Volatility undefined for %s, using default", params.crypto)

    projected_return = BASE_ANNUAL_RETURN * years * (1 + risk_multiplier) * factor

    if params.investment_type == "recurring":
        contributions = max(1, math.ceil(round(years * MONTHS_PER_YEAR, 6)))
        total_invested = amount * contributions
        projected_return *= (contributions + 1) / (2 * contributions)
    else:
        total_invested = amount

    projected_value = total_invested * (1 + projected_return)

    horizon_days = years * DAYS_PER_YEAR
    spread = risk_multiplier * RISK_SPREAD + volatility * math.sqrt(horizon_days)
    best_case = projected_value * (1 + spread)
    worst_case = projected_value * max(1 - spread, 0.0)

    def _return(value: float) -> float:
        if total_invested <= 0:
            return 0.0
        return (value - total_invested) / total_invested

    risk_level = risk_level_for(risk_tolerance)
    confidence, confidence_label = _confidence(volatility, risk_tolerance)

    return SimulationResult(
        total_invested=total_invested,
        projected_value=projected_value,
        potential_return=_return(projected_value),
        best_case=best_case,
        best_case_return=_return(best_case),
        worst_case=worst_case,
        worst_case_return=_return(worst_case),
        volatility=volatility,
        risk_level=risk_level,
        confidence=confidence,
        confidence_label=confidence_label,
        market_timing=market_timing,
        safety_recommendation=_safety_recommendation(risk_level, volatility),
    )


def simulate_investment(
    params: SimulationParams,
    fetch: Callable[..., Optional[HistoricalSeries]] = get_historical_data,
) -> SimulationResult:
    """Fetch recent history for the chosen asset and run the simulation.

    A failed fetch falls back to DEFAULT_VOLATILITY and neutral conditions.
    """
    _, coin_id = SIMULATOR_ASSETS.get(params.crypto.upper(), (params.crypto, params.crypto))
    history = fetch(coin_id, days=HISTORY_DAYS)
    if history is None:
        logger.info("No history for %s, simulating with default volatility", coin_id)
    return run_simulation(params, history)
