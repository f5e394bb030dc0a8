"""Display formatting helpers."""

import functools
import math
import threading
from typing import Any, Callable, Optional

CURRENCY_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£", "JPY": "¥"}

NA = "N/A"


def format_currency(amount: float, currency: str = "USD") -> str:
    """Format an amount like ``$1,234.56`` (``-$5.00`` when negative)."""
    symbol = CURRENCY_SYMBOLS.get(currency.upper(), f"{currency.upper()} ")
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_percentage(value: float) -> str:
    """Format a value already expressed in percent, e.g. 3.456 -> ``3.46%``."""
    return f"{value:,.2f}%"


def format_number(value: float, decimals: int = 0) -> str:
    return f"{value:,.{decimals}f}"


def format_or_na(value: Optional[float], formatter: Callable[[float], str] = format_number) -> str:
    """Apply ``formatter`` unless the value is missing or NaN."""
    if value is None:
        return NA
    try:
        if math.isnan(value):
            return NA
    except TypeError:
        return NA
    return formatter(value)


def format_delta(value: Optional[float]) -> Optional[str]:
    """Percentage delta for st.metric, None when the change is unknown."""
    if format_or_na(value) == NA:
        return None
    return format_percentage(value)


def truncate_string(text: str, num: int) -> str:
    if len(text) <= num:
        return text
    return text[:num] + "..."


def capitalize_first_letter(text: str) -> str:
    return text[:1].upper() + text[1:]


def debounce(wait: float) -> Callable[[Callable[..., Any]], Callable[..., None]]:
    """Delay calls until ``wait`` seconds pass without a new call.

    Only the last call of a burst runs, on a timer thread.
    """
    def decorator(func: Callable[..., Any]) -> Callable[..., None]:
        timer: Optional[threading.Timer] = None
        lock = threading.Lock()

        @functools.wraps(func)
        def debounced(*args: Any, **kwargs: Any) -> None:
            nonlocal timer
            with lock:
                if timer is not None:
                    timer.cancel()
                timer = threading.Timer(wait, func, args=args, kwargs=kwargs)
                timer.daemon = True
                timer.start()

        return debounced

    return decorator
