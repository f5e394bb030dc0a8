"""Configuration and constants for Crypto Pro-Trader."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Paths
PROJECT_ROOT = Path(__file__).parent.parent
LOG_DIR = Path(os.getenv("LOG_DIR", PROJECT_ROOT / "logs"))

# CoinGecko
COINGECKO_API_URL = os.getenv("COINGECKO_API_URL", "https://api.coingecko.com/api/v3")
VS_CURRENCY = "usd"
REQUEST_TIMEOUT = 10  # seconds, fixed; there is no retry

# Coins shown on the landing page, in display order
TRACKED_COIN_IDS = ("bitcoin", "ethereum", "solana", "cardano")

# Ticker shorthands accepted by the coin detail page
COIN_ID_MAP = {
    "btc": "bitcoin",
    "eth": "ethereum",
    "sol": "solana",
    "ada": "cardano",
}

# Dashboard
REFRESH_INTERVAL = 30  # seconds between live data refreshes
CACHE_TTL = REFRESH_INTERVAL
HISTORY_DAYS = 30

# Simulator form choices: ticker -> (display name, CoinGecko id)
SIMULATOR_ASSETS = {
    "BTC": ("Bitcoin", "bitcoin"),
    "ETH": ("Ethereum", "ethereum"),
    "SOL": ("Solana", "solana"),
    "ADA": ("Cardano", "cardano"),
    "DOT": ("Polkadot", "polkadot"),
    "LINK": ("Chainlink", "chainlink"),
    "XRP": ("Ripple", "ripple"),
    "DOGE": ("Dogecoin", "dogecoin"),
    "UNI": ("Uniswap", "uniswap"),
    "AVAX": ("Avalanche", "avalanche-2"),
}
SIMULATOR_TIMEFRAMES = (
    "1 hour", "6 hours", "12 hours",
    "1 day", "3 days", "7 days", "14 days",
    "1 month", "3 months", "6 months", "1 year",
)
MIN_INVESTMENT = 200

# Indicator periods
SMA_PERIOD = 20
EMA_PERIOD = 50
RSI_PERIOD = 14

# Third-party widgets (optional)
CLERK_PUBLISHABLE_KEY = os.getenv("CLERK_PUBLISHABLE_KEY", "")
CLERK_JS_URL = os.getenv(
    "CLERK_JS_URL",
    "https://cdn.jsdelivr.net/npm/@clerk/clerk-js@5/dist/clerk.browser.js",
)
GA_MEASUREMENT_ID = os.getenv("GA_MEASUREMENT_ID", "")
