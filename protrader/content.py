"""Static landing-page copy."""

BRAND = "CRYPTO PRO-TRADER"
TAGLINE = "Smart Trading Made Easy"
HERO_TEXT = (
    "Our AI analyzes millions of data points to give you clear buy or wait signals. "
    "Start with just any amount on your favorite trading app."
)

# (name, symbol, 24h trend) shown when live market data is unavailable
FALLBACK_COINS = (
    ("Bitcoin", "BTC", 3.5),
    ("Ethereum", "ETH", 5.2),
    ("Solana", "SOL", -2.1),
    ("Cardano", "ADA", 1.8),
)

# (icon, title, description)
FEATURES = (
    ("📈", "Smart Signals",
     "Get clear buy or wait recommendations based on AI analysis of market trends"),
    ("🛡️", "Risk Detection",
     "AI monitors market risks 24/7 to protect your investments from volatility"),
    ("⏱️", "Perfect Timing",
     "Get notified of the best moments to enter or exit positions"),
)

STEPS = (
    ("Connect Your Trading App",
     "Seamlessly integrates with popular apps like Coinbase, Binance, and more"),
    ("Set Your Parameters",
     "Start small with just $200 and customize your risk tolerance"),
    ("Get AI Signals",
     "Receive clear buy, sell, or hold recommendations based on AI analysis"),
)

WAITLIST_PERKS = ("🛡️ Priority Access", "💲 Early Bird Pricing")

SUPPORTED_APPS = (
    "Coinbase", "Binance", "Robinhood", "Kraken",
    "Gemini", "eToro", "Bitfinex", "KuCoin",
)

CONTACT_EMAIL = "support@cryptoprotrader.com"
TWITTER_HANDLE = "@CryptoProTrader"

DISCLAIMER = (
    "Simulations and signals are illustrative only and do not constitute "
    "financial advice. Cryptocurrency investments carry significant risk."
)
