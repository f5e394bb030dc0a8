"""Landing page for Crypto Pro-Trader.

Run with: streamlit run protrader/dashboard.py
"""

import sys
from pathlib import Path

import pandas as pd
import streamlit as st
import streamlit.components.v1 as components

# Ensure protrader is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

from protrader import content
from protrader.chart import (
    TIMEFRAMES,
    AnalysisType,
    Indicator,
    build_figure,
    load_chart_frame,
    market_analysis,
)
from protrader.config import (
    CACHE_TTL,
    MIN_INVESTMENT,
    REFRESH_INTERVAL,
    SIMULATOR_ASSETS,
    SIMULATOR_TIMEFRAMES,
    TRACKED_COIN_IDS,
)
from protrader.formatting import format_currency, format_delta, format_percentage
from protrader.integrations import WAITLIST_HEIGHT, analytics_html, waitlist_html
from protrader.market_data import get_coin_summaries, setup_logging
from protrader.models import CoinSummary, SimulationParams
from protrader.simulator import simulate_investment

st.set_page_config(
    page_title="CryptoTracker - Smart Trading Made Easy",
    page_icon="₿",
    layout="wide",
    initial_sidebar_state="collapsed",
)
setup_logging()

# Custom CSS
st.markdown("""
<style>
    .brand {
        font-size: 1.5rem;
        font-weight: 700;
        background: linear-gradient(90deg, #818cf8, #c084fc);
        -webkit-background-clip: text;
        -webkit-text-fill-color: transparent;
    }
    .hero-title {
        font-size: 3.5rem;
        font-weight: 800;
        text-align: center;
        margin-bottom: 0;
    }
    .hero-sub {
        font-size: 2rem;
        font-weight: 700;
        text-align: center;
        color: #a78bfa;
    }
    .hero-text {
        font-size: 1.15rem;
        text-align: center;
        color: #c7d2fe;
        max-width: 42rem;
        margin: 1rem auto 2rem auto;
    }
    .section-title {
        font-size: 2rem;
        font-weight: 700;
        text-align: center;
        margin-top: 2rem;
    }
    .section-sub {
        text-align: center;
        color: #c7d2fe;
        margin-bottom: 1.5rem;
    }
</style>
""", unsafe_allow_html=True)

analytics = analytics_html()
if analytics:
    components.html(analytics, height=0)


@st.cache_data(ttl=CACHE_TTL)
def load_summaries() -> list[CoinSummary]:
    """Load live summaries for the tracked coins."""
    return get_coin_summaries()


@st.cache_data(ttl=CACHE_TTL)
def load_chart(coin_id: str, timeframe: str) -> tuple[pd.DataFrame, bool]:
    """Load chart history with indicators."""
    return load_chart_frame(coin_id, timeframe)


def section_header(title: str, subtitle: str) -> None:
    st.markdown(f'<p class="section-title">{title}</p>', unsafe_allow_html=True)
    st.markdown(f'<p class="section-sub">{subtitle}</p>', unsafe_allow_html=True)


# Navbar
nav_left, nav_right = st.columns([4, 1])
nav_left.markdown(f'<span class="brand">₿ {content.BRAND}</span>', unsafe_allow_html=True)
nav_right.link_button("Join Waitlist", "#join-our-waitlist", width="stretch")

# Hero
st.markdown('<p style="text-align:center">🤖 AI-Powered Trading Assistant</p>',
            unsafe_allow_html=True)
st.markdown(f'<p class="hero-title">{content.BRAND}</p>', unsafe_allow_html=True)
st.markdown(f'<p class="hero-sub">{content.TAGLINE}</p>', unsafe_allow_html=True)
st.markdown(f'<p class="hero-text">{content.HERO_TEXT}</p>', unsafe_allow_html=True)
_, hero_cta, _ = st.columns([2, 1, 2])
hero_cta.link_button("Get Early Access", "#join-our-waitlist", type="primary",
                     width="stretch")

st.markdown("---")

# Tracked coins
section_header("Popular Cryptocurrencies We Track",
               "Get AI-powered insights for the most traded cryptocurrencies")


@st.fragment(run_every=REFRESH_INTERVAL)
def tracked_coins() -> None:
    summaries = load_summaries()
    cols = st.columns(len(TRACKED_COIN_IDS))

    if not summaries:
        for col, (name, symbol, trend) in zip(cols, content.FALLBACK_COINS):
            with col.container(border=True):
                st.metric(f"{name} ({symbol})", symbol, format_percentage(trend))
        st.caption("Live prices are temporarily unavailable.")
        return

    for col, coin in zip(cols, summaries):
        with col.container(border=True):
            if coin.image:
                st.image(coin.image, width=40)
            st.metric(
                f"{coin.name} ({coin.symbol.upper()})",
                format_currency(coin.current_price),
                format_delta(coin.price_change_percentage_24h),
            )
            st.markdown(f"[View details](/Coin_Details?id={coin.id})")


tracked_coins()

st.markdown("---")

# Features
section_header("AI-Powered Features", "Advanced technology made simple for everyday traders")
for col, (icon, title, description) in zip(st.columns(len(content.FEATURES)), content.FEATURES):
    with col.container(border=True):
        st.markdown(f"### {icon} {title}")
        st.write(description)

st.markdown("---")

# Investment simulator
section_header("Try Our AI-Powered Investment Simulator",
               "Test your strategies before risking real money. "
               f"Start with as little as {format_currency(MIN_INVESTMENT)}.")

with st.form("simulator"):
    form_left, form_right = st.columns(2)
    with form_left:
        amount = st.number_input("Investment Amount (USD)", min_value=float(MIN_INVESTMENT),
                                 value=float(MIN_INVESTMENT), step=100.0)
        investment_type = st.selectbox(
            "Investment Type",
            ["one-time", "recurring"],
            format_func=lambda x: "One-time Investment" if x == "one-time"
            else "Recurring Investment (monthly)",
        )
    with form_right:
        crypto = st.selectbox(
            "Cryptocurrency",
            list(SIMULATOR_ASSETS),
            format_func=lambda x: f"{SIMULATOR_ASSETS[x][0]} ({x})",
        )
        timeframe = st.selectbox(
            "Timeframe",
            SIMULATOR_TIMEFRAMES,
            index=SIMULATOR_TIMEFRAMES.index("1 month"),
            format_func=lambda x: x.title(),
        )
    risk_tolerance = st.slider("Risk Tolerance", min_value=0, max_value=100, value=50,
                               help="Conservative ← Balanced → Aggressive")
    submitted = st.form_submit_button("Simulate Investment", type="primary", width="stretch")

if submitted:
    params = SimulationParams(
        amount=amount,
        timeframe=timeframe,
        crypto=crypto,
        investment_type=investment_type,
        risk_tolerance=risk_tolerance,
    )
    with st.spinner("Analyzing recent market data..."):
        st.session_state["simulation"] = simulate_investment(params)

result = st.session_state.get("simulation")
if result is not None:
    col1, col2, col3 = st.columns(3)
    col1.metric("Expected Return", format_currency(result.projected_value),
                f"{result.potential_return * 100:.2f}% ROI")
    col2.metric("Best Case Scenario", format_currency(result.best_case),
                f"{result.best_case_return * 100:.2f}% ROI")
    col3.metric("Worst Case Scenario", format_currency(result.worst_case),
                f"{result.worst_case_return * 100:.2f}% ROI")

    info1, info2, info3 = st.columns(3)
    with info1.container(border=True):
        st.markdown("**📈 Market Timing**")
        st.write(result.market_timing)
    with info2.container(border=True):
        st.markdown("**⚠️ Risk Level**")
        st.write(f"{result.risk_level} (confidence: {result.confidence_label}, "
                 f"{result.confidence:.0f}%)")
    with info3.container(border=True):
        st.markdown("**🛡️ Safety Recommendation**")
        st.write(result.safety_recommendation)
    st.caption(f"Total invested: {format_currency(result.total_invested)} · "
               f"volatility {result.volatility:.2%} per period · {content.DISCLAIMER}")

st.markdown("---")

# Trading chart
section_header("Advanced Market Analysis", "Track market movements with our AI-enhanced trading charts")

ctrl_coin, ctrl_tf, ctrl_ind = st.columns([1, 1, 2])
chart_coin = ctrl_coin.selectbox("Coin", TRACKED_COIN_IDS, format_func=str.title)
chart_tf = ctrl_tf.selectbox("Timeframe", list(TIMEFRAMES),
                             format_func=lambda x: {"1D": "1 Day", "1W": "1 Week",
                                                    "1M": "1 Month"}[x])
with ctrl_ind:
    toggle_cols = st.columns(len(Indicator))
    enabled = [
        indicator
        for col, indicator in zip(toggle_cols, Indicator)
        if col.toggle(indicator.label, value=True, key=f"indicator_{indicator.value}")
    ]

frame, is_live = load_chart(chart_coin, chart_tf)
if not is_live:
    st.caption("Live chart data is unavailable; showing sample data.")
st.plotly_chart(build_figure(frame, enabled), width="stretch")

latest = frame.iloc[-1] if not frame.empty else None
if latest is not None and latest["signal"] != "hold" and pd.notna(latest["ai_confidence"]):
    st.info(f"AI Signal: **{str(latest['signal']).upper()}** · "
            f"Confidence: {latest['ai_confidence']:.0f}%")

analysis = market_analysis(frame)
tabs = st.tabs([analysis[t].title for t in AnalysisType])
for tab, analysis_type in zip(tabs, AnalysisType):
    with tab:
        item = analysis[analysis_type]
        st.markdown(f"#### {item.title}")
        st.write(item.content)
        st.markdown(f"**Our take:** {item.recommendation}")

st.markdown("---")

# How it works
section_header("How Our AI Trading Assistant Works", "Get started in three simple steps")
for number, (col, (title, description)) in enumerate(
        zip(st.columns(len(content.STEPS)), content.STEPS), start=1):
    with col.container(border=True):
        st.markdown(f"## {number}")
        st.markdown(f"**{title}**")
        st.write(description)

st.markdown("---")

# Waitlist
wl_left, wl_right = st.columns(2)
with wl_left:
    st.header("Join Our Waitlist")
    st.write("Be among the first to experience AI-powered crypto trading. "
             "Get early access and exclusive benefits.")
    for perk in content.WAITLIST_PERKS:
        st.markdown(f"- {perk}")
with wl_right:
    with st.container(border=True):
        st.subheader("Get Early Access to AI-Powered Trading")
        widget = waitlist_html()
        if widget:
            components.html(widget, height=WAITLIST_HEIGHT)
        else:
            st.info("Waitlist signup opens soon.")

st.caption("Trusted by traders using")
st.write(" · ".join(content.SUPPORTED_APPS))

st.markdown("---")

# Footer
foot1, foot2, foot3 = st.columns(3)
with foot1:
    st.markdown(f"**₿ {content.BRAND}**")
    st.caption("Making crypto trading smarter with AI for everyday traders.")
with foot2:
    st.markdown("**Supported Apps**")
    st.caption(", ".join(content.SUPPORTED_APPS))
with foot3:
    st.markdown("**Contact**")
    st.caption(f"{content.CONTACT_EMAIL}  \nFollow us on Twitter {content.TWITTER_HANDLE}")
st.caption(f"© {content.BRAND}. All rights reserved. {content.DISCLAIMER}")
