"""Streamlit dashboard for U.S. income and wealth inequality.

Three views, each backed by one API endpoint:
- Wealth: share of net worth held by the top 1% (FRED)
- Census: median income, aggregate income and Gini index (ACS)
- Earnings Gap: mean vs. median weekly and annual earnings (FRED)

Run with: streamlit run inequality_dashboard/ui/dashboard.py
"""

import httpx
import streamlit as st
import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from inequality_dashboard.config import FRED_SERIES, Settings
from inequality_dashboard.ui.chart_data import (
    CHART_CENSUS_YEARS,
    census_frame,
    fetch_endpoint,
    format_gap,
    format_money,
    format_percent,
    gap_chart_rows,
    latest,
    wealth_points,
)


MEAN_COLOR = "#8884d8"
MEDIAN_COLOR = "#82ca9d"
GAP_COLOR = "#ffc658"

CARD_STYLE = "background: #1e293b; border: 1px solid #334155; border-radius: 8px; padding: 1rem 1.5rem;"


def base_layout(fig: go.Figure, title: str) -> None:
    fig.update_layout(
        height=420, margin=dict(l=0, r=60, t=40, b=0),
        paper_bgcolor="rgba(0,0,0,0)", plot_bgcolor="rgba(0,0,0,0)",
        legend=dict(
            orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1,
            font=dict(size=10, color="#94a3b8"), bgcolor="rgba(0,0,0,0)",
        ),
        title=dict(text=title, font=dict(size=13, color="#94a3b8"), x=0),
        xaxis=dict(showgrid=True, gridcolor="#1e293b", tickfont=dict(color="#64748b", size=10)),
        hovermode="x unified",
    )


def render_error(message: str) -> None:
    st.markdown(
        f"""<div style="background: #ef444422; border: 1px solid #ef4444; border-radius: 4px; padding: 0.75rem 1rem; color: #fca5a5; font-size: 0.85rem;">
            {message}
        </div>""",
        unsafe_allow_html=True,
    )


# =============================================================================
# TAB 1: WEALTH
# =============================================================================

def render_wealth_tab(settings: Settings) -> None:
    """Render the top-1% wealth share chart."""
    try:
        payload = fetch_endpoint("wealth-data", settings=settings)
    except httpx.HTTPError as e:
        render_error(f"Failed to load wealth data: {e}")
        return

    points = wealth_points(payload)
    if points.empty:
        st.info("No wealth observations available")
        return

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=points["year"], y=points["value"],
        mode="lines", line=dict(color="#2563eb", width=2),
        name="Top 1% share",
        hovertemplate="%{y:.1f}%<extra></extra>",
    ))
    base_layout(fig, "FRED: Share of Total Net Worth Held by the Top 1%")
    fig.update_yaxes(
        title_text="Share of Wealth (%)", showgrid=True, gridcolor="#1e293b",
        tickfont=dict(color="#64748b", size=10),
    )
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


# =============================================================================
# TAB 2: CENSUS
# =============================================================================

def render_census_tab(settings: Settings) -> None:
    """Render income levels against the Gini index."""
    try:
        records = fetch_endpoint(
            "census-data", params={"years": ",".join(CHART_CENSUS_YEARS)}, settings=settings
        )
    except httpx.HTTPError as e:
        render_error(f"Failed to load Census data: {e}")
        return

    df = census_frame(records)
    if df.empty:
        st.info("No Census years available")
        return

    fig = make_subplots(specs=[[{"secondary_y": True}]])
    fig.add_trace(go.Scatter(
        x=df["year"], y=df["medianIncome"], mode="lines+markers",
        line=dict(color="#2563eb"), name="Median Income",
        hovertemplate="$%{y:,.0f}<extra></extra>",
    ), secondary_y=False)
    fig.add_trace(go.Scatter(
        x=df["year"], y=df["aggregateIncome"], mode="lines+markers",
        line=dict(color="#16a34a"), name="Aggregate Income",
        hovertemplate="$%{y:,.0f}<extra></extra>",
    ), secondary_y=False)
    fig.add_trace(go.Scatter(
        x=df["year"], y=df["giniIndex"], mode="lines+markers",
        line=dict(color="#dc2626"), name="Gini Index",
        hovertemplate="%{y:.3f}<extra></extra>",
    ), secondary_y=True)

    base_layout(fig, "Census: Income Distribution Metrics")
    fig.update_xaxes(type="category")
    fig.update_yaxes(title_text="Income ($)", gridcolor="#1e293b", secondary_y=False)
    fig.update_yaxes(title_text="Gini Index", showgrid=False, secondary_y=True)
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})

    skipped = sum(r.get("skippedValues", 0) for r in records)
    if skipped:
        st.caption(f"{skipped} non-numeric state values were excluded.")


# =============================================================================
# TAB 3: EARNINGS GAP
# =============================================================================

def render_gap_chart(data: list[dict], mode: str, metric: str) -> None:
    """Mean and median lines with the gap as bars on a second axis."""
    rows = pd.DataFrame(gap_chart_rows(data, mode, metric))
    money = "$%{y:,.0f}" if mode == "annual" else "$%{y:,.2f}"

    fig = make_subplots(specs=[[{"secondary_y": True}]])
    fig.add_trace(go.Bar(
        x=rows["year"], y=rows["gap"], marker_color=GAP_COLOR,
        name="Gap (%)" if metric == "percent" else "Gap ($)",
        hovertemplate=("%{y:.1f}%" if metric == "percent" else money) + "<extra></extra>",
    ), secondary_y=True)
    fig.add_trace(go.Scatter(
        x=rows["year"], y=rows["mean"], mode="lines", line=dict(color=MEAN_COLOR, width=2),
        name="Mean", hovertemplate=money + "<extra></extra>",
    ), secondary_y=False)
    fig.add_trace(go.Scatter(
        x=rows["year"], y=rows["median"], mode="lines", line=dict(color=MEDIAN_COLOR, width=2),
        name="Median", hovertemplate=money + "<extra></extra>",
    ), secondary_y=False)

    base_layout(fig, "U.S. Mean vs. Median Earnings Gap")
    fig.update_yaxes(
        title_text="Weekly Earnings" if mode == "weekly" else "Annual Earnings",
        tickprefix="$", gridcolor="#1e293b", secondary_y=False,
    )
    if metric == "percent":
        fig.update_yaxes(title_text="Gap (%)", ticksuffix="%", range=[0, 15],
                         showgrid=False, secondary_y=True)
    else:
        fig.update_yaxes(title_text="Gap ($)", tickprefix="$", showgrid=False, secondary_y=True)

    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def render_gap_insights(current: dict, mode: str, metric: str) -> None:
    """Summary cards for the most recent year."""
    col1, col2 = st.columns(2)
    with col1:
        st.markdown(
            f"""<div style="{CARD_STYLE}">
                <div style="color: #94a3b8; font-size: 0.7rem; text-transform: uppercase; letter-spacing: 0.1em;">Current Gap</div>
                <div style="font-size: 2.5rem; font-weight: 700; color: #3b82f6; font-family: 'SF Mono', monospace;">
                    {format_gap(current, mode, metric)}
                </div>
                <div style="color: #94a3b8; font-size: 0.8rem;">
                    {"Weekly" if mode == "weekly" else "Annual"} difference between mean and median earnings
                </div>
            </div>""",
            unsafe_allow_html=True,
        )
    with col2:
        st.markdown(
            f"""<div style="{CARD_STYLE}">
                <div style="color: #94a3b8; font-size: 0.7rem; text-transform: uppercase; letter-spacing: 0.1em;">
                    Annualized Earnings ({current['year']})
                </div>
                <div style="display: flex; justify-content: space-between; margin-top: 0.5rem;">
                    <div><div style="color: #64748b; font-size: 0.8rem;">Mean</div>
                        <div style="font-size: 1.5rem; font-weight: 600;">{format_money(current['meanAnnual'])}</div></div>
                    <div><div style="color: #64748b; font-size: 0.8rem;">Median</div>
                        <div style="font-size: 1.5rem; font-weight: 600;">{format_money(current['medianAnnual'])}</div></div>
                </div>
            </div>""",
            unsafe_allow_html=True,
        )

    st.markdown("### What This Means")
    st.markdown(
        f"The gap between mean and median earnings shows how national \"average\" "
        f"statistics can mask economic reality. When the mean exceeds the median by "
        f"{format_percent(current['annualGapPercent'])}, a small number of high earners are pulling "
        f"the average upward, and the typical (median) worker earns substantially less "
        f"than the average suggests."
    )


def render_earnings_gap_tab(settings: Settings) -> None:
    """Render the earnings-gap chart with its display toggles."""
    try:
        payload = fetch_endpoint("earnings-gap", settings=settings)
    except httpx.HTTPError as e:
        render_error(f"Failed to load earnings data: {e}")
        return

    data = payload.get("data", [])
    if not data:
        st.info("No overlapping years of mean and median earnings")
        return

    col_mode, col_metric, _ = st.columns([1, 1, 3])
    with col_mode:
        mode = st.radio("Period", ["weekly", "annual"], format_func=str.capitalize, horizontal=True)
    with col_metric:
        metric = st.radio(
            "Gap",
            ["absolute", "percent"],
            format_func=lambda m: "Dollar Gap" if m == "absolute" else "Percent Gap",
            horizontal=True,
        )

    render_gap_chart(data, mode, metric)
    render_gap_insights(latest(data), mode, metric)

    series = payload.get("metadata", {}).get("series", {})
    st.caption(
        "Source: Federal Reserve Economic Data (FRED). "
        f"Mean earnings: {FRED_SERIES.get(series.get('meanHourlyEarnings'), 'average hourly earnings')} "
        f"({series.get('meanHourlyEarnings')}) x average weekly hours ({series.get('averageWeeklyHours')}). "
        f"Median earnings: {series.get('medianWeeklyEarnings')}."
    )


# =============================================================================
# MAIN APP
# =============================================================================

def main() -> None:
    """Main dashboard entry point."""
    st.set_page_config(
        page_title="Income Inequality Dashboard",
        page_icon="",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    st.markdown(
        """
        <style>
            .stApp { background-color: #0f172a; }
            .stMarkdown, .stText, p, span, label { color: #e2e8f0; }
            h1, h2, h3, h4 { color: #f1f5f9 !important; font-weight: 600 !important; }
            #MainMenu, footer, header { visibility: hidden; }
        </style>
        """,
        unsafe_allow_html=True,
    )

    st.markdown(
        """<div style="padding: 0.5rem 0 1rem 0; border-bottom: 1px solid #334155; margin-bottom: 1rem;">
            <h1 style="margin: 0; font-size: 1.5rem; color: #f1f5f9;">US Wealth & Income Inequality</h1>
            <div style="color: #64748b; font-size: 0.75rem; margin-top: 0.25rem;">Data: FRED + Census ACS</div>
        </div>""",
        unsafe_allow_html=True,
    )

    settings = Settings()

    tab1, tab2, tab3 = st.tabs(["Wealth", "Census", "Earnings Gap"])

    with tab1:
        render_wealth_tab(settings)

    with tab2:
        render_census_tab(settings)

    with tab3:
        render_earnings_gap_tab(settings)


if __name__ == "__main__":
    main()
