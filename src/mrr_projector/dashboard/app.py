"""MRR Projector — Streamlit dashboard.

Layout: sidebar tier editor + projection inputs → main area with headline
metrics, the projected-vs-actual chart, and tables in expanders.

The dashboard owns all mutable state (the tier list lives in
``st.session_state``).  Every rerun rebuilds a ``Scenario`` and calls
``run_pipeline`` once; the chart is drawn only from that run's geometry.

Run with:
    streamlit run src/mrr_projector/dashboard/app.py
"""

from __future__ import annotations

from datetime import date

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from mrr_projector.config import DisplayConfig, PricingTier, ProjectionParameters, Scenario
from mrr_projector.engine.aggregator import compute_tier_shares
from mrr_projector.engine.formatting import format_currency, format_period
from mrr_projector.engine.pipeline import run_pipeline
from mrr_projector.models.results import PipelineResult

# ---------------------------------------------------------------------------
# Default instances — single source of truth for sidebar defaults
# ---------------------------------------------------------------------------
_DEF_SC = Scenario()
_DEF_PR = ProjectionParameters()
_DEF_D = DisplayConfig()

_PROJECTED_COLOR = "#e5e7eb"
_ACTUAL_COLOR = "#4f46e5"

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="MRR Projector", page_icon="📈", layout="wide")

st.markdown("""
<style>
div[data-testid="stMetric"] {
    background: #ffffff;
    border: 1px solid #e5e7eb;
    border-radius: 10px;
    padding: 14px 16px 12px;
}
h1 { color: #9333ea !important; font-weight: 800 !important; }
</style>
""", unsafe_allow_html=True)


# ---------------------------------------------------------------------------
# Tier state
# ---------------------------------------------------------------------------

# Each row carries a synthetic "id" so widget keys stay stable when a
# row above it is removed.  The id never reaches the engine.
if "tiers" not in st.session_state:
    st.session_state.tiers = [{"id": i, **t.model_dump()} for i, t in enumerate(_DEF_SC.tiers)]
    st.session_state.next_tier_id = len(st.session_state.tiers)


def _add_tier() -> None:
    st.session_state.tiers.append({"id": st.session_state.next_tier_id, **PricingTier().model_dump()})
    st.session_state.next_tier_id += 1


def _remove_tier(tier_id: int) -> None:
    st.session_state.tiers = [t for t in st.session_state.tiers if t["id"] != tier_id]


# ---------------------------------------------------------------------------
# SIDEBAR — Inputs
# ---------------------------------------------------------------------------
st.sidebar.header("Inputs")

with st.sidebar.expander("Pricing Tiers", expanded=True):
    for tier in st.session_state.tiers:
        i = tier["id"]
        tier["name"] = st.text_input("Tier name", value=tier["name"], placeholder="e.g. Basic", key=f"tier_name_{i}")
        c1, c2, c3 = st.columns([0.42, 0.42, 0.16])
        tier["unit_price"] = c1.number_input(
            "Price (€)", min_value=0.0, value=float(tier["unit_price"]), step=1.0, format="%.2f",
            key=f"tier_price_{i}",
        )
        tier["subscriber_count"] = c2.number_input(
            "Customers", min_value=0, value=int(tier["subscriber_count"]), step=1,
            key=f"tier_customers_{i}",
        )
        c3.button("➖", key=f"tier_remove_{i}", on_click=_remove_tier, args=(i,), help="Remove tier")
    st.button("➕ Add Tier", on_click=_add_tier, use_container_width=True)

with st.sidebar.expander("Projection", expanded=True):
    months_ahead = st.number_input("Projection months", min_value=1, max_value=120, value=_DEF_PR.months_ahead, step=1)
    start_period = st.date_input("Start month", value=_DEF_PR.start_period)
    growth_rate = st.number_input(
        "Monthly growth rate (%)", value=_DEF_PR.monthly_growth_rate_pct, step=0.5, format="%.2f",
    )

with st.sidebar.expander("Advanced"):
    use_seed = st.checkbox("Reproducible 'actual' series", value=False)
    seed = st.number_input("Random seed", min_value=0, value=42, step=1, disabled=not use_seed)
    zero_policy = st.radio(
        "Growth when starting MRR is 0",
        options=["zero", "undefined"],
        index=0 if _DEF_D.zero_start_growth == "zero" else 1,
        format_func=lambda v: "Show 0.0%" if v == "zero" else "Show n/a",
    )


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

scenario = Scenario(
    tiers=[
        PricingTier(name=t["name"], unit_price=t["unit_price"], subscriber_count=t["subscriber_count"])
        for t in st.session_state.tiers
    ],
    projection=ProjectionParameters(
        months_ahead=int(months_ahead),
        monthly_growth_rate_pct=float(growth_rate),
        start_period=start_period if isinstance(start_period, date) else _DEF_PR.start_period,
    ),
    display=DisplayConfig(zero_start_growth=zero_policy),
    random_seed=int(seed) if use_seed else None,
)
result = run_pipeline(scenario)


# ---------------------------------------------------------------------------
# Chart
# ---------------------------------------------------------------------------

def _build_chart(res: PipelineResult, d: DisplayConfig) -> go.Figure:
    """Plot both polylines in normalised 0–100 space (y inverted)."""
    g = res.geometry
    fig = go.Figure()

    for y in g.grid_lines:
        fig.add_shape(
            type="line", x0=d.left_margin, x1=d.left_margin + d.plot_width, y0=y, y1=y,
            line=dict(color="#e5e7eb", width=1),
        )

    projected, actual = g.series
    fig.add_trace(go.Scatter(
        x=[p.x for p in projected], y=[p.y for p in projected],
        mode="lines", name="Projected",
        line=dict(color=_PROJECTED_COLOR, width=2),
        customdata=[format_currency(p.value, d.headline_decimals, d.currency_symbol) for p in projected],
        hovertemplate="%{customdata}<extra>Projected</extra>",
    ))
    fig.add_trace(go.Scatter(
        x=[p.x for p in actual], y=[p.y for p in actual],
        mode="lines+markers" if len(actual) == 1 else "lines", name="Actual",
        line=dict(color=_ACTUAL_COLOR, width=3),
        customdata=[format_currency(p.value, d.headline_decimals, d.currency_symbol) for p in actual],
        hovertemplate="%{customdata}<extra>Actual</extra>",
    ))

    fig.update_yaxes(
        range=[100, 0],
        tickvals=[a.y for a in g.axis_labels],
        ticktext=[a.label for a in g.axis_labels],
        showgrid=False, zeroline=False,
    )
    fig.update_xaxes(
        range=[0, 100],
        tickvals=[d.left_margin, d.left_margin + d.plot_width],
        ticktext=[res.period_labels.start, res.period_labels.end],
        showgrid=False, zeroline=False,
    )
    fig.update_layout(
        height=320,
        margin=dict(l=10, r=10, t=10, b=10),
        plot_bgcolor="#ffffff",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, x=0),
    )
    return fig


# ---------------------------------------------------------------------------
# MAIN AREA
# ---------------------------------------------------------------------------
st.title("Stripe MRR Generator")

s = result.summary
m1, m2, m3 = st.columns(3)
m1.metric("MRR", s.current_mrr_label, s.growth_label if s.growth_pct is not None else None)
m2.metric("Starting MRR", s.starting_mrr_label)
m3.metric("Base MRR (tiers)", format_currency(result.projection.base_revenue, 2))

if result.projection.projected:
    st.plotly_chart(_build_chart(result, scenario.display), use_container_width=True)
else:
    st.info("Nothing to plot — the projection window is empty.")

with st.expander("Monthly series"):
    p = result.projection
    df = pd.DataFrame({
        "Month": [format_period(d) for d in p.periods],
        "Projected (€)": p.projected,
        "Actual (€)": p.actual,
    })
    st.dataframe(df.style.format({"Projected (€)": "{:,.2f}", "Actual (€)": "{:,.2f}"}), hide_index=True)

with st.expander("Tier breakdown"):
    shares = compute_tier_shares(scenario.tiers)
    st.dataframe(
        pd.DataFrame(
            [(n or "(unnamed)", r, sh * 100) for n, r, sh in shares],
            columns=["Tier", "MRR (€)", "Share (%)"],
        ).style.format({"MRR (€)": "{:,.2f}", "Share (%)": "{:.1f}"}),
        hide_index=True,
    )

with st.expander("Formulas"):
    st.markdown(
        "- **Base MRR** = Σ price × customers\n"
        "- **Projected[i]** = base × (1 + g/100)^i\n"
        "- **Actual[i]** = projected[i] × (1 + u), u ~ U[−5%, +5%]\n"
        "- **Growth** = (last − first) / first × 100"
    )
