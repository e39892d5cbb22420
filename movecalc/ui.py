# movecalc/ui.py
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from movecalc import content
from movecalc.config import Settings
from movecalc.formatting import format_range, format_usd
from movecalc.model import (
    CostBreakdown,
    HomeSize,
    MoveType,
    MovingInput,
    MOVE_TYPE_LABEL,
    SIZE_LABEL,
)
from movecalc.report import breakdown_frame, summary_caption


def page_header():
    st.title(content.APP_TITLE)
    st.caption(content.APP_SUBTITLE)


def input_form(settings: Settings):
    """Widgets bound to the FormState keys; values land in st.session_state."""
    c1, c2 = st.columns(2)
    c1.number_input(
        "Distance (miles)",
        min_value=settings.DISTANCE_MIN,
        max_value=settings.DISTANCE_MAX,
        step=settings.DISTANCE_STEP,
        key="distance",
    )
    c2.selectbox(
        "Move Type",
        options=[mt.value for mt in MoveType],
        format_func=lambda v: MOVE_TYPE_LABEL[MoveType(v)],
        key="move_type",
    )
    st.selectbox(
        "Home Size",
        options=[hs.value for hs in HomeSize],
        format_func=lambda v: SIZE_LABEL[HomeSize(v)],
        key="home_size",
    )
    c3, c4 = st.columns(2)
    c3.checkbox("Packing Services", key="packing_services")
    c4.checkbox("Storage Needed", key="storage_needed")


def result_hero(inp: MovingInput, b: CostBreakdown):
    st.metric("Estimated Total Moving Cost", format_usd(b.total))
    st.caption(summary_caption(inp))
    c1, c2 = st.columns(2)
    c1.metric("Service Add-ons", format_usd(b.service_addons))
    c2.metric("Cost Range", format_range(b.low, b.high))


def breakdown_table(b: CostBreakdown):
    st.subheader("Cost Breakdown")
    df = breakdown_frame(b)[["label", "value"]].rename(columns={"label": "Item", "value": "Amount"})
    st.dataframe(df, use_container_width=True, hide_index=True)


def breakdown_chart(b: CostBreakdown):
    rows = breakdown_frame(b)
    parts = rows[~rows["is_total"]]
    fig = go.Figure(go.Bar(
        x=parts["amount"],
        y=parts["label"],
        orientation="h",
        text=parts["value"],
        textposition="auto",
        hovertemplate="%{y}: $%{x:,.0f}<extra></extra>",
    ))
    fig.add_vline(x=0, line_width=1, line_color="gray")
    fig.update_layout(
        title=f"Range {format_range(b.low, b.high)}",
        xaxis_title="Cost ($)",
        yaxis={"autorange": "reversed"},
        height=280,
        margin={"l": 10, "r": 10, "t": 40, "b": 10},
    )
    st.plotly_chart(fig, use_container_width=True)


def comparison_table(results: dict):
    """results: MoveType -> CostBreakdown."""
    df = pd.DataFrame([
        {
            "Move Type": MOVE_TYPE_LABEL[mt],
            "Base": format_usd(b.base_cost),
            "Distance": format_usd(b.distance_cost),
            "Add-ons": format_usd(b.service_addons),
            "Total": format_usd(b.total),
            "Range": format_range(b.low, b.high),
        }
        for mt, b in results.items()
    ])
    st.dataframe(df, use_container_width=True, hide_index=True)


def distance_sweep_chart(curve: pd.DataFrame, distance: float):
    df = curve.copy()
    df["Move Type"] = df["move_type"].map(lambda v: MOVE_TYPE_LABEL[MoveType(v)])
    fig = px.line(
        df,
        x="distance",
        y="total",
        color="Move Type",
        labels={"distance": "Distance (miles)", "total": "Estimated Total ($)"},
    )
    for name, g in df.groupby("Move Type"):
        fig.add_trace(go.Scatter(
            x=list(g["distance"]) + list(g["distance"])[::-1],
            y=list(g["high"]) + list(g["low"])[::-1],
            fill="toself",
            opacity=0.15,
            line={"width": 0},
            name=f"{name} range",
            hoverinfo="skip",
            showlegend=False,
        ))
    fig.add_vline(x=distance, line_dash="dot", line_color="black")
    st.plotly_chart(fig, use_container_width=True)


def tips_component():
    st.subheader("Moving Tips")
    st.markdown("\n".join(f"- {tip}" for tip in content.MOVING_TIPS))


def disclaimer_component():
    st.caption(content.DISCLAIMER)


def footer_component():
    st.divider()
    st.caption(" • ".join(content.FOOTER_NOTES))
    st.caption(" | ".join(f"[{label}]({url})" for label, url in content.FOOTER_LINKS))
    st.caption(content.COPYRIGHT)
