"""Plotly chart factory"""
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import plotly.io as pio

from config.settings import COLORS

pio.templates["microfinance_light"] = go.layout.Template(
    layout=go.Layout(
        font=dict(family="sans-serif", color="#333"),
        title_font=dict(size=20, color="#333"),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        xaxis=dict(gridcolor="#e0e0e0", linecolor="#e0e0e0", zerolinecolor="#e0e0e0"),
        yaxis=dict(gridcolor="#e0e0e0", linecolor="#e0e0e0", zerolinecolor="#e0e0e0"),
        colorway=px.colors.qualitative.Plotly,
    )
)
pio.templates.default = "microfinance_light"


def create_collection_pie(
    principal_collected: float,
    interest_collected: float,
    principal_balance: float,
    interest_balance: float,
) -> go.Figure:
    """Collected vs outstanding, split into principal and interest"""
    # overpaid balances are negative and cannot be drawn
    values = [principal_collected, interest_collected, max(principal_balance, 0), max(interest_balance, 0)]
    fig = go.Figure(data=[go.Pie(
        labels=["Principal collected", "Interest collected", "Principal outstanding", "Interest outstanding"],
        values=values,
        hole=0.45,
        marker_colors=[COLORS["principal"], COLORS["interest"], "#aec7e8", "#ffbb78"],
        textinfo="label+percent",
        textposition="outside",
    )])
    fig.update_layout(
        title="Portfolio composition",
        showlegend=True,
        margin=dict(t=60, b=20, l=20, r=20),
        height=400,
    )
    return fig


def create_weekly_bar(weekly: pd.DataFrame) -> go.Figure:
    """Amount collected per week with the payment count on a second axis"""
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=weekly["weekNo"],
        y=weekly["amountCollected"],
        name="Amount collected",
        marker_color=COLORS["paid"],
    ))
    fig.add_trace(go.Scatter(
        x=weekly["weekNo"],
        y=weekly["numberOfPayments"],
        name="Payments",
        mode="lines+markers",
        yaxis="y2",
        line=dict(color=COLORS["secondary"]),
    ))
    fig.update_layout(
        title="Weekly collections",
        xaxis=dict(title="Week", dtick=1),
        yaxis=dict(title="Amount"),
        yaxis2=dict(title="Payments", overlaying="y", side="right", rangemode="tozero"),
        height=400,
        hovermode="x unified",
    )
    return fig


def create_group_rate_bar(groups: pd.DataFrame) -> go.Figure:
    """Collection rate per group"""
    fig = go.Figure(data=[go.Bar(
        x=groups["groupName"],
        y=groups["collectionRate"],
        text=[f"{v:.2f}%" for v in groups["collectionRate"]],
        textposition="auto",
        marker_color=COLORS["primary"],
    )])
    fig.update_layout(
        title="Collection rate by group",
        yaxis=dict(title="%", range=[0, 100]),
        height=380,
    )
    return fig
