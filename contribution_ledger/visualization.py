"""Plotly chart helpers for the contribution ledger page."""

from __future__ import annotations

from decimal import Decimal
from typing import Union

import plotly.graph_objects as go

from . import config

Number = Union[Decimal, float, int]


def create_budget_usage_chart(initial_budget: Number, remaining_budget: Number) -> go.Figure:
    """Donut chart of the contributed share against what is left.

    Parameters
    ----------
    initial_budget : Decimal or float
        Configured budget.
    remaining_budget : Decimal or float
        Budget still available. Negative values are shown as zero.

    Returns
    -------
    plotly.graph_objects.Figure
        Two-slice pie chart with a hole, ordered contributed then remaining.
    """
    initial = float(initial_budget)
    remaining = max(float(remaining_budget), 0.0)
    contributed = max(initial - remaining, 0.0)
    fig = go.Figure(
        go.Pie(
            labels=["Contributed", "Remaining"],
            values=[contributed, remaining],
            hole=0.6,
            sort=False,
            marker=dict(colors=["#16a34a", "#e5e7eb"]),
            textinfo="percent",
            hovertemplate=f"%{{label}}: %{{value:,.2f}} {config.CURRENCY_SYMBOL}<extra></extra>",
        )
    )
    fig.update_layout(
        showlegend=True,
        margin=dict(t=10, b=10, l=10, r=10),
        height=220,
    )
    return fig
