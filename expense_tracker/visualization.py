"""Plotly visualisation helpers for the expense tracker.

Each function accepts the category summary produced by
:meth:`expense_tracker.analytics.ExpenseAnalytics.category_summary` and
returns a `plotly.graph_objects.Figure` that Streamlit renders via
``st.plotly_chart``.
"""

from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from . import config


def _empty_figure() -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title="No data to display")
    return fig


def create_category_budget_chart(summary: pd.DataFrame, title: str | None = None) -> go.Figure:
    """Grouped bar chart of spent versus budget for each category.

    Parameters
    ----------
    summary : pandas.DataFrame
        Category summary with ``Category``, ``Budget`` and ``Spent`` columns.
    title : str, optional
        Chart title.

    Returns
    -------
    plotly.graph_objects.Figure
        Grouped bar chart, or an empty figure when nothing is budgeted
        or spent.
    """
    if summary.empty or not (summary[['Budget', 'Spent']] > 0).any().any():
        return _empty_figure()
    df = summary.melt(
        id_vars=['Category'],
        value_vars=['Budget', 'Spent'],
        var_name='Measure',
        value_name='Amount',
    )
    fig = px.bar(df, x='Category', y='Amount', color='Measure', barmode='group')
    fig.update_layout(
        title=title or "Spending vs budget by category",
        xaxis_title="Category",
        yaxis_title=f"Amount ({config.CURRENCY_SYMBOL})",
    )
    return fig


def create_category_pie_chart(summary: pd.DataFrame, title: str | None = None) -> go.Figure:
    """Pie chart of how total spending splits across categories.

    Parameters
    ----------
    summary : pandas.DataFrame
        Category summary with ``Category`` and ``Spent`` columns.
    title : str, optional
        Chart title.

    Returns
    -------
    plotly.graph_objects.Figure
        Pie chart of categories with spending, or an empty figure.
    """
    spent = summary[summary['Spent'] > 0] if not summary.empty else summary
    if spent.empty:
        return _empty_figure()
    fig = px.pie(spent, names='Category', values='Spent')
    fig.update_layout(title=title or "Spending by category")
    return fig
