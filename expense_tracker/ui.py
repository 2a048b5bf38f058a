"""Streamlit UI components for the expense tracker.

``ExpenseTrackerUI`` only draws: it reads figures from an
:class:`~expense_tracker.analytics.ExpenseAnalytics` and wires widgets to
callbacks handed in by the controller in :mod:`expense_tracker.app`.
Widget keys are module constants so the controller can read drafts back
out of ``st.session_state``.
"""

from __future__ import annotations

from typing import Callable

import streamlit as st
from streamlit.errors import StreamlitAPIException

from . import config
from .analytics import ExpenseAnalytics
from .formatting import (
    escape_currency_for_markdown,
    format_currency,
    format_percentage,
    format_transaction_meta,
)
from .models import CATEGORIES, CATEGORY_EMOJIS, FILTER_OPTIONS, SORT_OPTIONS
from .visualization import create_category_budget_chart, create_category_pie_chart

# Widget keys
BUDGET_INPUT_KEY = 'budget_input'
DESCRIPTION_INPUT_KEY = 'description_input'
AMOUNT_INPUT_KEY = 'amount_input'
CATEGORY_INPUT_KEY = 'category_input'
DATE_INPUT_KEY = 'date_input'


def category_budget_key(category: str) -> str:
    return f'category_budget_{category}'


class ExpenseTrackerUI:
    """UI components for the single-page expense tracker."""

    def setup_page_config(self) -> None:
        """Configure Streamlit page settings."""
        try:
            st.set_page_config(
                page_title=config.PAGE_TITLE,
                page_icon=config.PAGE_ICON,
                layout="wide",
                initial_sidebar_state="expanded",
            )
        except StreamlitAPIException:
            # Already configured upstream; avoid raising to keep reruns smooth.
            pass

    # ===== SIDEBAR =====
    def render_category_budgets(
        self,
        analytics: ExpenseAnalytics,
        on_change: Callable[[str], None],
    ) -> None:
        """Render the per-category budget inputs and their usage."""
        st.sidebar.title(config.PAGE_TITLE)
        st.sidebar.subheader("Category Budgets")

        for category in CATEGORIES:
            budget = analytics.state.category_budgets.get(category, 0.0)
            spent = analytics.category_spent(category)
            percentage = analytics.category_percentage(category)

            box = st.sidebar.container(border=True)
            label_col, budget_col = box.columns([3, 2])
            label_col.markdown(f"{CATEGORY_EMOJIS[category]} **{category}**")
            budget_col.markdown(escape_currency_for_markdown(f"**{format_currency(budget)}**"))
            box.text_input(
                f"{category} budget",
                key=category_budget_key(category),
                placeholder="Set budget",
                label_visibility="collapsed",
                on_change=on_change,
                args=(category,),
            )
            box.caption(escape_currency_for_markdown(
                f"Spent: {format_currency(spent)} ({format_percentage(percentage, 0)}% used)"
            ))

    # ===== OVERVIEW =====
    def render_overview(self, analytics: ExpenseAnalytics) -> None:
        """Render the budget, spent and remaining cards."""
        summary = analytics.summary()
        percent = format_percentage(summary['spent_percentage'], 1)

        col1, col2, col3 = st.columns(3)

        with col1:
            st.metric(label="Total Budget", value=format_currency(summary['budget']))
            st.caption(f"{percent}% allocated")

        with col2:
            st.metric(label="Spent", value=format_currency(summary['total_spent']))
            st.caption(f"{percent}% of budget")
            st.caption(escape_currency_for_markdown(
                f"{format_currency(summary['avg_per_day'])}/day average"
            ))

        with col3:
            st.metric(label="Remaining", value=format_currency(summary['remaining']))

    # ===== FORMS =====
    def render_budget_form(self, on_submit: Callable[[], None]) -> None:
        """Render the monthly budget input."""
        st.subheader("📅 Monthly Budget")
        input_col, button_col = st.columns([4, 1], vertical_alignment="bottom")
        input_col.text_input(
            "Set Budget Amount",
            key=BUDGET_INPUT_KEY,
            placeholder="Enter amount...",
        )
        button_col.button(
            "Set Budget",
            key='set_budget_button',
            on_click=on_submit,
            use_container_width=True,
        )

    def render_add_transaction_form(self, on_submit: Callable[[], None]) -> None:
        """Render the add-transaction inputs.

        Values stay in the widgets after a rejected submission; the
        controller clears them after a successful one.
        """
        st.subheader("➕ Add Transaction")
        col1, col2 = st.columns(2)

        with col1:
            st.text_input("Description", key=DESCRIPTION_INPUT_KEY, placeholder="e.g., Lunch at cafe")
            st.selectbox("Category", options=list(CATEGORIES), key=CATEGORY_INPUT_KEY)

        with col2:
            st.text_input("Amount", key=AMOUNT_INPUT_KEY, placeholder="e.g., 500")
            st.date_input("Date", key=DATE_INPUT_KEY)

        st.button(
            "Add Transaction",
            key='add_transaction_button',
            type="primary",
            on_click=on_submit,
            use_container_width=True,
        )

    # ===== HISTORY =====
    def render_history(
        self,
        analytics: ExpenseAnalytics,
        on_filter: Callable[[str], None],
        on_sort: Callable[[str], None],
        on_delete: Callable[[int], None],
    ) -> None:
        """Render filter and sort controls followed by the transaction list."""
        state = analytics.state
        transactions = analytics.list_transactions()

        header_col, count_col = st.columns([3, 1])
        header_col.subheader("📊 Transaction History")
        count_col.markdown(f"{analytics.filtered_count()} transactions")

        st.caption("Filter by Category")
        for col, option in zip(st.columns(len(FILTER_OPTIONS)), FILTER_OPTIONS):
            col.button(
                option,
                key=f'filter_{option}',
                type="primary" if state.filter_category == option else "secondary",
                on_click=on_filter,
                args=(option,),
                use_container_width=True,
            )

        st.caption("Sort by")
        for col, option in zip(st.columns(len(SORT_OPTIONS)), SORT_OPTIONS):
            col.button(
                option,
                key=f'sort_{option}',
                type="primary" if state.sort_key == option else "secondary",
                on_click=on_sort,
                args=(option,),
                use_container_width=True,
            )

        if not transactions:
            st.markdown("### 📊")
            st.markdown("**No transactions yet**")
            st.caption("Add your first transaction to get started!")
            return

        for transaction in transactions:
            row = st.container(border=True)
            emoji_col, text_col, amount_col, delete_col = row.columns([1, 6, 2, 1])
            emoji_col.markdown(f"## {CATEGORY_EMOJIS[transaction.category]}")
            text_col.markdown(escape_currency_for_markdown(f"**{transaction.description}**"))
            text_col.caption(format_transaction_meta(transaction))
            amount_col.markdown(escape_currency_for_markdown(
                f"**{format_currency(transaction.amount)}**"
            ))
            delete_col.button(
                "🗑️",
                key=f'delete_{transaction.id}',
                help="Delete transaction",
                on_click=on_delete,
                args=(transaction.id,),
            )

    def render_category_charts(self, analytics: ExpenseAnalytics) -> None:
        """Render the spend-versus-budget and share-of-spend charts."""
        summary = analytics.category_summary()
        with st.expander("📈 Category breakdown", expanded=False):
            bar_col, pie_col = st.columns(2)
            bar_col.plotly_chart(create_category_budget_chart(summary), use_container_width=True)
            pie_col.plotly_chart(create_category_pie_chart(summary), use_container_width=True)
