"""Expense Tracker - Streamlit controller.

Owns the session's :class:`~expense_tracker.models.TrackerState` in
``st.session_state`` and turns widget events into state transitions from
:mod:`expense_tracker.state`.  Rendering is delegated to
:class:`~expense_tracker.ui.ExpenseTrackerUI`.

Widget callbacks run before Streamlit re-executes the script, so they may
write widget keys directly; that is how drafts are cleared after a
successful submission.

To run the app from the command line::

    streamlit run expense_tracker/Home.py
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Optional

import streamlit as st

from . import config
from . import state as transitions
from .analytics import ExpenseAnalytics
from .models import CATEGORIES, TrackerState
from .ui import (
    AMOUNT_INPUT_KEY,
    BUDGET_INPUT_KEY,
    CATEGORY_INPUT_KEY,
    DATE_INPUT_KEY,
    DESCRIPTION_INPUT_KEY,
    ExpenseTrackerUI,
    category_budget_key,
)

logger = logging.getLogger(__name__)

STATE_KEY = 'tracker_state'

# Clocks for new transaction timestamps and the date draft reset
_now: Callable[[], datetime] = datetime.now
_today: Callable[[], date] = date.today

_LOGGING_CONFIGURED = False


def configure_logging() -> None:
    """Apply ``config.LOG_LEVEL`` once per process."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _LOGGING_CONFIGURED = True


# ===== SESSION STATE =====

def get_state() -> TrackerState:
    """Return the session's tracker state, creating it on first use."""
    if STATE_KEY not in st.session_state:
        tracker = transitions.new_state(today=_today)
        st.session_state[STATE_KEY] = tracker
        _sync_drafts_to_widgets(tracker)
        for category in CATEGORIES:
            st.session_state[category_budget_key(category)] = ''
        logger.debug("Initialised tracker state")
    return st.session_state[STATE_KEY]


def _commit(tracker: TrackerState) -> None:
    st.session_state[STATE_KEY] = tracker
    _sync_drafts_to_widgets(tracker)


def _sync_drafts_to_widgets(tracker: TrackerState) -> None:
    st.session_state[BUDGET_INPUT_KEY] = tracker.budget_draft
    st.session_state[DESCRIPTION_INPUT_KEY] = tracker.description_draft
    st.session_state[AMOUNT_INPUT_KEY] = tracker.amount_draft
    st.session_state[CATEGORY_INPUT_KEY] = tracker.category_draft
    st.session_state[DATE_INPUT_KEY] = tracker.date_draft


def _widget_value(key: str, default: Optional[object] = None):
    value = st.session_state.get(key, default)
    return default if value is None else value


# ===== CALLBACKS =====

def handle_set_budget() -> None:
    tracker = transitions.set_budget_draft(get_state(), _widget_value(BUDGET_INPUT_KEY, ''))
    _commit(transitions.set_budget(tracker))


def handle_category_budget_change(category: str) -> None:
    value = _widget_value(category_budget_key(category), '')
    st.session_state[STATE_KEY] = transitions.set_category_budget(get_state(), category, value)


def handle_add_transaction() -> None:
    tracker = get_state()
    tracker = transitions.update_transaction_draft(
        tracker,
        description=_widget_value(DESCRIPTION_INPUT_KEY, ''),
        amount=_widget_value(AMOUNT_INPUT_KEY, ''),
        category=_widget_value(CATEGORY_INPUT_KEY, tracker.category_draft),
        date=_widget_value(DATE_INPUT_KEY, tracker.date_draft),
    )
    _commit(transitions.add_transaction(tracker, now=_now, today=_today))


def handle_delete_transaction(transaction_id: int) -> None:
    st.session_state[STATE_KEY] = transitions.delete_transaction(get_state(), transaction_id)


def handle_filter(filter_category: str) -> None:
    st.session_state[STATE_KEY] = transitions.set_filter(get_state(), filter_category)


def handle_sort(sort_key: str) -> None:
    st.session_state[STATE_KEY] = transitions.set_sort(get_state(), sort_key)


# ===== PAGE =====

def main() -> None:
    """Entry point for the Streamlit app."""
    configure_logging()
    ui = ExpenseTrackerUI()
    ui.setup_page_config()

    analytics = ExpenseAnalytics(get_state())

    ui.render_category_budgets(analytics, on_change=handle_category_budget_change)
    ui.render_overview(analytics)
    st.divider()
    ui.render_budget_form(on_submit=handle_set_budget)
    st.divider()
    ui.render_add_transaction_form(on_submit=handle_add_transaction)
    st.divider()
    ui.render_history(
        analytics,
        on_filter=handle_filter,
        on_sort=handle_sort,
        on_delete=handle_delete_transaction,
    )
    ui.render_category_charts(analytics)

