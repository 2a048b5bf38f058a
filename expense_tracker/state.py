"""State transitions for the expense tracker.

Every public function here takes a :class:`TrackerState` and returns the
next one.  Nothing is mutated in place.  Invalid input never raises: the
transition simply returns the state it was given, which is how the page
signals that nothing happened (the form keeps its values).
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Any, Callable, Optional

from .models import (
    FILTER_OPTIONS,
    SORT_OPTIONS,
    TrackerState,
    Transaction,
    default_category_budgets,
    is_category,
)
from .parsing import parse_amount, parse_budget, parse_category_budget

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
Calendar = Callable[[], date]


def new_state(today: Optional[Calendar] = None) -> TrackerState:
    """Create an empty tracker: zero budgets, no transactions, default view."""
    today = today or date.today
    return TrackerState(category_budgets=default_category_budgets(), date_draft=today())


# ===== BUDGETS =====

def set_budget_draft(state: TrackerState, value: Any) -> TrackerState:
    return replace(state, budget_draft='' if value is None else str(value))


def set_budget(state: TrackerState) -> TrackerState:
    """Apply the overall budget draft.

    The draft must parse to a positive number.  On success the budget is
    replaced and the draft cleared; otherwise the state is returned as is
    and the draft is kept.
    """
    value = parse_budget(state.budget_draft)
    if value is None:
        logger.debug("Ignoring overall budget draft %r", state.budget_draft)
        return state
    logger.debug("Overall budget set to %s", value)
    return replace(state, overall_budget=value, budget_draft='')


def set_category_budget(state: TrackerState, category: str, value: Any) -> TrackerState:
    """Store a category budget.  Unparseable input is stored as zero."""
    if not is_category(category):
        logger.debug("Ignoring budget for unknown category %r", category)
        return state
    budgets = dict(state.category_budgets)
    budgets[category] = parse_category_budget(value)
    logger.debug("Budget for %s set to %s", category, budgets[category])
    return replace(state, category_budgets=budgets)


# ===== TRANSACTIONS =====

def update_transaction_draft(
    state: TrackerState,
    *,
    description: Optional[str] = None,
    amount: Any = None,
    category: Optional[str] = None,
    date: Optional[date] = None,
) -> TrackerState:
    """Replace any of the add-transaction drafts.  ``None`` leaves a field alone."""
    changes = {}
    if description is not None:
        changes['description_draft'] = description
    if amount is not None:
        changes['amount_draft'] = str(amount)
    if category is not None:
        if is_category(category):
            changes['category_draft'] = category
        else:
            logger.debug("Ignoring unknown category draft %r", category)
    if date is not None:
        changes['date_draft'] = date
    return replace(state, **changes) if changes else state


def add_transaction(
    state: TrackerState,
    now: Optional[Clock] = None,
    today: Optional[Calendar] = None,
) -> TrackerState:
    """Record a transaction from the current drafts.

    Requires a non-empty description and an amount that parses to a
    positive number.  On success the transaction gets the next identifier
    and the current instant as its timestamp; the description and amount
    drafts are cleared, the date draft goes back to today and the category
    draft is kept.

    Args:
        state: Current tracker state
        now: Clock used for the creation timestamp (defaults to ``datetime.now``)
        today: Calendar used to reset the date draft (defaults to ``date.today``)

    Returns:
        The next state, or ``state`` itself if the drafts were invalid
    """
    now = now or datetime.now
    today = today or date.today

    description = state.description_draft
    amount = parse_amount(state.amount_draft)
    if not description or amount is None:
        logger.debug(
            "Ignoring transaction draft (description=%r, amount=%r)",
            description, state.amount_draft,
        )
        return state
    if not is_category(state.category_draft):
        return state

    transaction = Transaction(
        id=state.next_id,
        description=description,
        amount=amount,
        category=state.category_draft,
        date=state.date_draft,
        timestamp=now(),
    )
    logger.debug("Added transaction %s: %s %s", transaction.id, transaction.category, amount)
    return replace(
        state,
        transactions=state.transactions + (transaction,),
        next_id=state.next_id + 1,
        description_draft='',
        amount_draft='',
        date_draft=today(),
    )


def delete_transaction(state: TrackerState, transaction_id: int) -> TrackerState:
    """Remove the transaction with ``transaction_id``; no-op if absent."""
    remaining = tuple(t for t in state.transactions if t.id != transaction_id)
    if len(remaining) == len(state.transactions):
        logger.debug("No transaction with id %r to delete", transaction_id)
        return state
    logger.debug("Deleted transaction %s", transaction_id)
    return replace(state, transactions=remaining)


# ===== VIEW =====

def set_filter(state: TrackerState, filter_category: str) -> TrackerState:
    if filter_category not in FILTER_OPTIONS:
        logger.debug("Ignoring unknown filter %r", filter_category)
        return state
    return replace(state, filter_category=filter_category)


def set_sort(state: TrackerState, sort_key: str) -> TrackerState:
    if sort_key not in SORT_OPTIONS:
        logger.debug("Ignoring unknown sort key %r", sort_key)
        return state
    return replace(state, sort_key=sort_key)
