"""Data model for the expense tracker.

The category set and sort options are fixed, closed collections.  All
records are immutable; state transitions in :mod:`expense_tracker.state`
build new instances with :func:`dataclasses.replace`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, Tuple

# Fixed category set, in display order.  Not user-extensible.
CATEGORIES: Tuple[str, ...] = ('Food', 'Entertainment', 'Transport', 'Utilities', 'Others')
CATEGORY_EMOJIS: Dict[str, str] = {
    'Food': '🍔',
    'Entertainment': '🎮',
    'Transport': '🚗',
    'Utilities': '💡',
    'Others': '📦',
}
DEFAULT_CATEGORY = CATEGORIES[0]

# Filter value meaning "every category"
ALL_CATEGORIES = 'All'
FILTER_OPTIONS: Tuple[str, ...] = (ALL_CATEGORIES,) + CATEGORIES

SORT_NEWEST = 'Newest First'
SORT_OLDEST = 'Oldest First'
SORT_HIGHEST = 'Highest Amount'
SORT_LOWEST = 'Lowest Amount'
SORT_OPTIONS: Tuple[str, ...] = (SORT_NEWEST, SORT_OLDEST, SORT_HIGHEST, SORT_LOWEST)


def is_category(value: object) -> bool:
    return isinstance(value, str) and value in CATEGORIES


def default_category_budgets() -> Dict[str, float]:
    return {category: 0.0 for category in CATEGORIES}


@dataclass(frozen=True)
class Transaction:
    """A recorded expense.  Never mutated after creation."""
    id: int
    description: str
    amount: float
    category: str
    date: date
    timestamp: datetime


@dataclass(frozen=True)
class TrackerState:
    """Everything the tracker holds for one session.

    Budget figures, the ledger, the view settings and the unsaved form
    drafts live together so that each user action is a single
    transition from one state to the next.
    """
    overall_budget: float = 0.0
    category_budgets: Dict[str, float] = field(default_factory=default_category_budgets)
    transactions: Tuple[Transaction, ...] = ()
    filter_category: str = ALL_CATEGORIES
    sort_key: str = SORT_NEWEST
    budget_draft: str = ''
    description_draft: str = ''
    amount_draft: str = ''
    category_draft: str = DEFAULT_CATEGORY
    date_draft: date = field(default_factory=date.today)
    next_id: int = 1
