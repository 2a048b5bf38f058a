"""Expense analytics over a tracker state.

All figures are derived on every call from the ledger and budgets held in
a :class:`~expense_tracker.models.TrackerState`.  Nothing is cached; the
ledger is small enough that a linear scan per read is fine.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd

from . import config
from .formatting import to_fixed
from .models import (
    ALL_CATEGORIES,
    CATEGORIES,
    CATEGORY_EMOJIS,
    SORT_HIGHEST,
    SORT_LOWEST,
    SORT_NEWEST,
    SORT_OLDEST,
    TrackerState,
    Transaction,
)

SUMMARY_COLUMNS = ['Category', 'Emoji', 'Budget', 'Spent', 'Percent Used']

# (attribute, descending) per sort option
_SORT_SPEC = {
    SORT_NEWEST: ('timestamp', True),
    SORT_OLDEST: ('timestamp', False),
    SORT_HIGHEST: ('amount', True),
    SORT_LOWEST: ('amount', False),
}


def round_half_up(value: float, places: int) -> float:
    """Round the exact binary value of ``value`` half-up to ``places`` decimals.

    Ties round away from zero, unlike ``round()``: 12.25 gives 12.3.

    Example:
        >>> round_half_up(0.25, 1)
        0.3
    """
    return float(to_fixed(value, places))


class ExpenseAnalytics:
    """Budget and spending calculations for one tracker state."""

    def __init__(self, state: TrackerState, average_days: Optional[int] = None):
        self.state = state
        self.average_days = average_days or config.AVERAGE_DAYS

    # ===== TOTALS =====
    def total_spent(self) -> float:
        """Sum of every transaction amount, regardless of the active filter."""
        return sum((t.amount for t in self.state.transactions), 0.0)

    def remaining(self) -> float:
        """Overall budget minus total spent.  Can be negative."""
        return self.state.overall_budget - self.total_spent()

    def spent_percentage(self) -> float:
        """Share of the overall budget spent, in percent with one decimal.

        Zero when no overall budget is set.
        """
        budget = self.state.overall_budget
        if budget <= 0:
            return 0.0
        return round_half_up(self.total_spent() / budget * 100, 1)

    def avg_per_day(self) -> float:
        """Total spent spread over a fixed month length, two decimals."""
        if not self.state.transactions:
            return 0.0
        return round_half_up(self.total_spent() / self.average_days, 2)

    # ===== CATEGORIES =====
    def category_spent(self, category: str) -> float:
        return sum(
            (t.amount for t in self.state.transactions if t.category == category),
            0.0,
        )

    def category_percentage(self, category: str) -> float:
        """Share of a category budget spent, in percent.  Zero without a budget."""
        budget = self.state.category_budgets.get(category, 0.0)
        if budget <= 0:
            return 0.0
        return self.category_spent(category) / budget * 100

    def category_summary(self) -> pd.DataFrame:
        """One row per category with its budget, spend and percent used."""
        rows = [
            {
                'Category': category,
                'Emoji': CATEGORY_EMOJIS[category],
                'Budget': float(self.state.category_budgets.get(category, 0.0)),
                'Spent': self.category_spent(category),
                'Percent Used': self.category_percentage(category),
            }
            for category in CATEGORIES
        ]
        return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)

    # ===== LISTING =====
    def list_transactions(
        self,
        filter_category: Optional[str] = None,
        sort_key: Optional[str] = None,
    ) -> List[Transaction]:
        """Transactions matching the filter, in sort order.

        Defaults to the filter and sort held in the state.  The ledger
        itself is left untouched; ties keep their insertion order.
        """
        filter_category = filter_category or self.state.filter_category
        sort_key = sort_key or self.state.sort_key

        if filter_category == ALL_CATEGORIES:
            selected = list(self.state.transactions)
        else:
            selected = [t for t in self.state.transactions if t.category == filter_category]

        spec = _SORT_SPEC.get(sort_key)
        if spec is None:
            return selected
        attribute, descending = spec
        return sorted(selected, key=lambda t: getattr(t, attribute), reverse=descending)

    def filtered_count(self) -> int:
        return len(self.list_transactions())

    def summary(self) -> Dict[str, Any]:
        """Figures shown on the overview cards."""
        return {
            'budget': self.state.overall_budget,
            'total_spent': self.total_spent(),
            'remaining': self.remaining(),
            'spent_percentage': self.spent_percentage(),
            'avg_per_day': self.avg_per_day(),
            'transaction_count': len(self.state.transactions),
        }
