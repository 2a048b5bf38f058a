"""Top‑level package for the Expense Tracker.

A single-page Streamlit app for tracking spending against a monthly
budget and per-category sub-budgets.  The modules are:

* ``models`` – the category set, sort options and state dataclasses
* ``state`` – pure transitions from one tracker state to the next
* ``analytics`` – totals, percentages and the filtered/sorted listing
* ``formatting`` – currency and percentage display strings
* ``visualization`` – Plotly figures for the category breakdown
* ``app`` – the Streamlit controller that ties everything together

To run the app from the command line you can execute:

```bash
streamlit run expense_tracker/Home.py
```

Nothing is persisted: the ledger lives in the browser session and is
gone on reload.
"""

from . import analytics  # noqa: F401  # re-exported for convenience
from . import models  # noqa: F401  # re-exported for convenience
from . import state  # noqa: F401  # re-exported for convenience

__all__ = ["analytics", "models", "state"]
