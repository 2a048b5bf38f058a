#!/usr/bin/env python3
"""Direct launcher for the Expense Tracker.

This script launches Streamlit on ``expense_tracker/Home.py`` from the
project root.
"""

import sys
import subprocess
from pathlib import Path

project_root = Path(__file__).parent.resolve()
home_page = project_root / "expense_tracker" / "Home.py"

if __name__ == "__main__":
    subprocess.run([
        sys.executable, "-m", "streamlit", "run",
        str(home_page),
    ], cwd=project_root)
