#!/usr/bin/env python3
"""Direct launcher for the Contribution Ledger page.

This script launches Streamlit on ``contribution_ledger/app.py`` from the
project root so the package imports resolve.
"""

import sys
import subprocess
from pathlib import Path

project_root = Path(__file__).parent.resolve()
app_path = project_root / "contribution_ledger" / "app.py"

if __name__ == "__main__":
    subprocess.run(
        [sys.executable, "-m", "streamlit", "run", str(app_path)],
        cwd=project_root,
    )
