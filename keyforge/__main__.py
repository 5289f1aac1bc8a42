"""Allow running as ``python -m keyforge``."""

from __future__ import annotations

import sys
from pathlib import Path

# Support direct execution via file path (e.g., ``python keyforge/__main__.py``)
if __package__ in (None, ""):
    _project_root = Path(__file__).resolve().parent.parent
    if str(_project_root) not in sys.path:
        sys.path.insert(0, str(_project_root))

from keyforge.main import main

main()
