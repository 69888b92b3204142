#!/usr/bin/env python3
"""Send the sample email and SMS notifications to stdout."""

from __future__ import annotations

import sys
from pathlib import Path

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from notification_system.demo import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
