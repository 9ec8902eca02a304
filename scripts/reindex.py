#!/usr/bin/env python3
"""
Reindex the semantic-search demo from scripts/seed-data.json.

Usage:
  python scripts/reindex.py            # uses API_KEY / API_KEY_WRITER from .env.development
  python scripts/reindex.py --clean    # delete existing docs first
"""

import sys
from pathlib import Path

# Ensure project root on path
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from reindexer.cli import main


if __name__ == "__main__":
    sys.exit(main())
