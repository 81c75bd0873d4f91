from __future__ import annotations

import sys

from tripsplit.cli import main

if __name__ == "__main__":
    sys.exit(main())
