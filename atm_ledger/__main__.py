"""Allow ``python -m atm_ledger``."""

import sys

from atm_ledger.cli import main

if __name__ == "__main__":
    sys.exit(main())
