"""Allow ``python -m ppr``."""

import sys

from ppr.cli import main

sys.exit(main())
