"""Allow running the CLI solver with ``python -m cli_solver``."""

import sys

from .main import main

sys.exit(main())
