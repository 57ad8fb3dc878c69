"""Allow running as ``python -m wordtally``."""

import sys

from .cli import main

sys.exit(main())
