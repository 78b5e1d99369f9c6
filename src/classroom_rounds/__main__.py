"""Allow ``python -m classroom_rounds``."""

import sys

from .cli import main

sys.exit(main())
