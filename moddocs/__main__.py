"""Entry point for ``python -m moddocs``."""

import sys

from .cli import main

sys.exit(main())
