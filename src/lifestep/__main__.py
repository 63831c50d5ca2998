"""Run the lifestep CLI with ``python -m lifestep``."""

import sys

from .frontends.cli import main

sys.exit(main())
