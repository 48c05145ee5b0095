"""Allow ``python -m globe_optimizer``."""

import sys

from globe_optimizer.cli import main

sys.exit(main())
