"""Allow ``python -m fortune_kind``."""

import sys

from fortune_kind.cli import main

sys.exit(main())
