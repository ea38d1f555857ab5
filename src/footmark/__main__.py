"""Allow ``python -m footmark INPUT OUTPUT``."""

import sys

from footmark.cli import main

sys.exit(main())
