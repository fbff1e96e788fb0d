"""Allow ``python -m wp_meta_kit``."""

import sys

from .cli import main

sys.exit(main())
