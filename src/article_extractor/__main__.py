"""Allow running as python -m article_extractor."""

import sys

from .cli import main

sys.exit(main())
