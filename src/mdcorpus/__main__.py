"""Allow ``python -m mdcorpus``."""

import sys

from mdcorpus.main import main

sys.exit(main())
