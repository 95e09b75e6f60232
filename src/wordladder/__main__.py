"""Allow running the solver with `python -m wordladder`."""

import sys

from wordladder import main

sys.exit(main())
