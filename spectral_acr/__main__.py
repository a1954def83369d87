"""Allow ``python -m spectral_acr``."""

import sys

from spectral_acr.cli import main

sys.exit(main())
