"""Allow ``python -m axaml_outline``."""

import sys

from axaml_outline.cli import main

sys.exit(main())
