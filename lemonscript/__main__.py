# Author:   LemonScript developers
# Date:     10/19/2026

import sys

from lemonscript.cli import main

sys.exit(main())
