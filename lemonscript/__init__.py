# Author:   LemonScript developers
# Date:     10/19/2026

__version__ = "0.4.0"
