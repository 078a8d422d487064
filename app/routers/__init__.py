# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# - root.py: The welcome endpoint at GET /
#
# Each router is mounted in main.py.
# =============================================================================

from . import root

__all__ = [
    "root",
]
