# =============================================================================
# lib/ - Standalone Component Modules
# =============================================================================
# Each module wraps one outside dependency:
# - hashing.py: bcrypt password hashing
# - tokens.py: Signed JWT issue/verify
# - mailer.py: SMTP transactional email
# - fetcher.py: Single outbound HTTP GET
# - database.py: MongoDB client and background connection attempt
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.database import DatabaseConnector, DatabaseState
from lib.fetcher import ExternalFetcher
from lib.hashing import PasswordHasher
from lib.mailer import Mailer
from lib.tokens import TokenIssuer

__all__ = [
    "DatabaseConnector",
    "DatabaseState",
    "ExternalFetcher",
    "PasswordHasher",
    "Mailer",
    "TokenIssuer",
]
