# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic logic:
# - models/: Pydantic schemas (user stub, mail message, demo report)
# - services/: The startup demo orchestrator
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
