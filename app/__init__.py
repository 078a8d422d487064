# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the HTTP shell:
# - main.py: App factory, middleware setup, error handlers, lifespan
# - server.py: uvicorn runner that starts the demo once the port is bound
# - config.py: Environment variable loading and settings
# - logging_config.py: JSON logger construction
# - exceptions.py: Error taxonomy shared by every package
# - middleware.py: Security headers and request logging
# - routers/: Route definitions
#
# The app layer is thin - it handles HTTP concerns and delegates
# everything else to core/ and lib/.
# =============================================================================
