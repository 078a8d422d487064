# =============================================================================
# tests/ - Test Suite
# =============================================================================
# - test_hashing.py / test_tokens.py: credential components
# - test_mailer.py / test_fetcher.py: outbound services (mocked)
# - test_database.py: background MongoDB connection attempt
# - test_demo_service.py: startup demo sequencing and failure isolation
# - test_app.py / test_server.py: HTTP shell and listener-ready hook
# - test_logging_config.py / test_exceptions.py: ambient stack
#
# Run tests with: pytest
# =============================================================================
