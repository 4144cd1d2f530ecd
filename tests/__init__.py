# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the gallery server:
# - test_utils.py / test_models.py: Unit tests for helpers and schemas
# - test_templates.py, test_catalog_service.py, test_pages.py,
#   test_config_store.py, test_upload_service.py: Service tests
# - test_routes.py: HTTP tests through FastAPI's TestClient
#
# Run tests with: poetry run pytest
# =============================================================================
