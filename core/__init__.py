# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the gallery's business logic:
# - models/: Pydantic schemas for catalog entries, config and uploads
# - services/: Template store, accessors, page builders, config store, uploads
#
# Services raise app.exceptions errors but never import FastAPI routing,
# so they can be tested directly against a temporary directory.
# =============================================================================
