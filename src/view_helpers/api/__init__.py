"""FastAPI application serving helper-backed templates."""
