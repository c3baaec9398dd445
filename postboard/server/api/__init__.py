"""FastAPI route definitions."""
