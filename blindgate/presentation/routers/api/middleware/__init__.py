"""Request middleware and FastAPI auth dependencies."""
