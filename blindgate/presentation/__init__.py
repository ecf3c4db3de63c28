"""HTTP presentation layer (FastAPI routers, middleware, error rendering)."""
