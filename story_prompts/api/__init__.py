"""
HTTP layer - FastAPI app, routers, schemas and dependencies.
"""
