"""
post_platform

- ``post_service``: the FastAPI application (routes, ORM models, auth, config)
- ``migration``: Alembic revisions that build and seed the database schema
"""
