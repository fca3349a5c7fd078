"""
post_service package

This package contains the web application for the post service.
It includes:

- FastAPI application (`main.py`) with JSON (`routes/api.py`) and HTML (`routes/pages.py`) routes
- SQLAlchemy models and database integration (`models.py`, `db.py`)
- Password hashing and JWT logic (`auth.py`)
- Pydantic schemas (`schemas.py`) and settings (`config.py`)
"""
