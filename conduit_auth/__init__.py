"""
conduit_auth package

This package contains the backend logic for the Conduit authentication service.
It includes:

- FastAPI application (`main.py`) and the users router (`routes/users.py`)
- SQLAlchemy models and database integration (`models.py`, `db.py`)
- Password hashing and JWT logic (`auth.py`)
- Account operations: sign-up, login, current user, profile update (`service.py`)
- Pydantic schemas (`schemas.py`) and settings (`config.py`)
"""
