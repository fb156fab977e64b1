"""
Tests for the conduit_auth package.

- `test_service.py`: account operations against a SQLite database
- `test_auth.py`: password hashing and JWT helpers
- `test_routes.py`: HTTP endpoints through FastAPI's TestClient
- `test_db_init.py`: table creation
- `test_logging_config.py`: logging handlers
"""
