"""Database session dependency.

Route exceptions are thrown into ``get_session`` so the request's work is
rolled back before the error handler answers.
"""

from asset_registry.infrastructure.database import get_session

get_db_session = get_session

__all__ = ["get_db_session"]
