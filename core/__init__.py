"""
Core utilities and configuration for the Storefront SQL API.

This package provides foundational components used by every layer:

Modules:
    config: Application configuration and environment variable management
    database: Async engine and session management
    exceptions: Exception hierarchy for failed statements
    logging: Logging configuration
    sql_client: Fluent named-parameter SQL client over an AsyncSession
    sample_data: Sample rows used by init_db and the test suite

Usage:
    from core.config import settings
    from core.database import get_session
    from core.sql_client import SqlClient

Example:
    async with async_session_maker() as session:
        client = SqlClient(session)
        name = await (
            client.sql("SELECT name FROM customers WHERE id = :id")
            .param("id", 1)
            .query()
            .optional()
        )
"""

__all__ = [
    "settings",
    "get_session",
    "setup_logging",
    "SqlClient",
    "StatementSpec",
    "MappedQuery",
    # Exceptions
    "StorefrontException",
    "DataAccessError",
    "ConstraintViolationError",
    "ResultShapeError",
]
