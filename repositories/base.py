from sqlalchemy.ext.asyncio import AsyncSession
from core.sql_client import SqlClient


class BaseRepository:
    """Holds the injected session and a SqlClient bound to it."""

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.client = SqlClient(db_session)
