"""
Transaction scope for service methods
"""

import functools
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.sql_client import translate_error

logger = logging.getLogger(__name__)


def transactional(method):
    """
    Run a service method as one transaction on ``self.db``.

    Commits when the method returns, rolls back and re-raises when it raises.
    A failing commit (e.g. a deferred constraint) is rolled back too and
    surfaces as a DataAccessError. Every exit path ends the transaction, so
    the next call starts fresh.
    """
    @functools.wraps(method)
    async def wrapper(self, *args, **kwargs):
        operation = f"{type(self).__name__}.{method.__name__}"
        try:
            result = await method(self, *args, **kwargs)
            await self.db.commit()
        except SQLAlchemyError as e:
            logger.warning(f"{operation} failed at commit, rolling back")
            await self.db.rollback()
            raise translate_error(e, {"operation": operation}) from e
        except Exception:
            logger.warning(f"{operation} failed, rolling back")
            await self.db.rollback()
            raise
        return result

    return wrapper


class BaseService:
    def __init__(self, db_session: AsyncSession):
        self.db = db_session
