import argparse
import asyncio
import logging
import sys
import os

# Add current directory to path to allow imports from core, models, etc.
sys.path.append(os.getcwd())

from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from core.config import settings
from core.logging import setup_logging
from core.sample_data import load_sample_data
# Import all models to ensure they are registered
from models import Base

logger = logging.getLogger(__name__)


async def init_database(drop: bool = False, seed: bool = False):
    logger.info("Connecting to database...")
    engine = create_async_engine(settings.DATABASE_URL, echo=settings.ENVIRONMENT == "development")

    async with engine.begin() as conn:
        if drop:
            logger.info("Dropping tables...")
            await conn.run_sync(Base.metadata.drop_all)
        logger.info("Creating tables...")
        await conn.run_sync(Base.metadata.create_all)
        logger.info("Tables created successfully.")

    if seed:
        session_maker = async_sessionmaker(engine, expire_on_commit=False)
        async with session_maker() as session:
            await load_sample_data(session)

    await engine.dispose()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Create the storefront schema")
    parser.add_argument("--drop", action="store_true", help="drop existing tables first")
    parser.add_argument(
        "--seed",
        action="store_true",
        default=settings.SEED_SAMPLE_DATA,
        help="load sample customers, products, orders and users",
    )
    return parser.parse_args(argv)


if __name__ == "__main__":
    setup_logging()
    args = parse_args()
    asyncio.run(init_database(drop=args.drop, seed=args.seed))
