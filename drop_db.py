"""Drop every fitcoach table (and Alembic's version table). Development use only."""

import asyncio
import os
import sys

# Add project root to path
sys.path.append(os.getcwd())

from sqlalchemy import text

from fitcoach.db.base import Base
from fitcoach.db.session import engine
from fitcoach.models import *  # noqa: F401, F403 - register all models


async def drop_tables():
    print("Dropping all tables...")
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE IF EXISTS alembic_version"))
        await conn.run_sync(Base.metadata.drop_all)
        for enum_name in ("mediatype", "chatrole"):
            await conn.execute(text(f"DROP TYPE IF EXISTS {enum_name}"))
    print("Tables dropped.")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(drop_tables())
