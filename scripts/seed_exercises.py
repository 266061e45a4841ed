"""Load the bundled exercise catalog into the database (skips names that already exist)."""

import asyncio
import json
import logging
import os
import sys
from pathlib import Path

# Add parent directory to path so we can import fitcoach modules
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from sqlalchemy import select

from fitcoach.core.config import get_settings
from fitcoach.core.logging import configure_logging
from fitcoach.db.session import async_session_maker, engine
from fitcoach.models.exercise import Exercise
from fitcoach.schemas.exercise import ExerciseCreate

logger = logging.getLogger("seed_exercises")

CATALOG_PATH = Path(__file__).resolve().parent.parent / "fitcoach" / "data" / "exercise_catalog.json"


def load_catalog(path: Path = CATALOG_PATH) -> list[ExerciseCreate]:
    with open(path, encoding="utf-8") as fh:
        return [ExerciseCreate.model_validate(item) for item in json.load(fh)]


async def main(path: Path = CATALOG_PATH) -> None:
    configure_logging(get_settings().log_level)
    entries = load_catalog(path)
    async with async_session_maker() as session:
        result = await session.execute(select(Exercise.name))
        existing = set(result.scalars().all())
        added = 0
        for entry in entries:
            if entry.name in existing:
                continue
            session.add(Exercise(**entry.model_dump()))
            added += 1
        await session.commit()
    logger.info("Seeded %d exercises (%d already present)", added, len(entries) - added)
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main(Path(sys.argv[1]) if len(sys.argv) > 1 else CATALOG_PATH))
