import re
import unittest
import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from sqlalchemy.dialects import postgresql

from fitcoach.core.constants import USER_ID
from fitcoach.models.plan import WorkoutPlan
from fitcoach.models.workout import WorkoutSet
from fitcoach.repositories import PlanRepository, WorkoutRepository
from fitcoach.schemas.plan import PlanExerciseCreate, WorkoutPlanCreate
from tests.factories import BASE_TIME


class StubResult:
    def __init__(self, rows=()):
        self.rows = list(rows)

    def all(self):
        return list(self.rows)

    def scalars(self):
        return self

    def scalar_one(self):
        return self.rows[0]

    def scalar_one_or_none(self):
        return self.rows[0] if self.rows else None


class RecordingSession:
    """AsyncSession stand-in: records statements, replays queued results, fills defaults on flush."""

    def __init__(self, *results: StubResult):
        self.results = list(results)
        self.statements = []
        self.added = []

    async def execute(self, stmt):
        self.statements.append(stmt)
        if self.results:
            return self.results.pop(0)
        # unqueued reads see whatever was added, like a reload after flush
        return StubResult(self.added)

    def add(self, obj):
        self.added.append(obj)

    async def flush(self):
        now = datetime.now(timezone.utc)
        for obj in self.added:
            for row in [obj, *getattr(obj, "exercises", [])]:
                row.id = row.id or uuid.uuid4()
                row.created_at = row.created_at or now

    def sql(self, index: int = -1) -> str:
        return str(self.statements[index].compile(dialect=postgresql.dialect()))

    def params(self, index: int = -1) -> dict:
        return self.statements[index].compile(dialect=postgresql.dialect()).params


def set_row(weight: str, minutes_in: int = 0) -> WorkoutSet:
    return WorkoutSet(
        id=uuid.uuid4(),
        session_id=uuid.uuid4(),
        exercise_name="Press de Banca",
        set_number=1,
        reps=8,
        weight_kg=Decimal(weight),
        rpe=7,
        created_at=BASE_TIME + timedelta(minutes=minutes_in),
    )


class WorkoutQueriesTestCase(unittest.IsolatedAsyncioTestCase):
    async def test_window_query_is_oldest_session_first(self) -> None:
        db = RecordingSession()
        since = BASE_TIME - timedelta(days=30)

        await WorkoutRepository(db).sets_in_window(USER_ID, "Press de Banca", since)

        sql = db.sql()
        self.assertIn("ORDER BY workout_sessions.started_at, workout_sets.created_at", sql)
        self.assertNotIn("DESC", sql)
        self.assertRegex(sql, r"workout_sessions\.started_at >= %\(\w+\)s")
        self.assertIn("JOIN workout_sessions ON workout_sessions.id = workout_sets.session_id", sql)
        self.assertIn(since, db.params().values())
        self.assertIn("Press de Banca", db.params().values())
        self.assertIn(USER_ID, db.params().values())

    async def test_history_query_is_newest_first(self) -> None:
        db = RecordingSession()

        await WorkoutRepository(db).exercise_history(USER_ID, "Sentadilla", limit=10)

        sql = db.sql()
        self.assertIn("ORDER BY workout_sets.created_at DESC", sql)
        self.assertRegex(sql, r"LIMIT %\(\w+\)s")
        self.assertIn(10, db.params().values())

    async def test_window_rows_map_to_records_in_row_order(self) -> None:
        first, second = set_row("60.00"), set_row("62.50", minutes_in=5)
        later_start = BASE_TIME + timedelta(days=2)
        db = RecordingSession(StubResult([(first, BASE_TIME), (second, later_start)]))

        records = await WorkoutRepository(db).sets_in_window(USER_ID, "Press de Banca", BASE_TIME)

        self.assertEqual([r.id for r in records], [first.id, second.id])
        self.assertEqual([r.weight_kg for r in records], [60.0, 62.5])
        self.assertEqual(records[1].session_started_at, later_start)

    async def test_list_sessions_newest_first(self) -> None:
        db = RecordingSession()
        await WorkoutRepository(db).list_sessions(USER_ID, limit=5)
        self.assertIn("ORDER BY workout_sessions.started_at DESC", db.sql())


class PlanRepositoryTestCase(unittest.IsolatedAsyncioTestCase):
    async def test_create_plan_adds_plan_with_exercises(self) -> None:
        db = RecordingSession()
        payload = WorkoutPlanCreate(
            name="Fuerza 4 semanas",
            difficulty="intermediate",
            duration_weeks=4,
            sessions_per_week=3,
            exercises=[
                PlanExerciseCreate(day_number=1, exercise_name="Sentadilla", sets=5, reps="5", order_index=0),
                PlanExerciseCreate(day_number=1, exercise_name="Press de Banca", sets=4, reps="6-8", order_index=1),
            ],
        )
        plan = await PlanRepository(db).create_plan(USER_ID, payload)

        self.assertEqual(len(db.added), 1)
        self.assertIsInstance(db.added[0], WorkoutPlan)
        self.assertEqual(db.added[0].user_id, USER_ID)
        self.assertEqual(plan.name, "Fuerza 4 semanas")
        self.assertEqual([e.exercise_name for e in plan.exercises], ["Sentadilla", "Press de Banca"])
        self.assertEqual(plan.exercises[1].reps, "6-8")
        self.assertIn("WHERE workout_plans.id =", db.sql())

    async def test_list_plans_newest_first_for_user(self) -> None:
        db = RecordingSession()
        await PlanRepository(db).list_plans(USER_ID, skip=0, limit=20)
        sql = db.sql()
        self.assertIn("ORDER BY workout_plans.created_at DESC", sql)
        self.assertTrue(re.search(r"workout_plans\.user_id = %\(\w+\)s", sql))


if __name__ == "__main__":
    unittest.main()
