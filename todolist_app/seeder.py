"""
Fill the task database with sample tasks for manual testing.

    python -m todolist_app.seeder [count]
"""

import datetime
import logging
import random
import sys

from todolist_app.config import get_settings
from todolist_app.db.db_manager import close_database, get_task_repository, setup_database
from todolist_app.db.task_repository import TaskRepository
from todolist_app.models.data_models import Task

logger = logging.getLogger(__name__)

SAMPLE_TITLES = [
    "Buy milk", "Finish assignment", "Call the dentist", "Water the plants",
    "Read chapter 4", "Pay electricity bill", "Clean the kitchen", "Book train tickets",
]
SAMPLE_DURATIONS = ["", "15m", "30m", "1h", "2h", "4h"]


def seed_database(repository: TaskRepository, count: int = 10, rng=None):
    """Insert `count` random tasks and return their ids."""
    rng = rng or random.Random()
    today = datetime.date.today()

    task_ids = []
    for i in range(count):
        deadline = ""
        # Roughly two out of three tasks get a deadline within the next two weeks
        if rng.random() < 0.66:
            day = today + datetime.timedelta(days=rng.randint(0, 14))
            deadline = f"{day.day}/{day.month}/{day.year}"

        task = Task(
            title=rng.choice(SAMPLE_TITLES),
            description=f"Sample task #{i + 1}",
            deadline=deadline,
            duration=rng.choice(SAMPLE_DURATIONS),
            is_done=rng.random() < 0.2,
        )
        task_ids.append(repository.insert_task(task))

    logger.info("Seeded %s task(s)", len(task_ids))
    return task_ids


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    settings = get_settings()
    setup_database(str(settings.db_path), settings.db_pool_size)
    try:
        seed_database(get_task_repository(), int(sys.argv[1]) if len(sys.argv) > 1 else 10)
    finally:
        close_database()
