"""
Database Manager - application-level entry point for the record store.

Architecture:
- BaseRepository: Connection pooling and common query operations
- DatabaseInitializer: Schema creation and destructive version upgrade
- TaskRepository: Task CRUD
"""

from todolist_app.db.base_repository import DB_NAME, get_default_pool
from todolist_app.db.database_initializer import DatabaseInitializer
from todolist_app.db.task_repository import TaskRepository


# --- INITIALIZATION ---

def setup_database(db_name: str = DB_NAME, pool_size: int = 5):
    """Configure the shared pool and initialize the schema. Call this at application startup."""
    pool = get_default_pool()
    pool.reconfigure(db_name, pool_size)
    pool.initialize()
    DatabaseInitializer(pool).setup_database()


def verify_schema() -> bool:
    """Verify that the tasks table exists with the current version."""
    return DatabaseInitializer(get_default_pool()).verify_schema()


def close_database():
    """Close every pooled connection."""
    get_default_pool().close_all()


def get_task_repository(pool=None) -> TaskRepository:
    """Repository bound to the shared pool unless another pool is given."""
    return TaskRepository(pool or get_default_pool())
