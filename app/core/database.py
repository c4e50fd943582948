from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool
from .config import settings
from .exceptions import StorageUnavailableException
import logging

logger = logging.getLogger(__name__)

ALEMBIC_DIR = Path(__file__).resolve().parents[2] / "alembic"

# Create Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================

def create_db_engine(database_url: str = None) -> Engine:
    """
    Create database engine for the given URL (defaults to settings.DATABASE_URL).

    PostgreSQL gets the pooled configuration from settings; SQLite (tests,
    local runs) gets a thread-safe connection and no pool tuning.
    """
    url = database_url or settings.DATABASE_URL

    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        # In-memory database lives only as long as its single connection
        if url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
    else:
        options = {
            # Connection pool settings
            "poolclass": QueuePool,
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_timeout": settings.DB_POOL_TIMEOUT,
            "pool_recycle": settings.DB_POOL_RECYCLE,
            "connect_args": {
                "connect_timeout": 10,  # Connection timeout in seconds
            },
        }

    engine = create_engine(
        url,
        pool_pre_ping=True,  # Test connection before using (detect disconnects)
        echo=settings.DB_ECHO_SQL,
        **options,
    )
    _register_listeners(engine)
    return engine


def _register_listeners(engine: Engine) -> None:
    @event.listens_for(engine, "connect")
    def receive_connect(dbapi_conn, connection_record):
        logger.debug("New database connection established")

    @event.listens_for(engine, "checkout")
    def receive_checkout(dbapi_conn, connection_record, connection_proxy):
        logger.debug("Connection checked out from pool")


# =============================================================================
# SESSION CONFIGURATION
# =============================================================================

def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,  # Don't auto-commit transactions
        autoflush=False,   # Don't auto-flush before queries
        bind=engine,
        expire_on_commit=False  # Don't expire objects after commit
    )


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def check_database_connection(engine: Engine) -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection successful, False otherwise
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("✅ Database connection successful!")
        return True
    except SQLAlchemyError as e:
        logger.error(f"❌ Database connection failed: {e}")
        return False


def get_alembic_config() -> Config:
    """Alembic config pointing at the project's migration scripts."""
    config = Config()
    config.set_main_option("script_location", str(ALEMBIC_DIR))
    return config


def apply_migrations(engine: Engine, revision: str = "head") -> None:
    """
    Upgrade the schema to the given revision using the versioned Alembic scripts.

    Runs on a connection borrowed from `engine`, so it works the same for
    PostgreSQL and for the SQLite databases used in tests.
    """
    logger.info(f"Applying migrations up to '{revision}'...")
    config = get_alembic_config()
    with engine.begin() as connection:
        config.attributes["connection"] = connection
        command.upgrade(config, revision)
    logger.info("✅ Database schema is up to date!")


# =============================================================================
# INITIALIZATION
# =============================================================================

def init_db(engine: Engine, migrate: Optional[bool] = None):
    """
    Initialize database.
    Run this when starting the application.

    `migrate` defaults to settings.APPLY_MIGRATIONS_ON_STARTUP.
    """
    if migrate is None:
        migrate = settings.APPLY_MIGRATIONS_ON_STARTUP

    logger.info("Initializing database...")

    if not check_database_connection(engine):
        raise StorageUnavailableException("Cannot connect to database!")

    if migrate:
        apply_migrations(engine)

    logger.info("✅ Database initialized successfully!")


# =============================================================================
# TEST DATABASE CONNECTION
# =============================================================================

if __name__ == "__main__":
    """Test database connection when running this file directly."""
    logging.basicConfig(level=logging.INFO)

    from .config import print_config
    print_config()

    print("\n" + "-" * 80)
    print("Testing connection...")
    print("-" * 80)

    if check_database_connection(create_db_engine()):
        print("✅ Connection successful!")
    else:
        print("❌ Connection failed!")

    print("=" * 80 + "\n")
