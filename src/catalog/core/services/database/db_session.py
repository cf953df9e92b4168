"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import text
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from src.catalog.core.services.database.db_utils import register_sqlite_functions
from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.context import get_config


class DbSessionService:
    def __init__(self, config: ConfigData | None = None):
        """Initialize the shared database engine and session factory."""

        main_config = config or get_config()
        db_config = main_config.database
        self._environment = main_config.app.environment

        logger.info("Configuring database engine for environment: {}", self._environment)
        engine_kwargs = {
            "echo": db_config.echo,
            "connect_args": self._get_connect_args(main_config),
        }

        if db_config.is_sqlite:
            if ":memory:" in db_config.url or db_config.url.rstrip("/") == "sqlite:":
                # One shared connection, otherwise each session sees an empty database
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                    "pool_pre_ping": True,
                }
            )

        self._engine = create_engine(db_config.connection_string, **engine_kwargs)
        register_sqlite_functions(self._engine)
        logger.bind(dialect=self._engine.dialect.name).info("Database engine initialized")

    @property
    def engine(self):
        return self._engine

    def _get_connect_args(self, config: ConfigData) -> dict:
        """Get database-specific connection arguments."""
        connect_args = {}

        if config.database.is_sqlite:
            connect_args.update(
                {
                    "check_same_thread": False,
                    "timeout": 20,  # Lock timeout
                }
            )

            if config.app.environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )
        elif "postgresql" in config.database.url:
            connect_args.update(
                {
                    "application_name": f"{config.app.environment}_book_catalog",
                    "connect_timeout": 30,
                }
            )

        return connect_args

    def create_all(self) -> None:
        """Create all database tables."""
        from src.catalog.entities.book.table import BookTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Context manager style helper for repositories and scripts."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed: {}: {}", type(e).__name__, e
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error(
                "Database health check failed: {}: {}", type(e).__name__, e
            )
            return False

    def get_pool_status(self) -> dict:
        """Get current connection pool status for monitoring."""
        pool = self._engine.pool
        return {
            "size": getattr(pool, "size", lambda: 0)(),
            "checked_in": getattr(pool, "checkedin", lambda: 0)(),
            "checked_out": getattr(pool, "checkedout", lambda: 0)(),
            "overflow": getattr(pool, "overflow", lambda: 0)(),
        }

    def dispose(self) -> None:
        self._engine.dispose()
