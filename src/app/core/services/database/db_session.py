"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, create_engine

from src.app.runtime.config.config_data import DatabaseConfig
from src.app.runtime.context import get_config


class DbSessionService:
    def __init__(
        self,
        db_config: DatabaseConfig | None = None,
        environment: str | None = None,
    ):
        """Initialize the shared database engine and session factory."""

        logger.info("Setting up database engine and session factory")
        main_config = get_config()
        self._db_config = db_config or main_config.database
        self._environment = environment or main_config.app.environment

        engine_kwargs = {
            "echo": self._db_config.echo,
            "pool_pre_ping": True,
            "connect_args": self._get_connect_args(),
        }
        if self._db_config.is_in_memory:
            # Every connection must see the same in-memory database
            engine_kwargs["poolclass"] = StaticPool

        self._engine = create_engine(self._db_config.connection_string, **engine_kwargs)

    @property
    def engine(self):
        return self._engine

    def _get_connect_args(self) -> dict:
        """Get database-specific connection arguments."""
        connect_args = {}

        if self._db_config.is_sqlite:
            connect_args.update(
                {
                    "check_same_thread": False,  # Requests are served from a thread pool
                    "timeout": 20,  # Lock timeout
                }
            )

            if self._environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )

        return connect_args

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,  # Returned records stay readable after commit
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Context manager style helper for scripts and tests."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed",
                error_type=type(e).__name__,
                error_message=str(e),
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
        except SQLAlchemyError as e:
            logger.error(
                "Database health check failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False

    def dispose(self) -> None:
        """Close all pooled connections."""
        self._engine.dispose()
