from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlmodel import Session


@contextmanager
def transactional(session: Session) -> Iterator[Session]:
    """Run a unit of work all-or-nothing: commit on success, roll back on any error."""
    try:
        yield session
        session.commit()
    except Exception as e:
        session.rollback()
        logger.warning("Transaction rolled back after {}", type(e).__name__)
        raise
