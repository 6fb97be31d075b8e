"""PostgreSQL repository using SQLAlchemy Core."""

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator, List, Optional

from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.sql import Executable

from utils.error_handling import ConstraintViolationError, InvalidReferenceError
from utils.logging_config import get_logger

logger = get_logger(__name__)

FOREIGN_KEY_VIOLATION = "23503"
CHECK_VIOLATION = "23514"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def translate_integrity_error(exc: IntegrityError) -> Exception:
    """Map a store constraint failure onto the client-error taxonomy."""
    code = getattr(exc.orig, "pgcode", None)
    message = str(exc.orig)
    if code == FOREIGN_KEY_VIOLATION or "FOREIGN KEY constraint failed" in message:
        return InvalidReferenceError("customer_id")
    if code == CHECK_VIOLATION or "CHECK constraint failed" in message:
        return ConstraintViolationError()
    return exc


class PostgresRepository:
    """Thin wrapper to keep SQL organized and parameterized."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def fetch_one(self, stmt: Executable, conn: Optional[Connection] = None) -> Optional[dict]:
        """Execute a SELECT and return one row as dict."""
        if conn is not None:
            row = conn.execute(stmt).fetchone()
            return dict(row._mapping) if row else None
        with self.engine.connect() as conn:
            row = conn.execute(stmt).fetchone()
            return dict(row._mapping) if row else None

    def fetch_all(self, stmt: Executable) -> List[dict]:
        """Execute a SELECT and return every row as dict."""
        with self.engine.connect() as conn:
            return [dict(row._mapping) for row in conn.execute(stmt)]

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Open a transaction, translating constraint failures on the way out."""
        try:
            with self.engine.begin() as conn:
                yield conn
        except IntegrityError as exc:
            translated = translate_integrity_error(exc)
            if translated is exc:
                raise
            logger.warning(
                "Write rejected by store constraint",
                extra={"kind": type(translated).__name__},
            )
            raise translated from exc

    def execute(self, stmt: Executable) -> Any:
        """Execute a parameterized statement in its own transaction."""
        with self.transaction() as conn:
            return conn.execute(stmt)
