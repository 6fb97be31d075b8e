"""
Engine construction.

The engine is built once per warm Lambda and handed to repositories
explicitly; nothing below this module reaches for a global connection.
"""

from __future__ import annotations

import json
import os
from typing import Optional

import boto3
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool, StaticPool

from utils.error_handling import InternalError
from utils.logging_config import get_logger

logger = get_logger(__name__)

_engine: Optional[Engine] = None


def create_db_engine(db_url: str) -> Engine:
    """Create an engine for db_url with pooling suited to Lambda reuse."""
    if db_url.startswith("sqlite"):
        in_memory = db_url in ("sqlite://", "sqlite:///:memory:")
        engine = create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool if in_memory else None,
        )
        _enable_sqlite_foreign_keys(engine)
        return engine

    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=1,
        max_overflow=2,
        pool_pre_ping=True,
        pool_recycle=300,
    )


def _enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite ignores ON DELETE CASCADE and FK checks unless asked per connection."""

    @event.listens_for(engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_db_engine() -> Engine:
    """Get or create the process engine from DATABASE_URL or DB_SECRET_ARN."""
    global _engine
    if _engine is None:
        db_url = os.environ.get("DATABASE_URL")
        if not db_url:
            secret_arn = os.environ.get("DB_SECRET_ARN")
            if secret_arn:
                db_url = secret_to_db_url(secret_arn)
        if not db_url:
            logger.error("No database configured; set DATABASE_URL or DB_SECRET_ARN")
            raise InternalError()
        _engine = create_db_engine(db_url)
    return _engine


def secret_to_db_url(secret_arn: str) -> Optional[str]:
    """Build a SQLAlchemy URL from an RDS secret."""
    try:
        sm = boto3.client("secretsmanager")
        secret_value = sm.get_secret_value(SecretId=secret_arn)["SecretString"]
        secret = json.loads(secret_value)
    except Exception as exc:
        logger.warning("Failed to load DB secret", extra={"error": str(exc)})
        return None

    host = secret.get("host")
    port = secret.get("port", 5432)
    username = secret.get("username")
    password = secret.get("password")
    dbname = secret.get("dbname", "postgres")
    if not (host and username and password):
        return None
    return f"postgresql+psycopg2://{username}:{password}@{host}:{port}/{dbname}"
