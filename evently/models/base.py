"""
Base model configuration for SQLAlchemy ORM.

Every model inherits from ``Base``; ``init_db`` creates their tables from
``Base.metadata``.
"""

from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base

Base = declarative_base()

def utcnow() -> datetime:
    """Timezone-aware current time, used as the Python-side column default."""
    return datetime.now(timezone.utc)
