"""
Custom SQLAlchemy types shared by the models.
"""

import uuid

from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.types import String, TypeDecorator

class UUIDType(TypeDecorator):
    """
    Platform-independent UUID column type.

    PostgreSQL stores a native UUID; other databases store the 36 character
    string form. Python code always sees ``uuid.UUID`` values, and plain
    strings are accepted when binding parameters.
    """

    impl = String
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            return dialect.type_descriptor(UUID())
        return dialect.type_descriptor(String(36))

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        if not isinstance(value, uuid.UUID):
            # Validate string input before it reaches the database
            value = uuid.UUID(str(value))
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        if isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(value)
