"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures and configuration for all tests:
an in-memory SQLite database per test, seeded users and categories, and a
factory for event input.
"""

import os
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Set testing environment before the application reads it
os.environ["TESTING"] = "true"

from evently.models import Base, Category, User
from evently.schemas.event import EventInput

TEST_DATABASE_URL = "sqlite+aiosqlite://"

@pytest_asyncio.fixture
async def engine():
    """Create a fresh in-memory database for one test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
        echo=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()

@pytest_asyncio.fixture
async def db_session(engine) -> AsyncSession:
    """Create a test database session."""
    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False
    )

    async with session_factory() as session:
        yield session

@pytest.fixture
def revalidate() -> Mock:
    """Revalidator that records the paths it is called with."""
    return Mock()

async def _add_user(db_session, clerk_id, username, first_name, last_name) -> User:
    user = User(
        clerk_id=clerk_id,
        email=f"{username}@example.com",
        username=username,
        first_name=first_name,
        last_name=last_name,
        photo=f"https://img.example.com/{username}.png"
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user

@pytest_asyncio.fixture
async def organizer(db_session) -> User:
    """A user who organizes events."""
    return await _add_user(db_session, "clerk_organizer", "olivia", "Olivia", "Organizer")

@pytest_asyncio.fixture
async def buyer(db_session) -> User:
    """A user who buys tickets."""
    return await _add_user(db_session, "clerk_alice", "alice", "Alice", "Smith")

@pytest_asyncio.fixture
async def second_buyer(db_session) -> User:
    return await _add_user(db_session, "clerk_bob", "bob", "Bob", "Jones")

@pytest_asyncio.fixture
async def music(db_session) -> Category:
    category = Category(name="Music")
    db_session.add(category)
    await db_session.commit()
    return category

@pytest_asyncio.fixture
async def tech(db_session) -> Category:
    category = Category(name="Tech")
    db_session.add(category)
    await db_session.commit()
    return category

@pytest.fixture
def event_input(music):
    """Factory for EventInput; defaults to a paid music event next week."""
    def _make(**overrides) -> EventInput:
        start = datetime(2030, 6, 1, 19, 0, tzinfo=timezone.utc)
        fields = {
            "title": "Jazz Night",
            "description": "Live jazz downtown",
            "location": "Blue Note",
            "image_url": "https://img.example.com/jazz.png",
            "start_date_time": start,
            "end_date_time": start + timedelta(hours=3),
            "category_id": music.id,
            "price": "25.50",
            "is_free": False,
            "url": "https://example.com/jazz",
        }
        fields.update(overrides)
        return EventInput(**fields)
    return _make
