"""
Tests for the category service.
"""

import pytest

from evently.exceptions import DataAccessError
from evently.services.category_service import CategoryService

@pytest.mark.asyncio
async def test_create_and_list_categories(db_session):
    service = CategoryService(db_session)

    await service.create_category("Tech")
    await service.create_category("Music")

    categories = await service.get_all_categories()
    assert [category.name for category in categories] == ["Music", "Tech"]

@pytest.mark.asyncio
async def test_create_duplicate_category(db_session, music):
    with pytest.raises(DataAccessError):
        await CategoryService(db_session).create_category("Music")

@pytest.mark.asyncio
async def test_get_category_by_name_ignores_case_and_matches_fragments(db_session, music, tech):
    """Test the name lookup used by the event listing filter."""
    service = CategoryService(db_session)

    assert (await service.get_category_by_name("music")).id == music.id
    assert (await service.get_category_by_name("EC")).id == tech.id
    assert await service.get_category_by_name("sports") is None

@pytest.mark.asyncio
async def test_get_category_by_name_treats_wildcards_literally(db_session, music):
    assert await CategoryService(db_session).get_category_by_name("%") is None
