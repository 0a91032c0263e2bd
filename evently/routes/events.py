"""
Router for event endpoints.
This module handles API routes for:
- The searchable public listing, with previous/next links
- Event detail and related events
- Events of an organizer
- Creating, updating and deleting events
"""

import logging
from dataclasses import asdict
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from evently.exceptions import ValidationError
from evently.schemas.common import Page, to_uuid
from evently.schemas.event import CreateEventParams, UpdateEventParams
from evently.services.event_service import EventService
from evently.utils.api_response import create_response, success_response
from evently.utils.database import get_db
from evently.utils.pagination import build_pagination

router = APIRouter(
    prefix="/api/events",
    tags=["events"]
)

logger = logging.getLogger(__name__)

def _paged_response(request: Request, page: int, result: Page) -> JSONResponse:
    pagination = build_pagination(
        page,
        result.total_pages,
        params=str(request.query_params),
        path=request.url.path,
    )
    content = success_response(data=result)
    content["pagination"] = asdict(pagination)
    return JSONResponse(content=content)

@router.get("")
async def list_events(
    request: Request,
    query: Optional[str] = Query(None, description="Fragment of the event title"),
    category: Optional[str] = Query(None, description="Fragment of the category name"),
    limit: int = Query(6, gt=0, description="Events per page"),
    page: int = Query(1, ge=1, description="1-based page number"),
    db: AsyncSession = Depends(get_db)
):
    """Search all events"""
    result = await EventService(db).get_all_events(query=query, limit=limit, page=page, category=category)
    return _paged_response(request, page, result)

@router.post("")
async def create_event(params: CreateEventParams, db: AsyncSession = Depends(get_db)):
    """Create an event"""
    event = await EventService(db).create_event(params.user_id, params.event, params.path)
    return create_response(data=event, message="Event created successfully", status_code=status.HTTP_201_CREATED)

@router.get("/organizer/{user_id}")
async def list_events_by_user(
    request: Request,
    user_id: str,
    limit: int = Query(6, gt=0),
    page: int = Query(1, ge=1),
    db: AsyncSession = Depends(get_db)
):
    """Events organized by a user"""
    result = await EventService(db).get_events_by_user(user_id, limit=limit, page=page)
    return _paged_response(request, page, result)

@router.get("/{event_id}")
async def get_event(event_id: str, db: AsyncSession = Depends(get_db)):
    return create_response(data=await EventService(db).get_event_by_id(event_id))

@router.get("/{event_id}/related")
async def list_related_events(
    request: Request,
    event_id: str,
    category_id: str = Query(..., description="Category shared by the related events"),
    limit: int = Query(3, gt=0),
    page: int = Query(1, ge=1),
    db: AsyncSession = Depends(get_db)
):
    """Other events of the same category"""
    result = await EventService(db).get_related_events_by_category(category_id, event_id, limit=limit, page=page)
    return _paged_response(request, page, result)

@router.put("/{event_id}")
async def update_event(event_id: str, params: UpdateEventParams, db: AsyncSession = Depends(get_db)):
    """Update an event; only its organizer may do so"""
    if to_uuid(event_id, "event id") != params.event.id:
        raise ValidationError("Event ID in path and body differ")
    event = await EventService(db).update_event(params.user_id, params.event, params.path)
    return create_response(data=event, message="Event updated successfully")

@router.delete("/{event_id}")
async def delete_event(
    event_id: str,
    path: str = Query("/", description="Page to revalidate"),
    db: AsyncSession = Depends(get_db)
):
    await EventService(db).delete_event(event_id, path)
    return create_response(message="Event deleted successfully")
