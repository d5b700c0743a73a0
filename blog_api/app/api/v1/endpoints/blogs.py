"""
Blog endpoints for API v1.

These routes expose a CRUD API over the in‑memory blog collection.
Creating a blog requires ``title``, ``content`` and ``author``;
updating accepts any subset of them.  Identifiers in the path are
parsed as integers and a value that is not a number simply matches no
blog, so it yields 404 rather than 400.
"""

import re
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, status

from blog_api.app.api.deps import get_blog_service
from blog_api.app.core.errors import NotFoundError, ValidationError
from blog_api.app.schemas.blog import BlogCreate, BlogRead, BlogUpdate, MessageRead
from blog_api.app.services.blog_service import Blog, BlogService

router = APIRouter()

_ID_PATTERN = re.compile(r"-?[0-9]+")


def _parse_id(blog_id: str) -> Optional[int]:
    # Plain decimal integers only; "1_0", "1.0" or "1e3" match no blog.
    blog_id = blog_id.strip()
    if not _ID_PATTERN.fullmatch(blog_id):
        return None
    return int(blog_id)


def _find_blog(service: BlogService, blog_id: str) -> Blog:
    parsed = _parse_id(blog_id)
    blog = service.get_by_id(parsed) if parsed is not None else None
    if blog is None:
        raise NotFoundError()
    return blog


@router.get("", response_model=List[BlogRead])
async def list_blogs(service: BlogService = Depends(get_blog_service)) -> List[BlogRead]:
    """Return all blogs in creation order."""
    return [blog.to_read() for blog in service.list_all()]


@router.post("", response_model=BlogRead, status_code=status.HTTP_201_CREATED)
async def create_blog(
    blog_in: Optional[BlogCreate] = Body(None),
    service: BlogService = Depends(get_blog_service),
) -> BlogRead:
    """Create a new blog.

    Returns HTTP 400 if any of ``title``, ``content`` or ``author`` is
    missing or empty; the store is not touched in that case.
    """
    blog_in = blog_in or BlogCreate()
    if blog_in.missing_fields():
        raise ValidationError("Title, content, and author are required")
    blog = service.create(blog_in.title, blog_in.content, blog_in.author)
    return blog.to_read()


@router.get("/{blog_id}", response_model=BlogRead)
async def get_blog(blog_id: str, service: BlogService = Depends(get_blog_service)) -> BlogRead:
    """Retrieve a single blog by ID.

    Returns HTTP 404 if the blog is not found.
    """
    return _find_blog(service, blog_id).to_read()


@router.put("/{blog_id}", response_model=BlogRead)
async def update_blog(
    blog_id: str,
    blog_in: Optional[BlogUpdate] = Body(None),
    service: BlogService = Depends(get_blog_service),
) -> BlogRead:
    """Update an existing blog.

    Only non‑empty fields present in the body are written.
    """
    blog_in = blog_in or BlogUpdate()
    parsed = _parse_id(blog_id)
    blog = None
    if parsed is not None:
        blog = service.update(
            parsed,
            title=blog_in.title,
            content=blog_in.content,
            author=blog_in.author,
        )
    if blog is None:
        raise NotFoundError()
    return blog.to_read()


@router.delete("/{blog_id}", response_model=MessageRead)
async def delete_blog(blog_id: str, service: BlogService = Depends(get_blog_service)) -> MessageRead:
    """Delete a blog by ID."""
    parsed = _parse_id(blog_id)
    if parsed is None or not service.delete(parsed):
        raise NotFoundError()
    return MessageRead(message="Blog deleted successfully")
