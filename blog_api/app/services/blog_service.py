"""
Service layer for blogs.

``BlogService`` owns an in‑memory collection of blog records and the
counter used to assign their identifiers.  Identifiers start at 1,
increase by one per created blog and are never reused, even after a
deletion.  Records are kept in a ``dict`` keyed by identifier; since
dicts preserve insertion order, listing returns blogs in the order
they were created.

Nothing is persisted: the collection lives as long as the service
instance.  All methods are synchronous and never suspend, so when the
service is used from async route handlers each call runs to completion
before another request is processed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

from blog_api.app.schemas.blog import BlogRead

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Blog:
    """A single blog post held by :class:`BlogService`."""

    id: int
    title: str
    content: str
    author: str
    created_at: datetime = field(default_factory=_utcnow)

    def to_read(self) -> BlogRead:
        """Convert the record to its API representation."""
        return BlogRead(
            id=self.id,
            title=self.title,
            content=self.content,
            author=self.author,
            created_at=self.created_at,
        )


class BlogService:
    """In‑memory store of blog records."""

    def __init__(self) -> None:
        self._blogs: Dict[int, Blog] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._blogs)

    def create(self, title: str, content: str, author: str) -> Blog:
        """Create a blog, assigning the next identifier and the current time."""
        blog = Blog(id=self._next_id, title=title, content=content, author=author)
        self._next_id += 1
        self._blogs[blog.id] = blog
        logger.info("Created blog %s", blog.id)
        return blog

    def list_all(self) -> List[Blog]:
        """Return all blogs in creation order."""
        return list(self._blogs.values())

    def get_by_id(self, blog_id: int) -> Optional[Blog]:
        """Return the blog with ``blog_id`` or ``None`` if there is none."""
        return self._blogs.get(blog_id)

    def update(
        self,
        blog_id: int,
        *,
        title: Optional[str] = None,
        content: Optional[str] = None,
        author: Optional[str] = None,
    ) -> Optional[Blog]:
        """Update a blog in place.

        Only non‑empty values are written; omitted or empty fields keep
        their current value.  The identifier and creation time are never
        changed.  Returns the updated blog or ``None`` if the record does
        not exist.
        """
        blog = self._blogs.get(blog_id)
        if blog is None:
            return None
        if title:
            blog.title = title
        if content:
            blog.content = content
        if author:
            blog.author = author
        logger.info("Updated blog %s", blog_id)
        return blog

    def delete(self, blog_id: int) -> bool:
        """Delete a blog by ID.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        if self._blogs.pop(blog_id, None) is None:
            return False
        logger.info("Deleted blog %s", blog_id)
        return True

    def reset(self) -> None:
        """Remove every blog and restart identifiers at 1.

        Intended for tests and bootstrapping; not exposed over HTTP.
        """
        self._blogs.clear()
        self._next_id = 1
