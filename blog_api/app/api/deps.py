"""
Shared FastAPI dependencies.

The blog store is owned by the application (``app.state``) rather than
by a module level global, so each application instance, and each test,
works on its own collection.
"""

from fastapi import Request

from blog_api.app.services.blog_service import BlogService


def get_blog_service(request: Request) -> BlogService:
    """Return the ``BlogService`` attached to the running application."""
    return request.app.state.blog_service
