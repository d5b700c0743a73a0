"""Root conftest — shared fixtures for the Blog API tests.

Every test gets its own ``BlogService`` and application, so records and
identifiers never leak between tests.
"""

import pytest
from fastapi.testclient import TestClient

from blog_api.app.main import create_app
from blog_api.app.services.blog_service import BlogService


@pytest.fixture
def blog_service():
    return BlogService()


@pytest.fixture
def app(blog_service):
    return create_app(blog_service)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
