import logging
import pytest


@pytest.fixture(autouse=True)
def silence_django_request_logger():
    """Reduce noise from expected 4xx in passing tests.

    Some tests exercise 404/405 paths on purpose. Django logs these at
    WARNING via 'django.request'; lower that logger to ERROR meanwhile.
    """
    logger = logging.getLogger("django.request")
    old = logger.level
    logger.setLevel(logging.ERROR)
    try:
        yield
    finally:
        logger.setLevel(old)


@pytest.fixture
def session_request():
    """Build GET requests carrying a cache-backed session.

    Pass `session=` to reuse one session across several requests.
    """
    from django.contrib.sessions.backends.cache import SessionStore
    from django.test import RequestFactory

    def _make(path: str = "/", data: dict | None = None, session=None):
        request = RequestFactory().get(path, data or {})
        request.session = session if session is not None else SessionStore()
        return request

    return _make
