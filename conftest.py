"""
Pytest configuration file.
"""

import logging
import os
from logging.handlers import TimedRotatingFileHandler

import pytest
from django.conf import settings


@pytest.hookimpl(trylast=True)
def pytest_configure(config):
    """
    Disable file logging during test runs by removing the TimedRotatingFileHandler
    that writes lingo.log from the root logger. Runs after pytest-django has
    set Django up, which is when LOGGING is applied.
    """
    log_file_path = os.path.abspath(settings.BASE_DIR / "lingo.log")
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        if not isinstance(handler, TimedRotatingFileHandler):
            continue
        if os.path.abspath(handler.baseFilename) == log_file_path:
            root_logger.removeHandler(handler)
            handler.close()


@pytest.fixture(autouse=True)
def _isolated_request_cache():
    """Makes sure no test leaks a request cache into the next one."""
    from core.request_cache import end_request_cache

    end_request_cache()
    yield
    end_request_cache()


@pytest.fixture
def learner(db, django_user_model):
    return django_user_model.objects.create_user(
        username="learner", password="password", first_name="Ana"
    )


@pytest.fixture
def course_tree(db):
    """Spanish: unit 1 has lessons of 3 and 2 challenges, unit 2 of 1 and 0."""
    from core.testing import build_course  # pylint: disable=import-outside-toplevel

    return build_course()


@pytest.fixture
def learner_progress(learner, course_tree):
    # pylint: disable=import-outside-toplevel
    from core.models import UserProgress

    course, _, _ = course_tree
    return UserProgress.objects.create(user=learner, active_course=course, user_name="Ana")


@pytest.fixture
def logged_in_client(client, learner):
    client.login(username="learner", password="password")
    return client
