import pytest

from profile_pages.container import reset_container, set_container
from profile_pages.domain.user import User
from profile_pages.repositories.memory.factory import create_memory_container


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SITE_URL", "SKILL_CLOUD_LIMIT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def container():
    c = create_memory_container()
    set_container(c)
    yield c
    reset_container()


@pytest.fixture
def make_user():
    """Builds a User from a record, with only slug and name by default."""

    def _make(**fields) -> User:
        record = {"slug": "test", "name": "Test Danışman"}
        record.update(fields)
        return User.from_dict(record)

    return _make


@pytest.fixture
def ebru(container) -> User:
    return container.profiles.get_by_slug("ebru")


@pytest.fixture
def derya(container) -> User:
    return container.profiles.get_by_slug("derya")
