"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

import os

os.environ.setdefault("AUTH_SECRET_KEY", "test-secret-key")

from datetime import UTC, datetime  # noqa: E402
from typing import TYPE_CHECKING, Any, ClassVar  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from nationforge_backend.api import create_api  # noqa: E402
from nationforge_backend.api.dependencies import (  # noqa: E402
    get_auth_service,
    get_clock,
    get_country_store,
    get_game_configuration,
)
from nationforge_backend.database import UserSchema, get_session  # noqa: E402
from nationforge_backend.game_logic import (  # noqa: E402
    GameConfiguration,
    InMemoryCountryStore,
)
from nationforge_backend.settings import get_settings  # noqa: E402
from nationforge_backend.shared import FixedClock  # noqa: E402

if TYPE_CHECKING:
    from collections.abc import Callable, Generator, Iterator
    from uuid import UUID

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("AUTH_SECRET_KEY", "test-secret-key")
    get_settings.cache_clear()
    get_auth_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_auth_service.cache_clear()


class FakeUserRepository:
    """In-memory repository used to mock database operations."""

    def __init__(self, session: Any) -> None:  # pragma: no cover - session unused
        self._session = session

    _store: ClassVar[dict[UUID, UserSchema]] = {}

    @classmethod
    def reset(cls) -> None:
        cls._store = {}

    def get_by_id(self, user_id: UUID) -> UserSchema | None:
        return type(self)._store.get(user_id)

    def get_by_email(self, email: str) -> UserSchema | None:
        return next(
            (user for user in type(self)._store.values() if user.email == email),
            None,
        )

    def add(self, user: UserSchema) -> UserSchema:
        if getattr(user, "created_at", None) is None:
            timestamp = datetime.now(UTC)
            user.created_at = timestamp
            user.updated_at = timestamp
        type(self)._store[user.id] = user
        return user


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(T0)


@pytest.fixture
def country_store() -> InMemoryCountryStore:
    return InMemoryCountryStore()


@pytest.fixture
def app(
    monkeypatch: pytest.MonkeyPatch,
    clock: FixedClock,
    country_store: InMemoryCountryStore,
):
    FakeUserRepository.reset()
    monkeypatch.setattr(
        "nationforge_backend.api.services.auth.UserRepository", FakeUserRepository
    )
    monkeypatch.setattr(
        "nationforge_backend.api.dependencies.UserRepository", FakeUserRepository
    )

    application = create_api()

    def override_session() -> Generator[None, None, None]:
        yield None

    application.dependency_overrides[get_session] = override_session
    application.dependency_overrides[get_clock] = lambda: clock
    application.dependency_overrides[get_country_store] = lambda: country_store
    application.dependency_overrides[get_game_configuration] = lambda: GameConfiguration()
    yield application
    application.dependency_overrides.clear()
    FakeUserRepository.reset()


@pytest.fixture
def client(app) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client: TestClient) -> Callable[..., dict[str, str]]:
    """Return a helper registering a user and producing auth headers."""

    def _register(
        username: str = "Founder", email: str = "founder@example.com"
    ) -> dict[str, str]:
        response = client.post(
            "/auth/register",
            json={"username": username, "email": email, "password": "Password123"},
        )
        assert response.status_code == 201
        token = response.json()["token"]["access_token"]
        return {"Authorization": f"Bearer {token}"}

    return _register


@pytest.fixture
def auth_headers(register: Callable[..., dict[str, str]]) -> dict[str, str]:
    return register()


@pytest.fixture
def country_payload() -> Callable[..., dict[str, Any]]:
    """Return a builder for valid country creation payloads."""

    def _build(name: str = "Avalon", **overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": name,
            "government": "Democracy",
            "values": ["Freedom", "Justice"],
            "flag": {
                "backgroundColor": "#3B82F6",
                "pattern": "stripe",
                "patternColor": "#FFFFFF",
            },
        }
        payload.update(overrides)
        return payload

    return _build
