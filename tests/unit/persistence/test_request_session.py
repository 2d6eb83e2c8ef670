"""Unit tests for committing or rolling back the request session."""

import pytest
from dishka import Provider, Scope, make_async_container, provide
from dishka.integrations.fastapi import (
    DishkaRoute,
    FastapiProvider,
    FromDishka,
    setup_dishka,
)
from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from specdit.domain.error import NotFoundError
from specdit.interface.error import handle_http_exception, http_error
from specdit.util.di import (
    ProdConfigProvider,
    ProdDomainProvider,
    ProdInterfaceProvider,
    ProdPersistenceProvider,
)


class RecordingSession:
    """Stands in for AsyncSession and records what happened to it."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    async def __aenter__(self) -> "RecordingSession":
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.calls.append("close")

    async def commit(self) -> None:
        self.calls.append("commit")

    async def rollback(self) -> None:
        self.calls.append("rollback")


class RecordingSessionProvider(Provider):
    """Replaces the engine-backed session factory."""

    def __init__(self, session: RecordingSession) -> None:
        super().__init__()
        self.session = session

    @provide(scope=Scope.APP)
    def get_session_factory(self) -> async_sessionmaker[AsyncSession]:
        return lambda: self.session


router = APIRouter(route_class=DishkaRoute)


@router.post("/write")
async def write(session: FromDishka[AsyncSession]) -> dict[str, bool]:
    session.calls.append("write")
    return {"ok": True}


@router.post("/write-then-crash")
async def write_then_crash(session: FromDishka[AsyncSession]) -> dict[str, bool]:
    session.calls.append("write")
    try:
        raise RuntimeError("tally failed")
    except Exception as e:
        raise http_error(e, "voting") from e


@router.post("/write-then-missing")
async def write_then_missing(session: FromDishka[AsyncSession]) -> dict[str, bool]:
    session.calls.append("write")
    try:
        raise NotFoundError("Post", "7")
    except Exception as e:
        raise http_error(e, "deleting post") from e


@pytest.fixture
def session():
    return RecordingSession()


@pytest.fixture
def client(session):
    container = make_async_container(
        ProdConfigProvider(),
        ProdDomainProvider(),
        ProdInterfaceProvider(),
        ProdPersistenceProvider(),
        RecordingSessionProvider(session),
        FastapiProvider(),
    )
    app = FastAPI()
    setup_dishka(container, app)
    app.add_exception_handler(HTTPException, handle_http_exception)
    app.include_router(router)
    return TestClient(app)


class TestRequestSession:
    """The request session only commits requests that succeeded."""

    def test_success_commits(self, client, session):
        response = client.post("/write")

        assert response.status_code == 200
        assert session.calls == ["write", "commit", "close"]

    def test_internal_error_after_write_rolls_back(self, client, session):
        """A 500 answered by the route leaves nothing behind."""
        response = client.post("/write-then-crash")

        assert response.status_code == 500
        assert response.json()["detail"] == "Error voting"
        assert session.calls == ["write", "rollback", "close"]

    def test_client_error_after_write_rolls_back(self, client, session):
        response = client.post("/write-then-missing")

        assert response.status_code == 404
        assert "commit" not in session.calls
        assert "rollback" in session.calls
