"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import pytest
from collections.abc import AsyncGenerator
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings
from app.db.models import User
from app.db.session import Database
from app.main import create_app
from app.repositories.users import CredentialStore
from app.services.tokens import TokenService

ADMIN_PASSWORD = "admin-pass-123"
STUDENT_PASSWORD = "student-pass-123"


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite file, with cheap bcrypt."""
    return Settings(
        jwt_secret_key="test-secret-key",
        database_url_override=f"sqlite+aiosqlite:///{tmp_path}/test.db",
        bcrypt_rounds=4,
    )


@pytest.fixture
async def database(settings: Settings) -> AsyncGenerator[Database, None]:
    db = Database(settings.database_url)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with database.sessionmaker() as s:
        yield s


@pytest.fixture
def token_service(settings: Settings) -> TokenService:
    return TokenService(settings.jwt_secret_key, expire_minutes=settings.jwt_expire_minutes)


@pytest.fixture
def app(settings: Settings, database: Database) -> FastAPI:
    # ASGITransport does not run the lifespan, so attach the database directly
    application = create_app(settings)
    application.state.database = database
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing FastAPI endpoints."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def store(session: AsyncSession) -> CredentialStore:
    return CredentialStore(session, bcrypt_rounds=4)


@pytest.fixture
async def admin_user(store: CredentialStore) -> User:
    return await store.register(
        {"email": "admin@example.com", "password": ADMIN_PASSWORD, "name": "Admin", "role": "admin"}
    )


@pytest.fixture
async def student_user(store: CredentialStore) -> User:
    return await store.register(
        {"email": "student@example.com", "password": STUDENT_PASSWORD, "name": "Student"}
    )


@pytest.fixture
def admin_headers(admin_user: User, token_service: TokenService) -> dict[str, str]:
    return {"Authorization": f"Bearer {token_service.issue(admin_user)}"}


@pytest.fixture
def student_headers(student_user: User, token_service: TokenService) -> dict[str, str]:
    return {"Authorization": f"Bearer {token_service.issue(student_user)}"}


@pytest.fixture
def note_payload():
    """Factory for a valid note create body; keyword overrides replace fields."""

    def build(**overrides) -> dict:
        payload = {
            "title": "Data Structures Unit 1",
            "content": "Arrays, linked lists and stacks.",
            "fileUrl": "https://files.example.com/ds-unit-1.pdf",
            "subject": "Data Structure and Algorithms",
            "semester": "Third Semester",
        }
        payload.update(overrides)
        return payload

    return build
