"""Test fixtures for the URL shortener application."""

import os
from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from urlshortener.core.config import EnvironmentType, Settings, StoreBackend
from urlshortener.db.base import Database, get_engine_config
from urlshortener.main import create_app
from urlshortener.store.memory import InMemoryCodeStore
from urlshortener.store.sql import SQLCodeStore

# Test database URL - using SQLite in-memory
TEST_SQLALCHEMY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_BASE_URL = "http://sho.rt"


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set testing environment variables."""
    original_env = os.environ.copy()

    os.environ["ENVIRONMENT"] = "testing"
    os.environ["LOG_TO_FILE"] = "false"

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest_asyncio.fixture
async def test_database() -> AsyncGenerator[Database, None]:
    """Create a fresh in-memory database with tables."""
    database = Database(
        TEST_SQLALCHEMY_DATABASE_URL,
        **get_engine_config(TEST_SQLALCHEMY_DATABASE_URL)
    )
    await database.connect()

    yield database

    await database.dispose()


@pytest_asyncio.fixture
async def test_db(test_database) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session on the test database."""
    async with test_database.session() as session:
        yield session


@pytest_asyncio.fixture
async def sql_store(test_database) -> SQLCodeStore:
    """SQL code store over the in-memory test database."""
    return SQLCodeStore(test_database)


@pytest.fixture
def memory_store() -> InMemoryCodeStore:
    """In-memory code store."""
    return InMemoryCodeStore()


@pytest_asyncio.fixture(params=["sql", "memory"])
async def store(request, test_database):
    """Each code store implementation in turn."""
    if request.param == "sql":
        return SQLCodeStore(test_database)
    return InMemoryCodeStore()


@pytest.fixture
def test_settings() -> Settings:
    """Settings for an app backed by a private in-memory database."""
    return Settings(
        ENVIRONMENT=EnvironmentType.TESTING,
        STORE_BACKEND=StoreBackend.SQL,
        DATABASE_URL=TEST_SQLALCHEMY_DATABASE_URL,
        BASE_URL=TEST_BASE_URL,
        LOG_TO_FILE=False,
        DEBUG=False,
    )


@pytest.fixture
def test_app(test_settings) -> FastAPI:
    """Create FastAPI test app."""
    return create_app(test_settings)


@pytest.fixture
def client(test_app) -> Generator[TestClient, None, None]:
    """Return FastAPI TestClient instance with the lifespan running."""
    with TestClient(test_app) as test_client:
        yield test_client
    test_app.dependency_overrides.clear()
