"""Tests for the URL shortening service."""

import pytest

from urlshortener.services.exceptions import (
    ServiceError,
    ShortCodeGenerationError,
    URLNotFoundError,
    URLStorageError,
    wrap_store_error,
)
from urlshortener.services.shortener import ShortenedURLService
from urlshortener.store.exceptions import (
    GenerationExhaustedError,
    NotFoundError,
    StorageFailureError,
    StoreError,
)
from tests.utils import FailingStore


@pytest.mark.service
class TestShortenedURLService:
    """Test suite for ShortenedURLService."""

    @pytest.fixture
    def service(self, memory_store):
        return ShortenedURLService(store=memory_store)

    @pytest.mark.asyncio
    async def test_shorten_and_get(self, service):
        code = await service.shorten_url("https://example.com/a")

        assert await service.get_url(code) == "https://example.com/a"
        assert await service.shorten_url("https://example.com/a") == code

    @pytest.mark.asyncio
    async def test_delegates_to_sql_store(self, sql_store):
        service = ShortenedURLService(store=sql_store)

        code = await service.shorten_url("https://example.com/sql")

        assert await sql_store.resolve(code) == "https://example.com/sql"

    @pytest.mark.asyncio
    async def test_get_unknown_code(self, service):
        with pytest.raises(URLNotFoundError) as excinfo:
            await service.get_url("zzzzzz")

        assert excinfo.value.operation == "get url"
        assert str(excinfo.value).startswith("get url: ")
        assert isinstance(excinfo.value.__cause__, NotFoundError)

    @pytest.mark.asyncio
    async def test_storage_failure_keeps_its_kind(self):
        service = ShortenedURLService(store=FailingStore(StorageFailureError("disk on fire")))

        with pytest.raises(URLStorageError) as shorten_info:
            await service.shorten_url("https://example.com/a")
        with pytest.raises(URLStorageError) as get_info:
            await service.get_url("abcdef")

        assert shorten_info.value.operation == "shorten url"
        assert "disk on fire" in str(shorten_info.value)
        assert isinstance(shorten_info.value.__cause__, StorageFailureError)
        assert get_info.value.operation == "get url"

    @pytest.mark.asyncio
    async def test_exhaustion_keeps_its_kind(self):
        service = ShortenedURLService(store=FailingStore(GenerationExhaustedError(5)))

        with pytest.raises(ShortCodeGenerationError) as excinfo:
            await service.shorten_url("https://example.com/a")

        assert isinstance(excinfo.value.__cause__, GenerationExhaustedError)
        assert excinfo.value.__cause__.attempts == 5


@pytest.mark.service
@pytest.mark.parametrize(
    "store_error, service_kind",
    [
        (NotFoundError("abc"), URLNotFoundError),
        (StorageFailureError("down"), URLStorageError),
        (GenerationExhaustedError(3), ShortCodeGenerationError),
        (StoreError("unclassified"), URLStorageError),
    ],
)
def test_wrap_store_error(store_error, service_kind):
    wrapped = wrap_store_error(store_error, "op")

    assert type(wrapped) is service_kind
    assert isinstance(wrapped, ServiceError)
    assert wrapped.operation == "op"
    assert str(wrapped) == f"op: {store_error}"
