"""Behaviour shared by every code store implementation."""

import pytest

from urlshortener.store.exceptions import GenerationExhaustedError, NotFoundError
from urlshortener.store.codes import ShortCodeGenerator
from tests.utils import ScriptedGenerator, random_url


@pytest.mark.store
class TestCodeStoreBehaviour:
    """Runs against both the SQL and the in-memory store."""

    @pytest.mark.asyncio
    async def test_example_scenario(self, store):
        code = await store.shorten("https://example.com/a")

        assert len(code) == 6
        assert code.isalnum()
        assert await store.resolve(code) == "https://example.com/a"
        assert await store.shorten("https://example.com/a") == code

        with pytest.raises(NotFoundError):
            await store.resolve("zzzzzz" if code != "zzzzzz" else "yyyyyy")

    @pytest.mark.asyncio
    async def test_resubmission_is_idempotent(self, store):
        url = random_url()

        first = await store.shorten(url)
        second = await store.shorten(url)

        assert first == second
        assert await store.count() == 1

    @pytest.mark.asyncio
    async def test_distinct_urls_get_distinct_codes(self, store):
        urls = [random_url() for _ in range(25)]

        codes = [await store.shorten(url) for url in urls]

        assert len(set(codes)) == len(urls)
        assert await store.count() == len(urls)

    @pytest.mark.asyncio
    async def test_resolve_round_trips(self, store):
        urls = ["https://example.com/a", "https://example.com/a/", "HTTPS://EXAMPLE.COM/a", "not even a url", "  padded  "]

        for url in urls:
            assert await store.resolve(await store.shorten(url)) == url

    @pytest.mark.asyncio
    async def test_originals_are_not_normalized(self, store):
        first = await store.shorten("https://example.com/a")
        second = await store.shorten("https://example.com/a/")

        assert first != second

    @pytest.mark.asyncio
    async def test_generated_codes_use_the_alphabet(self, store):
        generator = ShortCodeGenerator()

        for _ in range(10):
            assert generator.is_valid(await store.shorten(random_url()))

    @pytest.mark.asyncio
    async def test_resolve_unknown_code(self, store):
        with pytest.raises(NotFoundError) as excinfo:
            await store.resolve("nope00")

        assert excinfo.value.code == "nope00"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", ["", "a", "way-too-long-for-a-code", "héllo!", "../etc"])
    async def test_resolve_accepts_any_string(self, store, code):
        with pytest.raises(NotFoundError):
            await store.resolve(code)

    @pytest.mark.asyncio
    async def test_collision_is_retried(self, store):
        store.generator = ScriptedGenerator(["aaaaaa"])
        assert await store.shorten("https://example.com/first") == "aaaaaa"

        store.generator = ScriptedGenerator(["aaaaaa", "aaaaaa", "bbbbbb"])
        code = await store.shorten("https://example.com/second")

        assert code == "bbbbbb"
        assert store.generator.calls == 3
        assert await store.resolve("aaaaaa") == "https://example.com/first"
        assert await store.resolve("bbbbbb") == "https://example.com/second"

    @pytest.mark.asyncio
    async def test_generation_exhausted(self, store):
        store.generator = ScriptedGenerator(["aaaaaa"])
        await store.shorten("https://example.com/first")

        store.max_attempts = 3
        store.generator = ScriptedGenerator(["aaaaaa"] * 3)

        with pytest.raises(GenerationExhaustedError) as excinfo:
            await store.shorten("https://example.com/second")

        assert excinfo.value.attempts == 3
        assert store.generator.calls == 3
        assert await store.count() == 1

    @pytest.mark.asyncio
    async def test_existing_mapping_wins_over_exhaustion(self, store):
        store.generator = ScriptedGenerator(["aaaaaa"])
        await store.shorten("https://example.com/first")

        # A taken candidate is irrelevant when the original is already stored
        store.generator = ScriptedGenerator(["aaaaaa"] * 10)
        assert await store.shorten("https://example.com/first") == "aaaaaa"
