"""Tests for local media storage and media lifecycle helpers."""

import hashlib

import pytest

from server.adapters.storage import LocalStorageBackend, StorageError, content_key
from server.core.models import AttachedMedia
from server.services import key_from_url, media_url, release_media


def test_content_key_is_content_addressed():
    data = b"\x89PNG data"
    digest = hashlib.sha256(data).hexdigest()
    assert content_key("Logo.PNG", data) == f"{digest}.png"
    assert content_key("other-name.png", data) == content_key("logo.png", data)
    assert content_key("logo.png", b"different") != content_key("logo.png", data)


class TestLocalStorageBackend:
    def test_put_get_delete(self, media_storage):
        stored = media_storage.put_bytes("abc.png", b"bytes", "image/png")

        assert stored.size == 5
        assert stored.checksum == hashlib.sha256(b"bytes").hexdigest()
        assert media_storage.exists("abc.png")
        assert media_storage.get_bytes("abc.png") == b"bytes"

        media_storage.delete("abc.png")
        assert not media_storage.exists("abc.png")
        media_storage.delete("abc.png")

    def test_missing_key(self, media_storage):
        with pytest.raises(FileNotFoundError):
            media_storage.get_bytes("nope.png")

    def test_rejects_escaping_keys(self, media_storage):
        with pytest.raises(StorageError):
            media_storage.put_bytes("../outside.png", b"x")
        assert media_storage.exists("../outside.png") is False


class TestReleaseMedia:
    def test_urls(self):
        assert media_url("abc.png") == "/media/abc.png"
        assert key_from_url("/media/abc.png") == "abc.png"
        assert key_from_url("https://example.com/a.png") is None
        assert key_from_url("/media/") is None

    @pytest.mark.asyncio
    async def test_releases_local_blob(self, media_storage):
        media_storage.put_bytes("abc.png", b"x")
        await release_media(media_storage, AttachedMedia("a.png", media_url("abc.png")))
        assert not media_storage.exists("abc.png")

    @pytest.mark.asyncio
    async def test_keeps_blob_still_referenced(self, media_storage):
        media_storage.put_bytes("abc.png", b"x")
        media = AttachedMedia("a.png", media_url("abc.png"))
        await release_media(media_storage, media, AttachedMedia("renamed.png", media_url("abc.png")))
        assert media_storage.exists("abc.png")

    @pytest.mark.asyncio
    async def test_ignores_external_urls(self, tmp_path):
        storage = LocalStorageBackend(tmp_path / "m")
        await release_media(storage, AttachedMedia("a.png", "https://example.com/a.png"))
        await release_media(storage, None)
