"""Tests for the Cloudinary upload adapter."""
import hashlib
from urllib.parse import parse_qs

import httpx
import pytest

from ems.errors import UploadError
from ems.media import CloudinaryUploader

DATA_URI = "data:image/png;base64,iVBORw0KGgo="


def make_uploader(handler) -> CloudinaryUploader:
    return CloudinaryUploader(
        cloud_name="demo",
        api_key="key123",
        api_secret="shh",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_upload_returns_secure_url_and_signs_request() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["form"] = {k: v[0] for k, v in parse_qs(request.content.decode()).items()}
        return httpx.Response(200, json={"secure_url": "https://res.cloudinary.com/demo/a.png"})

    url = await make_uploader(handler).upload(DATA_URI)

    assert url == "https://res.cloudinary.com/demo/a.png"
    assert seen["url"] == "https://api.cloudinary.com/v1_1/demo/image/upload"
    form = seen["form"]
    assert form["file"] == DATA_URI
    assert form["folder"] == "employee_photos"
    assert form["api_key"] == "key123"
    expected = hashlib.sha1(
        f"folder=employee_photos&timestamp={form['timestamp']}shh".encode()
    ).hexdigest()
    assert form["signature"] == expected


@pytest.mark.asyncio
async def test_rejected_upload_raises_upload_error() -> None:
    uploader = make_uploader(lambda request: httpx.Response(400, json={"error": {"message": "bad"}}))
    with pytest.raises(UploadError):
        await uploader.upload(DATA_URI)


@pytest.mark.asyncio
async def test_transport_failure_raises_upload_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(UploadError):
        await make_uploader(handler).upload(DATA_URI)


@pytest.mark.asyncio
async def test_response_without_url_raises_upload_error() -> None:
    uploader = make_uploader(lambda request: httpx.Response(200, json={"public_id": "x"}))
    with pytest.raises(UploadError):
        await uploader.upload(DATA_URI)


@pytest.mark.asyncio
async def test_unconfigured_uploader_fails_without_network() -> None:
    uploader = CloudinaryUploader(cloud_name="", api_key="", api_secret="")
    assert not uploader.is_configured
    with pytest.raises(UploadError):
        await uploader.upload(DATA_URI)
