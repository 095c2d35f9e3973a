"""
Image uploads to the Cloudinary media host.

Uploads use Cloudinary's signed REST endpoint.  Every failure (missing
credentials, transport errors, non-2xx responses, unexpected payloads)
is reported as ``UploadError`` so callers can apply their own fallback.
"""
import hashlib
import logging
import time
from typing import Optional, Protocol

import httpx

from .config import Settings
from .errors import UploadError

logger = logging.getLogger(__name__)

CLOUDINARY_API_URL = "https://api.cloudinary.com/v1_1"


class MediaUploader(Protocol):
    async def upload(self, data: str) -> str:
        """Store image data (URL or data URI) and return its hosted URL."""


class CloudinaryUploader:
    """Async client for Cloudinary image uploads."""

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        folder: str = "employee_photos",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.folder = folder
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "CloudinaryUploader":
        return cls(
            cloud_name=settings.cloudinary_cloud_name,
            api_key=settings.cloudinary_api_key,
            api_secret=settings.cloudinary_api_secret,
            folder=settings.upload_folder,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.cloud_name and self.api_key and self.api_secret)

    @property
    def upload_url(self) -> str:
        return f"{CLOUDINARY_API_URL}/{self.cloud_name}/image/upload"

    def sign(self, params: dict[str, str | int]) -> str:
        """Compute the SHA-1 request signature Cloudinary expects."""
        to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params))
        return hashlib.sha1((to_sign + self.api_secret).encode("utf-8")).hexdigest()

    async def upload(self, data: str) -> str:
        if not self.is_configured:
            raise UploadError("Cloudinary credentials are not configured")

        params: dict[str, str | int] = {
            "folder": self.folder,
            "timestamp": int(time.time()),
        }
        form = {
            **params,
            "file": data,
            "api_key": self.api_key,
            "signature": self.sign(params),
        }

        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout), transport=self._transport
            ) as client:
                resp = await client.post(self.upload_url, data=form)
                resp.raise_for_status()
                secure_url = resp.json()["secure_url"]
        except httpx.HTTPStatusError as exc:
            raise UploadError(
                f"Upload rejected with HTTP {exc.response.status_code}: {exc.response.text}"
            ) from exc
        except httpx.HTTPError as exc:
            raise UploadError(f"Upload failed: {exc}") from exc
        except (ValueError, KeyError) as exc:
            raise UploadError("Upload response did not include a secure_url") from exc

        logger.debug("Uploaded image to %s", secure_url)
        return secure_url
