"""
Cloudinary Connector
Uploads product images to Cloudinary with an unsigned upload preset

Author: TM3
Date: 2025-10-03
"""
import logging
from typing import Optional

import httpx

from onium_admin.core.config import settings

logger = logging.getLogger(__name__)


class CloudinaryConnector:
    """
    Connector for the Cloudinary upload API

    Returns the secure URL that products store as image_url.
    """

    def __init__(self, cloud_name: Optional[str] = None, upload_preset: Optional[str] = None):
        """
        Initialize Cloudinary connector

        Args:
            cloud_name: Cloudinary cloud name
            upload_preset: Unsigned upload preset
        """
        self.cloud_name = cloud_name or settings.CLOUDINARY_CLOUD_NAME
        self.upload_preset = upload_preset or settings.CLOUDINARY_UPLOAD_PRESET

        if not self.cloud_name or not self.upload_preset:
            raise ValueError("Cloudinary not configured. Set CLOUDINARY_CLOUD_NAME and CLOUDINARY_UPLOAD_PRESET")

        self.api_url = f"https://api.cloudinary.com/v1_1/{self.cloud_name}/image/upload"

    async def upload_image(self, content: bytes, filename: str, content_type: Optional[str] = None) -> str:
        """
        Upload one image

        Returns:
            The durable https URL of the uploaded image
        """
        files = {"file": (filename, content, content_type or "application/octet-stream")}
        data = {"upload_preset": self.upload_preset}

        async with httpx.AsyncClient() as client:
            response = await client.post(self.api_url, data=data, files=files, timeout=60.0)
            response.raise_for_status()
            payload = response.json()

        url = payload.get("secure_url")
        if not url:
            raise Exception(f"Cloudinary response without secure_url: {payload}")

        logger.info(f"Image uploaded: {url}")
        return url
