"""
Uploads API Endpoint
Product image upload to Cloudinary
"""
import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from onium_admin.connectors.cloudinary_connector import CloudinaryConnector
from onium_admin.core.auth import get_current_admin

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_admin)])


def get_cloudinary() -> CloudinaryConnector:
    try:
        return CloudinaryConnector()
    except ValueError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.post("/image")
async def upload_image(
    file: UploadFile = File(...),
    cloudinary: CloudinaryConnector = Depends(get_cloudinary),
):
    """
    Upload a product image

    Returns:
        {"url": secure URL to store as the product's image_url}
    """
    if not (file.content_type or "").startswith("image/"):
        raise HTTPException(status_code=400, detail="File must be an image")

    contents = await file.read()
    try:
        url = await cloudinary.upload_image(contents, file.filename, file.content_type)
    except Exception as e:
        logger.error(f"Image upload failed: {e}")
        raise HTTPException(status_code=502, detail=f"Image upload failed: {str(e)}")

    return {"status": "success", "url": url}
