"""Images controller — pasted image uploads."""

from fastapi import APIRouter, File, HTTPException, UploadFile

from api.images.dto.image import PasteImageResponse
from api.images.services import images_service
from config import UPLOAD_FIELD

router = APIRouter(prefix="/api/images", tags=["Images"])


@router.get("/submit")
async def submit():
    return "Test"


@router.post("/paste/save", response_model=PasteImageResponse)
async def save_pasted_image(pasted_image: UploadFile = File(..., alias=UPLOAD_FIELD)):
    """Validate a pasted image and return the URL it can be reached at."""
    try:
        return await images_service.save_pasted_image(pasted_image)
    except (images_service.PayloadTooLargeError, images_service.InvalidFormatError) as e:
        raise HTTPException(status_code=400, detail=str(e))
