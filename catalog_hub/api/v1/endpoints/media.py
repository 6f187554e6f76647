"""Image hosting and watermark endpoints."""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from catalog_hub.api.deps import get_image_client, get_watermark_client
from catalog_hub.schemas.media import UploadImageRequest, WatermarkRequest
from catalog_hub.schemas.results import Err, Result

router = APIRouter(prefix="/media", tags=["media"])


def _respond(result: Result) -> JSONResponse:
    if isinstance(result, Err):
        return JSONResponse(status_code=result.status or 502, content=result.model_dump())
    return JSONResponse(status_code=200, content=result.model_dump(mode="json"))


@router.post("/upload-image")
def upload_image(body: UploadImageRequest, image_client=Depends(get_image_client)):
    if not body.image:
        return _respond(Err(error="image is required", status=400))
    return _respond(image_client.upload(body.image, name=body.name, expiration=body.expiration))


@router.post("/watermark")
def watermark(body: WatermarkRequest, watermark_client=Depends(get_watermark_client)):
    if not body.image_url:
        return _respond(Err(error="image_url is required", status=400))
    return _respond(
        watermark_client.apply_watermark(body.image_url, position=body.position, opacity=body.opacity)
    )
