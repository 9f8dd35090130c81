"""
Media upload proxy.

Endpoints:
  POST /image   -> content-manager folder "images"
  POST /video   -> content-manager folder "videos"

The multipart ``file`` part is streamed to the content manager; the caller
gets a plain-text status line back.
"""
# External package imports
from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import PlainTextResponse

# Local application imports
from ...application.use_cases.upload.upload_file import UploadFileUseCase
from ...domain.exceptions import DownstreamError
from ...di.container import get_container
from ..dependencies import get_current_user


router = APIRouter(tags=["uploads"], dependencies=[Depends(get_current_user)])


async def _upload(kind: str, file: UploadFile) -> PlainTextResponse:
    upload_use_case = get_container().get(UploadFileUseCase)
    try:
        filename = await upload_use_case.execute(kind, file)
    except DownstreamError as exception:
        return PlainTextResponse(
            f"Error uploading file: {exception.message}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    finally:
        await file.close()
    return PlainTextResponse(f"File uploaded successfully: {filename}")


@router.post("/image", response_class=PlainTextResponse)
async def upload_image(file: UploadFile = File(...)) -> PlainTextResponse:
    return await _upload("image", file)


@router.post("/video", response_class=PlainTextResponse)
async def upload_video(file: UploadFile = File(...)) -> PlainTextResponse:
    return await _upload("video", file)
