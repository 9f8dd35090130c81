# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, Query, Response, status

# Local application imports
from ...application.dto.camera_dto import CameraCreateRequest, CameraResponse, CameraUpdateRequest
from ...application.dto.error_dto import ErrorResponse
from ...application.use_cases.camera import (
    CreateCameraUseCase,
    DeleteCameraUseCase,
    GetCameraUseCase,
    ListCamerasUseCase,
    SearchCamerasUseCase,
    UpdateCameraUseCase,
)
from ...domain.models.principal import Principal
from ...di.container import get_container
from ..dependencies import get_principal


# End users and the internal service (shared token) are both admitted here
router = APIRouter(
    tags=["cameras"],
    dependencies=[Depends(get_principal)],
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)


@router.get("", response_model=List[CameraResponse])
async def list_cameras() -> List[CameraResponse]:
    """List all cameras"""
    return await get_container().get(ListCamerasUseCase).execute()


@router.post("", response_model=CameraResponse, status_code=status.HTTP_201_CREATED)
async def create_camera(
    request: CameraCreateRequest,
    principal: Principal = Depends(get_principal),
) -> CameraResponse:
    """
    Create a new camera
    
    Args:
        request: Camera creation request
        principal: Caller (from dependency)
        
    Returns:
        CameraResponse with created camera information; 400 for a blank name,
        409 when the name (ignoring case and whitespace) already exists
    """
    create_camera_use_case = get_container().get(CreateCameraUseCase)
    return await create_camera_use_case.execute(request, created_by=principal.name)


@router.get("/search", response_model=List[CameraResponse])
async def search_cameras(name: str = Query(...)) -> List[CameraResponse]:
    """Case-insensitive substring search on camera names"""
    return await get_container().get(SearchCamerasUseCase).execute(name)


@router.get("/{camera_id}", response_model=CameraResponse)
async def get_camera(camera_id: int) -> CameraResponse:
    return await get_container().get(GetCameraUseCase).execute(camera_id)


@router.put("/{camera_id}", response_model=CameraResponse)
async def update_camera(camera_id: int, request: CameraUpdateRequest) -> CameraResponse:
    """Update only the fields present (non-null) in the request body"""
    return await get_container().get(UpdateCameraUseCase).execute(camera_id, request)


@router.delete("/{camera_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_camera(camera_id: int) -> Response:
    await get_container().get(DeleteCameraUseCase).execute(camera_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
