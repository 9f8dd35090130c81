from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ...domain.models.camera import Camera


class _CameraFields(BaseModel):
    """Camera configuration fields shared by requests and responses (camelCase on the wire)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    device: Optional[str] = None
    resolution: Optional[str] = None
    fps: Optional[str] = None
    post_url: Optional[str] = None
    codec: Optional[str] = None
    preset: Optional[str] = None
    tune: Optional[str] = None
    buffer: Optional[str] = None
    rotation: Optional[str] = None


class CameraCreateRequest(_CameraFields):
    """DTO for camera creation request; name is validated by the use case"""
    name: Optional[str] = None


class CameraUpdateRequest(_CameraFields):
    """DTO for camera update request; only non-null fields are applied"""
    name: Optional[str] = None


class CameraResponse(_CameraFields):
    """DTO for camera response"""
    id: int
    name: str

    @classmethod
    def from_camera(cls, camera: Camera) -> "CameraResponse":
        return cls(
            id=camera.id or 0,
            name=camera.name,
            device=camera.device,
            resolution=camera.resolution,
            fps=camera.fps,
            post_url=camera.post_url,
            codec=camera.codec,
            preset=camera.preset,
            tune=camera.tune,
            buffer=camera.buffer,
            rotation=camera.rotation,
        )
