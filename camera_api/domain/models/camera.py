# Standard library imports
from dataclasses import dataclass
from typing import Optional


def normalize_camera_name(name: str) -> str:
    """Key used for case-insensitive name uniqueness ("  FrontDoor " -> "frontdoor")."""
    return name.strip().lower()


@dataclass
class Camera:
    """
    Pure domain model for Camera entity - no external dependencies.
    
    Holds the capture/encoding configuration of one camera. Every field but
    ``id`` and ``name`` is an opaque string handed to the capture agents.
    """
    id: Optional[int]
    name: str
    device: Optional[str] = None
    resolution: Optional[str] = None
    fps: Optional[str] = None
    post_url: Optional[str] = None
    codec: Optional[str] = None
    preset: Optional[str] = None
    tune: Optional[str] = None
    buffer: Optional[str] = None
    rotation: Optional[str] = None
    
    def __post_init__(self) -> None:
        """Business validations"""
        if not self.name or len(self.name.strip()) < 1:
            raise ValueError("Camera name is required")
    
    @property
    def name_key(self) -> str:
        return normalize_camera_name(self.name)
