from .auth_controller import router as auth_router
from .user_controller import router as user_router
from .camera_controller import router as camera_router
from .upload_controller import router as upload_router


__all__ = ["auth_router", "user_router", "camera_router", "upload_router"]
