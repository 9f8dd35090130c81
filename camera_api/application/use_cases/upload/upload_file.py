# Standard library imports
import logging
from typing import AsyncIterator, Optional

# External package imports
from fastapi import UploadFile

# Local application imports
from ....domain.exceptions import BadRequestError
from ....infrastructure.external.content_manager_client import ContentManagerClient

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024

UPLOAD_FOLDERS = {
    "image": "images",
    "video": "videos",
}


class UploadFileUseCase:
    """Use case for proxying an uploaded media file to the content manager"""
    
    def __init__(self, content_manager_client: ContentManagerClient) -> None:
        self.content_manager_client = content_manager_client
    
    async def execute(self, kind: str, file: UploadFile) -> str:
        """
        Stream ``file`` to the content manager folder for ``kind``
        
        Args:
            kind: "image" or "video"
            file: Multipart upload from the request
            
        Returns:
            The original file name
            
        Raises:
            BadRequestError: If the kind is unknown or the file has no name
            DownstreamError: If the content manager rejects or cannot be reached
        """
        folder = UPLOAD_FOLDERS.get(kind)
        if folder is None:
            raise BadRequestError(f"Unsupported upload type: {kind}", "Invalid upload type")
        if not file.filename:
            raise BadRequestError("Missing file name.", "Invalid file")
        
        async def chunks() -> AsyncIterator[bytes]:
            while True:
                chunk = await file.read(CHUNK_SIZE)
                if not chunk:
                    break
                yield chunk
        
        size: Optional[int] = file.size
        await self.content_manager_client.put_file(
            folder=folder,
            filename=file.filename,
            content=chunks(),
            content_type=file.content_type,
            content_length=size,
        )
        return file.filename
