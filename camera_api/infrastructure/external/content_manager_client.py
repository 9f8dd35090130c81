# Standard library imports
import logging
from typing import AsyncIterable, Optional, Union
from urllib.parse import quote

# External package imports
import httpx

# Local application imports
from ...core.config import get_settings
from ...domain.exceptions import DownstreamError

logger = logging.getLogger(__name__)

UploadBody = Union[bytes, AsyncIterable[bytes]]


class ContentManagerClient:
    """
    HTTP client for the content-manager service that stores uploaded media.
    
    Files are written with ``PUT {base_url}/uploads/{folder}/{filename}``.
    """
    
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize content manager client.
        
        Args:
            base_url: Base URL of the content manager. If None, reads from settings.
            timeout: Request timeout in seconds. If None, reads from settings.
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        if base_url is None or timeout is None:
            settings = get_settings()
            base_url = base_url or settings.content_manager_url
            timeout = timeout if timeout is not None else settings.upload_timeout_seconds
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
    
    def upload_url(self, folder: str, filename: str) -> str:
        return f"{self.base_url}/uploads/{folder}/{quote(filename, safe='')}"
    
    async def put_file(
        self,
        folder: str,
        filename: str,
        content: UploadBody,
        content_type: Optional[str] = None,
        content_length: Optional[int] = None,
    ) -> None:
        """
        Forward one file to the content manager.
        
        Args:
            folder: Target folder ("images" or "videos")
            filename: Original file name
            content: File bytes, or an async iterator of chunks
            content_type: Content type to forward
            content_length: Size in bytes when known
            
        Raises:
            DownstreamError: On timeout, transport failure or non-2xx response
        """
        url = self.upload_url(folder, filename)
        headers = {"Content-Type": content_type or "application/octet-stream"}
        if content_length is not None:
            headers["Content-Length"] = str(content_length)
        
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                logger.info(f"Forwarding upload '{filename}' to {url}")
                response = await client.put(url, content=content, headers=headers)
                response.raise_for_status()
            except httpx.TimeoutException as e:
                logger.error(f"Timeout uploading '{filename}' to content manager: {e}")
                raise DownstreamError(f"Timeout contacting content manager: {e}") from e
            except httpx.HTTPStatusError as e:
                logger.error(
                    f"HTTP error uploading '{filename}' to content manager: "
                    f"{e.response.status_code} - {e.response.text}"
                )
                raise DownstreamError(
                    f"{e.response.status_code} {e.response.reason_phrase}: {e.response.text}"
                ) from e
            except httpx.HTTPError as e:
                logger.error(f"Transport error uploading '{filename}' to content manager: {e}")
                raise DownstreamError(str(e) or e.__class__.__name__) from e
        
        logger.info(f"Uploaded '{filename}' to content manager folder '{folder}'")
