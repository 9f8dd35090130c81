"""
Tests for ContentManagerClient and UploadFileUseCase using httpx.MockTransport.
"""
import io

import httpx
import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from camera_api.application.use_cases.upload.upload_file import UploadFileUseCase
from camera_api.domain.exceptions import BadRequestError, DownstreamError
from camera_api.infrastructure.external.content_manager_client import ContentManagerClient

BASE_URL = "http://content-manager.test:8181"


class RecordingHandler:
    """MockTransport handler that records each request body"""

    def __init__(self, status_code=200, text="ok"):
        self.status_code = status_code
        self.text = text
        self.requests = []
        self.bodies = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.bodies.append(await request.aread())
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.text)


def _client(handler) -> ContentManagerClient:
    return ContentManagerClient(base_url=BASE_URL, timeout=5, transport=httpx.MockTransport(handler))


def _upload(data: bytes, filename="photo.png", content_type="image/png") -> UploadFile:
    return UploadFile(
        file=io.BytesIO(data),
        size=len(data),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


class TestContentManagerClient:

    def test_upload_url_quotes_filename(self):
        client = ContentManagerClient(base_url=BASE_URL + "/", timeout=1)
        assert client.upload_url("images", "my photo.png") == f"{BASE_URL}/uploads/images/my%20photo.png"
        assert client.upload_url("videos", "../x.mp4") == f"{BASE_URL}/uploads/videos/..%2Fx.mp4"

    def test_defaults_come_from_settings(self, settings):
        client = ContentManagerClient()
        assert client.base_url == "http://content-manager.test:8181"
        assert client.timeout == settings.upload_timeout_seconds

    @pytest.mark.asyncio
    async def test_put_file(self):
        handler = RecordingHandler()
        await _client(handler).put_file("images", "a.png", b"PNGDATA", "image/png", 7)

        request = handler.requests[0]
        assert request.method == "PUT"
        assert str(request.url) == f"{BASE_URL}/uploads/images/a.png"
        assert request.headers["content-type"] == "image/png"
        assert handler.bodies[0] == b"PNGDATA"

    @pytest.mark.asyncio
    async def test_non_2xx_raises_downstream_error(self):
        handler = RecordingHandler(status_code=507, text="disk full")
        with pytest.raises(DownstreamError) as exc_info:
            await _client(handler).put_file("videos", "v.mp4", b"x")
        assert "507" in exc_info.value.message
        assert "disk full" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_connection_error_raises_downstream_error(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(DownstreamError) as exc_info:
            await _client(refuse).put_file("images", "a.png", b"x")
        assert "connection refused" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_timeout_raises_downstream_error(self):
        def slow(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(DownstreamError) as exc_info:
            await _client(slow).put_file("images", "a.png", b"x")
        assert "Timeout" in exc_info.value.message


class TestUploadFileUseCase:

    @pytest.mark.asyncio
    async def test_image_goes_to_images_folder(self):
        handler = RecordingHandler()
        use_case = UploadFileUseCase(_client(handler))

        name = await use_case.execute("image", _upload(b"\x89PNG-bytes"))
        assert name == "photo.png"
        assert handler.requests[0].url.path == "/uploads/images/photo.png"
        assert handler.bodies[0] == b"\x89PNG-bytes"

    @pytest.mark.asyncio
    async def test_video_goes_to_videos_folder(self):
        handler = RecordingHandler()
        use_case = UploadFileUseCase(_client(handler))

        await use_case.execute("video", _upload(b"mp4", filename="clip.mp4", content_type="video/mp4"))
        assert handler.requests[0].url.path == "/uploads/videos/clip.mp4"
        assert handler.requests[0].headers["content-type"] == "video/mp4"

    @pytest.mark.asyncio
    async def test_large_file_streams_in_chunks(self):
        handler = RecordingHandler()
        data = b"0123456789abcdef" * (3 * 1024 * 1024 // 16 + 5)

        await UploadFileUseCase(_client(handler)).execute("video", _upload(data, filename="big.mp4"))
        assert handler.bodies[0] == data

    @pytest.mark.asyncio
    async def test_unknown_kind(self):
        with pytest.raises(BadRequestError):
            await UploadFileUseCase(_client(RecordingHandler())).execute("audio", _upload(b"x"))

    @pytest.mark.asyncio
    async def test_missing_filename(self):
        with pytest.raises(BadRequestError):
            await UploadFileUseCase(_client(RecordingHandler())).execute("image", _upload(b"x", filename=""))

    @pytest.mark.asyncio
    async def test_downstream_failure_propagates(self):
        with pytest.raises(DownstreamError):
            await UploadFileUseCase(_client(RecordingHandler(status_code=500))).execute("image", _upload(b"x"))
