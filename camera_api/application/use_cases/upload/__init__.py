from .upload_file import UploadFileUseCase, UPLOAD_FOLDERS

__all__ = ["UploadFileUseCase", "UPLOAD_FOLDERS"]
