from .spend_repository import SpendRepository, InsertResult
from .upload_repository import UploadRepository

__all__ = ["SpendRepository", "InsertResult", "UploadRepository"]
