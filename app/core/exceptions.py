from typing import Any, Dict, Optional
from fastapi import status

class BaseAPIException(Exception):
    """
    Class cha cho tất cả các lỗi Custom trong hệ thống.
    Giúp chuẩn hóa format lỗi trả về cho client.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

# =========================================================
# 1. COMMON ERRORS
# =========================================================

class BadRequestException(BaseAPIException):
    """Lỗi 400: Yêu cầu không hợp lệ (body sai JSON, thiếu trường...)"""
    def __init__(self, message: str = "Bad Request", details: dict = None, code: str = "BAD_REQUEST"):
        super().__init__(
            message=message,
            code=code,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )

class NotFoundException(BaseAPIException):
    """Lỗi 404: Không tìm thấy tài nguyên (trả về body rỗng)"""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND
        )

# =========================================================
# 2. STORAGE ERRORS
# =========================================================

class StorageUnavailableException(BaseAPIException):
    """
    Lỗi 500: Database không kết nối được hoặc lỗi nghiêm trọng khi đọc/ghi.
    Service không tự retry, client phải gọi lại.
    """
    def __init__(self, message: str = "Storage unavailable", details: dict = None):
        super().__init__(
            message=f"Storage Error: {message}",
            code="STORAGE_UNAVAILABLE",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details
        )
