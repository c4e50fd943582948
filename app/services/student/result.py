from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from app.core.exceptions import NotFoundException

T = TypeVar("T")


@dataclass(frozen=True)
class LookupResult(Generic[T]):
    """
    Kết quả tra cứu theo ID: hoặc tìm thấy record, hoặc không.

    Dùng thay cho việc trả về None để phía gọi phải xử lý rõ ràng
    trường hợp không tìm thấy.
    """
    record: Optional[T] = None
    found: bool = False

    @classmethod
    def of(cls, record: T) -> "LookupResult[T]":
        return cls(record=record, found=True)

    @classmethod
    def not_found(cls) -> "LookupResult[T]":
        return cls()

    def unwrap(self, message: str = "Resource not found") -> T:
        """Trả về record, raise NotFoundException nếu không tìm thấy."""
        if not self.found:
            raise NotFoundException(message)
        return self.record
