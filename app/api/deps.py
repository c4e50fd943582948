from fastapi import Request
from app.services.student.store import StudentStore


def get_store(request: Request) -> StudentStore:
    """
    Dependency để lấy StudentStore đã được tạo lúc khởi động app
    (xem create_app trong app/main.py).
    """
    return request.app.state.store
