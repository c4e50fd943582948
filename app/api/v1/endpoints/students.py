from fastapi import APIRouter, Depends, Response, status
from typing import List
from app.api.deps import get_store
from app.core.exceptions import NotFoundException
from app.services.student.store import StudentStore
from app.schemas.student import Student, StudentCreate, StudentUpdate

router = APIRouter()

NOT_FOUND_MESSAGE = "Không tìm thấy học sinh"


@router.post("", response_model=Student, status_code=status.HTTP_200_OK)
def create_student(
    student: StudentCreate,
    store: StudentStore = Depends(get_store)
):
    """
    Tạo học sinh mới

    Yêu cầu:
    - **name**: Tên học sinh (bắt buộc)
    - **department**: Khoa (bắt buộc)
    - **email**: Email (bắt buộc)

    Trường `id` trong body (nếu có) bị bỏ qua, ID do database cấp.
    """
    return store.create(student)


@router.get("", response_model=List[Student])
def get_students(store: StudentStore = Depends(get_store)):
    """
    Lấy danh sách tất cả học sinh
    """
    return store.list_all()


@router.get("/{student_id}", response_model=Student)
def get_student(
    student_id: int,
    store: StudentStore = Depends(get_store)
):
    """
    Lấy thông tin chi tiết của 1 học sinh theo ID
    """
    return store.get_by_id(student_id).unwrap(NOT_FOUND_MESSAGE)


@router.put("/{student_id}", response_model=Student)
def update_student(
    student_id: int,
    student: StudentUpdate,
    store: StudentStore = Depends(get_store)
):
    """
    Cập nhật toàn bộ thông tin học sinh (không hỗ trợ cập nhật từng phần)
    """
    return store.update(student_id, student).unwrap(NOT_FOUND_MESSAGE)


@router.delete("/{student_id}", status_code=status.HTTP_200_OK)
def delete_student(
    student_id: int,
    store: StudentStore = Depends(get_store)
):
    """
    Xóa học sinh
    """
    if not store.delete_by_id(student_id):
        raise NotFoundException(NOT_FOUND_MESSAGE)
    return Response(status_code=status.HTTP_200_OK)
