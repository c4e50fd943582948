import logging
from contextlib import contextmanager
from typing import Iterator, List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from app.core.database import check_database_connection, create_session_factory
from app.core.exceptions import StorageUnavailableException
from app.models.student import Student as StudentModel
from app.schemas.student import Student, StudentCreate, StudentUpdate
from app.services.student.result import LookupResult

logger = logging.getLogger(__name__)

# Signed 64-bit range of the id column (SQLite INTEGER, PostgreSQL BIGINT)
MIN_ID = -2**63
MAX_ID = 2**63 - 1


def _is_storable_id(student_id: int) -> bool:
    return MIN_ID <= student_id <= MAX_ID


class StudentStore:
    """
    Lưu trữ và truy xuất Student trong database quan hệ.

    Mỗi thao tác mở một session riêng và commit đúng một thay đổi,
    nên store có thể dùng chung giữa các request. ID do database cấp
    (auto-increment) khi tạo và không bao giờ thay đổi.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = create_session_factory(engine)

    @contextmanager
    def _session(self) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"❌ Database error: {e}")
            raise StorageUnavailableException(str(e.__class__.__name__)) from e
        finally:
            db.close()

    def is_available(self) -> bool:
        return check_database_connection(self.engine)

    def create(self, student: StudentCreate) -> Student:
        """Tạo học sinh mới, trả về record kèm ID vừa được cấp"""
        with self._session() as db:
            db_student = StudentModel(
                name=student.name,
                department=student.department,
                email=student.email
            )
            db.add(db_student)
            db.commit()
            db.refresh(db_student)
            logger.info(f"Created student id={db_student.id}")
            return Student.model_validate(db_student)

    def list_all(self) -> List[Student]:
        """Lấy toàn bộ học sinh theo thứ tự tạo"""
        with self._session() as db:
            rows = db.scalars(select(StudentModel).order_by(StudentModel.id)).all()
            return [Student.model_validate(row) for row in rows]

    def get_by_id(self, student_id: int) -> LookupResult[Student]:
        """Lấy thông tin 1 học sinh theo ID"""
        if not _is_storable_id(student_id):
            return LookupResult.not_found()

        with self._session() as db:
            db_student = db.get(StudentModel, student_id)
            if db_student is None:
                logger.debug(f"Student id={student_id} not found")
                return LookupResult.not_found()
            return LookupResult.of(Student.model_validate(db_student))

    def update(self, student_id: int, student: StudentUpdate) -> LookupResult[Student]:
        """
        Ghi đè toàn bộ name/department/email của học sinh.
        Không tạo mới nếu ID không tồn tại.
        """
        if not _is_storable_id(student_id):
            return LookupResult.not_found()

        with self._session() as db:
            db_student = db.get(StudentModel, student_id)
            if db_student is None:
                logger.debug(f"Student id={student_id} not found, nothing updated")
                return LookupResult.not_found()

            db_student.name = student.name
            db_student.department = student.department
            db_student.email = student.email
            db.commit()
            db.refresh(db_student)
            logger.info(f"Updated student id={student_id}")
            return LookupResult.of(Student.model_validate(db_student))

    def delete_by_id(self, student_id: int) -> bool:
        """Xóa học sinh, trả về False nếu không có record nào để xóa"""
        if not _is_storable_id(student_id):
            return False

        with self._session() as db:
            db_student = db.get(StudentModel, student_id)
            if db_student is None:
                return False

            db.delete(db_student)
            db.commit()
            logger.info(f"Deleted student id={student_id}")
            return True
