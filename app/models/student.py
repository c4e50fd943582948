from sqlalchemy import BigInteger, Column, Integer, String
from app.core.database import Base


class Student(Base):
    __tablename__ = "students"

    # INTEGER on SQLite keeps the rowid auto-increment
    id = Column(BigInteger().with_variant(Integer(), "sqlite"), primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    department = Column(String, nullable=False)
    email = Column(String, nullable=False)
