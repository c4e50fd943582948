from pydantic import BaseModel, ConfigDict


class StudentBase(BaseModel):
    name: str
    department: str
    email: str


class StudentCreate(StudentBase):
    pass


class StudentUpdate(StudentBase):
    """Full replacement set: every field is overwritten on update."""
    pass


class Student(StudentBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
