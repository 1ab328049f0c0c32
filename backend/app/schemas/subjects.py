"""Subject catalog schemas."""

from app.schemas.base import BaseSchema


class SemesterSubjects(BaseSchema):
    semester: str
    subjects: list[str]
