"""Read-only subject catalog."""

from app.data.csit_subjects import CSIT_SUBJECTS
from app.errors import NotFound
from app.schemas.subjects import SemesterSubjects


def list_subjects(semester: str | None = None) -> list[SemesterSubjects]:
    """All semesters, or only the one whose name matches (case-insensitive)."""
    groups = [SemesterSubjects.model_validate(group) for group in CSIT_SUBJECTS]
    if semester is None:
        return groups

    wanted = semester.strip().lower()
    matching = [group for group in groups if group.semester.lower() == wanted]
    if not matching:
        raise NotFound(f"Unknown semester '{semester}'")
    return matching
