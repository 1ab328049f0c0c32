"""Subject catalog routes."""

from fastapi import APIRouter, Depends

from app.api.deps import require
from app.schemas.subjects import SemesterSubjects
from app.services.policy import Operation
from app.services.subjects import list_subjects

router = APIRouter(prefix="/api/subjects", tags=["subjects"])


@router.get(
    "",
    response_model=list[SemesterSubjects],
    dependencies=[Depends(require("subjects", Operation.LIST))],
)
async def get_subjects(semester: str | None = None) -> list[SemesterSubjects]:
    """Subjects grouped by semester; `?semester=Third Semester` narrows to one group."""
    return list_subjects(semester)
