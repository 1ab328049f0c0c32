"""Field schemas of the four content resource types."""

from app.db.models import Assignment, Blog, Note, OldQuestion
from app.repositories.base import ResourceSchema
from app.schemas.assignments import AssignmentCreate, AssignmentListQuery, AssignmentRead, AssignmentUpdate
from app.schemas.blogs import BlogCreate, BlogListQuery, BlogRead, BlogUpdate
from app.schemas.notes import NoteCreate, NoteListQuery, NoteRead, NoteUpdate
from app.schemas.old_questions import (
    OldQuestionCreate,
    OldQuestionListQuery,
    OldQuestionRead,
    OldQuestionUpdate,
)

CLASSIFICATION_FILTERS = ("subject", "semester", "faculty", "year", "is_published")

BASE_SORT_FIELDS = {
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "title": "title",
}

CLASSIFIED_SORT_FIELDS = {
    **BASE_SORT_FIELDS,
    "subject": "subject",
    "semester": "semester",
    "year": "year",
}

NOTES = ResourceSchema(
    name="notes",
    path="notes",
    label="Note",
    model=Note,
    create_schema=NoteCreate,
    update_schema=NoteUpdate,
    read_schema=NoteRead,
    query_schema=NoteListQuery,
    filter_fields=CLASSIFICATION_FILTERS,
    search_fields=("title", "content", "description"),
    sort_fields={**CLASSIFIED_SORT_FIELDS, "views": "views", "likes": "likes"},
)

ASSIGNMENTS = ResourceSchema(
    name="assignments",
    path="assignments",
    label="Assignment",
    model=Assignment,
    create_schema=AssignmentCreate,
    update_schema=AssignmentUpdate,
    read_schema=AssignmentRead,
    query_schema=AssignmentListQuery,
    filter_fields=CLASSIFICATION_FILTERS + ("difficulty",),
    search_fields=("title", "description", "instructions"),
    sort_fields={**CLASSIFIED_SORT_FIELDS, "dueDate": "due_date", "totalMarks": "total_marks"},
)

OLD_QUESTIONS = ResourceSchema(
    name="old_questions",
    path="old-questions",
    label="Old question",
    model=OldQuestion,
    create_schema=OldQuestionCreate,
    update_schema=OldQuestionUpdate,
    read_schema=OldQuestionRead,
    query_schema=OldQuestionListQuery,
    filter_fields=CLASSIFICATION_FILTERS + ("difficulty",),
    search_fields=("title", "question", "answer"),
    sort_fields=CLASSIFIED_SORT_FIELDS,
)

BLOGS = ResourceSchema(
    name="blogs",
    path="blogs",
    label="Blog",
    model=Blog,
    create_schema=BlogCreate,
    update_schema=BlogUpdate,
    read_schema=BlogRead,
    query_schema=BlogListQuery,
    filter_fields=("category", "is_published", "is_featured"),
    search_fields=("title", "excerpt", "description"),
    sort_fields={
        **BASE_SORT_FIELDS,
        "category": "category",
        "views": "views",
        "likes": "likes",
        "readTimeMinutes": "read_time_minutes",
    },
)

RESOURCES = (NOTES, ASSIGNMENTS, OLD_QUESTIONS, BLOGS)
