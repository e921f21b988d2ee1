from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Annotated, Any, Dict, Optional

from faculty_eval.config import MAX_RATING
from faculty_eval.schemas.report_schema import CategoryRating
from faculty_eval.services.service_helper import normalize_answers, normalize_category_ratings

Rating = Annotated[int, Field(ge=1, le=MAX_RATING)]

class EvaluationCreate(BaseModel):
    """
    Bài đánh giá học sinh gửi cho một giáo viên.
    answers: question_id -> điểm 1..5; câu bỏ trống thì không gửi.
    """
    teacher_id: int
    student_id: str = Field(..., min_length=1)
    student_name: Optional[str] = None
    section: Optional[str] = None
    answers: Dict[str, Rating] = Field(default_factory=dict)
    positive_feedback: Optional[str] = None
    suggestions: Optional[str] = None

class Evaluation(BaseModel):
    """
    Schema để đọc dữ liệu đánh giá từ cơ sở dữ liệu.
    """
    evaluation_id: int
    teacher_id: int
    teacher_name: str
    student_id: str
    student_name: Optional[str] = None
    section: Optional[str] = None
    answers: Dict[str, int] = Field(default_factory=dict)
    category_ratings: Dict[str, CategoryRating] = Field(default_factory=dict)
    positive_feedback: Optional[str] = None
    suggestions: Optional[str] = None
    submitted_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("answers", mode="before")
    @classmethod
    def parse_answers(cls, value: Any) -> Dict[str, int]:
        return normalize_answers(value)

    @field_validator("category_ratings", mode="before")
    @classmethod
    def parse_category_ratings(cls, value: Any) -> Dict[str, Any]:
        return normalize_category_ratings(value)
