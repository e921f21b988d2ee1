# faculty_eval/schemas/report_schema.py
from pydantic import BaseModel, ConfigDict, Field, AliasChoices, field_validator
from typing import Any, Dict, List, Optional

from faculty_eval.services.service_helper import normalize_answers, normalize_category_ratings, to_number


class CategoryRating(BaseModel):
    """
    Cặp {score, max} của một category.
    Giá trị không phải số được coi là 0.
    """
    score: float = 0.0
    max: float = 0.0

    @field_validator("score", "max", mode="before")
    @classmethod
    def coerce_number(cls, value: Any) -> float:
        return to_number(value)


class QuestionRecord(BaseModel):
    """
    Câu hỏi ở dạng đã chuẩn hóa, đầu vào của bộ tổng hợp.
    Đọc được cả từ model Question (question_id, question_text) lẫn dict thô.
    """
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(validation_alias=AliasChoices("id", "question_id"))
    category: str
    category_name: Optional[str] = None
    text: str = Field("", validation_alias=AliasChoices("text", "question_text"))

    @field_validator("id", "category", mode="before")
    @classmethod
    def coerce_str(cls, value: Any) -> str:
        return "" if value is None else str(value)


class SubmissionRecord(BaseModel):
    """
    Một bài đánh giá đã chuẩn hóa: answers và category_ratings luôn là dict,
    dù dữ liệu gốc là chuỗi JSON hay object.
    """
    model_config = ConfigDict(from_attributes=True)

    teacher_id: str
    teacher_name: str = ""
    student_id: Optional[str] = None
    category_ratings: Dict[str, CategoryRating] = Field(default_factory=dict)
    answers: Dict[str, int] = Field(default_factory=dict)
    positive_feedback: Optional[str] = None
    suggestions: Optional[str] = None

    @field_validator("teacher_id", mode="before")
    @classmethod
    def coerce_teacher_id(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("teacher_name", mode="before")
    @classmethod
    def coerce_teacher_name(cls, value: Any) -> str:
        return value or ""

    @field_validator("student_id", mode="before")
    @classmethod
    def coerce_student_id(cls, value: Any) -> Optional[str]:
        return None if value is None else str(value)

    @field_validator("category_ratings", mode="before")
    @classmethod
    def parse_category_ratings(cls, value: Any) -> Dict[str, Any]:
        return normalize_category_ratings(value)

    @field_validator("answers", mode="before")
    @classmethod
    def parse_answers(cls, value: Any) -> Dict[str, int]:
        return normalize_answers(value)


class CategoryInfo(BaseModel):
    category: str
    category_name: Optional[str] = None

    @property
    def label(self) -> str:
        return self.category_name or self.category


class TeacherAggregate(BaseModel):
    teacher_id: str
    teacher_name: str
    total_respondents: int
    accumulated_score: float
    highest_possible_score: int
    overall_rating: str = Field(..., description="Phần trăm, 2 chữ số thập phân, ví dụ '87.50'.")
    performance_level: str
    category_ratings: Dict[str, CategoryRating] = Field(default_factory=dict)
    category_breakdown: Dict[str, float] = Field(default_factory=dict)


class EvaluationReport(BaseModel):
    evaluation_period: str
    categories: List[CategoryInfo]
    total_questions: int
    teachers: List[TeacherAggregate]


class OverallSummary(BaseModel):
    evaluation_period: str
    total_teachers_evaluated: int
    school_average: float = Field(..., description="Trung bình overall_rating (%) của các giáo viên.")
    school_average_level: str
    performance_distribution: Dict[str, int]
    teachers: List[TeacherAggregate]


class TeacherComment(BaseModel):
    positive: str = ""
    improvement: str = ""


class TeacherComments(BaseModel):
    teacher_id: str
    teacher_name: str
    overall_rating: str
    comments: List[TeacherComment]


class FilteredComment(BaseModel):
    teacher_name: str
    positive: str = ""
    improvement: str = ""
    matched_words: List[str]
