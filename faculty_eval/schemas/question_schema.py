from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class QuestionBase(BaseModel):
    """
    Schema cơ sở cho câu hỏi đánh giá.
    """
    category: str = Field(..., min_length=1, description="Mã nhóm câu hỏi")
    category_name: Optional[str] = Field(None, description="Tên hiển thị của nhóm")
    question_text: str = Field(..., min_length=1)

class QuestionCreate(QuestionBase):
    pass

class QuestionUpdate(BaseModel):
    category: Optional[str] = None
    category_name: Optional[str] = None
    question_text: Optional[str] = None
    question_order: Optional[int] = None
    is_active: Optional[bool] = None

class Question(QuestionBase):
    question_id: int
    question_order: int
    is_active: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
