from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import Optional

from faculty_eval.models.comment_analysis_model import CommentType

class CommentAnalysisResult(BaseModel):
    """Kết quả phân tích một bình luận."""
    language: str
    is_flagged: bool
    flag_reason: Optional[str] = None

class CommentAnalysis(BaseModel):
    analysis_id: int
    evaluation_id: int
    comment_text: str
    comment_type: CommentType
    is_flagged: bool
    flag_reason: Optional[str] = None
    language_detected: Optional[str] = None
    admin_reviewed: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class CommentAnalysisUpdate(BaseModel):
    admin_reviewed: bool
