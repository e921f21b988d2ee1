# faculty_eval/models/comment_analysis_model.py
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, func, Enum
from sqlalchemy.orm import relationship
from faculty_eval.models.base_model import Base
import enum

class CommentType(str, enum.Enum):
    """Loại bình luận được phân tích."""
    positive = "positive"
    suggestion = "suggestion"


class CommentAnalysis(Base):
    """
    Model cho bảng comment_analysis.
    """
    __tablename__ = 'comment_analysis'

    analysis_id = Column(Integer, primary_key=True)
    evaluation_id = Column(Integer, ForeignKey('evaluations.evaluation_id', ondelete="CASCADE"), nullable=False)
    comment_text = Column(Text, nullable=False)
    comment_type = Column(Enum(CommentType), nullable=False)
    is_flagged = Column(Boolean, nullable=False, default=False)
    flag_reason = Column(String(50))
    language_detected = Column(String(20))
    admin_reviewed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=func.now())

    evaluation = relationship("Evaluation", back_populates="comment_analyses")
