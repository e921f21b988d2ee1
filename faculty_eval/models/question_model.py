from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, func
from faculty_eval.models.base_model import Base


class Question(Base):
    """
    Model cho bảng questions.
    Câu hỏi được nhóm theo mã category; xóa câu hỏi là xóa mềm (is_active=False).
    """
    __tablename__ = 'questions'

    question_id = Column(Integer, primary_key=True)
    category = Column(String(100), nullable=False, index=True)
    category_name = Column(String(255))
    question_text = Column(Text, nullable=False)
    question_order = Column(Integer, nullable=False, default=1)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=func.now())

    def __repr__(self):
        return f"<Question(question_id={self.question_id}, category='{self.category}')>"
