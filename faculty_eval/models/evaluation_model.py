from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.orm import relationship
from faculty_eval.models.base_model import Base


class Evaluation(Base):
    """
    Model cho bảng evaluations.
    Mỗi bản ghi là đánh giá của đúng một học sinh cho đúng một giáo viên.
    answers và category_ratings được lưu dưới dạng chuỗi JSON.
    """
    __tablename__ = 'evaluations'
    __table_args__ = (
        UniqueConstraint("teacher_id", "student_id", name="uq_evaluation_teacher_student"),
    )

    evaluation_id = Column(Integer, primary_key=True)

    teacher_id = Column(Integer, ForeignKey('teachers.teacher_id', ondelete="CASCADE"), nullable=False)
    teacher_name = Column(String(255), nullable=False)
    student_id = Column(String(100), nullable=False)
    student_name = Column(String(255))
    section = Column(String(100))

    answers = Column(Text)
    category_ratings = Column(Text)
    positive_feedback = Column(Text)
    suggestions = Column(Text)
    submitted_at = Column(DateTime, default=func.now())

    teacher = relationship("Teacher", back_populates="evaluations")
    comment_analyses = relationship(
        "CommentAnalysis", back_populates="evaluation", cascade="all, delete-orphan"
    )

    def __repr__(self):
        return (
            f"<Evaluation(teacher_id={self.teacher_id}, "
            f"student_id={self.student_id}, submitted_at={self.submitted_at})>"
        )
