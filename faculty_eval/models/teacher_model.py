from sqlalchemy import Boolean, Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship
from faculty_eval.models.base_model import Base


class Teacher(Base):
    """
    Model cho bảng teachers.
    """
    __tablename__ = 'teachers'

    teacher_id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    department = Column(String(255))
    level = Column(String(100))
    position = Column(String(100))
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=func.now())

    # Mối quan hệ với đánh giá (one-to-many)
    evaluations = relationship("Evaluation", back_populates="teacher", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Teacher(teacher_id='{self.teacher_id}', name='{self.name}')>"
