from sqlalchemy import Boolean, Column, Integer, String
from faculty_eval.models.base_model import Base


class EvaluationSetting(Base):
    """
    Model cho bảng evaluation_settings (chỉ có một dòng).
    """
    __tablename__ = 'evaluation_settings'

    setting_id = Column(Integer, primary_key=True)
    current_semester = Column(String(50), nullable=False, default="1st Semester")
    school_year = Column(String(50), nullable=False, default="2025-2026")
    is_evaluation_active = Column(Boolean, nullable=False, default=True)

    @property
    def evaluation_period(self) -> str:
        return f"{self.current_semester} A/Y {self.school_year}"
