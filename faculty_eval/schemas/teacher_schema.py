from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional

class TeacherBase(BaseModel):
    """
    Schema cơ sở cho Giáo viên, chứa các trường dùng chung.
    """
    name: str = Field(..., min_length=1)
    department: Optional[str] = None
    level: Optional[str] = None
    position: Optional[str] = None

class TeacherCreate(TeacherBase):
    """
    Schema cho việc tạo một Giáo viên mới.
    """
    pass

class TeacherUpdate(BaseModel):
    """
    Schema cho việc cập nhật thông tin Giáo viên.
    Các trường là tùy chọn (Optional).
    """
    name: Optional[str] = None
    department: Optional[str] = None
    level: Optional[str] = None
    position: Optional[str] = None
    is_active: Optional[bool] = None

class Teacher(TeacherBase):
    """
    Schema cho mô hình Giáo viên đã hoàn chỉnh, bao gồm teacher_id.
    """
    teacher_id: int
    is_active: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
