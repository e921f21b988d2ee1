# faculty_eval/crud/teacher_crud.py
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select
from faculty_eval.models.teacher_model import Teacher
from faculty_eval.schemas.teacher_schema import TeacherCreate, TeacherUpdate


def get_teacher(db: Session, teacher_id: int) -> Optional[Teacher]:
    """
    Lấy thông tin giáo viên theo teacher_id.
    """
    stmt = select(Teacher).where(Teacher.teacher_id == teacher_id)
    return db.execute(stmt).scalar_one_or_none()

def get_all_teachers(db: Session, skip: int = 0, limit: Optional[int] = 100, active_only: bool = False) -> List[Teacher]:
    """
    Lấy danh sách tất cả giáo viên, sắp xếp theo tên.
    """
    stmt = select(Teacher)
    if active_only:
        stmt = stmt.where(Teacher.is_active.is_(True))
    stmt = stmt.order_by(Teacher.name).offset(skip).limit(limit)
    return db.execute(stmt).scalars().all()

def create_teacher(db: Session, teacher_in: TeacherCreate) -> Teacher:
    db_teacher = Teacher(**teacher_in.model_dump())
    db.add(db_teacher)
    db.commit()
    db.refresh(db_teacher)
    return db_teacher

def update_teacher(db: Session, db_obj: Teacher, obj_in: TeacherUpdate) -> Teacher:
    update_data = obj_in.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(db_obj, key, value)
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    return db_obj

def delete_teacher(db: Session, db_obj: Teacher) -> Teacher:
    db.delete(db_obj)
    db.commit()
    return db_obj
