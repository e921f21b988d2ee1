# faculty_eval/crud/question_crud.py
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import func, select
from faculty_eval.models.question_model import Question
from faculty_eval.schemas.question_schema import QuestionCreate, QuestionUpdate


def get_question(db: Session, question_id: int) -> Optional[Question]:
    return db.get(Question, question_id)

def get_questions(db: Session, include_inactive: bool = False) -> List[Question]:
    """
    Lấy danh mục câu hỏi theo question_order.
    Mặc định chỉ lấy câu hỏi đang hoạt động (dùng cho báo cáo).
    """
    stmt = select(Question)
    if not include_inactive:
        stmt = stmt.where(Question.is_active.is_(True))
    stmt = stmt.order_by(Question.question_order, Question.question_id)
    return db.execute(stmt).scalars().all()

def create_question(db: Session, question_in: QuestionCreate) -> Question:
    """
    Tạo câu hỏi mới, question_order = số câu hỏi hiện có + 1.
    """
    current_count = db.execute(select(func.count(Question.question_id))).scalar() or 0
    db_question = Question(
        **question_in.model_dump(),
        question_order=current_count + 1,
        is_active=True,
    )
    db.add(db_question)
    db.commit()
    db.refresh(db_question)
    return db_question

def update_question(db: Session, db_obj: Question, obj_in: QuestionUpdate) -> Question:
    update_data = obj_in.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(db_obj, key, value)
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    return db_obj

def deactivate_question(db: Session, db_obj: Question) -> Question:
    """Xóa mềm: câu hỏi không còn tham gia vào báo cáo."""
    db_obj.is_active = False
    db.commit()
    db.refresh(db_obj)
    return db_obj
