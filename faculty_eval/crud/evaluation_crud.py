# faculty_eval/crud/evaluation_crud.py
from typing import Dict, List, Optional
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from faculty_eval.models.evaluation_model import Evaluation
from faculty_eval.models.teacher_model import Teacher
from faculty_eval.schemas.evaluation_schema import EvaluationCreate
from faculty_eval.schemas.report_schema import CategoryRating
from faculty_eval.services.service_helper import dump_json_mapping
import logging

logger = logging.getLogger(__name__)

DUPLICATE_EVALUATION_DETAIL = "Học sinh đã đánh giá giáo viên này rồi."


def get_evaluation(db: Session, evaluation_id: int) -> Optional[Evaluation]:
    return db.get(Evaluation, evaluation_id)

def get_evaluation_by_teacher_and_student(db: Session, teacher_id: int, student_id: str) -> Optional[Evaluation]:
    stmt = select(Evaluation).where(
        Evaluation.teacher_id == teacher_id,
        Evaluation.student_id == student_id,
    )
    return db.execute(stmt).scalars().first()

def get_all_evaluations(db: Session, skip: int = 0, limit: Optional[int] = None) -> List[Evaluation]:
    stmt = select(Evaluation).order_by(Evaluation.evaluation_id).offset(skip)
    if limit is not None:
        stmt = stmt.limit(limit)
    return db.execute(stmt).scalars().all()

def get_evaluations_by_teacher_id(db: Session, teacher_id: int, skip: int = 0, limit: Optional[int] = None) -> List[Evaluation]:
    stmt = (
        select(Evaluation)
        .where(Evaluation.teacher_id == teacher_id)
        .order_by(Evaluation.evaluation_id)
        .offset(skip)
    )
    if limit is not None:
        stmt = stmt.limit(limit)
    return db.execute(stmt).scalars().all()

def create_evaluation(
    db: Session,
    evaluation_in: EvaluationCreate,
    teacher: Teacher,
    category_ratings: Dict[str, CategoryRating],
) -> Evaluation:
    """
    Lưu bài đánh giá. Mỗi học sinh chỉ được đánh giá một giáo viên một lần.
    """
    existing = get_evaluation_by_teacher_and_student(db, teacher.teacher_id, evaluation_in.student_id)
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=DUPLICATE_EVALUATION_DETAIL
        )

    db_evaluation = Evaluation(
        teacher_id=teacher.teacher_id,
        teacher_name=teacher.name,
        student_id=evaluation_in.student_id,
        student_name=evaluation_in.student_name,
        section=evaluation_in.section,
        answers=dump_json_mapping(evaluation_in.answers),
        category_ratings=dump_json_mapping(
            {category: rating.model_dump() for category, rating in category_ratings.items()}
        ),
        positive_feedback=evaluation_in.positive_feedback,
        suggestions=evaluation_in.suggestions,
    )
    db.add(db_evaluation)
    try:
        db.commit()
    except IntegrityError:
        # Hai bài gửi cùng lúc: ràng buộc uq_evaluation_teacher_student chặn bài thứ hai
        db.rollback()
        logger.warning(
            "Duplicate evaluation rejected for teacher %s, student %s",
            teacher.teacher_id, evaluation_in.student_id,
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=DUPLICATE_EVALUATION_DETAIL
        )
    db.refresh(db_evaluation)
    logger.info(
        "Student %s submitted evaluation %s for teacher %s",
        evaluation_in.student_id, db_evaluation.evaluation_id, teacher.teacher_id,
    )
    return db_evaluation

def delete_evaluation(db: Session, db_obj: Evaluation) -> Evaluation:
    db.delete(db_obj)
    db.commit()
    return db_obj
