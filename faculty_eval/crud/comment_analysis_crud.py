from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select
from faculty_eval.models.comment_analysis_model import CommentAnalysis
from faculty_eval.models.evaluation_model import Evaluation


def create_comment_analyses(db: Session, analyses: List[CommentAnalysis]) -> List[CommentAnalysis]:
    db.add_all(analyses)
    db.commit()
    for analysis in analyses:
        db.refresh(analysis)
    return analyses

def get_comment_analysis(db: Session, analysis_id: int) -> Optional[CommentAnalysis]:
    return db.get(CommentAnalysis, analysis_id)

def get_comment_analyses(
    db: Session, flagged_only: bool = False, evaluation_id: Optional[int] = None,
    skip: int = 0, limit: int = 100
) -> List[CommentAnalysis]:
    stmt = select(CommentAnalysis)
    if flagged_only:
        stmt = stmt.where(CommentAnalysis.is_flagged.is_(True))
    if evaluation_id is not None:
        stmt = stmt.where(CommentAnalysis.evaluation_id == evaluation_id)
    stmt = stmt.order_by(CommentAnalysis.analysis_id).offset(skip).limit(limit)
    return db.execute(stmt).scalars().all()

def get_evaluations_without_analysis(db: Session) -> List[Evaluation]:
    """Các bài đánh giá chưa được phân tích bình luận."""
    analysed = select(CommentAnalysis.evaluation_id)
    stmt = select(Evaluation).where(Evaluation.evaluation_id.not_in(analysed))
    return db.execute(stmt).scalars().all()

def mark_reviewed(db: Session, db_obj: CommentAnalysis, reviewed: bool = True) -> CommentAnalysis:
    db_obj.admin_reviewed = reviewed
    db.commit()
    db.refresh(db_obj)
    return db_obj
