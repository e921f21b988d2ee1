import logging
from typing import Dict, List, Sequence

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from faculty_eval.config import MAX_RATING
from faculty_eval.crud import evaluation_crud, evaluation_setting_crud, question_crud, teacher_crud
from faculty_eval.models.evaluation_model import Evaluation
from faculty_eval.schemas.evaluation_schema import EvaluationCreate
from faculty_eval.schemas.report_schema import CategoryRating, QuestionRecord
from faculty_eval.services import comment_analysis_service

logger = logging.getLogger(__name__)


def compute_category_ratings(
    questions: Sequence[QuestionRecord], answers: Dict[str, int]
) -> Dict[str, CategoryRating]:
    """
    Tính {score, max} cho từng category từ câu trả lời của một học sinh.
    Câu bỏ trống: 0 điểm nhưng vẫn tính 5 vào max.
    """
    category_ratings: Dict[str, CategoryRating] = {}
    for question in questions:
        rating = category_ratings.setdefault(question.category, CategoryRating())
        rating.score += answers.get(question.id, 0)
        rating.max += MAX_RATING
    return category_ratings


def submit_evaluation(db: Session, evaluation_in: EvaluationCreate) -> Evaluation:
    """
    Nhận bài đánh giá của học sinh:
    - kiểm tra kỳ đánh giá đang mở và giáo viên tồn tại;
    - tính category_ratings theo danh mục câu hỏi hiện tại;
    - lưu bài đánh giá rồi phân tích bình luận.
    """
    settings = evaluation_setting_crud.get_settings(db)
    if not settings.is_evaluation_active:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Kỳ đánh giá hiện đã đóng."
        )

    teacher = teacher_crud.get_teacher(db, teacher_id=evaluation_in.teacher_id)
    if not teacher:
        raise HTTPException(status_code=404, detail="Teacher not found")

    questions = [QuestionRecord.model_validate(q) for q in question_crud.get_questions(db)]
    known_ids = {q.id for q in questions}
    unknown: List[str] = [qid for qid in evaluation_in.answers if qid not in known_ids]
    if unknown:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Câu hỏi không tồn tại hoặc đã ngừng sử dụng: {', '.join(sorted(unknown))}"
        )

    category_ratings = compute_category_ratings(questions, evaluation_in.answers)
    db_evaluation = evaluation_crud.create_evaluation(
        db,
        evaluation_in=evaluation_in,
        teacher=teacher,
        category_ratings=category_ratings,
    )
    comment_analysis_service.analyze_evaluation_comments(db, db_evaluation)
    return db_evaluation
