# faculty_eval/api/v1/endpoints/comment_analysis_route.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional

from faculty_eval.crud import comment_analysis_crud
from faculty_eval.schemas import comment_analysis_schema
from faculty_eval.services import comment_analysis_service
from faculty_eval.api import deps

router = APIRouter()


@router.get(
    "",
    response_model=List[comment_analysis_schema.CommentAnalysis],
    summary="Kết quả phân tích bình luận"
)
def get_comment_analyses(
    flagged_only: bool = False,
    evaluation_id: Optional[int] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(deps.get_db)
):
    return comment_analysis_crud.get_comment_analyses(
        db, flagged_only=flagged_only, evaluation_id=evaluation_id, skip=skip, limit=limit
    )


@router.put(
    "/{analysis_id}",
    response_model=comment_analysis_schema.CommentAnalysis,
    summary="Đánh dấu bình luận đã được quản trị viên xem xét"
)
def review_comment_analysis(
    analysis_id: int,
    analysis_update: comment_analysis_schema.CommentAnalysisUpdate,
    db: Session = Depends(deps.get_db)
):
    db_analysis = comment_analysis_crud.get_comment_analysis(db, analysis_id)
    if db_analysis is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Không tìm thấy kết quả phân tích.")
    return comment_analysis_crud.mark_reviewed(db, db_analysis, reviewed=analysis_update.admin_reviewed)


@router.post("/run", summary="Phân tích các bài đánh giá chưa được phân tích")
def run_pending_analysis(db: Session = Depends(deps.get_db)):
    processed = comment_analysis_service.analyze_pending_evaluations(db)
    return {"processed_evaluations": processed}
