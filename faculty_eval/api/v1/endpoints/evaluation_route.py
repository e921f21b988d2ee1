# faculty_eval/api/v1/endpoints/evaluation_route.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from faculty_eval.crud import evaluation_crud, teacher_crud
from faculty_eval.schemas import evaluation_schema
from faculty_eval.services import evaluation_service
from faculty_eval.api import deps

router = APIRouter()


@router.post(
    "",
    response_model=evaluation_schema.Evaluation,
    status_code=status.HTTP_201_CREATED,
    summary="Học sinh gửi bài đánh giá giáo viên"
)
def submit_evaluation(
    evaluation_in: evaluation_schema.EvaluationCreate,
    db: Session = Depends(deps.get_db)
):
    """
    category_ratings được tính ở server từ answers và danh mục câu hỏi hiện tại.
    Mỗi học sinh chỉ được đánh giá một giáo viên một lần.
    """
    return evaluation_service.submit_evaluation(db, evaluation_in=evaluation_in)


@router.get(
    "",
    response_model=List[evaluation_schema.Evaluation],
    summary="Lấy danh sách tất cả bài đánh giá"
)
def get_all_evaluations(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(deps.get_db)
):
    return evaluation_crud.get_all_evaluations(db, skip=skip, limit=limit)


@router.get(
    "/by_teacher/{teacher_id}",
    response_model=List[evaluation_schema.Evaluation],
    summary="Lấy tất cả bài đánh giá của một giáo viên"
)
def get_evaluations_by_teacher(
    teacher_id: int,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(deps.get_db)
):
    if not teacher_crud.get_teacher(db, teacher_id=teacher_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Teacher with id {teacher_id} not found."
        )
    return evaluation_crud.get_evaluations_by_teacher_id(db, teacher_id, skip=skip, limit=limit)


@router.get(
    "/{evaluation_id}",
    response_model=evaluation_schema.Evaluation,
    summary="Lấy một bài đánh giá theo ID"
)
def get_evaluation(evaluation_id: int, db: Session = Depends(deps.get_db)):
    db_evaluation = evaluation_crud.get_evaluation(db, evaluation_id=evaluation_id)
    if db_evaluation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Evaluation not found.")
    return db_evaluation


@router.delete(
    "/{evaluation_id}",
    status_code=status.HTTP_200_OK,
    summary="Xóa một bài đánh giá"
)
def delete_evaluation(evaluation_id: int, db: Session = Depends(deps.get_db)):
    db_evaluation = evaluation_crud.get_evaluation(db, evaluation_id=evaluation_id)
    if db_evaluation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Evaluation not found.")
    deleted = evaluation_crud.delete_evaluation(db, db_obj=db_evaluation)
    return {
        "message": "Đã xóa thành công",
        "deleted_evaluation_id": deleted.evaluation_id,
        "status": "success"
    }
