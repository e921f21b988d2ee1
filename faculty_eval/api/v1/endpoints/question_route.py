# faculty_eval/api/v1/endpoints/question_route.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from faculty_eval.crud import question_crud
from faculty_eval.schemas import question_schema
from faculty_eval.api import deps

router = APIRouter()


@router.post(
    "",
    response_model=question_schema.Question,
    status_code=status.HTTP_201_CREATED,
    summary="Tạo câu hỏi đánh giá mới"
)
def create_new_question(
    question_in: question_schema.QuestionCreate,
    db: Session = Depends(deps.get_db)
):
    return question_crud.create_question(db, question_in=question_in)


@router.get(
    "",
    response_model=List[question_schema.Question],
    summary="Lấy danh mục câu hỏi"
)
def get_all_questions(
    include_inactive: bool = False,
    db: Session = Depends(deps.get_db)
):
    """
    Mặc định chỉ trả về câu hỏi đang hoạt động, sắp xếp theo question_order.
    """
    return question_crud.get_questions(db, include_inactive=include_inactive)


@router.get(
    "/{question_id}",
    response_model=question_schema.Question,
    summary="Lấy thông tin một câu hỏi theo ID"
)
def get_question(question_id: int, db: Session = Depends(deps.get_db)):
    db_question = question_crud.get_question(db, question_id=question_id)
    if db_question is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Không tìm thấy câu hỏi.")
    return db_question


@router.put(
    "/{question_id}",
    response_model=question_schema.Question,
    summary="Cập nhật câu hỏi"
)
def update_existing_question(
    question_id: int,
    question_update: question_schema.QuestionUpdate,
    db: Session = Depends(deps.get_db)
):
    db_question = question_crud.get_question(db, question_id=question_id)
    if db_question is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Không tìm thấy câu hỏi.")
    return question_crud.update_question(db, db_obj=db_question, obj_in=question_update)


@router.delete(
    "/{question_id}",
    response_model=question_schema.Question,
    summary="Ngừng sử dụng một câu hỏi (xóa mềm)"
)
def deactivate_question(question_id: int, db: Session = Depends(deps.get_db)):
    db_question = question_crud.get_question(db, question_id=question_id)
    if db_question is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Không tìm thấy câu hỏi.")
    return question_crud.deactivate_question(db, db_obj=db_question)
