# faculty_eval/api/v1/endpoints/teacher_route.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from faculty_eval.crud import teacher_crud
from faculty_eval.schemas import teacher_schema
from faculty_eval.api import deps

router = APIRouter()


@router.post(
    "",
    response_model=teacher_schema.Teacher,
    status_code=status.HTTP_201_CREATED,
    summary="Thêm giáo viên mới"
)
def create_new_teacher(
    teacher_in: teacher_schema.TeacherCreate,
    db: Session = Depends(deps.get_db)
):
    return teacher_crud.create_teacher(db=db, teacher_in=teacher_in)


@router.get(
    "",
    response_model=List[teacher_schema.Teacher],
    summary="Lấy danh sách giáo viên"
)
def get_all_teachers(
    skip: int = 0,
    limit: int = 100,
    active_only: bool = False,
    db: Session = Depends(deps.get_db)
):
    return teacher_crud.get_all_teachers(db, skip=skip, limit=limit, active_only=active_only)


@router.get(
    "/{teacher_id}",
    response_model=teacher_schema.Teacher,
    summary="Lấy thông tin giáo viên theo ID"
)
def get_teacher(teacher_id: int, db: Session = Depends(deps.get_db)):
    db_teacher = teacher_crud.get_teacher(db, teacher_id=teacher_id)
    if db_teacher is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Teacher with id {teacher_id} not found."
        )
    return db_teacher


@router.put(
    "/{teacher_id}",
    response_model=teacher_schema.Teacher,
    summary="Cập nhật thông tin giáo viên"
)
def update_existing_teacher(
    teacher_id: int,
    teacher_update: teacher_schema.TeacherUpdate,
    db: Session = Depends(deps.get_db)
):
    db_teacher = teacher_crud.get_teacher(db, teacher_id=teacher_id)
    if db_teacher is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Teacher with id {teacher_id} not found."
        )
    return teacher_crud.update_teacher(db, db_obj=db_teacher, obj_in=teacher_update)


@router.delete(
    "/{teacher_id}",
    status_code=status.HTTP_200_OK,
    summary="Xóa giáo viên (kèm các bài đánh giá)"
)
def delete_existing_teacher(teacher_id: int, db: Session = Depends(deps.get_db)):
    db_teacher = teacher_crud.get_teacher(db, teacher_id=teacher_id)
    if db_teacher is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Teacher with id {teacher_id} not found."
        )
    deleted = teacher_crud.delete_teacher(db, db_obj=db_teacher)
    return {
        "message": "Giáo viên đã được xóa thành công.",
        "deleted_teacher_id": deleted.teacher_id,
        "status": "success"
    }
