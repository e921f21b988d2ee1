# faculty_eval/api/v1/endpoints/filter_word_route.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from faculty_eval.crud import filter_word_crud
from faculty_eval.schemas import filter_word_schema
from faculty_eval.api import deps

router = APIRouter()


@router.get("", response_model=List[filter_word_schema.FilterWord], summary="Danh sách từ lọc")
def get_filter_words(db: Session = Depends(deps.get_db)):
    return filter_word_crud.get_filter_words(db)


@router.post(
    "",
    response_model=filter_word_schema.FilterWord,
    status_code=status.HTTP_201_CREATED,
    summary="Thêm từ lọc"
)
def create_filter_word(
    filter_word_in: filter_word_schema.FilterWordCreate,
    db: Session = Depends(deps.get_db)
):
    return filter_word_crud.create_filter_word(db, filter_word_in=filter_word_in)


@router.delete("/{word}", status_code=status.HTTP_200_OK, summary="Xóa từ lọc")
def delete_filter_word(word: str, db: Session = Depends(deps.get_db)):
    db_word = filter_word_crud.get_filter_word_by_word(db, word.strip().lower())
    if db_word is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Không tìm thấy từ lọc.")
    filter_word_crud.delete_filter_word(db, db_obj=db_word)
    return {"message": "Đã xóa thành công", "word": db_word.word}
