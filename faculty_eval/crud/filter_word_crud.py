from typing import List, Optional
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy import select
from faculty_eval.models.filter_word_model import FilterWord
from faculty_eval.schemas.filter_word_schema import FilterWordCreate


def get_filter_words(db: Session) -> List[FilterWord]:
    return db.execute(select(FilterWord).order_by(FilterWord.word)).scalars().all()

def get_filter_word_values(db: Session) -> List[str]:
    return [fw.word for fw in get_filter_words(db)]

def get_filter_word_by_word(db: Session, word: str) -> Optional[FilterWord]:
    return db.execute(select(FilterWord).where(FilterWord.word == word)).scalar_one_or_none()

def create_filter_word(db: Session, filter_word_in: FilterWordCreate) -> FilterWord:
    if get_filter_word_by_word(db, filter_word_in.word):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Từ này đã có trong danh sách lọc."
        )
    db_word = FilterWord(word=filter_word_in.word)
    db.add(db_word)
    db.commit()
    db.refresh(db_word)
    return db_word

def delete_filter_word(db: Session, db_obj: FilterWord) -> FilterWord:
    db.delete(db_obj)
    db.commit()
    return db_obj
