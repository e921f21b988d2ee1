from sqlalchemy import Column, Integer, String
from faculty_eval.models.base_model import Base


class FilterWord(Base):
    """
    Model cho bảng filter_words: các từ dùng để lọc bình luận khi xuất báo cáo.
    """
    __tablename__ = 'filter_words'

    filter_word_id = Column(Integer, primary_key=True)
    word = Column(String(100), unique=True, nullable=False)

    def __repr__(self):
        return f"<FilterWord(word='{self.word}')>"
