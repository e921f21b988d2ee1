from faculty_eval.database import Base, engine
from faculty_eval.models import (
    Teacher, Question, Evaluation, FilterWord, CommentAnalysis, EvaluationSetting
)
from sqlalchemy import text
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def recreate_database():
    logger.info("Đang xóa tất cả các bảng cơ sở dữ liệu...")

    # Xóa theo thứ tự ngược của sorted_tables để bảng con bị xóa trước
    all_table_names = [table.name for table in reversed(Base.metadata.sorted_tables)]
    cascade = " CASCADE" if engine.dialect.name == "postgresql" else ""

    with engine.connect() as connection:
        for table_name in all_table_names:
            try:
                logger.info("Đang xóa bảng: %s", table_name)
                connection.execute(text(f"DROP TABLE IF EXISTS {table_name}{cascade}"))
                connection.commit()
            except Exception as e:
                # Trong phát triển, chúng ta muốn xóa sạch nhất có thể.
                logger.error("Lỗi khi xóa bảng %s: %s", table_name, e)
                connection.rollback()

    logger.info("Đang tạo lại tất cả các bảng cơ sở dữ liệu...")
    Base.metadata.create_all(bind=engine)
    logger.info("Cơ sở dữ liệu đã được tạo lại thành công!")

if __name__ == "__main__":
    recreate_database()
