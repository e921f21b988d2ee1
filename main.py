# main.py
from fastapi import FastAPI
from contextlib import asynccontextmanager
from apscheduler.schedulers.asyncio import AsyncIOScheduler # type: ignore
from apscheduler.triggers.cron import CronTrigger # type: ignore
from fastapi.middleware.cors import CORSMiddleware
from faculty_eval.api.v1.api import api_router
from faculty_eval.config import CORS_ORIGINS
from faculty_eval.database import Base, engine, SessionLocal
from faculty_eval.models import *
from faculty_eval.services import comment_analysis_service
import logging

# Cấu hình logging cho ứng dụng và APScheduler
logging.basicConfig(level=logging.INFO)
logging.getLogger('apscheduler').setLevel(logging.INFO)
logger = logging.getLogger(__name__)

# Tạo scheduler
scheduler = AsyncIOScheduler()

# Hàm tác vụ sẽ được lập lịch (hàm đồng bộ: scheduler chạy trong thread pool)
def run_comment_analysis_task():
    """Phân tích bình luận của các bài đánh giá chưa được phân tích, chạy định kỳ."""
    db = SessionLocal()
    try:
        processed = comment_analysis_service.analyze_pending_evaluations(db)
        logger.info("Tác vụ phân tích bình luận đã chạy: %d bài đánh giá.", processed)
    except Exception:
        db.rollback()
        logger.exception("Lỗi khi chạy tác vụ phân tích bình luận")
    finally:
        db.close()

# Hàm lifespan event handler
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Tạo tất cả các bảng trong cơ sở dữ liệu
    Base.metadata.create_all(bind=engine)

    scheduler.add_job(
        run_comment_analysis_task,
        trigger=CronTrigger(hour=0, minute=0),
        id="comment_analysis_job",
        name="Analyze Pending Evaluation Comments"
    )
    scheduler.start()
    logger.info("Scheduler đã được khởi động.")

    yield # Điểm này ứng dụng sẽ chạy

    scheduler.shutdown()
    logger.info("Scheduler đã tắt.")

app = FastAPI(
    title="Faculty Evaluation API",
    description="API cho hệ thống đánh giá giáo viên (Teachers' Behavior Inventory).",
    version="1.0.0",
    lifespan=lifespan
)

# Cấu hình CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Bao gồm router chính của API v1
app.include_router(api_router, prefix="/api/v1")

@app.get("/")
def read_root():
    return {"message": "Welcome to the Faculty Evaluation API! Visit /docs for API documentation."}
