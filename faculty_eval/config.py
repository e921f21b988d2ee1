from dotenv import load_dotenv
import os


load_dotenv(dotenv_path="credentials.env")

POSTGRES_USER = os.getenv("POSTGRES_USER")
POSTGRES_PASSWORD = os.getenv("POSTGRES_PASSWORD")
POSTGRES_DB = os.getenv("POSTGRES_DB")
POSTGRES_HOST = os.getenv("POSTGRES_HOST", "localhost")
POSTGRES_PORT = os.getenv("POSTGRES_PORT", "5432")

# DATABASE_URL trong env sẽ ghi đè cấu hình Postgres (dùng cho dev/sqlite)
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"postgresql+psycopg2://{POSTGRES_USER}:{POSTGRES_PASSWORD}@{POSTGRES_HOST}:{POSTGRES_PORT}/{POSTGRES_DB}",
)

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost,http://localhost:3000").split(",")
    if origin.strip()
]

INSTITUTION_NAME = os.getenv("INSTITUTION_NAME", "ACLC College of Daet")
DEFAULT_POSITION = os.getenv("DEFAULT_POSITION", "Assistant Instructor 1")

# Thang điểm tối đa cho mỗi câu hỏi
MAX_RATING = 5

# Người ký trên báo cáo bình luận
ACADEMIC_HEAD_NAME = os.getenv("ACADEMIC_HEAD_NAME", "")
SCHOOL_DIRECTOR_NAME = os.getenv("SCHOOL_DIRECTOR_NAME", "")
