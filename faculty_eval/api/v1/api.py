# faculty_eval/api/v1/api.py
from fastapi import APIRouter

from faculty_eval.api.v1.endpoints.teacher_route import router as teacher_router
from faculty_eval.api.v1.endpoints.question_route import router as question_router
from faculty_eval.api.v1.endpoints.evaluation_route import router as evaluation_router
from faculty_eval.api.v1.endpoints.report_route import router as report_router
from faculty_eval.api.v1.endpoints.filter_word_route import router as filter_word_router
from faculty_eval.api.v1.endpoints.comment_analysis_route import router as comment_analysis_router
from faculty_eval.api.v1.endpoints.setting_route import router as setting_router

api_router = APIRouter()

api_router.include_router(teacher_router, prefix="/teachers", tags=["Teachers"])
api_router.include_router(question_router, prefix="/questions", tags=["Questions"])
api_router.include_router(evaluation_router, prefix="/evaluations", tags=["Evaluations"])
api_router.include_router(report_router, prefix="/reports", tags=["Reports"])
api_router.include_router(filter_word_router, prefix="/filter_words", tags=["Filter Words"])
api_router.include_router(comment_analysis_router, prefix="/comment_analysis", tags=["Comment Analysis"])
api_router.include_router(setting_router, prefix="/settings", tags=["Settings"])
