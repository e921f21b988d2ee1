# faculty_eval/api/v1/endpoints/report_route.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List

from faculty_eval.api import deps
from faculty_eval.schemas.report_schema import (
    EvaluationReport,
    FilteredComment,
    OverallSummary,
    TeacherAggregate,
    TeacherComments,
)
from faculty_eval.services import report_service
from faculty_eval.services.export_services.export_report import export_report_excel
from faculty_eval.services.export_services.export_documents import (
    export_teacher_comments_docx,
    export_tbi_score_docx,
)

router = APIRouter()


@router.get("/teachers", response_model=EvaluationReport, summary="Bảng tổng hợp đánh giá theo giáo viên")
def get_evaluation_report(db: Session = Depends(deps.get_db)):
    return report_service.get_evaluation_report(db)


@router.get("/teachers/{teacher_id}", response_model=TeacherAggregate, summary="Kết quả tổng hợp của một giáo viên")
def get_teacher_aggregate(teacher_id: int, db: Session = Depends(deps.get_db)):
    try:
        return report_service.get_teacher_aggregate(db, teacher_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/teachers/{teacher_id}/comments", response_model=TeacherComments, summary="Bình luận của học sinh (đã lọc)")
def get_teacher_comments(teacher_id: int, db: Session = Depends(deps.get_db)):
    try:
        return report_service.get_teacher_comments(db, teacher_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/summary", response_model=OverallSummary, summary="Tổng quan kết quả toàn trường")
def get_overall_summary(db: Session = Depends(deps.get_db)):
    return report_service.get_overall_summary(db)


@router.get("/filtered-comments", response_model=List[FilteredComment], summary="Bình luận bị chặn bởi từ lọc")
def get_filtered_comments(db: Session = Depends(deps.get_db)):
    return report_service.get_filtered_comments(db)


@router.get("/export/excel", summary="Xuất bảng tổng hợp ra file Excel")
def export_excel(db: Session = Depends(deps.get_db)):
    return export_report_excel(db)


@router.get("/export/tbi-score", summary="Xuất bảng điểm TBI ra file Word")
def export_tbi_score(db: Session = Depends(deps.get_db)):
    return export_tbi_score_docx(db)


@router.get("/export/comments/{teacher_id}", summary="Xuất bình luận của một giáo viên ra file Word")
def export_comments(teacher_id: int, db: Session = Depends(deps.get_db)):
    try:
        return export_teacher_comments_docx(db, teacher_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
