from io import BytesIO
from typing import Dict, List, Optional, Sequence

from docx import Document # type: ignore
from docx.enum.text import WD_ALIGN_PARAGRAPH # type: ignore
from docx.oxml import OxmlElement # type: ignore
from docx.oxml.ns import qn # type: ignore
from docx.shared import Pt, RGBColor # type: ignore
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from faculty_eval.config import (
    ACADEMIC_HEAD_NAME,
    DEFAULT_POSITION,
    INSTITUTION_NAME,
    SCHOOL_DIRECTOR_NAME,
)
from faculty_eval.crud import evaluation_setting_crud, teacher_crud
from faculty_eval.schemas.report_schema import TeacherAggregate, TeacherComments
from faculty_eval.services import report_service

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
HEADER_FILL = "4682B4"  # steel blue

TBI_SCORE_HEADER = [
    "No.",
    "Teacher Name",
    "Position",
    "Total Respondents",
    "Highest Possible Score",
    "Total Accumulated Score",
    "Final Rating",
]


def _add_text(doc, text: str, bold: bool = False, size: Optional[int] = None,
              align=WD_ALIGN_PARAGRAPH.CENTER, color: Optional[RGBColor] = None):
    paragraph = doc.add_paragraph()
    paragraph.alignment = align
    run = paragraph.add_run(text)
    run.bold = bold
    if size:
        run.font.size = Pt(size)
    if color is not None:
        run.font.color.rgb = color
    return paragraph


def _shade_cell(cell, fill: str):
    tc_pr = cell._tc.get_or_add_tcPr()
    shading = OxmlElement("w:shd")
    shading.set(qn("w:val"), "clear")
    shading.set(qn("w:color"), "auto")
    shading.set(qn("w:fill"), fill)
    tc_pr.append(shading)


def _set_cell_text(cell, text: str, bold: bool = False, color: Optional[RGBColor] = None):
    paragraph = cell.paragraphs[0]
    paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
    run = paragraph.add_run(text)
    run.bold = bold
    if color is not None:
        run.font.color.rgb = color


def _to_stream(doc, filename: str) -> StreamingResponse:
    stream = BytesIO()
    doc.save(stream)
    stream.seek(0)
    headers = {"Content-Disposition": f"attachment; filename={filename}"}
    return StreamingResponse(stream, media_type=DOCX_MEDIA_TYPE, headers=headers)


def build_tbi_score_rows(aggregates: Sequence[TeacherAggregate], positions: Dict[str, str]) -> List[List[str]]:
    rows = []
    for idx, teacher in enumerate(aggregates, start=1):
        rows.append([
            str(idx),
            teacher.teacher_name,
            positions.get(teacher.teacher_id) or DEFAULT_POSITION,
            str(teacher.total_respondents),
            str(teacher.highest_possible_score),
            f"{teacher.accumulated_score:g}",
            f"{teacher.overall_rating}%",
        ])
    return rows


def build_tbi_score_document(aggregates: Sequence[TeacherAggregate], positions: Dict[str, str]):
    """
    Bảng điểm TBI của toàn bộ giáo viên.
    """
    doc = Document()
    _add_text(doc, "TBI SCORE REPORT", bold=True, size=16)

    table = doc.add_table(rows=1, cols=len(TBI_SCORE_HEADER))
    table.style = "Table Grid"
    for cell, text in zip(table.rows[0].cells, TBI_SCORE_HEADER):
        _set_cell_text(cell, text, bold=True, color=RGBColor(0xFF, 0xFF, 0xFF))
        _shade_cell(cell, HEADER_FILL)

    final_rating_idx = TBI_SCORE_HEADER.index("Final Rating")
    for row in build_tbi_score_rows(aggregates, positions):
        cells = table.add_row().cells
        for idx, (cell, text) in enumerate(zip(cells, row)):
            _set_cell_text(cell, text, bold=idx == final_rating_idx)
    return doc


def build_comments_document(comments: TeacherComments, position: str, evaluation_period: str):
    """
    Phiếu bình luận (TBI - Feedback and Comments) của một giáo viên.
    """
    doc = Document()
    _add_text(doc, INSTITUTION_NAME, bold=True, size=14)
    doc.add_paragraph()
    _add_text(doc, "OFFICE OF THE ACADEMIC HEAD", bold=True, size=14)
    doc.add_paragraph()
    _add_text(doc, "TEACHERS' BEHAVIOR INVENTORY", bold=True, size=14, color=RGBColor(0xFF, 0x00, 0x00))
    _add_text(doc, "(FEEDBACK AND COMMENTS)", bold=True, size=12)
    _add_text(doc, evaluation_period, bold=True, size=12)
    doc.add_paragraph()

    _add_text(doc, f"NAME OF FACULTY: {comments.teacher_name}", size=12, align=WD_ALIGN_PARAGRAPH.LEFT)
    _add_text(doc, f"POSITION: {position.upper()}", size=12, align=WD_ALIGN_PARAGRAPH.LEFT)
    _add_text(doc, f"RATING: {comments.overall_rating}%", align=WD_ALIGN_PARAGRAPH.LEFT)
    doc.add_paragraph()

    _add_text(doc, "STUDENTS' COMMENTS AND FEEDBACK", bold=True, size=12)
    table = doc.add_table(rows=1, cols=2)
    table.style = "Table Grid"
    _set_cell_text(table.rows[0].cells[0], "Positive Feedback", bold=True)
    _set_cell_text(table.rows[0].cells[1], "Areas for Improvement", bold=True)
    for comment in comments.comments:
        cells = table.add_row().cells
        _set_cell_text(cells[0], comment.positive)
        _set_cell_text(cells[1], comment.improvement)
    doc.add_paragraph()

    # Phần chữ ký
    signatures = doc.add_table(rows=3, cols=2)
    signatures.cell(0, 0).text = "Prepared and verified by:"
    signatures.cell(0, 1).text = "Noted by:"
    signatures.cell(1, 0).text = f"{ACADEMIC_HEAD_NAME or '_________________________'}\nAcademic Head"
    signatures.cell(1, 1).text = f"{SCHOOL_DIRECTOR_NAME or '_________________________'}\nSchool Director"
    signatures.cell(2, 0).text = (
        "Received by:\n_________________________\nName and Signature of Faculty\nDate:"
    )
    return doc


def export_tbi_score_docx(db: Session) -> StreamingResponse:
    aggregates = report_service.get_teacher_aggregates(db)
    positions = {
        str(teacher.teacher_id): teacher.position
        for teacher in teacher_crud.get_all_teachers(db, limit=None)
        if teacher.position
    }
    doc = build_tbi_score_document(aggregates, positions)
    return _to_stream(doc, "TBI_SCORE.docx")


def export_teacher_comments_docx(db: Session, teacher_id: int) -> StreamingResponse:
    """
    Raises ValueError nếu giáo viên chưa có bài đánh giá nào.
    """
    comments = report_service.get_teacher_comments(db, teacher_id)
    teacher = teacher_crud.get_teacher(db, teacher_id)
    position = (teacher.position if teacher else None) or DEFAULT_POSITION
    evaluation_period = evaluation_setting_crud.get_settings(db).evaluation_period
    doc = build_comments_document(comments, position, evaluation_period)
    return _to_stream(doc, f"TBI_COMMENTS_{teacher_id}.docx")
