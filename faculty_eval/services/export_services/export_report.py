from sqlalchemy.orm import Session
from openpyxl import Workbook # type: ignore
from openpyxl.styles import Alignment, Border, Font, Side # type: ignore
from openpyxl.utils import get_column_letter # type: ignore
from fastapi.responses import StreamingResponse
from io import BytesIO

from faculty_eval.schemas.report_schema import EvaluationReport
from faculty_eval.services import report_service

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
MIN_COLUMN_WIDTH = 16

THIN = Side(style="thin")
CELL_BORDER = Border(top=THIN, bottom=THIN, left=THIN, right=THIN)
CELL_ALIGNMENT = Alignment(horizontal="center", vertical="center")
CELL_FONT = Font(size=16)
HEADER_FONT = Font(size=16, bold=True)


def build_report_rows(report: EvaluationReport) -> list:
    """
    Header + một dòng cho mỗi giáo viên.
    Cột category lấy từ category_breakdown (làm tròn 2 chữ số).
    """
    header = [
        "Teacher",
        "Respondents",
        "Highest Possible Score",
        "Accumulated Score",
        "Overall Rating",
        *[category.label for category in report.categories],
    ]
    rows = [header]
    for teacher in report.teachers:
        rows.append([
            teacher.teacher_name,
            teacher.total_respondents,
            teacher.highest_possible_score,
            teacher.accumulated_score,
            f"{teacher.overall_rating}%",
            *[teacher.category_breakdown.get(category.category, 0.0) for category in report.categories],
        ])
    return rows


def build_report_workbook(report: EvaluationReport) -> Workbook:
    wb = Workbook()
    ws = wb.active
    ws.title = "Report"

    for row in build_report_rows(report):
        ws.append(row)

    # Font, viền và căn giữa cho toàn bộ ô
    for row_idx, row in enumerate(ws.iter_rows(), start=1):
        for cell in row:
            cell.font = HEADER_FONT if row_idx == 1 else CELL_FONT
            cell.alignment = CELL_ALIGNMENT
            cell.border = CELL_BORDER

    # Auto-adjust column width to fit content
    for col in range(1, ws.max_column + 1):
        col_letter = get_column_letter(col)
        max_length = max(
            (len(str(cell.value)) for cell in ws[col_letter] if cell.value is not None),
            default=0,
        )
        ws.column_dimensions[col_letter].width = max(MIN_COLUMN_WIDTH, max_length + 2)

    # In ngang, vừa một trang theo chiều rộng, căn giữa
    ws.page_setup.orientation = "landscape"
    ws.page_setup.fitToWidth = 1
    ws.page_setup.fitToHeight = 0
    ws.sheet_properties.pageSetUpPr.fitToPage = True
    ws.print_options.horizontalCentered = True
    return wb


def export_report_excel(db: Session) -> StreamingResponse:
    """
    Xuất báo cáo tổng hợp đánh giá giáo viên ra Excel.
    """
    report = report_service.get_evaluation_report(db)
    wb = build_report_workbook(report)

    stream = BytesIO()
    wb.save(stream)
    stream.seek(0)

    headers = {"Content-Disposition": "attachment; filename=evaluation_report.xlsx"}
    return StreamingResponse(stream, media_type=XLSX_MEDIA_TYPE, headers=headers)
