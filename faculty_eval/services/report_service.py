import logging
from typing import Iterable, List, Optional, Sequence

from sqlalchemy.orm import Session

from faculty_eval.crud import evaluation_crud, evaluation_setting_crud, filter_word_crud, question_crud, teacher_crud
from faculty_eval.schemas.report_schema import (
    EvaluationReport,
    FilteredComment,
    OverallSummary,
    QuestionRecord,
    SubmissionRecord,
    TeacherAggregate,
    TeacherComment,
    TeacherComments,
)
from faculty_eval.services.aggregation_service import (
    LOWEST_LEVEL,
    PERFORMANCE_LEVELS,
    aggregate_evaluations,
    derive_categories,
    performance_level,
)

# Thiết lập logger
logger = logging.getLogger(__name__)


def load_question_records(db: Session) -> List[QuestionRecord]:
    """Danh mục câu hỏi đang hoạt động, đã chuẩn hóa."""
    return [QuestionRecord.model_validate(q) for q in question_crud.get_questions(db)]


def load_submission_records(db: Session, teacher_id: Optional[int] = None) -> List[SubmissionRecord]:
    """
    Đọc bài đánh giá từ DB và chuẩn hóa answers/category_ratings về dict.
    teacher_name lấy theo bảng teachers hiện tại (giáo viên có thể đã đổi tên),
    tên lưu trong bài đánh giá chỉ dùng khi không tìm thấy giáo viên.
    """
    if teacher_id is None:
        rows = evaluation_crud.get_all_evaluations(db)
    else:
        rows = evaluation_crud.get_evaluations_by_teacher_id(db, teacher_id)

    current_names = {
        str(teacher.teacher_id): teacher.name
        for teacher in teacher_crud.get_all_teachers(db, limit=None)
    }
    submissions = []
    for row in rows:
        submission = SubmissionRecord.model_validate(row)
        submission.teacher_name = current_names.get(submission.teacher_id) or submission.teacher_name
        submissions.append(submission)
    return submissions


def _sorted_by_name(aggregates: Iterable[TeacherAggregate]) -> List[TeacherAggregate]:
    return sorted(aggregates, key=lambda a: (a.teacher_name.lower(), a.teacher_id))


def get_evaluation_report(db: Session) -> EvaluationReport:
    """
    Báo cáo tổng hợp: một dòng cho mỗi giáo viên đã được đánh giá.
    """
    questions = load_question_records(db)
    submissions = load_submission_records(db)
    aggregates = aggregate_evaluations(questions, submissions)
    logger.info(
        "Aggregated %d evaluations into %d teacher rows (%d questions)",
        len(submissions), len(aggregates), len(questions),
    )
    return EvaluationReport(
        evaluation_period=evaluation_setting_crud.get_settings(db).evaluation_period,
        categories=derive_categories(questions),
        total_questions=len(questions),
        teachers=_sorted_by_name(aggregates),
    )


def get_teacher_aggregates(db: Session) -> List[TeacherAggregate]:
    """Kết quả tổng hợp của mọi giáo viên đã được đánh giá, sắp xếp theo tên."""
    return get_evaluation_report(db).teachers


def get_teacher_aggregate(db: Session, teacher_id: int) -> TeacherAggregate:
    questions = load_question_records(db)
    submissions = load_submission_records(db, teacher_id=teacher_id)
    aggregates = aggregate_evaluations(questions, submissions)
    if not aggregates:
        raise ValueError(f"Giáo viên id={teacher_id} chưa có bài đánh giá nào.")
    return aggregates[0]


def summarize(aggregates: Sequence[TeacherAggregate], evaluation_period: str) -> OverallSummary:
    """
    Tổng quan toàn trường: trung bình overall_rating và phân bố mức đánh giá.
    """
    ratings = [float(a.overall_rating) for a in aggregates]
    school_average = round(sum(ratings) / len(ratings), 2) if ratings else 0.0

    distribution = {level: 0 for _, level in PERFORMANCE_LEVELS}
    distribution[LOWEST_LEVEL] = 0
    for aggregate in aggregates:
        distribution[aggregate.performance_level] += 1

    return OverallSummary(
        evaluation_period=evaluation_period,
        total_teachers_evaluated=len(aggregates),
        school_average=school_average,
        school_average_level=performance_level(school_average),
        performance_distribution=distribution,
        teachers=_sorted_by_name(aggregates),
    )


def get_overall_summary(db: Session) -> OverallSummary:
    report = get_evaluation_report(db)
    return summarize(report.teachers, report.evaluation_period)


def find_filter_words(text: str, filter_words: Sequence[str]) -> List[str]:
    lowered = text.lower()
    return [word for word in filter_words if word and word.lower() in lowered]


def filter_comments(
    submissions: Iterable[SubmissionRecord], filter_words: Sequence[str]
) -> List[TeacherComment]:
    """
    Bỏ các cặp bình luận có chứa từ lọc (so khớp chuỗi con, không phân biệt hoa thường).
    """
    comments = []
    for submission in submissions:
        comment = TeacherComment(
            positive=submission.positive_feedback or "",
            improvement=submission.suggestions or "",
        )
        if find_filter_words(f"{comment.positive} {comment.improvement}", filter_words):
            continue
        comments.append(comment)
    return comments


def get_teacher_comments(db: Session, teacher_id: int) -> TeacherComments:
    submissions = load_submission_records(db, teacher_id=teacher_id)
    if not submissions:
        raise ValueError(f"Giáo viên id={teacher_id} chưa có bài đánh giá nào.")

    aggregate = aggregate_evaluations(load_question_records(db), submissions)[0]
    comments = filter_comments(submissions, filter_word_crud.get_filter_word_values(db))
    return TeacherComments(
        teacher_id=aggregate.teacher_id,
        teacher_name=aggregate.teacher_name,
        overall_rating=aggregate.overall_rating,
        comments=comments,
    )


def get_filtered_comments(db: Session) -> List[FilteredComment]:
    """
    Danh sách bình luận BỊ lọc, để quản trị viên xem lại.
    """
    filter_words = filter_word_crud.get_filter_word_values(db)
    if not filter_words:
        return []

    filtered = []
    for submission in load_submission_records(db):
        positive = submission.positive_feedback or ""
        improvement = submission.suggestions or ""
        matched = find_filter_words(f"{positive} {improvement}", filter_words)
        if matched:
            filtered.append(
                FilteredComment(
                    teacher_name=submission.teacher_name,
                    positive=positive,
                    improvement=improvement,
                    matched_words=matched,
                )
            )
    return filtered
