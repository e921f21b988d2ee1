"""
Tổng hợp kết quả đánh giá giáo viên.

Chuyển các bài đánh giá thô (SubmissionRecord) cùng danh mục câu hỏi
(QuestionRecord) thành một TeacherAggregate cho mỗi giáo viên có ít nhất
một bài đánh giá. Hàm thuần: không I/O, không trạng thái dùng chung.
"""
from typing import Dict, Iterable, List, Sequence

from faculty_eval.config import MAX_RATING
from faculty_eval.schemas.report_schema import (
    CategoryInfo,
    CategoryRating,
    QuestionRecord,
    SubmissionRecord,
    TeacherAggregate,
)

ZERO_RATING = "0.00"

# Ngưỡng phần trăm -> mức đánh giá, xét từ cao xuống thấp
PERFORMANCE_LEVELS = [
    (90.0, "Excellent"),
    (80.0, "Very Good"),
    (70.0, "Good"),
    (60.0, "Fair"),
]
LOWEST_LEVEL = "Needs Improvement"


def derive_categories(questions: Sequence[QuestionRecord]) -> List[CategoryInfo]:
    """
    Lấy danh sách category theo thứ tự xuất hiện đầu tiên.
    Nếu một category trùng lặp, category_name của lần xuất hiện đầu tiên được giữ.
    """
    categories: Dict[str, CategoryInfo] = {}
    for question in questions:
        if question.category not in categories:
            categories[question.category] = CategoryInfo(
                category=question.category,
                category_name=question.category_name,
            )
    return list(categories.values())


def format_rating(accumulated_score: float, highest_possible_score: float) -> str:
    if highest_possible_score <= 0:
        return ZERO_RATING
    return f"{accumulated_score / highest_possible_score * 100:.2f}"


def performance_level(rating_percent: float) -> str:
    for threshold, level in PERFORMANCE_LEVELS:
        if rating_percent >= threshold:
            return level
    return LOWEST_LEVEL


class _TeacherTotals:
    __slots__ = ("teacher_name", "respondents", "categories")

    def __init__(self, teacher_name: str):
        self.teacher_name = teacher_name
        self.respondents = 0
        self.categories: Dict[str, CategoryRating] = {}


def aggregate_evaluations(
    questions: Sequence[QuestionRecord],
    submissions: Iterable[SubmissionRecord],
) -> List[TeacherAggregate]:
    """
    Tính điểm tổng hợp cho từng giáo viên.

    - total_respondents: số bài đánh giá của giáo viên (kể cả bài không có
      category_ratings hoặc không trùng category nào trong danh mục).
    - score/max của từng category được cộng dồn qua mọi học sinh.
    - accumulated_score: tổng score của các category trong danh mục.
    - highest_possible_score = số câu hỏi x số học sinh x 5.
    - overall_rating: phần trăm 2 chữ số thập phân, "0.00" khi không có điểm tối đa.

    Category không có trong danh mục câu hỏi bị bỏ qua.
    Thứ tự giáo viên trong kết quả không được đảm bảo.
    """
    categories = derive_categories(questions)
    catalog = {category.category for category in categories}
    question_count = len(questions)

    grouped: Dict[str, _TeacherTotals] = {}
    for submission in submissions:
        totals = grouped.get(submission.teacher_id)
        if totals is None:
            totals = grouped[submission.teacher_id] = _TeacherTotals(submission.teacher_name)
        totals.respondents += 1

        for category, rating in submission.category_ratings.items():
            if category not in catalog:
                continue
            running = totals.categories.setdefault(category, CategoryRating())
            running.score += rating.score
            running.max += rating.max

    aggregates: List[TeacherAggregate] = []
    for teacher_id, totals in grouped.items():
        category_ratings = {
            category.category: totals.categories.get(category.category, CategoryRating())
            for category in categories
        }
        accumulated_score = sum(rating.score for rating in category_ratings.values())
        highest_possible_score = question_count * totals.respondents * MAX_RATING
        overall_rating = format_rating(accumulated_score, highest_possible_score)

        aggregates.append(
            TeacherAggregate(
                teacher_id=teacher_id,
                teacher_name=totals.teacher_name,
                total_respondents=totals.respondents,
                accumulated_score=accumulated_score,
                highest_possible_score=highest_possible_score,
                overall_rating=overall_rating,
                performance_level=performance_level(float(overall_rating)),
                category_ratings=category_ratings,
                category_breakdown={
                    category: round(rating.score, 2) if rating.max > 0 else 0.0
                    for category, rating in category_ratings.items()
                },
            )
        )
    return aggregates
