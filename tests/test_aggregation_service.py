import random

from faculty_eval.schemas.report_schema import CategoryRating, QuestionRecord, SubmissionRecord
from faculty_eval.services.aggregation_service import (
    aggregate_evaluations,
    derive_categories,
    format_rating,
    performance_level,
)


def make_questions():
    return [QuestionRecord(id=str(i), category="A", category_name="Teaching") for i in (1, 2)] + [
        QuestionRecord(id=str(i), category="B", category_name="Management") for i in (3, 4, 5)
    ]


def make_submission(teacher_id="t1", ratings=None, student_id=None):
    return SubmissionRecord(
        teacher_id=teacher_id,
        teacher_name=f"Teacher {teacher_id}",
        student_id=student_id,
        category_ratings=ratings or {},
    )


def by_teacher(aggregates):
    return {a.teacher_id: a for a in aggregates}


def test_two_respondents_full_catalog():
    ratings = {"A": {"score": 8, "max": 10}, "B": {"score": 12, "max": 15}}
    result = aggregate_evaluations(make_questions(), [make_submission(ratings=ratings), make_submission(ratings=ratings)])

    assert len(result) == 1
    teacher = result[0]
    assert teacher.total_respondents == 2
    assert teacher.accumulated_score == 40
    assert teacher.highest_possible_score == 50
    assert teacher.overall_rating == "80.00"
    assert teacher.category_ratings["A"] == CategoryRating(score=16, max=20)
    assert teacher.category_ratings["B"] == CategoryRating(score=24, max=30)
    assert teacher.category_breakdown == {"A": 16.0, "B": 24.0}
    assert teacher.performance_level == "Very Good"


def test_missing_category_contributes_zero():
    result = aggregate_evaluations(make_questions(), [make_submission(ratings={"A": {"score": 10, "max": 10}})])

    teacher = result[0]
    assert teacher.accumulated_score == 10
    assert teacher.highest_possible_score == 25
    assert teacher.overall_rating == "40.00"
    assert teacher.category_ratings["B"] == CategoryRating(score=0, max=0)
    assert teacher.category_breakdown["B"] == 0.0


def test_empty_submissions_gives_empty_output():
    assert aggregate_evaluations(make_questions(), []) == []
    assert aggregate_evaluations([], []) == []


def test_empty_catalog_uses_zero_sentinel():
    result = aggregate_evaluations([], [make_submission(ratings={"A": {"score": 5, "max": 5}})])

    teacher = result[0]
    assert teacher.total_respondents == 1
    assert teacher.highest_possible_score == 0
    assert teacher.accumulated_score == 0
    assert teacher.overall_rating == "0.00"
    assert teacher.category_breakdown == {}


def test_unknown_category_is_ignored():
    ratings = {"A": {"score": 10, "max": 10}, "Z": {"score": 99, "max": 99}}
    teacher = aggregate_evaluations(make_questions(), [make_submission(ratings=ratings)])[0]

    assert teacher.accumulated_score == 10
    assert "Z" not in teacher.category_ratings
    assert "Z" not in teacher.category_breakdown


def test_submission_without_ratings_still_counts_as_respondent():
    submissions = [
        make_submission(ratings={"A": {"score": 10, "max": 10}, "B": {"score": 15, "max": 15}}),
        make_submission(),
        make_submission(ratings={"OLD": {"score": 5, "max": 5}}),
    ]
    teacher = aggregate_evaluations(make_questions(), submissions)[0]

    assert teacher.total_respondents == 3
    assert teacher.highest_possible_score == 5 * 3 * 5
    assert teacher.accumulated_score == 25
    assert teacher.overall_rating == "33.33"


def test_malformed_numbers_are_treated_as_zero():
    submission = SubmissionRecord(
        teacher_id="t1",
        teacher_name="T",
        category_ratings='{"A": {"score": "abc", "max": null}, "B": {"score": "7", "max": 15}}',
    )
    teacher = aggregate_evaluations(make_questions(), [submission])[0]

    assert teacher.category_ratings["A"] == CategoryRating(score=0, max=0)
    assert teacher.accumulated_score == 7


def test_groups_by_teacher_and_skips_teachers_without_submissions():
    ratings = {"A": {"score": 10, "max": 10}, "B": {"score": 15, "max": 15}}
    submissions = [
        make_submission("t1", ratings),
        make_submission("t2", {"A": {"score": 5, "max": 10}}),
        make_submission("t1", ratings),
    ]
    result = by_teacher(aggregate_evaluations(make_questions(), submissions))

    assert set(result) == {"t1", "t2"}
    assert result["t1"].total_respondents == 2
    assert result["t1"].overall_rating == "100.00"
    assert result["t1"].performance_level == "Excellent"
    assert result["t2"].total_respondents == 1
    assert result["t2"].highest_possible_score == 25
    assert result["t2"].overall_rating == "20.00"


def test_invariants_hold_for_every_teacher():
    rng = random.Random(7)
    questions = make_questions()
    submissions = []
    for student in range(40):
        teacher_id = f"t{rng.randint(1, 5)}"
        ratings = {
            "A": {"score": rng.randint(2, 10), "max": 10},
            "B": {"score": rng.randint(3, 15), "max": 15},
        }
        if rng.random() < 0.2:
            del ratings["B"]
        submissions.append(make_submission(teacher_id, ratings, student_id=str(student)))

    for teacher in aggregate_evaluations(questions, submissions):
        own = [s for s in submissions if s.teacher_id == teacher.teacher_id]
        assert teacher.total_respondents == len(own)
        assert teacher.highest_possible_score == len(questions) * len(own) * 5
        assert teacher.accumulated_score == sum(r.score for r in teacher.category_ratings.values())
        for category, rating in teacher.category_ratings.items():
            expected = sum(s.category_ratings[category].score for s in own if category in s.category_ratings)
            assert rating.score == expected


def test_result_does_not_depend_on_submission_order():
    rng = random.Random(11)
    submissions = [
        make_submission(f"t{i % 3}", {"A": {"score": i % 10, "max": 10}, "B": {"score": i % 15, "max": 15}})
        for i in range(12)
    ]
    shuffled = list(submissions)
    rng.shuffle(shuffled)

    first = by_teacher(aggregate_evaluations(make_questions(), submissions))
    second = by_teacher(aggregate_evaluations(make_questions(), shuffled))
    assert first == second
    # gọi lại lần nữa không làm thay đổi input
    assert by_teacher(aggregate_evaluations(make_questions(), submissions)) == first


def test_first_seen_category_name_wins():
    questions = [
        QuestionRecord(id="1", category="A", category_name="First"),
        QuestionRecord(id="2", category="B"),
        QuestionRecord(id="3", category="A", category_name="Second"),
    ]
    categories = derive_categories(questions)

    assert [c.category for c in categories] == ["A", "B"]
    assert categories[0].category_name == "First"
    assert categories[1].label == "B"


def test_format_rating_and_levels():
    assert format_rating(0, 0) == "0.00"
    assert format_rating(7, 8) == "87.50"
    assert format_rating(1, 3) == "33.33"
    assert performance_level(95) == "Excellent"
    assert performance_level(80) == "Very Good"
    assert performance_level(70.5) == "Good"
    assert performance_level(60) == "Fair"
    assert performance_level(0) == "Needs Improvement"
