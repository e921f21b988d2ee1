from io import BytesIO

from docx import Document # type: ignore
from openpyxl import load_workbook # type: ignore

from faculty_eval.models.evaluation_model import Evaluation
from faculty_eval.services.report_service import filter_comments
from faculty_eval.schemas.report_schema import SubmissionRecord


def submit(client, teacher_id, student_id, answers, positive=None, suggestions=None):
    response = client.post("/api/v1/evaluations", json={
        "teacher_id": teacher_id,
        "student_id": student_id,
        "answers": answers,
        "positive_feedback": positive,
        "suggestions": suggestions,
    })
    assert response.status_code == 201
    return response.json()


def answers_for(catalog, rating):
    return {str(q["question_id"]): rating for q in catalog}


def seed(client, catalog, teacher):
    submit(client, teacher["teacher_id"], "s1", answers_for(catalog, 4),
           positive="Great teacher, lessons are clear", suggestions="More quizzes")
    submit(client, teacher["teacher_id"], "s2", answers_for(catalog, 4),
           positive="Bad attitude sometimes", suggestions="Be on time")
    other = client.post("/api/v1/teachers", json={"name": "Ana Reyes", "position": "Part Time Instructor"}).json()
    submit(client, other["teacher_id"], "s1", answers_for(catalog, 5))
    client.post("/api/v1/teachers", json={"name": "Not Evaluated"})
    return other


def test_report_aggregates_per_teacher(client, catalog, teacher):
    seed(client, catalog, teacher)

    response = client.get("/api/v1/reports/teachers")
    assert response.status_code == 200
    report = response.json()

    assert report["total_questions"] == 5
    assert [c["category"] for c in report["categories"]] == ["A", "B"]
    # sắp xếp theo tên, giáo viên chưa có đánh giá không xuất hiện
    assert [t["teacher_name"] for t in report["teachers"]] == ["Ana Reyes", "Juan Dela Cruz"]

    juan = report["teachers"][1]
    assert juan["total_respondents"] == 2
    assert juan["accumulated_score"] == 40
    assert juan["highest_possible_score"] == 50
    assert juan["overall_rating"] == "80.00"
    assert juan["category_breakdown"] == {"A": 16.0, "B": 24.0}

    ana = report["teachers"][0]
    assert ana["overall_rating"] == "100.00"
    assert ana["performance_level"] == "Excellent"


def test_report_uses_only_active_questions(client, catalog, teacher):
    submit(client, teacher["teacher_id"], "s1", answers_for(catalog, 4))
    client.delete(f"/api/v1/questions/{catalog[0]['question_id']}")

    aggregate = client.get(f"/api/v1/reports/teachers/{teacher['teacher_id']}").json()
    assert aggregate["highest_possible_score"] == 4 * 1 * 5
    assert aggregate["accumulated_score"] == 20


def test_teacher_aggregate_not_found(client, catalog, teacher):
    assert client.get(f"/api/v1/reports/teachers/{teacher['teacher_id']}").status_code == 404
    assert client.get(f"/api/v1/reports/teachers/{teacher['teacher_id']}/comments").status_code == 404


def test_empty_report(client, catalog):
    report = client.get("/api/v1/reports/teachers").json()
    assert report["teachers"] == []

    summary = client.get("/api/v1/reports/summary").json()
    assert summary["total_teachers_evaluated"] == 0
    assert summary["school_average"] == 0


def test_legacy_rows_with_native_json_are_aggregated(client, db_session, catalog, teacher):
    db_session.add(Evaluation(
        teacher_id=teacher["teacher_id"],
        teacher_name=teacher["name"],
        student_id="legacy",
        category_ratings='{"A": {"score": "10", "max": 10}, "X": {"score": 50, "max": 50}}',
        answers=None,
    ))
    db_session.commit()

    aggregate = client.get(f"/api/v1/reports/teachers/{teacher['teacher_id']}").json()
    assert aggregate["total_respondents"] == 1
    assert aggregate["accumulated_score"] == 10
    assert aggregate["overall_rating"] == "40.00"
    assert "X" not in aggregate["category_breakdown"]


def test_summary(client, catalog, teacher):
    seed(client, catalog, teacher)

    summary = client.get("/api/v1/reports/summary").json()
    assert summary["evaluation_period"] == "1st Semester A/Y 2025-2026"
    assert summary["total_teachers_evaluated"] == 2
    assert summary["school_average"] == 90.0
    assert summary["school_average_level"] == "Excellent"
    assert summary["performance_distribution"] == {
        "Excellent": 1, "Very Good": 1, "Good": 0, "Fair": 0, "Needs Improvement": 0,
    }


def test_teacher_comments_exclude_filter_words(client, catalog, teacher):
    seed(client, catalog, teacher)
    assert client.post("/api/v1/filter_words", json={"word": "  BAD "}).json()["word"] == "bad"
    assert client.post("/api/v1/filter_words", json={"word": "bad"}).status_code == 400

    comments = client.get(f"/api/v1/reports/teachers/{teacher['teacher_id']}/comments").json()
    assert comments["overall_rating"] == "80.00"
    assert comments["comments"] == [
        {"positive": "Great teacher, lessons are clear", "improvement": "More quizzes"},
    ]

    filtered = client.get("/api/v1/reports/filtered-comments").json()
    assert len(filtered) == 1
    assert filtered[0]["teacher_name"] == "Juan Dela Cruz"
    assert filtered[0]["matched_words"] == ["bad"]

    assert client.delete("/api/v1/filter_words/bad").status_code == 200
    assert client.get("/api/v1/reports/filtered-comments").json() == []


def test_filter_comments_is_case_insensitive():
    submissions = [
        SubmissionRecord(teacher_id="1", positive_feedback="So BORING", suggestions=None),
        SubmissionRecord(teacher_id="1", positive_feedback=None, suggestions="Speak louder"),
    ]
    comments = filter_comments(submissions, ["boring"])
    assert [c.improvement for c in comments] == ["Speak louder"]
    assert comments[0].positive == ""


def test_export_excel(client, catalog, teacher):
    seed(client, catalog, teacher)

    response = client.get("/api/v1/reports/export/excel")
    assert response.status_code == 200
    assert "evaluation_report.xlsx" in response.headers["content-disposition"]

    ws = load_workbook(BytesIO(response.content)).active
    header = [cell.value for cell in ws[1]]
    assert header == [
        "Teacher", "Respondents", "Highest Possible Score", "Accumulated Score", "Overall Rating",
        "Teaching Effectiveness", "Classroom Management",
    ]
    juan = [cell.value for cell in ws[3]]
    assert juan == ["Juan Dela Cruz", 2, 50, 40, "80.00%", 16, 24]
    assert ws.column_dimensions["A"].width >= 16
    assert ws.page_setup.orientation == "landscape"


def test_export_tbi_score_docx(client, catalog, teacher):
    seed(client, catalog, teacher)

    response = client.get("/api/v1/reports/export/tbi-score")
    assert response.status_code == 200

    doc = Document(BytesIO(response.content))
    assert doc.paragraphs[0].text == "TBI SCORE REPORT"
    rows = [[cell.text for cell in row.cells] for row in doc.tables[0].rows]
    assert rows[0][0] == "No."
    assert rows[1] == ["1", "Ana Reyes", "Part Time Instructor", "1", "25", "25", "100.00%"]
    assert rows[2] == ["2", "Juan Dela Cruz", "Assistant Instructor 1", "2", "50", "40", "80.00%"]


def test_export_comments_docx(client, catalog, teacher):
    seed(client, catalog, teacher)
    client.post("/api/v1/filter_words", json={"word": "bad"})

    response = client.get(f"/api/v1/reports/export/comments/{teacher['teacher_id']}")
    assert response.status_code == 200

    doc = Document(BytesIO(response.content))
    texts = [p.text for p in doc.paragraphs]
    assert "NAME OF FACULTY: Juan Dela Cruz" in texts
    assert "RATING: 80.00%" in texts
    rows = [[cell.text for cell in row.cells] for row in doc.tables[0].rows]
    assert rows == [
        ["Positive Feedback", "Areas for Improvement"],
        ["Great teacher, lessons are clear", "More quizzes"],
    ]

    assert client.get("/api/v1/reports/export/comments/999").status_code == 404


def test_reports_use_current_teacher_name(client, catalog, teacher):
    submit(client, teacher["teacher_id"], "s1", answers_for(catalog, 4), positive="Clear lessons every class")
    response = client.put(f"/api/v1/teachers/{teacher['teacher_id']}", json={"name": "Juan D. Cruz"})
    assert response.status_code == 200

    report = client.get("/api/v1/reports/teachers").json()
    assert [t["teacher_name"] for t in report["teachers"]] == ["Juan D. Cruz"]

    aggregate = client.get(f"/api/v1/reports/teachers/{teacher['teacher_id']}").json()
    assert aggregate["teacher_name"] == "Juan D. Cruz"

    comments = client.get(f"/api/v1/reports/teachers/{teacher['teacher_id']}/comments").json()
    assert comments["teacher_name"] == "Juan D. Cruz"
