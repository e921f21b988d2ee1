import inspect

from sqlalchemy.orm import sessionmaker

from faculty_eval.models.comment_analysis_model import CommentAnalysis
from faculty_eval.models.evaluation_model import Evaluation


def test_read_main(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to the Faculty Evaluation API! Visit /docs for API documentation."}


def test_comment_analysis_task_runs_synchronously(monkeypatch, db_session, teacher):
    import main

    assert not inspect.iscoroutinefunction(main.run_comment_analysis_task)

    db_session.add(Evaluation(
        teacher_id=teacher["teacher_id"],
        teacher_name=teacher["name"],
        student_id="nightly-1",
        suggestions="The teacher should give more lesson examples",
    ))
    db_session.commit()

    monkeypatch.setattr(main, "SessionLocal", sessionmaker(bind=db_session.get_bind()))
    main.run_comment_analysis_task()

    assert db_session.query(CommentAnalysis).count() == 1
