from sqlalchemy.orm import Session
from sqlalchemy import select
from faculty_eval.models.evaluation_setting_model import EvaluationSetting
from faculty_eval.schemas.evaluation_setting_schema import EvaluationSettingUpdate


def get_settings(db: Session) -> EvaluationSetting:
    """
    Lấy cấu hình kỳ đánh giá; tạo bản ghi mặc định nếu chưa có.
    """
    settings = db.execute(select(EvaluationSetting).order_by(EvaluationSetting.setting_id)).scalars().first()
    if settings is None:
        settings = EvaluationSetting(
            current_semester="1st Semester",
            school_year="2025-2026",
            is_evaluation_active=True,
        )
        db.add(settings)
        db.commit()
        db.refresh(settings)
    return settings

def update_settings(db: Session, obj_in: EvaluationSettingUpdate) -> EvaluationSetting:
    settings = get_settings(db)
    for key, value in obj_in.model_dump(exclude_unset=True).items():
        setattr(settings, key, value)
    db.commit()
    db.refresh(settings)
    return settings
