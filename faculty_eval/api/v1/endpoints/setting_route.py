# faculty_eval/api/v1/endpoints/setting_route.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from faculty_eval.crud import evaluation_setting_crud
from faculty_eval.schemas import evaluation_setting_schema
from faculty_eval.api import deps

router = APIRouter()


@router.get("", response_model=evaluation_setting_schema.EvaluationSetting, summary="Cấu hình kỳ đánh giá")
def get_settings(db: Session = Depends(deps.get_db)):
    return evaluation_setting_crud.get_settings(db)


@router.put("", response_model=evaluation_setting_schema.EvaluationSetting, summary="Cập nhật kỳ đánh giá")
def update_settings(
    settings_in: evaluation_setting_schema.EvaluationSettingUpdate,
    db: Session = Depends(deps.get_db)
):
    return evaluation_setting_crud.update_settings(db, obj_in=settings_in)
