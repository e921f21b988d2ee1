from pydantic import BaseModel, ConfigDict
from typing import Optional

class EvaluationSetting(BaseModel):
    setting_id: int
    current_semester: str
    school_year: str
    is_evaluation_active: bool
    evaluation_period: str

    model_config = ConfigDict(from_attributes=True)

class EvaluationSettingUpdate(BaseModel):
    current_semester: Optional[str] = None
    school_year: Optional[str] = None
    is_evaluation_active: Optional[bool] = None
