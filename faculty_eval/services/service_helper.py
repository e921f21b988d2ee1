import json
import logging
import math
from typing import Any, Dict

from pydantic import BaseModel

logger = logging.getLogger(__name__)


def to_number(value: Any) -> float:
    """
    Chuyển giá trị bất kỳ sang số thực.
    None, chuỗi không phải số, NaN/Infinity đều trả về 0.
    """
    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def load_json_mapping(value: Any) -> Dict[str, Any]:
    """
    Chuẩn hóa cột JSON (answers, category_ratings) về dict.
    Dữ liệu cũ có thể là chuỗi JSON hoặc dict; mọi dạng khác trả về {}.
    """
    if value is None or value == "":
        return {}
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8", errors="ignore")
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            logger.warning("Bỏ qua cột JSON không hợp lệ: %.50s", value)
            return {}
        # Chuỗi JSON bị mã hóa hai lần
        if isinstance(value, str):
            return load_json_mapping(value)
    if not isinstance(value, dict):
        return {}
    return {str(key): val for key, val in value.items()}


def dump_json_mapping(value: Dict[str, Any]) -> str:
    return json.dumps(value, ensure_ascii=False)


def normalize_category_ratings(value: Any) -> Dict[str, Any]:
    """
    category_ratings đã chuẩn hóa: category -> object {score, max}.
    Giá trị không phải object bị bỏ qua thay vì làm hỏng cả bản ghi.
    """
    return {
        category: rating
        for category, rating in load_json_mapping(value).items()
        if isinstance(rating, (dict, BaseModel))
    }


def normalize_answers(value: Any) -> Dict[str, int]:
    """answers đã chuẩn hóa: question_id -> điểm nguyên, giá trị hỏng thành 0."""
    return {
        question_id: int(to_number(rating))
        for question_id, rating in load_json_mapping(value).items()
    }
