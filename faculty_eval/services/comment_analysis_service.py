import logging
import re
from typing import List, Optional

from sqlalchemy.orm import Session

from faculty_eval.crud import comment_analysis_crud
from faculty_eval.models.comment_analysis_model import CommentAnalysis, CommentType
from faculty_eval.models.evaluation_model import Evaluation
from faculty_eval.schemas.comment_analysis_schema import CommentAnalysisResult

logger = logging.getLogger(__name__)

TAGALOG_MARKERS = ['ang', 'mga', 'kay', 'sa', 'ng', 'ni', 'na', 'ko', 'mo', 'siya', 'tayo', 'kami', 'kayo', 'sila']
ENGLISH_MARKERS = ['the', 'and', 'is', 'are', 'was', 'were', 'have', 'has', 'had', 'will', 'would', 'could', 'should']

OFFENSIVE_WORDS = [
    # English
    'stupid', 'idiot', 'hate', 'sucks', 'terrible', 'worst', 'useless', 'boring',
    # Tagalog
    'bobo', 'tanga', 'walang kwenta', 'pangit', 'ayoko', 'napaka',
    'wtf', 'damn', 'shit', 'fuck', 'bitch',
]

SPAM_PATTERNS = [
    re.compile(r'^[a-z]{1,3}$', re.IGNORECASE),  # vài chữ cái ngẫu nhiên
    re.compile(r'(.)\1{4,}'),                    # ký tự lặp lại
    re.compile(r'^[A-Z\s]{1,10}$'),              # chữ in hoa ngắn
    re.compile(r'^\d+$'),                        # chỉ có số
]

RELATED_TOPIC = re.compile(r'teacher|lesson|class|subject', re.IGNORECASE)


def detect_language(text: str) -> str:
    lowered = text.lower()
    tagalog_count = sum(1 for marker in TAGALOG_MARKERS if marker in lowered)
    english_count = sum(1 for marker in ENGLISH_MARKERS if marker in lowered)

    if tagalog_count > english_count and tagalog_count > 2:
        return 'tagalog'
    if tagalog_count > 0 and english_count > 0:
        return 'taglish'
    return 'english'


def analyze_comment(text: Optional[str]) -> Optional[CommentAnalysisResult]:
    """
    Phân tích một bình luận (tiếng Anh / Tagalog / Taglish).
    Trả về None nếu bình luận rỗng.
    Lý do gắn cờ theo thứ tự ưu tiên: offensive > spam > unrelated.
    """
    if not text or not text.strip():
        return None

    stripped = text.strip()
    lowered = text.lower()

    is_offensive = any(word in lowered for word in OFFENSIVE_WORDS)
    is_spam = any(pattern.search(stripped) for pattern in SPAM_PATTERNS)
    is_unrelated = len(stripped) < 3 or (len(stripped) < 10 and not RELATED_TOPIC.search(text))

    flag_reason = None
    if is_offensive:
        flag_reason = 'offensive'
    elif is_spam:
        flag_reason = 'spam'
    elif is_unrelated:
        flag_reason = 'unrelated'

    return CommentAnalysisResult(
        language=detect_language(text),
        is_flagged=flag_reason is not None,
        flag_reason=flag_reason,
    )


def analyze_evaluation_comments(db: Session, evaluation: Evaluation) -> List[CommentAnalysis]:
    """
    Phân tích bình luận của một bài đánh giá và lưu kết quả vào comment_analysis.
    """
    analyses = []
    for comment_type, text in (
        (CommentType.positive, evaluation.positive_feedback),
        (CommentType.suggestion, evaluation.suggestions),
    ):
        result = analyze_comment(text)
        if result is None:
            continue
        analyses.append(
            CommentAnalysis(
                evaluation_id=evaluation.evaluation_id,
                comment_text=text,
                comment_type=comment_type,
                is_flagged=result.is_flagged,
                flag_reason=result.flag_reason,
                language_detected=result.language,
            )
        )

    if analyses:
        comment_analysis_crud.create_comment_analyses(db, analyses)
        logger.info(
            "Đã phân tích %d bình luận cho evaluation %s (%d bị gắn cờ)",
            len(analyses), evaluation.evaluation_id,
            sum(1 for a in analyses if a.is_flagged),
        )
    return analyses


def analyze_pending_evaluations(db: Session) -> int:
    """
    Phân tích các bài đánh giá chưa có bản ghi comment_analysis nào.
    Bài không có bình luận sẽ không tạo bản ghi nào.
    Trả về số bài đánh giá đã có kết quả phân tích mới.
    """
    processed = 0
    for evaluation in comment_analysis_crud.get_evaluations_without_analysis(db):
        if analyze_evaluation_comments(db, evaluation):
            processed += 1
    return processed
