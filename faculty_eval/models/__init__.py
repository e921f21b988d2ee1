from .teacher_model import Teacher
from .question_model import Question
from .evaluation_model import Evaluation
from .filter_word_model import FilterWord
from .comment_analysis_model import CommentAnalysis
from .evaluation_setting_model import EvaluationSetting
