# exprcalc
# Python 3.x, PyQt5
# 버튼/키보드 입력으로 수식을 조립하고 안전하게 계산하는 계산기

from .errors import EvaluationError, ExpressionSyntaxError, InvalidExpression, MathError
from .display import DisplayText, format_display, format_number
from .evaluator import evaluate
from .normalizer import to_evaluable
from .session import Session
from .validator import is_valid

__all__ = [
    'DisplayText',
    'EvaluationError',
    'ExpressionSyntaxError',
    'InvalidExpression',
    'MathError',
    'Session',
    'evaluate',
    'format_display',
    'format_number',
    'is_valid',
    'to_evaluable',
]

__version__ = '0.1.0'
