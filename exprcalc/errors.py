# errors.py
# 평가 실패 종류. 화면에는 구분 없이 'Error' 하나로 표시된다.


class EvaluationError(Exception):
    """평가 실패 공통 부모"""

    kind = 'EvaluationError'


class InvalidExpression(EvaluationError):
    """허용되지 않은 문자 또는 연산자 연속"""

    kind = 'InvalidExpression'


class ExpressionSyntaxError(EvaluationError):
    """산술식으로 해석할 수 없음(괄호 짝, 끝 연산자 등)"""

    kind = 'SyntaxError'


class MathError(EvaluationError):
    """결과가 유한한 실수가 아님(0 나누기 등)"""

    kind = 'MathError'
