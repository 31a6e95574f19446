# validator.py
# 평가 전 1차 검사: 문자 집합과 연산자 연속만 본다.
# 괄호 짝, 끝 연산자 같은 문법 오류는 파서(evaluator)가 판정한다.

import re

# 숫자, + - * / % ( ) . 공백
ALLOWED_RE = re.compile(r'[0-9+\-*/().%\s]+')
# 빼기는 제외(5*-2 허용)
REPEATED_OPERATORS_RE = re.compile(r'[+*/%]{2,}')


def is_allowed_char(c: str) -> bool:
    return len(c) == 1 and ALLOWED_RE.fullmatch(c) is not None


def is_valid(expr: str) -> bool:
    if not expr or expr.strip() == '':
        return False
    if ALLOWED_RE.fullmatch(expr) is None:
        return False
    if REPEATED_OPERATORS_RE.search(expr):
        return False
    return True
