# normalizer.py

import re

# 정수 또는 소수 바로 뒤의 %
PERCENT_RE = re.compile(r'([0-9]+(\.[0-9]+)?)%')


def to_evaluable(expr: str) -> str:
    """'N%' 를 '(N/100)' 으로 바꾼다. % 가 없으면 그대로 돌려준다."""
    return PERCENT_RE.sub(r'(\1/100)', expr)
