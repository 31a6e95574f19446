# display.py
# 표시 문자열: 길면 왼쪽을 잘라 뒷부분(최근 입력)을 보여준다.

from decimal import Decimal
from typing import NamedTuple

MAX_CHARS = 20  # 디스플레이 글자 수 제한
ELLIPSIS = '…'
ZERO_MARKER = '0'
ERROR_MARKER = 'Error'


class DisplayText(NamedTuple):
    shown: str
    full: str

    @property
    def truncated(self) -> bool:
        return self.shown != self.full

    @property
    def title(self) -> str:
        """툴팁용: 잘렸을 때만 전체 문자열, 아니면 ''"""
        return self.full if self.truncated else ''


def format_display(text: str, max_chars: int = MAX_CHARS) -> DisplayText:
    full = str(text)
    if len(full) <= max_chars:
        return DisplayText(full, full)
    return DisplayText(ELLIPSIS + full[-max_chars:], full)


def format_number(value: float) -> str:
    """계산 결과를 수식 문자열로 되돌린다.

    4.0 -> '4', 0.5 -> '0.5', 1e22 -> '10000000000000000000000'.
    최단 왕복 자릿수(repr)를 쓰고 지수 표기 없이 펼친다('e' 는 수식에 쓸 수 없음).
    """
    if value == 0:
        return ZERO_MARKER  # -0 포함
    return format(Decimal(repr(value)).normalize(), 'f')
