# session.py
# 입력 엔진: 버튼/키 입력 → 수식 문자열 조립, = 시 평가, 오류 시 지연 후 초기화

import logging
import re

from .display import ERROR_MARKER, MAX_CHARS, ZERO_MARKER, DisplayText, format_display, format_number
from .errors import EvaluationError
from .evaluator import evaluate
from .validator import is_allowed_char

logger = logging.getLogger(__name__)

RECOVERY_DELAY_MS = 1200  # 'Error' 표시 후 초기화까지

ACTIONS = ('clear', 'backspace', 'calculate', 'percent')

# 숫자 구간 구분자: 연산자, 괄호, %, 공백
SEGMENT_SPLIT_RE = re.compile(r'[+\-*/()%\s]+')
# 빈 수식의 첫 글자로 올 수 없는 연산자(빼기는 허용)
LEADING_FORBIDDEN = frozenset('+*/%')

# UI/키보드 기호를 내부 기호로
CHAR_ALIASES = {'x': '*', 'X': '*', '×': '*', '÷': '/', '−': '-'}

KEY_ACTIONS = {
    'Enter': 'calculate',
    'Return': 'calculate',
    '=': 'calculate',
    'Backspace': 'backspace',
    'Escape': 'clear',
    'Delete': 'clear',
    'c': 'clear',
    'C': 'clear',
}


class Session:
    """계산기 한 개의 상태: 수식 문자열, 마지막 결과, 표시 문자열"""

    def __init__(self, scheduler=None, recovery_delay_ms: int = RECOVERY_DELAY_MS,
                 max_chars: int = MAX_CHARS, on_change=None) -> None:
        if scheduler is None:
            from .scheduler import QtScheduler
            scheduler = QtScheduler()
        self._scheduler = scheduler
        self.recovery_delay_ms = recovery_delay_ms
        self.max_chars = max_chars
        self.on_change = on_change  # callable(DisplayText), 표시가 바뀔 때마다

        self._generation = 0  # 새 입력이 들어올 때마다 증가, 지연 초기화가 확인
        self._pending = None
        self.reset()

    def reset(self) -> None:
        self._cancel_recovery()
        self._expr = ''
        self._last_result = None
        self._source = ZERO_MARKER  # 표시 원본(수식, '0' 또는 'Error')

    @property
    def expression(self) -> str:
        return self._expr

    @property
    def last_result(self):
        return self._last_result

    @property
    def error(self) -> bool:
        return self._source == ERROR_MARKER

    @property
    def recovery_pending(self) -> bool:
        return self._pending is not None

    # 외부 API
    def get_display(self) -> DisplayText:
        """shown: 화면 문자열, full: 툴팁용 전체 문자열(잘리지 않았으면 '')"""
        text = format_display(self._source, self.max_chars)
        return DisplayText(text.shown, text.title)

    def submit_action(self, action: str) -> None:
        if action not in ACTIONS:
            raise ValueError(f'unknown action: {action!r}')
        self._cancel_recovery()

        if action == 'clear':
            self._expr = ''
            self._last_result = None
        elif action == 'backspace':
            self._expr = self._expr[:-1]
        elif action == 'percent':
            self._expr += '%'
        elif action == 'calculate':
            self._calculate()
            return
        self._refresh()

    def submit_char(self, c: str) -> bool:
        """문자 하나를 덧붙인다. 거부되면 상태 변화 없이 False."""
        c = CHAR_ALIASES.get(c, c)
        if not is_allowed_char(c):
            logger.debug('[거부] 허용되지 않는 문자: %r', c)
            return False

        prefix = ''
        if c == '.':
            last = SEGMENT_SPLIT_RE.split(self._expr)[-1]
            if '.' in last:
                logger.debug('[거부] 같은 숫자에 소수점 중복: %r', self._expr)
                return False
            if not last:
                # '.' 으로 시작하면 '0.'
                prefix = '0'
        elif c in LEADING_FORBIDDEN and self._expr == '':
            logger.debug('[거부] 연산자로 시작할 수 없음: %r', c)
            return False

        self._cancel_recovery()
        self._expr += prefix + c
        self._refresh()
        return True

    def submit_key(self, key: str) -> bool:
        """키 이름(Enter, Backspace, Escape...) 또는 문자. 처리했으면 True."""
        action = KEY_ACTIONS.get(key)
        if action is not None:
            self.submit_action(action)
            return True
        return self.submit_char(key)

    # 내부 유틸
    def _calculate(self) -> None:
        expr = self._expr
        try:
            result = evaluate(expr)
        except EvaluationError as e:
            logger.warning('[오류] %s: %r (%s)', e.kind, expr, e)
            self._source = ERROR_MARKER
            self._notify()
            self._schedule_recovery()
            return

        logger.info('[계산] %s = %r', expr, result)
        self._last_result = result
        self._expr = format_number(result)
        self._refresh()

    def _refresh(self) -> None:
        self._source = self._expr or ZERO_MARKER
        self._notify()

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.get_display())

    def _schedule_recovery(self) -> None:
        generation = self._generation

        def recover() -> None:
            if generation != self._generation:
                # 그 사이 새 입력이 있었음
                return
            self._pending = None
            self._expr = ''
            self._refresh()

        self._pending = self._scheduler.schedule(self.recovery_delay_ms, recover)

    def _cancel_recovery(self) -> None:
        self._generation += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
