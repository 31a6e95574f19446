# evaluator.py
# 사칙연산 전용 재귀 하강 파서. 범용 코드 실행(eval 등)은 쓰지 않는다.
#
# expression : term (('+' | '-') term)*
# term       : unary (('*' | '/' | '%') unary)*
# unary      : ('+' | '-') unary | primary
# primary    : NUMBER | '(' expression ')'

import math
import operator
import re

from .errors import ExpressionSyntaxError, InvalidExpression, MathError
from .normalizer import to_evaluable
from .validator import is_valid

NUMBER = 'NUMBER'
EOF = 'EOF'

# '--' 는 공백 없이 붙어 있으면 오류(5--2), 공백이 있으면 단항(5- -2)
# 앞자리 0(05)은 일반 십진수로 읽는다
TOKEN_RE = re.compile(r'\s*(?:(?P<number>[0-9]+\.?[0-9]*|\.[0-9]+)|(?P<op>--|[-+*/%()]))')


def _divide(a: float, b: float) -> float:
    # IEEE-754: 0 나누기는 예외 대신 ±inf / nan
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _remainder(a: float, b: float) -> float:
    # 부호는 피제수를 따른다
    if math.isnan(a) or math.isnan(b) or math.isinf(a) or b == 0:
        return math.nan
    if math.isinf(b) or a == 0:
        return a
    return math.fmod(a, b)


ADDITIVE_OPS = {
    '+': operator.add,
    '-': operator.sub,
}

MULTIPLICATIVE_OPS = {
    '*': operator.mul,
    '/': _divide,
    '%': _remainder,
}


def tokenize(text: str) -> list:
    """(종류, 값) 튜플 목록. 숫자는 (NUMBER, float), 연산자/괄호는 (문자, 문자)."""
    tokens = []
    pos = 0
    while pos < len(text):
        m = TOKEN_RE.match(text, pos)
        if m is None:
            if text[pos:].strip() == '':
                break
            raise ExpressionSyntaxError(f'해석할 수 없는 문자: {text[pos:].strip()[0]!r}')
        if m.group('number') is not None:
            tokens.append((NUMBER, float(m.group('number'))))
        else:
            op = m.group('op')
            if op == '--':
                raise ExpressionSyntaxError("'--' 는 연산자가 아닙니다")
            tokens.append((op, op))
        pos = m.end()
    tokens.append((EOF, None))
    return tokens


class _Parser:
    """토큰 목록을 읽으면서 바로 값을 계산한다."""

    def __init__(self, tokens: list) -> None:
        self.tokens = tokens
        self.pos = 0

    def parse(self) -> float:
        value = self.expression()
        if self._kind() != EOF:
            self._error()
        return value

    def expression(self) -> float:
        value = self.term()
        while self._kind() in ADDITIVE_OPS:
            op = self._advance()[0]
            value = ADDITIVE_OPS[op](value, self.term())
        return value

    def term(self) -> float:
        value = self.unary()
        while self._kind() in MULTIPLICATIVE_OPS:
            op = self._advance()[0]
            value = MULTIPLICATIVE_OPS[op](value, self.unary())
        return value

    def unary(self) -> float:
        kind = self._kind()
        if kind == '-':
            self._advance()
            return -self.unary()
        if kind == '+':
            self._advance()
            return self.unary()
        return self.primary()

    def primary(self) -> float:
        kind, value = self._advance()
        if kind == NUMBER:
            return value
        if kind == '(':
            inner = self.expression()
            closing = self._advance()[0]
            if closing != ')':
                self._error(closing)
            return inner
        self._error(kind)

    # 내부 유틸
    def _kind(self) -> str:
        return self.tokens[self.pos][0]

    def _advance(self) -> tuple:
        token = self.tokens[self.pos]
        if token[0] != EOF:
            self.pos += 1
        return token

    def _error(self, kind=None) -> None:
        kind = kind or self.tokens[self.pos][0]
        if kind == EOF:
            raise ExpressionSyntaxError('수식이 중간에 끝났습니다')
        raise ExpressionSyntaxError(f'예상하지 못한 토큰: {kind!r}')


def evaluate(expr: str) -> float:
    if not is_valid(expr):
        raise InvalidExpression(f'허용되지 않는 수식: {expr!r}')
    tokens = tokenize(to_evaluable(expr))
    try:
        value = _Parser(tokens).parse()
    except RecursionError:
        raise ExpressionSyntaxError('괄호 중첩이 너무 깊습니다') from None
    if not math.isfinite(value):
        raise MathError(f'결과가 유한한 수가 아닙니다: {value}')
    return value
