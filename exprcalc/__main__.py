# __main__.py
# python -m exprcalc            : 계산기 창
# python -m exprcalc --eval EXPR: 창 없이 계산 결과만 출력

import argparse
import logging
import sys

from .display import ERROR_MARKER, MAX_CHARS, format_number
from .errors import EvaluationError
from .evaluator import evaluate
from .logging_config import setup_logger
from .session import RECOVERY_DELAY_MS

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='exprcalc',
        description='버튼/키보드로 수식을 입력해 계산하는 계산기',
    )
    parser.add_argument('--eval', dest='expressions', action='append', metavar='EXPR',
                        help='창을 띄우지 않고 수식을 계산해 출력(여러 번 지정 가능)')
    parser.add_argument('--recovery-delay', type=int, default=RECOVERY_DELAY_MS, metavar='MS',
                        help='오류 표시 후 초기화까지 지연(ms, 기본값: 1200)')
    parser.add_argument('--max-chars', type=int, default=MAX_CHARS, metavar='N',
                        help='표시할 최대 글자 수(기본값: 20)')
    parser.add_argument('--log', default=None,
                        help='로그 파일 경로(기본값: 파일 로그 없음)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='DEBUG 로그 출력')
    return parser.parse_args(argv)


def run_eval(expressions, out=None) -> int:
    """수식마다 결과 한 줄. 하나라도 실패하면 1."""
    out = out or sys.stdout
    status = 0
    for expr in expressions:
        try:
            text = format_number(evaluate(expr))
        except EvaluationError as e:
            logger.warning('[오류] %s: %r (%s)', e.kind, expr, e)
            text = ERROR_MARKER
            status = 1
        print(text, file=out)
    return status


def run_gui(args) -> int:
    from PyQt5.QtWidgets import QApplication

    from .session import Session
    from .window import CalculatorWindow

    app = QApplication(sys.argv[:1])
    session = Session(recovery_delay_ms=args.recovery_delay, max_chars=args.max_chars)
    w = CalculatorWindow(session)
    w.show()
    return app.exec_()


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logger(args.log, logging.DEBUG if args.verbose else logging.INFO)
    if args.expressions:
        return run_eval(args.expressions)
    return run_gui(args)


if __name__ == '__main__':
    sys.exit(main())
