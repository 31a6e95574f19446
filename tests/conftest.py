import os

import pytest

from exprcalc.session import Session


class ManualHandle:
    def __init__(self, due, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """advance(ms) 를 호출해야 시간이 흐르는 스케줄러"""

    def __init__(self):
        self.now = 0
        self.handles = []

    def schedule(self, delay_ms, callback):
        handle = ManualHandle(self.now + delay_ms, callback)
        self.handles.append(handle)
        return handle

    def advance(self, ms):
        self.now += ms
        due = [h for h in self.handles if not h.cancelled and h.due <= self.now]
        self.handles = [h for h in self.handles if h not in due]
        for h in due:
            h.callback()

    @property
    def pending(self):
        return [h for h in self.handles if not h.cancelled]


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def session(scheduler):
    return Session(scheduler=scheduler)


def type_chars(session, text):
    for ch in text:
        session.submit_char(ch)


@pytest.fixture(scope='session')
def qapp():
    # 디스플레이 없는 환경에서도 위젯 생성
    os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')
    from PyQt5.QtWidgets import QApplication
    return QApplication.instance() or QApplication([])
