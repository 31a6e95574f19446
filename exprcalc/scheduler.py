# scheduler.py
# 오류 복구용 지연 호출. 입력 처리와 같은 Qt 이벤트 루프에서 실행된다.

from PyQt5.QtCore import QTimer


class QtTimerHandle:
    """schedule() 이 돌려주는 취소 핸들"""

    def __init__(self, timer: QTimer, owner: 'QtScheduler') -> None:
        self._timer = timer
        self._owner = owner

    @property
    def active(self) -> bool:
        return self._timer.isActive()

    def cancel(self) -> None:
        self._timer.stop()
        self._owner._release(self._timer)


class QtScheduler:
    """단발성 QTimer 로 callback 을 delay_ms 뒤에 한 번 호출한다."""

    def __init__(self) -> None:
        # 발사 전 QTimer 가 GC 되지 않도록 참조 유지
        self._timers = set()

    def schedule(self, delay_ms: int, callback) -> QtTimerHandle:
        timer = QTimer()
        timer.setSingleShot(True)

        def fire() -> None:
            self._release(timer)
            callback()

        timer.timeout.connect(fire)
        self._timers.add(timer)
        timer.start(delay_ms)
        return QtTimerHandle(timer, self)

    def _release(self, timer: QTimer) -> None:
        self._timers.discard(timer)
