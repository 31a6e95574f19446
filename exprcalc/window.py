# window.py
# PyQt5 UI: 버튼/키보드 → Session 연결. 계산 로직은 두지 않는다.

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import (
    QWidget,
    QGridLayout,
    QVBoxLayout,
    QPushButton,
    QLineEdit,
)

from .session import Session

BUTTONS = [
    ['C', '(', ')', '⌫'],
    ['7', '8', '9', '÷'],
    ['4', '5', '6', '×'],
    ['1', '2', '3', '−'],
    ['0', '.', '%', '+'],
]

BUTTON_ACTIONS = {
    'C': 'clear',
    '⌫': 'backspace',
    '%': 'percent',
    '=': 'calculate',
}

# Qt 키 코드 → Session.submit_key 이름
KEY_NAMES = {
    Qt.Key_Return: 'Enter',
    Qt.Key_Enter: 'Enter',
    Qt.Key_Backspace: 'Backspace',
    Qt.Key_Escape: 'Escape',
    Qt.Key_Delete: 'Delete',
}


class CalculatorWindow(QWidget):
    """수식 표시줄 + 버튼 그리드"""

    def __init__(self, session: Session = None) -> None:
        super().__init__()
        self.session = session or Session()
        self.session.on_change = self.render
        self._build_ui()

    def _build_ui(self) -> None:
        self.setWindowTitle('Calculator')
        root = QVBoxLayout()
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(8)
        self.setLayout(root)

        self.display = QLineEdit()
        self.display.setReadOnly(True)
        self.display.setFocusPolicy(Qt.NoFocus)
        self.display.setAlignment(Qt.AlignRight)
        font = QFont(self.display.font())
        font.setPointSize(24)
        self.display.setFont(font)
        root.addWidget(self.display)

        grid = QGridLayout()
        grid.setSpacing(6)
        root.addLayout(grid)

        for r, row in enumerate(BUTTONS + [['=']]):
            for c, label in enumerate(row):
                btn = QPushButton(label)
                btn.setMinimumHeight(56)
                btn.setCursor(Qt.PointingHandCursor)
                # 버튼이 포커스를 가져가면 Enter 가 버튼 클릭이 되므로 막는다
                btn.setFocusPolicy(Qt.NoFocus)
                # clicked는 checked(bool) 인자를 내보내므로 첫 인자를 흡수하도록 작성
                btn.clicked.connect(lambda checked=False, ch=label: self.on_button(ch))
                if label == '=':
                    grid.addWidget(btn, r, 0, 1, 4)
                else:
                    grid.addWidget(btn, r, c)

        self.setFocusPolicy(Qt.StrongFocus)
        self.render(self.session.get_display())
        self.resize(360, 540)

    def on_button(self, label: str) -> None:
        action = BUTTON_ACTIONS.get(label)
        if action is not None:
            self.session.submit_action(action)
        else:
            self.session.submit_char(label)

    def render(self, text) -> None:
        self.display.setText(text.shown)
        self.display.setToolTip(text.full)

    def keyPressEvent(self, event) -> None:
        key = KEY_NAMES.get(event.key(), event.text())
        if key and self.session.submit_key(key):
            event.accept()
            return
        super().keyPressEvent(event)
