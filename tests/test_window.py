from PyQt5.QtCore import QEvent, Qt
from PyQt5.QtGui import QKeyEvent

from exprcalc.display import ELLIPSIS
from exprcalc.session import Session
from exprcalc.window import CalculatorWindow


def press(window, key, text=''):
    window.keyPressEvent(QKeyEvent(QEvent.KeyPress, key, Qt.NoModifier, text))


def make_window(scheduler):
    return CalculatorWindow(Session(scheduler=scheduler))


def test_initial_display(qapp, scheduler):
    w = make_window(scheduler)
    assert w.display.text() == '0'
    assert w.display.toolTip() == ''


def test_buttons_build_expression(qapp, scheduler):
    w = make_window(scheduler)
    for label in ['7', '×', '(', '2', '−', '.', '5', ')']:
        w.on_button(label)
    assert w.session.expression == '7*(2-0.5)'
    w.on_button('=')
    assert w.display.text() == '10.5'


def test_percent_and_clear_buttons(qapp, scheduler):
    w = make_window(scheduler)
    w.on_button('5')
    w.on_button('%')
    assert w.display.text() == '5%'
    w.on_button('⌫')
    assert w.display.text() == '5'
    w.on_button('C')
    assert w.display.text() == '0'


def test_error_display_and_recovery(qapp, scheduler):
    w = make_window(scheduler)
    for label in ['5', '÷', '0', '=']:
        w.on_button(label)
    assert w.display.text() == 'Error'
    scheduler.advance(1200)
    assert w.display.text() == '0'


def test_keyboard(qapp, scheduler):
    w = make_window(scheduler)
    press(w, Qt.Key_8, '8')
    press(w, Qt.Key_X, 'x')
    press(w, Qt.Key_3, '3')
    assert w.display.text() == '8*3'
    press(w, Qt.Key_Return)
    assert w.display.text() == '24'
    press(w, Qt.Key_Backspace)
    assert w.display.text() == '2'
    press(w, Qt.Key_Escape)
    assert w.display.text() == '0'


def test_tooltip_shows_full_expression(qapp, scheduler):
    w = make_window(scheduler)
    for ch in '123456789+123456789+123':
        w.on_button(ch)
    assert w.display.text() == ELLIPSIS + '456789+123456789+123'
    assert w.display.toolTip() == '123456789+123456789+123'
