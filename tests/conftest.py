import os

import pytest

# 화면 없이 Qt 위젯 생성
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


@pytest.fixture
def calc():
    """Fresh calculator engine."""
    from calculator import Calculator
    return Calculator()


def press_all(calc, labels):
    """Feed keypad labels one by one, return the last snapshot."""
    snap = calc.snapshot()
    for label in labels:
        snap = calc.press(label)
    return snap
