# calculator_app.py
# Python 3.x, PyQt5
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import argparse
import logging
import sys

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont, QFontMetrics
from PyQt5.QtWidgets import (
    QApplication,
    QWidget,
    QGridLayout,
    QVBoxLayout,
    QPushButton,
    QLineEdit,
    QLabel,
)

from calculator import Calculator, Snapshot

LOG_PATH = 'calculator.log'
WINDOW_SIZE = (360, 560)
BUTTON_HEIGHT = 64
DISPLAY_FONT_SIZE = 32
MIN_DISPLAY_FONT_SIZE = 10
PREVIOUS_FONT_SIZE = 14

# (라벨, 종류, 가로 칸 수)
BUTTONS = [
    [('C', 'function', 1), ('±', 'function', 1), ('%', 'function', 1), ('÷', 'operator', 1)],
    [('7', 'number', 1), ('8', 'number', 1), ('9', 'number', 1), ('×', 'operator', 1)],
    [('4', 'number', 1), ('5', 'number', 1), ('6', 'number', 1), ('−', 'operator', 1)],
    [('1', 'number', 1), ('2', 'number', 1), ('3', 'number', 1), ('+', 'operator', 1)],
    [('0', 'number', 2), ('.', 'number', 1), ('=', 'operator', 1)],
]

BUTTON_STYLES = {
    'number': 'background-color: #333333; color: #FFFFFF;',
    'operator': 'background-color: #FF9F0A; color: #FFFFFF; font-weight: 600;',
    'function': 'background-color: #A5A5A5; color: #000000;',
}

# 키보드 → 키패드 라벨
KEY_LABELS = {
    Qt.Key_Plus: '+',
    Qt.Key_Minus: '−',
    Qt.Key_Asterisk: '×',
    Qt.Key_Slash: '÷',
    Qt.Key_Percent: '%',
    Qt.Key_Period: '.',
    Qt.Key_Comma: '.',
    Qt.Key_Equal: '=',
    Qt.Key_Return: '=',
    Qt.Key_Enter: '=',
    Qt.Key_Escape: 'C',
    Qt.Key_Delete: 'C',
    Qt.Key_F9: '±',
}

logger = logging.getLogger('calculator')


def setup_logger(log_path=LOG_PATH, level=logging.INFO):
    """콘솔과 파일(UTF-8)로 동시에 로그를 남기는 로거를 설정한다."""
    if logger.handlers:
        return logger

    logger.setLevel(level)
    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # 콘솔
    sh = logging.StreamHandler(sys.stdout)
    sh.setLevel(level)
    sh.setFormatter(formatter)
    logger.addHandler(sh)

    # 파일(UTF-8)
    fh = logging.FileHandler(log_path, mode='a', encoding='utf-8')
    fh.setLevel(level)
    fh.setFormatter(formatter)
    logger.addHandler(fh)

    return logger


class CalculatorWindow(QWidget):
    """PyQt5 UI: 버튼/키보드 → Calculator 엔진 연결"""

    def __init__(self, engine=None) -> None:
        super().__init__()
        self.engine = engine if engine is not None else Calculator()
        self.buttons = {}
        self._build_ui()
        self.render(self.engine.snapshot())

    def _build_ui(self) -> None:
        self.setWindowTitle('Calculator')
        self.setStyleSheet('background-color: #121212;')
        root = QVBoxLayout()
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(8)
        self.setLayout(root)

        # 이전 값 + 연산자 줄
        self.previous = QLabel()
        self.previous.setAlignment(Qt.AlignRight)
        self.previous.setStyleSheet('color: #666666;')
        font = QFont(self.previous.font())
        font.setPointSize(PREVIOUS_FONT_SIZE)
        self.previous.setFont(font)
        root.addWidget(self.previous)

        self.display = QLineEdit()
        self.display.setReadOnly(True)
        self.display.setAlignment(Qt.AlignRight)
        self.display.setStyleSheet('color: #FFFFFF; border: none;')
        font = QFont(self.display.font())
        font.setPointSize(DISPLAY_FONT_SIZE)
        self.display.setFont(font)
        root.addWidget(self.display)

        grid = QGridLayout()
        grid.setSpacing(6)
        root.addLayout(grid)

        for r, row in enumerate(BUTTONS):
            c = 0
            for label, kind, span in row:
                btn = QPushButton(label)
                btn.setMinimumHeight(BUTTON_HEIGHT)
                btn.setCursor(Qt.PointingHandCursor)
                btn.setFocusPolicy(Qt.NoFocus)
                btn.setStyleSheet(BUTTON_STYLES[kind])
                # clicked는 checked(bool) 인자를 내보내므로 첫 인자를 흡수하도록 작성
                btn.clicked.connect(lambda checked=False, ch=label: self.on_button(ch))
                grid.addWidget(btn, r, c, 1, span)
                self.buttons[label] = btn
                c += span

        self.resize(*WINDOW_SIZE)

    def on_button(self, ch: str) -> None:
        logger.debug('press %s', ch)
        self.render(self.engine.press(ch))

    def render(self, snap: Snapshot) -> None:
        self.display.setText(snap.display)
        self.previous.setText(snap.previous_text)
        self._fit_display_font()

    def _fit_display_font(self) -> None:
        """긴 결과는 한 줄에 들어가도록 글자 크기를 줄인다."""
        font = QFont(self.display.font())
        size = DISPLAY_FONT_SIZE
        font.setPointSize(size)
        available = self.display_width()
        text = self.display.text()
        while (size > MIN_DISPLAY_FONT_SIZE
               and QFontMetrics(font).horizontalAdvance(text) > available):
            size -= 1
            font.setPointSize(size)
        self.display.setFont(font)

    def display_width(self) -> int:
        # 바깥 여백 12 + 12, 입력창 내부 여백 8
        return self.width() - 32

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._fit_display_font()

    def keyPressEvent(self, event) -> None:
        text = event.text()
        if len(text) == 1 and text in '0123456789':
            self.on_button(text)
        elif event.key() in KEY_LABELS:
            self.on_button(KEY_LABELS[event.key()])
        else:
            super().keyPressEvent(event)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='키패드 사칙연산 계산기를 실행합니다.'
    )
    parser.add_argument('--log', default=LOG_PATH,
                        help=f'로그 파일 경로(기본값: {LOG_PATH})')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='로그 레벨(기본값: INFO)')
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    setup_logger(args.log, getattr(logging, args.log_level))
    logger.info('[시작] 계산기 실행')

    app = QApplication(sys.argv[:1])
    w = CalculatorWindow()
    w.show()
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
