# calculator.py
# Python 3.x
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import logging
import math
import re
from decimal import Decimal
from enum import Enum
from typing import NamedTuple, Optional, Union

logger = logging.getLogger('calculator')

INITIAL_DISPLAY = '0'
DECIMAL_POINT = '.'
DIGITS = '0123456789'

# parseFloat 처럼 앞부분의 숫자만 읽는다
_NUMBER_PREFIX = re.compile(
    r'\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))'
)


class Operation(Enum):
    """대기 연산자. 값은 키패드 기호"""

    ADD = '+'
    SUBTRACT = '−'
    MULTIPLY = '×'
    DIVIDE = '÷'

    def apply(self, a: float, b: float) -> float:
        if self is Operation.ADD:
            return a + b
        if self is Operation.SUBTRACT:
            return a - b
        if self is Operation.MULTIPLY:
            return a * b
        # 0 나누기는 막지 않는다: Infinity / NaN 그대로 표시
        if b == 0:
            if a == 0 or math.isnan(a):
                return math.nan
            return math.copysign(math.inf, a) * math.copysign(1.0, b)
        return a / b

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Operation':
        # ASCII 키보드 입력도 허용
        mapping = {
            '+': cls.ADD,
            '−': cls.SUBTRACT, '-': cls.SUBTRACT,
            '×': cls.MULTIPLY, '*': cls.MULTIPLY,
            '÷': cls.DIVIDE, '/': cls.DIVIDE,
        }
        try:
            return mapping[symbol]
        except KeyError:
            raise ValueError(f'unknown operator: {symbol!r}') from None


def parse_number(text: str) -> float:
    """표시 문자열을 float로. 숫자로 시작하지 않으면 NaN"""
    if text.strip().lstrip('+-').startswith('NaN'):
        return math.nan
    m = _NUMBER_PREFIX.match(text)
    if not m:
        return math.nan
    return float(m.group(1))


def format_number(x: float) -> str:
    """숫자 → 표시 문자열 (반올림 없음, 정수는 소수점 없이)"""
    if math.isnan(x):
        return 'NaN'
    if math.isinf(x):
        return 'Infinity' if x > 0 else '-Infinity'
    if x == 0:
        return '0'

    # repr은 왕복 가능한 최단 자릿수를 준다
    sign, digit_tuple, exponent = Decimal(repr(x)).as_tuple()
    digits = ''.join(str(d) for d in digit_tuple)
    stripped = digits.rstrip('0')
    exponent += len(digits) - len(stripped)
    digits = stripped

    k = len(digits)
    n = exponent + k  # 소수점 위치
    if k <= n <= 21:
        s = digits + '0' * (n - k)
    elif 0 < n <= 21:
        s = digits[:n] + '.' + digits[n:]
    elif -6 < n <= 0:
        s = '0.' + '0' * (-n) + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else digits[0] + '.' + digits[1:]
        s = f'{mantissa}e{"+" if e >= 0 else "-"}{abs(e)}'
    return '-' + s if sign else s


class Snapshot(NamedTuple):
    """한 번의 입력 후 화면에 그릴 값"""

    display: str
    pending_operand: str
    pending_operation: Optional[Operation]

    @property
    def previous_text(self) -> str:
        # '이전 값 + 연산자' 줄
        if not self.pending_operand:
            return ''
        if self.pending_operation is None:
            return self.pending_operand
        return f'{self.pending_operand} {self.pending_operation.value}'


class CalculatorState:
    """엔진이 소유하는 상태 레코드"""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.display = INITIAL_DISPLAY
        self.pending_operand = ''
        self.pending_operation: Optional[Operation] = None
        self.awaiting_new_entry = False
        # 연속 '=' 용
        self.repeat_operation: Optional[Operation] = None
        self.repeat_operand = ''

    def forget_repeat(self) -> None:
        self.repeat_operation = None
        self.repeat_operand = ''

    def __repr__(self) -> str:
        return (f'CalculatorState(display={self.display!r}, '
                f'pending_operand={self.pending_operand!r}, '
                f'pending_operation={self.pending_operation}, '
                f'awaiting_new_entry={self.awaiting_new_entry})')


class Calculator:
    """연산 엔진: 숫자/연산자/=/%/부호/초기화 입력을 상태에 반영"""

    def __init__(self, state: Optional[CalculatorState] = None) -> None:
        self.state = state if state is not None else CalculatorState()

    def snapshot(self) -> Snapshot:
        s = self.state
        return Snapshot(s.display, s.pending_operand, s.pending_operation)

    def display_text(self) -> str:
        return self.state.display

    # 입력 API
    def press_digit(self, d: str) -> Snapshot:
        if d == DECIMAL_POINT:
            return self.press_decimal_point()
        if len(d) != 1 or d not in DIGITS:
            raise ValueError(f'not a digit: {d!r}')

        s = self.state
        s.forget_repeat()
        if s.awaiting_new_entry:
            s.display = d
            s.awaiting_new_entry = False
        elif s.display == INITIAL_DISPLAY:
            s.display = d
        else:
            s.display += d
        return self.snapshot()

    def press_decimal_point(self) -> Snapshot:
        s = self.state
        s.forget_repeat()
        if s.awaiting_new_entry:
            s.display = INITIAL_DISPLAY + DECIMAL_POINT
            s.awaiting_new_entry = False
        elif DECIMAL_POINT not in s.display:
            s.display += DECIMAL_POINT
        return self.snapshot()

    def press_operator(self, op: Union[Operation, str]) -> Snapshot:
        if not isinstance(op, Operation):
            op = Operation.from_symbol(op)

        s = self.state
        if s.pending_operation is not None and not s.awaiting_new_entry:
            # 두 번째 피연산자가 입력됐으면 먼저 계산
            self._evaluate()
        else:
            s.pending_operand = s.display
        s.pending_operation = op
        s.awaiting_new_entry = True
        s.forget_repeat()
        return self.snapshot()

    def press_equals(self) -> Snapshot:
        s = self.state
        if s.pending_operation is not None:
            s.repeat_operation = s.pending_operation
            s.repeat_operand = s.display
            self._evaluate()
            s.pending_operation = None
            s.awaiting_new_entry = True
        elif s.repeat_operation is not None:
            # 새 입력 없이 '=' 반복: 마지막 연산을 결과에 다시 적용
            s.pending_operand = s.display
            s.pending_operation = s.repeat_operation
            s.display = s.repeat_operand
            self._evaluate()
            s.pending_operation = None
            s.awaiting_new_entry = True
        return self.snapshot()

    def press_percent(self) -> Snapshot:
        s = self.state
        s.forget_repeat()
        s.display = format_number(parse_number(s.display) / 100)
        return self.snapshot()

    def press_toggle_sign(self) -> Snapshot:
        s = self.state
        s.forget_repeat()
        s.display = format_number(-1 * parse_number(s.display))
        return self.snapshot()

    def press_clear(self) -> Snapshot:
        self.state.reset()
        return self.snapshot()

    def press(self, label: str) -> Snapshot:
        """키패드 라벨 하나를 해당 입력으로 전달"""
        if label in ('C', 'AC'):
            return self.press_clear()
        if label in ('±', '+/-'):
            return self.press_toggle_sign()
        if label == '%':
            return self.press_percent()
        if label == '=':
            return self.press_equals()
        if label == DECIMAL_POINT:
            return self.press_decimal_point()
        if len(label) == 1 and label in DIGITS:
            return self.press_digit(label)
        return self.press_operator(label)

    # 내부 유틸
    def _evaluate(self) -> None:
        s = self.state
        if s.pending_operation is None:
            return
        current = parse_number(s.display)
        previous = parse_number(s.pending_operand)
        result = s.pending_operation.apply(previous, current)
        text = format_number(result)
        logger.debug('%s %s %s = %s', s.pending_operand,
                     s.pending_operation.value, s.display, text)
        if not math.isfinite(result):
            logger.warning('non-finite result: %s %s %s -> %s', s.pending_operand,
                           s.pending_operation.value, s.display, text)
        s.display = text
        s.pending_operand = text
