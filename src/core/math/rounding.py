"""
Decimal Rounding — усечение дробной части через текстовое представление

ВАЖНО: round_to_places НЕ является арифметическим округлением (round half up).
Результат получается срезом текста дробной части, поэтому для многих входов
он отличается от интуитивного: round_to_places(3.14159, 2) ≈ 2.15.
Поведение воспроизводится буквально, т.к. вызывающий код может зависеть
от конкретных значений.

Алгоритм round_to_places(num, n):
    z = num - ceil(num)                      (≤ 0, для целых 0)
    s = number_to_text(z)[: n + 3 если z < 0, иначе n + 2]
    return parse_int_prefix(number_to_text(num)) + parse_float_prefix(s)

Арифметический вариант round(num * 10**n) / 10**n намеренно не используется.
"""

import math
import re
from decimal import Decimal
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ТЕКСТОВОГО ФОРМАТА
# =============================================================================

# Десятичная запись используется для порядков в [-6, 21), иначе экспоненциальная
DECIMAL_NOTATION_MIN_POINT: Final[int] = -6
DECIMAL_NOTATION_MAX_POINT: Final[int] = 21

_FLOAT_PREFIX_RE: Final[re.Pattern[str]] = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)
_INT_PREFIX_RE: Final[re.Pattern[str]] = re.compile(r"\s*([+-]?)(\d+)")


# =============================================================================
# ТЕКСТОВОЕ ПРЕДСТАВЛЕНИЕ ЧИСЕЛ
# =============================================================================


def number_to_text(value: float) -> str:
    """
    Каноническое текстовое представление float.

    Кратчайшие цифры, однозначно восстанавливающие значение (как repr),
    но в другой раскладке:
    - ноль (включая -0.0) → "0", NaN → "NaN", ±inf → "Infinity"/"-Infinity"
    - целые без ".0": 100.0 → "100"
    - десятичная запись, пока десятичная точка в [-6, 21): 1e-05 → "0.00001"
    - иначе экспонента со знаком: 1.5e-07 → "1.5e-7", 1e21 → "1e+21"

    Examples:
        >>> number_to_text(-0.25)
        '-0.25'
        >>> number_to_text(1e-7)
        '1e-7'
    """
    if math.isnan(value):
        return "NaN"
    if value == 0:
        return "0"
    if value < 0:
        return "-" + number_to_text(-value)
    if math.isinf(value):
        return "Infinity"

    _, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    k = len(digits)
    # value = 0.digits * 10**point
    point = exponent + k

    if k <= point <= DECIMAL_NOTATION_MAX_POINT:
        return digits + "0" * (point - k)
    if 0 < point <= DECIMAL_NOTATION_MAX_POINT:
        return f"{digits[:point]}.{digits[point:]}"
    if DECIMAL_NOTATION_MIN_POINT < point <= 0:
        return "0." + "0" * (-point) + digits

    power = point - 1
    sign = "+" if power >= 0 else "-"
    mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{mantissa}e{sign}{abs(power)}"


def parse_float_prefix(text: str) -> float:
    """
    Разбор самого длинного префикса, являющегося десятичным числом.

    Examples:
        >>> parse_float_prefix("-0.85")
        -0.85
        >>> parse_float_prefix("1e")
        1.0
        >>> math.isnan(parse_float_prefix("-"))
        True
    """
    match = _FLOAT_PREFIX_RE.match(text)
    if match is None:
        return math.nan
    return float(match.group(1))


def parse_int_prefix(text: str) -> float:
    """
    Разбор ведущего целого префикса (дробная часть и экспонента отбрасываются).

    Examples:
        >>> parse_int_prefix("3.14159")
        3.0
        >>> parse_int_prefix("1e+21")
        1.0
    """
    match = _INT_PREFIX_RE.match(text)
    if match is None:
        return math.nan
    magnitude = float(int(match.group(2)))
    # "-0.5" даёт -0.0
    return -magnitude if match.group(1) == "-" else magnitude


# =============================================================================
# ROUND TO PLACES
# =============================================================================


def round_to_places(num: float, n: int) -> float:
    """
    "Округление" num до n знаков после точки усечением текста.

    Args:
        num: Исходное число
        n: Количество знаков после точки

    Returns:
        Целая часть num (усечённая) плюс усечённый текст (num - ceil(num));
        NaN для NaN/inf входа

    Examples:
        >>> round_to_places(2.0, 3)
        2.0
        >>> round_to_places(3.14159, 2)  # doctest: +SKIP
        2.15
    """
    num = float(num)

    if math.isfinite(num):
        fractional = num - math.ceil(num)
    else:
        fractional = math.nan

    text = number_to_text(fractional)
    length = n + 3 if fractional < 0 else n + 2
    # Отрицательная длина среза даёт пустую строку, а не срез с конца
    text = text[: max(length, 0)]

    z = parse_float_prefix(text)
    t = parse_int_prefix(number_to_text(num))
    return t + z
