"""
Combinatorics — factorial и биномиальные коэффициенты

Обе функции мемоизированы (src.core.math.memoize) и никогда не бросают
исключений на числовом входе: вне области определения возвращаются
значения-заглушки (NaN, 0, 1), т.к. функции используются внутри
численных конвейеров.

ВАЖНО: binomial вычисляется мультипликативно в фиксированном порядке
(b *= n - i; b /= i + 1). Порядок операций определяет округление float
и должен сохраняться для воспроизводимости.
"""

import math
from typing import Final

from src.core.math.memoize import memoize


# =============================================================================
# ПАРАМЕТРЫ РЕКУРСИИ
# =============================================================================

# Шаг прогрева кэша factorial: глубина рекурсии не превышает шага
FACTORIAL_RECURSION_STEP: Final[int] = 128


@memoize
def factorial(n: int) -> float:
    """
    Факториал n! = n * (n-1) * ... * 2 * 1.

    Рекурсия идёт через мемоизированную обёртку, поэтому подрезультаты
    переиспользуются между вызовами. Для n > FACTORIAL_RECURSION_STEP кэш
    сначала прогревается снизу вверх по цепочке n - j * STEP, так что каждый
    рекурсивный спуск упирается в уже вычисленное значение. Порядок умножений
    тот же, результат побитово совпадает с прямой рекурсией.

    Args:
        n: Целое число (нецелые спускаются ниже нуля и дают NaN)

    Returns:
        n! (float); NaN если n < 0 или n = NaN; inf для n = inf и при переполнении

    Examples:
        >>> factorial(5)
        120.0
        >>> math.isnan(factorial(-1))
        True
        >>> factorial(1000)
        inf
    """
    # n != n: NaN без приведения больших int к float
    if n != n or n < 0:
        return math.nan
    if n == math.inf:
        return math.inf
    if n == 0 or n == 1:
        return 1.0

    if n > FACTORIAL_RECURSION_STEP:
        for j in range(int(n // FACTORIAL_RECURSION_STEP), 0, -1):
            factorial(n - j * FACTORIAL_RECURSION_STEP)

    return n * factorial(n - 1)


@memoize
def binomial(n: int, k: int) -> float:
    """
    Биномиальный коэффициент C(n, k).

    Args:
        n: Размер множества
        k: Размер выборки

    Returns:
        0.0 если k > n или k < 0; 1.0 если k == 0 или k == n;
        иначе мультипликативное накопление

    Examples:
        >>> binomial(5, 2)
        10.0
        >>> binomial(2, 5)
        0.0
    """
    if k > n or k < 0:
        return 0.0
    if k == 0 or k == n:
        return 1.0

    # while вместо range: k может прийти как float (2.0)
    b = 1.0
    i = 0
    while i < k:
        b *= n - i
        b /= i + 1
        i += 1
    return b
