"""
Memoizer — кэширование результатов чистых функций

Динамическое программирование для рекурсивных функций (factorial, binomial):
результат сохраняется под каноническим ключом, построенным из аргументов,
и повторно не вычисляется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Один кэш на обёртку; разные обёртки кэш не разделяют
2. Кэш создаётся при первом вызове и живёт столько же, сколько обёртка
   (без вытеснения и инвалидации)
3. Ключ: строковые представления позиционных аргументов через ","
4. Аргументы только вещественные числа (иначе (1, 2) и ("1", 2) совпали бы)
5. Структура кэша защищена lock; вычисление идёт вне lock
   (повторное вычисление чистой функции безопасно и допускает рекурсию)
"""

import functools
import logging
import threading
from collections.abc import Callable
from numbers import Real
from typing import Any, Final, Generic, TypeVar

logger = logging.getLogger(__name__)

R = TypeVar("R")

# =============================================================================
# ПАРАМЕТРЫ КЛЮЧА
# =============================================================================

MEMO_KEY_SEPARATOR: Final[str] = ","


def canonical_key(args: tuple[Any, ...]) -> str:
    """
    Канонический ключ кэша для набора позиционных аргументов.

    Raises:
        TypeError: Если аргумент не является вещественным числом

    Examples:
        >>> canonical_key((5, 2))
        '5,2'
    """
    for arg in args:
        if not isinstance(arg, Real):
            raise TypeError(
                f"Memoized functions accept real numbers only, got {type(arg).__name__}: {arg!r}"
            )
    return MEMO_KEY_SEPARATOR.join(str(arg) for arg in args)


# =============================================================================
# MEMOIZED WRAPPER
# =============================================================================


class Memoized(Generic[R]):
    """
    Вызываемая обёртка с приватным кэшем.

    Кэш создаётся лениво, под lock, при первом вызове; до него обёртка
    не держит никакого состояния, кроме самой функции. Прямого доступа
    к кэшу снаружи нет.
    """

    def __init__(self, func: Callable[..., R]):
        self._func = func
        self._cache: dict[str, R] | None = None
        self._lock = threading.Lock()
        self._name = getattr(func, "__name__", repr(func))
        functools.update_wrapper(self, func)

    def __call__(self, *args: Any) -> R:
        key = canonical_key(args)

        with self._lock:
            if self._cache is None:
                self._cache = {}
            elif key in self._cache:
                return self._cache[key]

        logger.debug("Cache miss for %s(%s)", self._name, key)
        result = self._func(*args)

        with self._lock:
            # При гонке первых вызовов сохраняется первый результат
            return self._cache.setdefault(key, result)

    def __repr__(self) -> str:
        return f"<memoized {self._func!r}>"


def memoize(func: Callable[..., R]) -> Memoized[R]:
    """
    Обернуть чистую функцию кэшем.

    Корректность требует, чтобы func была чистой функцией своих
    позиционных аргументов (без скрытого состояния и побочных эффектов).

    Args:
        func: Чистая функция от вещественных аргументов

    Returns:
        Новая Memoized-обёртка; уже обёрнутая функция возвращается как есть

    Examples:
        >>> square = memoize(lambda x: x * x)
        >>> square(3)
        9
    """
    if isinstance(func, Memoized):
        return func
    return Memoized(func)
