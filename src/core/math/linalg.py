"""
Linear Algebra Containers — Vector & Matrix

Числовые контейнеры с проверкой размерностей. Все вышестоящие численные
алгоритмы (определители, решение СЛАУ, преобразования) строятся на них
и наследуют их гарантии.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Vector.dimension() всегда равен количеству элементов
2. Matrix прямоугольная: все строки одинаковой длины
3. Неудачное построение Matrix никогда не возвращает частично заполненный объект
4. Индексы вне диапазона — ошибка программиста (IndexError), не доменная ошибка
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Final

from src.core.math.exceptions import DimensionMismatchError

logger = logging.getLogger(__name__)

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Общий численный допуск для геометрии и решателей (|pivot| < EPS → вырожденность)
EPS: Final[float] = 1e-6

MATRIX_RAGGED_ROWS_MESSAGE: Final[str] = "Your array contains arrays with different lengths."


def _check_index(index: int, size: int, what: str) -> None:
    # 0 <= index < size, отрицательные индексы не допускаются
    if not 0 <= index < size:
        raise IndexError(f"{what} index {index} out of range for size {size}")


# =============================================================================
# VECTOR
# =============================================================================


class Vector:
    """
    Упорядоченная изменяемая последовательность вещественных чисел.

    Обёртка над собственным списком (не подкласс list): наружу открыты
    только чтение, append и exchange.
    """

    __slots__ = ("_elements",)

    def __init__(self, source: Iterable[float] | None = None):
        """
        Args:
            source: Исходные элементы (копируются поэлементно, порядок сохраняется)
        """
        self._elements: list[float] = []
        if source is not None:
            for value in source:
                self._elements.append(value)

    def dimension(self) -> int:
        """Размерность вектора (количество элементов)"""
        return len(self._elements)

    def append(self, value: float) -> None:
        self._elements.append(value)

    def exchange(self, i: int, j: int) -> None:
        """
        Обмен двух элементов местами.

        Args:
            i: Индекс первого элемента (0 <= i < dimension())
            j: Индекс второго элемента (0 <= j < dimension())

        Raises:
            IndexError: Если индекс вне диапазона
        """
        size = len(self._elements)
        _check_index(i, size, "Vector")
        _check_index(j, size, "Vector")
        self._elements[i], self._elements[j] = self._elements[j], self._elements[i]

    def to_list(self) -> list[float]:
        return list(self._elements)

    def __getitem__(self, index: int) -> float:
        _check_index(index, len(self._elements), "Vector")
        return self._elements[index]

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[float]:
        return iter(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._elements == other._elements

    def __repr__(self) -> str:
        return f"Vector({self._elements!r})"


# =============================================================================
# MATRIX
# =============================================================================


class Matrix:
    """
    Прямоугольная матрица: последовательность строк-векторов.

    Строки принадлежат матрице эксклюзивно и наружу не отдаются:
    чтение только через копии (row, entry, to_list, итерация по кортежам).
    Единственная мутация — exchange_rows.
    """

    __slots__ = ("_rows",)

    def __init__(self, source: Iterable[Sequence[float]] | None = None):
        """
        Построение матрицы из двумерного литерала.

        Проверка инкрементальная, по мере копирования: первая строка задаёт
        ожидаемую длину, первая (по порядку) строка другой длины вызывает
        ошибку.

        Args:
            source: Последовательность строк (последовательностей чисел)

        Raises:
            DimensionMismatchError: Если строки имеют разную длину

        Examples:
            >>> Matrix([[1.0, 2.0], [3.0, 4.0]]).column_count()
            2
            >>> Matrix([[1.0], [2.0, 3.0]])  # doctest: +SKIP
            Traceback (most recent call last):
                ...
            DimensionMismatchError: Matrix has incorrect dimensions: ...
        """
        self._rows: list[Vector] = []
        if source is None:
            return

        expected_length: int | None = None
        for index, elements in enumerate(source):
            if expected_length is not None and len(elements) != expected_length:
                # Частично построенная матрица не должна быть наблюдаема
                self._rows = []
                logger.warning(
                    "Rejected ragged matrix literal: row %d has length %d, expected %d",
                    index,
                    len(elements),
                    expected_length,
                )
                raise DimensionMismatchError(MATRIX_RAGGED_ROWS_MESSAGE)

            self._rows.append(Vector(elements))
            expected_length = len(elements)

    def row_count(self) -> int:
        """Количество строк"""
        return len(self._rows)

    def column_count(self) -> int:
        """Количество столбцов (длина первой строки, 0 для пустой матрицы)"""
        if self._rows:
            return self._rows[0].dimension()
        return 0

    def exchange_rows(self, i: int, j: int) -> None:
        """
        Обмен двух строк местами (перестановка ссылок, без глубокого копирования).

        Raises:
            IndexError: Если индекс строки вне диапазона
        """
        size = len(self._rows)
        _check_index(i, size, "Matrix row")
        _check_index(j, size, "Matrix row")
        self._rows[i], self._rows[j] = self._rows[j], self._rows[i]

    def row(self, i: int) -> tuple[float, ...]:
        _check_index(i, len(self._rows), "Matrix row")
        return tuple(self._rows[i])

    def entry(self, i: int, j: int) -> float:
        _check_index(i, len(self._rows), "Matrix row")
        return self._rows[i][j]

    def to_list(self) -> list[list[float]]:
        return [row.to_list() for row in self._rows]

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        for row in self._rows:
            yield tuple(row)

    def __len__(self) -> int:
        return len(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()!r})"
