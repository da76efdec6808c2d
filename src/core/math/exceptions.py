"""
Linear Algebra Exceptions — Таксономия ошибок матричных операций

Два вида ошибок:
- DimensionMismatchError: нарушена прямоугольность (структурная ошибка)
- SingularMatrixError: вырожденная матрица (численная ошибка, нулевой pivot)

Обе ошибки терминальные: ядро их не перехватывает и не восстанавливается
автоматически. Пользовательская диагностика — строка explain().
"""

from enum import Enum
from typing import ClassVar, Final

# =============================================================================
# DEFAULT PHRASES
# =============================================================================

DIMENSION_MISMATCH_PHRASE: Final[str] = "Matrix has incorrect dimensions"
SINGULAR_MATRIX_PHRASE: Final[str] = "Matrix is singular"


class ErrorKind(str, Enum):
    """Вид ошибки линейной алгебры"""

    DIMENSION_MISMATCH = "dimension_mismatch"
    SINGULAR_MATRIX = "singular_matrix"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class _ExplainedMatrixError(Exception):
    """
    Общая реализация explain() для ошибок матриц.

    Не предназначен для наследования вне этого модуля.
    """

    kind: ClassVar[ErrorKind]
    default_phrase: ClassVar[str]

    def __init__(self, message: str | None = None):
        self._message = message
        super().__init__(self.explain())

    @property
    def message(self) -> str | None:
        """Детализация ошибки (None если не задана)"""
        return self._message

    def explain(self) -> str:
        """
        Человекочитаемое объяснение ошибки.

        Returns:
            "<phrase>: <message>." если message задан, иначе "<phrase>."

        Examples:
            >>> DimensionMismatchError().explain()
            'Matrix has incorrect dimensions.'
            >>> DimensionMismatchError("x").explain()
            'Matrix has incorrect dimensions: x.'
        """
        if self._message is not None:
            return f"{self.default_phrase}: {self._message}."
        return f"{self.default_phrase}."

    def __str__(self) -> str:
        return self.explain()


class DimensionMismatchError(_ExplainedMatrixError):
    """
    Несогласованные размерности.

    Поднимается конструктором Matrix, если строки имеют разную длину.
    """

    kind = ErrorKind.DIMENSION_MISMATCH
    default_phrase = DIMENSION_MISMATCH_PHRASE


class SingularMatrixError(_ExplainedMatrixError):
    """
    Вырожденная матрица.

    Зарезервировано для решателей линейных систем (например, метод Гаусса):
    поднимается, когда pivot численно равен нулю (|pivot| < EPS).
    """

    kind = ErrorKind.SINGULAR_MATRIX
    default_phrase = SINGULAR_MATRIX_PHRASE
