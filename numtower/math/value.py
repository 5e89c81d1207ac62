"""
Base class for the exact numeric types.

Provides:
- Type promotion hierarchy between the exact types
- The operator surface every exact type implements
- Total ordering built on ``compare_to``
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, ClassVar


class TypePrecedence(IntEnum):
    """
    Type promotion precedence hierarchy.

    Lower values promote to higher values; mixed arithmetic runs in the type
    with the higher precedence.
    """

    INTEGER = 0  # Python int
    BIG_DECIMAL = 1  # Base-10 mantissa * 10^exponent
    RATIONAL = 2  # Exact fraction (every BigDecimal is a Rational)


class ExactNumber(ABC):
    """
    Base class for all exact numeric value objects.

    Subclasses must implement:
    - type_precedence: Class variable defining promotion order
    - All abstract methods

    Note: Concrete subclasses inherit from both BaseModel and ExactNumber,
    e.g., `class Rational(BaseModel, ExactNumber):`. ExactNumber itself does
    not inherit from BaseModel to avoid MRO conflicts.
    """

    type_precedence: ClassVar[TypePrecedence]

    @abstractmethod
    def promote(self, other: ExactNumber) -> ExactNumber:
        """
        Promote this value to the type of ``other`` if ``other`` ranks higher.

        Example:
            BigDecimal(5, -1).promote(Rational(1, 3)) → Rational(5, 10)
        """

    @abstractmethod
    def compare_to(self, other: Any) -> int:
        """Negative, zero or positive, like ``cmp``."""

    @abstractmethod
    def to_string(self) -> str:
        """Convert to human-readable string."""

    def __str__(self) -> str:
        return self.to_string()

    # Arithmetic

    @abstractmethod
    def __add__(self, other: Any) -> ExactNumber:
        pass

    @abstractmethod
    def __radd__(self, other: Any) -> ExactNumber:
        pass

    @abstractmethod
    def __sub__(self, other: Any) -> ExactNumber:
        pass

    @abstractmethod
    def __rsub__(self, other: Any) -> ExactNumber:
        pass

    @abstractmethod
    def __mul__(self, other: Any) -> ExactNumber:
        pass

    @abstractmethod
    def __rmul__(self, other: Any) -> ExactNumber:
        pass

    @abstractmethod
    def __truediv__(self, other: Any) -> ExactNumber:
        pass

    @abstractmethod
    def __rtruediv__(self, other: Any) -> ExactNumber:
        pass

    @abstractmethod
    def __mod__(self, other: Any) -> ExactNumber:
        pass

    @abstractmethod
    def __neg__(self) -> ExactNumber:
        pass

    @abstractmethod
    def __pos__(self) -> ExactNumber:
        pass

    @abstractmethod
    def __abs__(self) -> ExactNumber:
        pass

    # Ordering, all routed through compare_to

    def __lt__(self, other: Any) -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        return self.compare_to(other) >= 0

    # Helper methods for type promotion

    @classmethod
    def should_promote_to(cls, other_type: type[ExactNumber]) -> bool:
        """True if this type should promote to ``other_type``."""
        return cls.type_precedence < other_type.type_precedence

    def promote_types(self, other: ExactNumber) -> tuple[ExactNumber, ExactNumber]:
        """
        Promote both values to a common type.

        Example:
            BigDecimal(5, -1).promote_types(Rational(1, 3)) → (Rational(5, 10), Rational(1, 3))
        """
        if self.type_precedence < other.type_precedence:
            return self.promote(other), other
        elif other.type_precedence < self.type_precedence:
            return self, other.promote(self)
        else:
            return self, other
