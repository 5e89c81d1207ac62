"""numtower - exact numeric tower.

Main namespace package:
- numtower.math: Rational, BigDecimal and float/decimal decomposition
- numtower.core: Settings, logging and the error hierarchy
"""

from .math import BigDecimal, Err, Ok, Rational

__version__ = "0.1.0"

__all__ = ["Rational", "BigDecimal", "Ok", "Err"]
