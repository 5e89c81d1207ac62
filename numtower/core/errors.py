"""
Numeric exceptions.

Fallible entry points never raise these directly; they wrap them in a
``Result``. Only the convenience "or throw" surface raises.
"""

from typing import Any, Dict, Optional, Tuple


class NumericError(Exception):
    """Base exception for numtower errors"""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DivideByZeroError(NumericError, ZeroDivisionError):
    """Raised when a lossy conversion or a BigDecimal division hits a zero divisor"""

    def __init__(self, operation: str, value: Any = None):
        super().__init__(
            message=f"Cannot {operation}: division by zero",
            details={"operation": operation, "value": str(value)}
        )


class NumericOverflowError(NumericError, OverflowError):
    """Raised when a value does not fit the requested fixed-width target"""

    def __init__(self, value: Any, target: str):
        super().__init__(
            message=f"Value {value} is out of range for {target}",
            details={"value": str(value), "target": target}
        )


class ParseError(NumericError, ValueError):
    """Raised for malformed numeric text"""

    def __init__(
        self,
        text: str,
        span: Tuple[int, int],
        reason: str,
        provider: Any = None,
    ):
        start, end = span
        super().__init__(
            message=f"Could not parse {text!r} into a Rational: {reason} at [{start}:{end}] {text[start:end]!r}",
            details={"text": text, "span": span, "reason": reason, "provider": repr(provider)}
        )
        self.text = text
        self.span = span
        self.reason = reason
        self.provider = provider


class UnsupportedConversionError(NumericError, TypeError):
    """Raised when a conversion source or target kind is not supported"""

    def __init__(self, source: Any, target: Any):
        source_name = getattr(source, "__name__", type(source).__name__)
        target_name = getattr(target, "__name__", str(target))
        super().__init__(
            message=f"Cannot convert {source_name} to {target_name}",
            details={"source": source_name, "target": target_name}
        )
