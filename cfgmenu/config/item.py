"""
Typed configuration items for cfgmenu.

A configuration item maps a display name to a single scalar value. The
value kind is one of a small closed set (bool, uint8, int32, double) and
is fixed for the lifetime of the item.
"""

import logging
import math
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


class TypeMismatchError(TypeError):
    """Raised when an item's value is requested as the wrong kind."""
    pass


class ValueKind(Enum):
    """Supported scalar kinds."""
    BOOL = "bool"
    UINT8 = "uint8"
    INT32 = "int32"
    DOUBLE = "double"


# Python type -> kind, used for inference and typed access.
# bool must be checked before int (bool is an int subclass).
_PYTHON_KINDS = (
    (bool, ValueKind.BOOL),
    (int, ValueKind.INT32),
    (float, ValueKind.DOUBLE),
)

_UINT8_PATTERN = re.compile(r'^[0-9]+$')
_INT32_PATTERN = re.compile(r'^-?[0-9]+$')
_DOUBLE_PATTERN = re.compile(
    r'^-?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][-+]?[0-9]+)?|inf|infinity|nan)$',
    re.IGNORECASE,
)

_BOOL_TRUE_TEXT = ("1", "true")

Scalar = Union[bool, int, float]


def kind_of(value: Any) -> ValueKind:
    """
    Infer the value kind of a Python scalar.

    Args:
        value: A bool, int or float

    Returns:
        Matching ValueKind (int maps to INT32)

    Raises:
        TypeError: If the value is not a supported scalar
    """
    for python_type, kind in _PYTHON_KINDS:
        if isinstance(value, python_type):
            return kind
    raise TypeError(f"Unsupported configuration value type: {type(value).__name__}")


def _as_kind(kind_or_type: Union[ValueKind, type]) -> ValueKind:
    if isinstance(kind_or_type, ValueKind):
        return kind_or_type
    for python_type, kind in _PYTHON_KINDS:
        if kind_or_type is python_type:
            return kind
    raise TypeError(f"Unsupported configuration value type: {kind_or_type!r}")


def _wrap(value: int, bits: int, signed: bool) -> int:
    """Wrap an integer into a fixed-width range like a C cast."""
    span = 1 << bits
    value %= span
    if signed and value >= span >> 1:
        value -= span
    return value


def format_double(value: float) -> str:
    """
    Render a double in its shortest round-trip form.

    Uses the shortest digit string that reads back exactly, written in
    fixed notation or in exponent notation (e+NN / e-NN), whichever is
    shorter. Ties go to fixed notation.

    Example:
        >>> format_double(0.3), format_double(5.0), format_double(1e15)
        ('0.3', '5', '1e+15')
    """
    if not math.isfinite(value):
        return repr(value)

    sign, digits, exponent = Decimal(repr(value)).as_tuple()
    prefix = "-" if sign else ""
    text = "".join(map(str, digits)).rstrip("0")
    if not text:
        return f"{prefix}0"
    exponent += len(digits) - len(text)

    # Exponent of the leading digit
    leading = exponent + len(text) - 1
    mantissa = text[0] + (f".{text[1:]}" if len(text) > 1 else "")
    scientific = f"{mantissa}e{'-' if leading < 0 else '+'}{abs(leading):02d}"

    point = len(text) + exponent
    if exponent >= 0:
        fixed = text + "0" * exponent
    elif point > 0:
        fixed = f"{text[:point]}.{text[point:]}"
    else:
        fixed = "0." + "0" * -point + text

    return prefix + (fixed if len(fixed) <= len(scientific) else scientific)


@dataclass(frozen=True)
class TypedValue:
    """
    A scalar payload tagged with its kind.

    The payload is normalized to the kind on construction, so
    TypedValue(ValueKind.UINT8, 300) holds 44.
    """
    kind: ValueKind
    payload: Scalar

    def __post_init__(self):
        object.__setattr__(self, "payload", self.cast(self.kind, self.payload))

    @staticmethod
    def cast(kind: ValueKind, value: Scalar) -> Scalar:
        """
        Convert a scalar into the representation of a kind.

        Integer kinds truncate toward zero and wrap to their width.

        Raises:
            ValueError: If a non-finite float is cast to an integer kind
        """
        if kind is ValueKind.BOOL:
            return bool(value)
        if kind is ValueKind.DOUBLE:
            return float(value)
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError(f"Cannot convert {value} to {kind.value}")
        if kind is ValueKind.UINT8:
            return _wrap(int(value), 8, signed=False)
        return _wrap(int(value), 32, signed=True)

    def with_payload(self, value: Scalar) -> "TypedValue":
        """Return a value of the same kind holding a new payload."""
        return TypedValue(self.kind, value)

    def parse(self, text: str) -> "TypedValue":
        """
        Parse text into a value of the same kind.

        Booleans are true only for "1" or "true". Numeric kinds require
        their canonical decimal form.

        Returns:
            New TypedValue

        Raises:
            ValueError: If the text is not a valid literal of this kind
        """
        if self.kind is ValueKind.BOOL:
            return TypedValue(self.kind, text in _BOOL_TRUE_TEXT)

        if self.kind is ValueKind.DOUBLE:
            if not _DOUBLE_PATTERN.match(text):
                raise ValueError(f"Invalid double literal: {text!r}")
            number = float(text)
            if math.isinf(number) and "inf" not in text.lower():
                raise ValueError(f"Double literal out of range: {text!r}")
            return TypedValue(self.kind, number)

        if self.kind is ValueKind.UINT8:
            pattern, low, high = _UINT8_PATTERN, 0, 0xFF
        else:
            pattern, low, high = _INT32_PATTERN, -(1 << 31), (1 << 31) - 1

        if not pattern.match(text):
            raise ValueError(f"Invalid {self.kind.value} literal: {text!r}")
        number = int(text)
        if not low <= number <= high:
            raise ValueError(f"{self.kind.value} literal out of range: {text!r}")
        return TypedValue(self.kind, number)

    def __str__(self) -> str:
        if self.kind is ValueKind.BOOL:
            return "true" if self.payload else "false"
        if self.kind is ValueKind.DOUBLE:
            return format_double(self.payload)
        return str(self.payload)


class ConfigItem:
    """
    A named configuration setting holding one typed scalar.

    The kind is inferred from the initial value unless given explicitly
    (uint8 must always be requested explicitly). It never changes; set()
    only replaces the payload.

    Example:
        >>> item = ConfigItem("screen width", 800)
        >>> item.tagname
        'screen-width'
        >>> str(item)
        '800'
    """

    def __init__(self, name: str, value: Scalar = 0, kind: Optional[ValueKind] = None):
        if kind is None:
            kind = kind_of(value)
        self._name = name
        self._value = TypedValue(kind, value)

    @property
    def name(self) -> str:
        """Display name."""
        return self._name

    @property
    def tagname(self) -> str:
        """Name with every space replaced by a hyphen, used as a storage key."""
        return self._name.replace(" ", "-")

    @property
    def kind(self) -> ValueKind:
        return self._value.kind

    @property
    def value(self) -> TypedValue:
        return self._value

    def to_string(self) -> str:
        """Render the value as text (same as str(item))."""
        return str(self._value)

    def to_typed(self, kind_or_type: Union[ValueKind, type]) -> Scalar:
        """
        Get the raw value, checked against the requested kind.

        Args:
            kind_or_type: A ValueKind, or bool/int/float (int means int32)

        Returns:
            Stored value

        Raises:
            TypeMismatchError: If the requested kind is not the active kind
        """
        requested = _as_kind(kind_or_type)
        if requested is not self._value.kind:
            raise TypeMismatchError(
                f"'{self._name}' holds {self._value.kind.value}, "
                f"not {requested.value}"
            )
        return self._value.payload

    def set(self, value: Union[str, Scalar]) -> bool:
        """
        Set a new value from text or from a scalar.

        Text is parsed as the item's kind. Unparsable numeric text is
        ignored and leaves the value unchanged. Scalars are cast to the
        item's kind and always accepted.

        Args:
            value: Text or bool/int/float value

        Returns:
            True if the value was accepted, False if text was rejected
        """
        if isinstance(value, str):
            try:
                self._value = self._value.parse(value)
            except ValueError as e:
                logger.debug(f"Ignoring value for '{self._name}': {e}")
                return False
            return True

        self._value = self._value.with_payload(value)
        return True

    def __bool__(self) -> bool:
        return bool(self._value.payload)

    def __int__(self) -> int:
        return int(self._value.payload)

    def __float__(self) -> float:
        return float(self._value.payload)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"ConfigItem({self._name!r}, {self._value.payload!r}, {self._value.kind})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigItem):
            return NotImplemented
        return self._name == other._name and self._value == other._value

    # Mutable; not usable as a dict key
    __hash__ = None
