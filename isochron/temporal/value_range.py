"""The range of valid values for a date-time field.

A ValueRange is described by four numbers: the smallest and largest
possible minimum, and the smallest and largest possible maximum. Most
fields have a fixed range where both pairs are equal; DAY_OF_MONTH is
variable, ``1 - 28/31``, because month length depends on context.
"""

from __future__ import annotations

from isochron.errors import FieldOutOfRangeError

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class ValueRange:
    """The range of valid values for a field.

    Examples:
        >>> ValueRange.of(1, 12)
        ValueRange(1, 12)
        >>> str(ValueRange.of(1, 28, 31))
        '1 - 28/31'
        >>> ValueRange.of(1, 28, 31).is_valid_value(30)
        True
    """

    __slots__ = ("_min_smallest", "_min_largest", "_max_smallest", "_max_largest")

    def __init__(
        self, min_smallest: int, min_largest: int, max_smallest: int, max_largest: int
    ) -> None:
        if min_smallest > min_largest:
            raise ValueError("smallest minimum value must be less than largest minimum value")
        if max_smallest > max_largest:
            raise ValueError("smallest maximum value must be less than largest maximum value")
        if min_largest > max_largest:
            raise ValueError("minimum value must be less than maximum value")
        if min_smallest > max_smallest:
            raise ValueError("minimum value must be less than smallest maximum value")
        self._min_smallest = min_smallest
        self._min_largest = min_largest
        self._max_smallest = max_smallest
        self._max_largest = max_largest

    @classmethod
    def of(cls, *bounds: int) -> ValueRange:
        """Create a range from two, three or four bounds.

        ``of(min, max)`` is a fixed range, ``of(min, max_smallest,
        max_largest)`` has a variable maximum and the four-argument form
        sets every bound.

        Raises:
            ValueError: If the bounds are inconsistent.
        """
        if len(bounds) == 2:
            low, high = bounds
            return cls(low, low, high, high)
        if len(bounds) == 3:
            low, max_smallest, max_largest = bounds
            return cls(low, low, max_smallest, max_largest)
        if len(bounds) == 4:
            return cls(*bounds)
        raise TypeError(f"ValueRange.of() takes 2 to 4 bounds, got {len(bounds)}")

    @property
    def minimum(self) -> int:
        """Return the smallest possible minimum."""
        return self._min_smallest

    @property
    def largest_minimum(self) -> int:
        return self._min_largest

    @property
    def smallest_maximum(self) -> int:
        return self._max_smallest

    @property
    def maximum(self) -> int:
        """Return the largest possible maximum."""
        return self._max_largest

    @property
    def is_fixed(self) -> bool:
        """Return True if both the minimum and maximum are fixed."""
        return (
            self._min_smallest == self._min_largest
            and self._max_smallest == self._max_largest
        )

    @property
    def is_int_value(self) -> bool:
        """Return True if every value in the range fits a signed 32-bit int."""
        return self._min_smallest >= _INT_MIN and self._max_largest <= _INT_MAX

    def is_valid_value(self, value: int) -> bool:
        """Return True if value lies between minimum and maximum."""
        return self._min_smallest <= value <= self._max_largest

    def is_valid_int_value(self, value: int) -> bool:
        """Return True if the range is int-sized and contains value."""
        return self.is_int_value and self.is_valid_value(value)

    def check_valid_value(self, value: int, field: object = None) -> int:
        """Validate value against the range.

        Args:
            value: The value to check.
            field: The field being checked, used in the error message.

        Returns:
            The value, unchanged.

        Raises:
            FieldOutOfRangeError: If the value is outside the range.
        """
        if not self.is_valid_value(value):
            raise FieldOutOfRangeError(self._message(value, field), field, value)
        return value

    def check_valid_int_value(self, value: int, field: object = None) -> int:
        """Validate value and require an int-sized range."""
        if not self.is_valid_int_value(value):
            raise FieldOutOfRangeError(self._message(value, field), field, value)
        return value

    def _message(self, value: int, field: object) -> str:
        if field is not None:
            return f"Invalid value for {field} (valid values {self}): {value}"
        return f"Invalid value (valid values {self}): {value}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueRange):
            return NotImplemented
        return (
            self._min_smallest == other._min_smallest
            and self._min_largest == other._min_largest
            and self._max_smallest == other._max_smallest
            and self._max_largest == other._max_largest
        )

    def __hash__(self) -> int:
        return hash(
            (self._min_smallest, self._min_largest, self._max_smallest, self._max_largest)
        )

    def __repr__(self) -> str:
        if self.is_fixed:
            return f"ValueRange({self._min_smallest}, {self._max_largest})"
        return (
            f"ValueRange({self._min_smallest}, {self._min_largest}, "
            f"{self._max_smallest}, {self._max_largest})"
        )

    def __str__(self) -> str:
        text = str(self._min_smallest)
        if self._min_smallest != self._min_largest:
            text += f"/{self._min_largest}"
        text += f" - {self._max_smallest}"
        if self._max_smallest != self._max_largest:
            text += f"/{self._max_largest}"
        return text


__all__ = ["ValueRange"]
