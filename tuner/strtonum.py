"""Strict numeric parsing.

The scanners in this module behave like the C ``strtol`` / ``strtod`` family: they read
as much of a number as they can from the start of the text and report where they stopped.
On their own they silently accept partial input (``"12abc"`` scans as 12).

`try_parse()` wraps a scanner and turns any partial parse into a `NumberFormatError`:
the whole text must be consumed, and empty text is rejected. Callers get a `ParseResult`
(or, via `parse_int()` / `parse_float()`, a plain value or a raised error) and never see
the scanner's cursor.

Example:
	```python
	parse_int("42")              # → 42
	parse_int("ff", 16)          # → 255
	parse_float("0.618")         # → 0.618
	try_parse_int("12x").ok      # → False
	```
"""

import dataclasses
import re
import typing

T = typing.TypeVar("T")

Scanner = typing.Callable[..., typing.Tuple[typing.Any, int]]


class NumberFormatError (ValueError):

	"""Raised when text is not, in its entirety, a valid number."""

	def __init__ (self, text: str) -> None:

		super().__init__(f"Invalid number format: {text!r}")
		self.text = text


@dataclasses.dataclass(frozen=True)
class ParseResult (typing.Generic[T]):

	"""
	Either a parsed value or the error that prevented parsing.

	Exactly one of `value` and `error` is meaningful: when `error` is set the
	parse failed and `value` is None.
	"""

	value: typing.Optional[T] = None
	error: typing.Optional[ValueError] = None

	@property
	def ok (self) -> bool:

		"""True when the parse succeeded."""

		return self.error is None

	def unwrap (self) -> T:

		"""Return the value, or raise the carried error."""

		if self.error is not None:
			raise self.error

		return typing.cast(T, self.value)


_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_DIGIT_VALUES: typing.Dict[str, int] = {
	**{char: value for value, char in enumerate(_DIGITS)},
	**{char.upper(): value for value, char in enumerate(_DIGITS)},
}

# Larger than any valid digit in bases up to 36.
_NOT_A_DIGIT = 36

_FLOAT_PATTERN = re.compile(
	r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
	re.IGNORECASE
)


def _digit_value (char: str) -> int:

	return _DIGIT_VALUES.get(char, _NOT_A_DIGIT)


def scan_long (text: str, base: int = 10) -> typing.Tuple[int, int]:

	"""
	Scan a signed integer from the start of `text`.

	Accepts an optional sign and, for base 16 (or base 0), an optional ``0x`` prefix.
	Base 0 picks the base from the prefix: ``0x`` is hexadecimal, a leading ``0`` is
	octal, anything else decimal. Only ASCII digits are recognised and leading
	whitespace is not skipped.

	Returns:
		A tuple of (value, end) where `end` is the index of the first character that was
		not consumed. When no digits could be read the result is (0, 0).

	Raises:
		ValueError: If `base` is not 0 or in the range 2-36.
	"""

	if base != 0 and not 2 <= base <= 36:
		raise ValueError(f"Base must be 0 or between 2 and 36, got {base}")

	pos = 0
	negative = False

	if text[pos:pos + 1] in ("+", "-"):
		negative = text[pos] == "-"
		pos += 1

	if base in (0, 16) and text[pos:pos + 2] in ("0x", "0X") and _digit_value(text[pos + 2:pos + 3]) < 16:
		pos += 2
		base = 16

	elif base == 0:
		base = 8 if text[pos:pos + 1] == "0" else 10

	start = pos
	value = 0

	while pos < len(text):

		digit = _digit_value(text[pos])

		if digit >= base:
			break

		value = value * base + digit
		pos += 1

	if pos == start:
		return 0, 0

	return (-value if negative else value), pos


def scan_double (text: str) -> typing.Tuple[float, int]:

	"""
	Scan a decimal floating-point number from the start of `text`.

	Recognises an optional sign, digits with an optional fractional part, an optional
	exponent, and the special values ``inf``, ``infinity`` and ``nan`` in any case.
	An exponent marker without digits (``"1e"``) is left unconsumed.

	Returns:
		A tuple of (value, end), or (0.0, 0) when no number could be read.
	"""

	match = _FLOAT_PATTERN.match(text)

	if match is None:
		return 0.0, 0

	return float(match.group()), match.end()


def try_parse (scanner: Scanner, text: str, *args: typing.Any) -> ParseResult:

	"""
	Run `scanner` over `text` and require that it consumes every character.

	Parameters:
		scanner: `scan_long`, `scan_double`, or any callable with the same
			``(text, *args) -> (value, end)`` shape.
		text: The string to parse.
		*args: Extra arguments for the scanner, such as the base for `scan_long`.

	Returns:
		A `ParseResult` holding the value, or a `NumberFormatError` when the text is
		empty or has trailing characters the scanner did not consume.
	"""

	if not text:
		return ParseResult(error=NumberFormatError(text))

	value, end = scanner(text, *args)

	if end != len(text):
		return ParseResult(error=NumberFormatError(text))

	return ParseResult(value=value)


def try_parse_int (text: str, base: int = 10) -> ParseResult[int]:

	"""Strictly parse an integer, returning a `ParseResult`."""

	return try_parse(scan_long, text, base)


def try_parse_float (text: str) -> ParseResult[float]:

	"""Strictly parse a float, returning a `ParseResult`."""

	return try_parse(scan_double, text)


def parse_int (text: str, base: int = 10) -> int:

	"""
	Strictly parse an integer.

	Raises:
		NumberFormatError: If `text` is empty or not entirely a number.
	"""

	return try_parse_int(text, base).unwrap()


def parse_float (text: str) -> float:

	"""
	Strictly parse a float.

	Raises:
		NumberFormatError: If `text` is empty or not entirely a number.
	"""

	return try_parse_float(text).unwrap()
