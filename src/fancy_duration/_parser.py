"""Fancy duration text parser - Lark grammar plus an Interpreter that validates terms."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedInput
from lark.visitors import Interpreter

from fancy_duration._constants import (
    DEFAULT_MAX_INPUT_LENGTH,
    MAX_EXPONENT,
    NANOS_PER_SECOND,
)
from fancy_duration._errors import (
    ERR_MSG_EMPTY,
    ERR_MSG_EXPONENT_TOO_LARGE,
    ERR_MSG_FRACTIONAL_UNIT,
    ERR_MSG_INPUT_TOO_LONG,
    ERR_MSG_INVALID_FORMAT,
    DuplicateUnitError,
    EmptyInputError,
    InvalidFormatError,
    UnknownUnitError,
)
from fancy_duration._formatter import Term, from_magnitude, seconds_count
from fancy_duration.units import SECONDS, UnitSpec, unit_for_symbol

_NUMBER = r"[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?"
_SYMBOL = r"[a-zA-Zµμ]+"

_GRAMMAR = rf"""
duration: SIGN? term+
term: TERM

SIGN: "-"
TERM: /{_NUMBER}{_SYMBOL}/

%import common.WS
%ignore WS
"""

# Splits a TERM token the same way the lexer matched it
_TERM_RE = re.compile(rf"({_NUMBER})({_SYMBOL})")

_parser = Lark(_GRAMMAR, start="duration", parser="lalr")


@dataclass(frozen=True)
class ParsedDuration:
    """Validated terms of a duration string, in input order."""

    negative: bool
    terms: list[Term] = field(default_factory=list)


class TermCollector(Interpreter):
    """Walks a parsed duration tree, validating and accumulating terms."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._negative = False
        self._terms: list[Term] = []
        self._seen: set[UnitSpec] = set()
        self._seconds = 0
        self._nanos = 0

    @property
    def parsed(self) -> ParsedDuration:
        return ParsedDuration(negative=self._negative, terms=list(self._terms))

    @property
    def times(self) -> tuple[int, int]:
        """Signed, floor-normalized (seconds, nanos) of everything collected."""
        extra, nanos = divmod(self._nanos, NANOS_PER_SECOND)
        return from_magnitude(self._negative, self._seconds + extra, nanos)

    # ---- Tree handlers ----

    def duration(self, tree: Tree) -> None:
        for child in tree.children:
            if isinstance(child, Token) and child.type == "SIGN":
                self._negative = True
            else:
                self.visit(child)

    def term(self, tree: Tree) -> None:
        token = tree.children[0]
        m = _TERM_RE.fullmatch(str(token))
        if m is None:
            raise InvalidFormatError(
                ERR_MSG_INVALID_FORMAT,
                f"malformed term {str(token)!r} in {self._text!r}",
            )
        number, symbol = m.groups()

        unit = unit_for_symbol(symbol)
        if unit is None:
            raise UnknownUnitError(
                symbol, f"unknown unit {symbol!r} in term {str(token)!r}"
            )
        if unit in self._seen:
            raise DuplicateUnitError(
                unit.symbol,
                f"unit {unit.symbol!r} repeated at column {token.column} of {self._text!r}",
            )
        self._seen.add(unit)

        if unit is SECONDS:
            self._add_seconds(number)
        elif not number.isdigit():
            raise InvalidFormatError(
                ERR_MSG_FRACTIONAL_UNIT,
                f"non-integer count {number!r} for unit {unit.symbol!r}",
            )
        else:
            self._add_whole(unit, int(number))

    # ---- Accumulation ----

    def _add_whole(self, unit: UnitSpec, count: int) -> None:
        if unit.is_subsecond:
            self._nanos += count * unit.nanos_per_unit
        else:
            self._seconds += count * unit.seconds_per_unit
        self._terms.append(Term(unit, count))

    def _add_seconds(self, number: str) -> None:
        total_nanos = _seconds_to_nanos(number)
        seconds, nanos = divmod(total_nanos, NANOS_PER_SECOND)
        self._seconds += seconds
        self._nanos += nanos
        count = int(number) if number.isdigit() else seconds_count(seconds, nanos)
        self._terms.append(Term(SECONDS, count))


def _seconds_to_nanos(number: str) -> int:
    """Convert a decimal or scientific seconds count to nanoseconds, truncating."""
    mantissa, _, exponent = number.lower().partition("e")
    whole, _, fraction = mantissa.partition(".")
    exp = int(exponent) if exponent else 0
    if abs(exp) > MAX_EXPONENT:
        raise InvalidFormatError(
            ERR_MSG_EXPONENT_TOO_LARGE,
            f"exponent {exp} exceeds limit {MAX_EXPONENT} in {number!r}",
        )
    digits = int(whole + fraction)
    shift = 9 + exp - len(fraction)
    if shift >= 0:
        return digits * 10**shift
    return digits // 10**-shift


def _collect(text: str, max_length: int | None) -> TermCollector:
    if max_length is None:
        max_length = DEFAULT_MAX_INPUT_LENGTH

    stripped = text.strip()
    if not stripped:
        raise EmptyInputError(ERR_MSG_EMPTY, f"empty duration text: {text!r}")
    if len(stripped) > max_length:
        raise InvalidFormatError(
            ERR_MSG_INPUT_TOO_LONG,
            f"duration text length {len(stripped)} exceeds limit {max_length}",
        )

    try:
        tree = _parser.parse(stripped)
    except UnexpectedInput as e:
        raise InvalidFormatError(
            ERR_MSG_INVALID_FORMAT,
            f"cannot parse duration {stripped!r} at column {e.column}",
            wrapped=e,
        ) from e

    collector = TermCollector(stripped)
    collector.visit(tree)
    return collector


def parse_terms(text: str, *, max_length: int | None = None) -> ParsedDuration:
    """Parse fancy duration text into its sign and validated terms.

    Terms are returned in input order; fractional seconds counts are
    ``Decimal`` values truncated to nanosecond precision.

    Args:
        text: The duration text, e.g. ``"3m 5s"`` or ``"-1.5s"``.
        max_length: Maximum accepted text length. Defaults to 1024.

    Raises:
        EmptyInputError: If the text is blank.
        InvalidFormatError: If the text does not follow the grammar.
        UnknownUnitError: If a unit symbol is not recognized.
        DuplicateUnitError: If a unit appears more than once.
    """
    return _collect(text, max_length).parsed


def parse_to_ns(text: str, *, max_length: int | None = None) -> tuple[int, int]:
    """Parse fancy duration text into a floor-normalized (seconds, nanos) pair.

    ``nanos`` is the sub-second remainder, not the whole duration in
    nanoseconds, and always lies in ``[0, 1_000_000_000)``.

    Raises:
        ParseError: Any of the errors raised by :func:`parse_terms`.
    """
    return _collect(text, max_length).times
