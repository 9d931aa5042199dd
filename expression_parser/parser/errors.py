"""
Error handling for the expression parser.

Malformed input is reported as a ParseFailure value inside a ParseResult,
never raised. Callers who prefer exceptions can call ParseResult.unwrap(),
which raises ParseError. A broken postfix sequence reaching the assembler is
a defect in the pipeline and raises InvariantViolation.

Author: xwest
"""

from typing import Generic, Optional, Tuple, TypeVar
from dataclasses import dataclass
from enum import Enum


T = TypeVar("T")


class FailureReason(Enum):
    """Why an input string was rejected."""
    UNRECOGNIZED_CHARACTER = "P001"
    UNMATCHED_OPEN_PAREN = "P002"
    UNMATCHED_CLOSE_PAREN = "P003"
    EMPTY_INPUT = "P004"
    MISSING_OPERAND = "P005"
    MISSING_OPERATOR = "P006"

    @property
    def code(self) -> str:
        return self.value


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unrecognized character",
    "P002": "Unmatched opening parenthesis",
    "P003": "Unmatched closing parenthesis",
    "P004": "Empty expression",
    "P005": "Missing operand",
    "P006": "Missing operator",
}


@dataclass(frozen=True)
class ParseFailure:
    """Diagnostic for an input string that could not be parsed."""
    reason: FailureReason
    message: str
    character: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Tuple[str, ...] = ()

    @property
    def code(self) -> str:
        return self.reason.code

    def __str__(self) -> str:
        result = f"ERROR[{self.code}]: {self.message}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class ParseError(Exception):
    """
    Exception raised by ParseResult.unwrap() on a failed parse.

    Carries the ParseFailure describing the rejected input.
    """

    def __init__(self, failure: ParseFailure):
        super().__init__(failure.message)
        self.failure = failure

    def __str__(self) -> str:
        return str(self.failure)


class InvariantViolation(Exception):
    """
    Raised when the assembler receives postfix input that no successful
    conversion could have produced.
    """

    def __init__(self, message: str, postfix: str):
        super().__init__(f"{message} (postfix: {postfix!r})")
        self.postfix = postfix


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Either a parsed value or the failure explaining why there is none."""
    value: Optional[T] = None
    failure: Optional[ParseFailure] = None

    @classmethod
    def success(cls, value: T) -> "ParseResult[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, failure: ParseFailure) -> "ParseResult[T]":
        return cls(failure=failure)

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> T:
        """
        Get the parsed value.

        Raises:
            ParseError: If the parse failed
        """
        if self.failure is not None:
            raise ParseError(self.failure)
        return self.value

    def __bool__(self) -> bool:
        return self.ok


# Helper functions for creating common parse failures

def create_unrecognized_character_failure(char: str) -> ParseFailure:
    """Create a failure for a character outside the token alphabet."""
    if char.isspace():
        help_text = "Whitespace is not allowed; every character must be a token."
        suggestions = ("Remove the whitespace",)
    elif char.isprintable():
        help_text = f"The character '{char}' is not a digit, letter, operator or parenthesis."
        suggestions = ("Use one of the operators: +, -, *",)
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."
        suggestions = ()

    return ParseFailure(
        reason=FailureReason.UNRECOGNIZED_CHARACTER,
        message=f"Unrecognized character: {char!r}",
        character=char,
        help_text=help_text,
        suggestions=suggestions,
    )


def create_unmatched_open_paren_failure() -> ParseFailure:
    """Create a failure for an opening parenthesis that is never closed."""
    return ParseFailure(
        reason=FailureReason.UNMATCHED_OPEN_PAREN,
        message="Unclosed delimiter '('",
        character="(",
        help_text="An opening '(' was never closed.",
        suggestions=("Add a closing ')'",),
    )


def create_unmatched_close_paren_failure() -> ParseFailure:
    """Create a failure for a closing parenthesis with no opening partner."""
    return ParseFailure(
        reason=FailureReason.UNMATCHED_CLOSE_PAREN,
        message="Unexpected closing delimiter ')'",
        character=")",
        help_text="A closing ')' has no matching '('.",
        suggestions=("Remove the ')'", "Add an opening '('"),
    )


def create_empty_input_failure() -> ParseFailure:
    """Create a failure for input that contains no tokens."""
    return ParseFailure(
        reason=FailureReason.EMPTY_INPUT,
        message="Empty expression",
        help_text="The input contains no tokens to parse.",
    )


def create_missing_operand_failure(found: Optional[str] = None) -> ParseFailure:
    """Create a failure for an operator or ')' with no operand before it, or a trailing operator."""
    if found is None:
        message = "Unexpected end of input, expected an operand"
    else:
        message = f"Expected an operand, found {found!r}"

    return ParseFailure(
        reason=FailureReason.MISSING_OPERAND,
        message=message,
        character=found,
        help_text="Every operator needs a digit, letter or parenthesized expression on both sides.",
        suggestions=("Ensure all operators have operands",),
    )


def create_missing_operator_failure(found: str) -> ParseFailure:
    """Create a failure for two operands side by side."""
    return ParseFailure(
        reason=FailureReason.MISSING_OPERATOR,
        message=f"Expected an operator, found {found!r}",
        character=found,
        help_text="Operands must be separated by an operator; numbers are single digits.",
        suggestions=("Insert '*' for multiplication", "Insert '+' or '-'"),
    )
