"""Custom exceptions for axaml-outline."""


class AxamlOutlineError(Exception):
    """Base exception for axaml-outline operations."""


class ParseError(AxamlOutlineError):
    """Error during markup scanning."""


class MismatchedTagError(ParseError):
    """Closing tag does not match the element on top of the open stack.

    Only raised when the scanner runs in strict mode.
    """

    def __init__(self, expected: str, found: str, line: int) -> None:
        super().__init__(
            f"Closing tag </{found}> on line {line + 1} does not match <{expected}>"
        )
        self.expected = expected
        self.found = found
        self.line = line


class DocumentTooLargeError(AxamlOutlineError):
    """Document exceeds the configured size limit."""
