"""URI template exceptions."""

from enum import Enum
from typing import List, Union
from dataclasses import dataclass


class SyntaxErrorKind(str, Enum):
    """Reason a template or expression failed to parse."""
    MALFORMED_EXPRESSION = "malformed_expression"
    RESERVED_OPERATOR = "reserved_operator"
    MALFORMED_VARIABLE_SPECIFIER = "malformed_variable_specifier"


class ExpansionErrorKind(str, Enum):
    """Reason a parsed template could not be expanded."""
    PREFIX_ON_COMPOSITE = "prefix_on_composite"
    NESTED_COMPOSITE = "nested_composite"
    MISSING_VARIABLES = "missing_variables"


class UriTemplateError(Exception):
    """Base class for every error raised by the package."""


class TemplateSyntaxError(UriTemplateError, ValueError):
    """Raised while parsing when the text is not a valid template or expression.

    Attributes:
        kind: What was wrong with the text
        detail: The offending literal text
    """

    def __init__(self, kind: SyntaxErrorKind, detail: str, message: str):
        self.kind = kind
        self.detail = detail
        super().__init__(message)

    @classmethod
    def malformed_expression(cls, expression: str) -> 'TemplateSyntaxError':
        return cls(
            SyntaxErrorKind.MALFORMED_EXPRESSION,
            expression,
            f'The expression "{expression}" is invalid.'
        )

    @classmethod
    def malformed_template(cls, template: str) -> 'TemplateSyntaxError':
        return cls(
            SyntaxErrorKind.MALFORMED_EXPRESSION,
            template,
            f'The template "{template}" contains invalid expressions.'
        )

    @classmethod
    def reserved_operator(cls, expression: str) -> 'TemplateSyntaxError':
        return cls(
            SyntaxErrorKind.RESERVED_OPERATOR,
            expression,
            f'The operator used in the expression "{expression}" is reserved.'
        )

    @classmethod
    def malformed_variable_specifier(cls, specifier: str) -> 'TemplateSyntaxError':
        if specifier == '':
            message = 'No variable specification was included in the expression.'
        else:
            message = f'The variable specification "{specifier}" is invalid.'
        return cls(SyntaxErrorKind.MALFORMED_VARIABLE_SPECIFIER, specifier, message)


class TemplateCanNotBeExpanded(UriTemplateError):
    """Raised when variables can not be substituted into a parsed template.

    Attributes:
        kind: Why the expansion failed
        detail: Variable name, or names, involved
    """

    def __init__(self, kind: ExpansionErrorKind, detail: Union[str, List[str]], message: str):
        self.kind = kind
        self.detail = detail
        super().__init__(message)

    @classmethod
    def prefix_on_composite(cls, name: str) -> 'TemplateCanNotBeExpanded':
        return cls(
            ExpansionErrorKind.PREFIX_ON_COMPOSITE,
            name,
            f'The ":" modifier can not be applied on "{name}" since it is a list of values.'
        )

    @classmethod
    def nested_composite(cls, name: str) -> 'TemplateCanNotBeExpanded':
        return cls(
            ExpansionErrorKind.NESTED_COMPOSITE,
            name,
            f'The "{name}" variable can not be a nested list.'
        )

    @classmethod
    def missing_variables(cls, names: List[str]) -> 'TemplateCanNotBeExpanded':
        return cls(
            ExpansionErrorKind.MISSING_VARIABLES,
            list(names),
            f"Undefined variables: {list(names)}"
        )


@dataclass
class ValidationError:
    """Single validation error found in a variables file."""
    message: str
    path: str = ""
    exit_code: int = 2


class VariablesValidationError(UriTemplateError):
    """Raised when a variables file fails validation.

    The loader collects every problem before raising, allowing the CLI to
    report them all and map to the validation exit code.
    """

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors
        self.exit_code = 2

        messages = []
        for error in errors:
            if error.path:
                messages.append(f"Validation error at '{error.path}': {error.message}")
            else:
                messages.append(f"Validation error: {error.message}")

        super().__init__("\n".join(messages))
