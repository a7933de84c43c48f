"""RFC 6570 URI Template parsing and expansion.

Basic usage:
    >>> from uri_templates import UriTemplate
    >>> UriTemplate.parse('/search{?q,lang}').expand({'q': 'uri templates', 'lang': 'en'})
    '/search?q=uri%20templates&lang=en'

Single expressions:
    >>> from uri_templates import Expression
    >>> Expression.parse('{+path}').expand({'path': '/foo/bar'})
    '/foo/bar'
"""

from uri_templates.exceptions import (
    UriTemplateError,
    TemplateSyntaxError,
    TemplateCanNotBeExpanded,
    SyntaxErrorKind,
    ExpansionErrorKind,
    ValidationError,
    VariablesValidationError,
)

from uri_templates.expression import (
    Operator,
    OperatorBehavior,
    OPERATOR_TABLE,
    VarSpecifier,
    Modifier,
    Expression,
    parse_expression,
)

from uri_templates.variables import VariableBag

from uri_templates.template import UriTemplate, expand

from uri_templates.loader import VariablesLoader

__version__ = "0.1.0"  # Keep in sync with package version

__all__ = [
    # Expressions
    "Operator",
    "OperatorBehavior",
    "OPERATOR_TABLE",
    "VarSpecifier",
    "Modifier",
    "Expression",
    "parse_expression",
    # Templates
    "UriTemplate",
    "expand",
    # Variables
    "VariableBag",
    "VariablesLoader",
    # Exceptions
    "UriTemplateError",
    "TemplateSyntaxError",
    "TemplateCanNotBeExpanded",
    "SyntaxErrorKind",
    "ExpansionErrorKind",
    "ValidationError",
    "VariablesValidationError",
]
