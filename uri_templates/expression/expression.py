"""
Expression parsing and expansion.
Implements the {operator? variable-list} unit of RFC 6570 section 2.2
and the expansion algorithm of section 3.2.
"""

import logging
import re
from dataclasses import dataclass, field
from collections.abc import Mapping
from typing import Any, Tuple, Union

from ..exceptions import TemplateSyntaxError, TemplateCanNotBeExpanded
from ..variables.bag import VariableBag
from .encoding import encode_value
from .operators import Operator, RESERVED_OPERATORS
from .var_specifier import VarSpecifier


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Expression:
    """
    A parsed {...} expression.

    Attributes:
        operator: Expression operator
        specifiers: Variable specifiers in the order they were written
    """
    operator: Operator
    specifiers: Tuple[VarSpecifier, ...]
    variable_names: Tuple[str, ...] = field(init=False, repr=False, compare=False)
    _text: str = field(init=False, repr=False, compare=False)

    # Reserved operators match here and are rejected after the match
    EXPRESSION_PATTERN = re.compile(r'\{(?P<operator>[./;?&=,!@|+#])?(?P<variables>[^}]*)\}')

    def __post_init__(self):
        if not self.specifiers:
            raise TemplateSyntaxError.malformed_variable_specifier('')
        object.__setattr__(self, 'specifiers', tuple(self.specifiers))
        object.__setattr__(
            self, 'variable_names',
            tuple(dict.fromkeys(specifier.name for specifier in self.specifiers))
        )
        object.__setattr__(
            self, '_text',
            '{' + self.operator.value + ','.join(specifier.to_text() for specifier in self.specifiers) + '}'
        )

    @classmethod
    def parse(cls, expression: str) -> 'Expression':
        """
        Parse a single expression.

        Args:
            expression: Expression text including its braces, e.g. '{?x,y}'

        Returns:
            Parsed Expression

        Raises:
            TemplateSyntaxError: If the expression is malformed, uses a reserved
                operator or contains an invalid variable specifier
        """
        match = cls.EXPRESSION_PATTERN.fullmatch(expression)
        if not match:
            raise TemplateSyntaxError.malformed_expression(expression)

        operator = match.group('operator') or ''
        if operator and operator in RESERVED_OPERATORS:
            raise TemplateSyntaxError.reserved_operator(expression)

        specifiers = tuple(
            VarSpecifier.parse(token) for token in match.group('variables').split(',')
        )
        logger.debug(f"Parsed expression {expression} into {len(specifiers)} specifier(s)")
        return cls(Operator(operator), specifiers)

    @property
    def joiner(self) -> str:
        return self.operator.joiner

    @property
    def prefix(self) -> str:
        return self.operator.prefix

    def to_text(self) -> str:
        """Return the canonical expression string."""
        return self._text

    def __str__(self) -> str:
        return self._text

    def expand(self, variables: Union[VariableBag, Mapping, None]) -> str:
        """
        Expand the expression with the given variables.

        Args:
            variables: Variable bag, or a mapping to build one from

        Returns:
            Expanded text, empty when no variable contributed anything

        Raises:
            TemplateCanNotBeExpanded: If a prefix modifier is applied to a list or map
        """
        if not isinstance(variables, VariableBag):
            variables = VariableBag(variables)

        parts = [self._replace(specifier, variables) for specifier in self.specifiers]
        expanded = self.joiner.join(part for part in parts if part != '')
        if expanded == '':
            return expanded

        return self.prefix + expanded

    def _replace(self, specifier: VarSpecifier, variables: VariableBag) -> str:
        """Expand a single variable specifier."""
        value = variables.fetch(specifier.name)
        if value is None:
            return ''

        if isinstance(value, str):
            expanded, use_query = self._replace_string(value, specifier)
        else:
            expanded, use_query = self._replace_composite(value, specifier)

        if not use_query:
            return expanded

        # ';' emits a bare name for empty values, '?' and '&' keep the '='
        if self.joiner != '&' and expanded == '':
            return specifier.name

        return f"{specifier.name}={expanded}"

    def _replace_string(self, value: str, specifier: VarSpecifier) -> Tuple[str, bool]:
        if specifier.is_prefix:
            value = value[:specifier.position]

        return encode_value(value, self.operator.allows_reserved), self.operator.query

    def _replace_composite(self, value: Any, specifier: VarSpecifier) -> Tuple[str, bool]:
        """Expand a list or associative value."""
        if len(value) == 0:
            return '', False

        if specifier.is_prefix:
            raise TemplateCanNotBeExpanded.prefix_on_composite(specifier.name)

        use_query = self.operator.query
        allow_reserved = self.operator.allows_reserved

        if is_list(value):
            items = list(value.values()) if isinstance(value, Mapping) else list(value)
            pairs = [encode_value(item, allow_reserved) for item in items]
            if not specifier.is_explode:
                return ','.join(pairs), use_query

            if use_query:
                # The first item receives its name= from the caller
                pairs = pairs[:1] + [f"{specifier.name}={pair}" for pair in pairs[1:]]
            return self.joiner.join(pairs), use_query

        pairs = [
            (encode_value(str(key), allow_reserved), encode_value(item, allow_reserved))
            for key, item in value.items()
        ]
        if specifier.is_explode:
            # Exploded maps carry their own keys, so no name= is prepended
            return self.joiner.join(f"{key}={item}" for key, item in pairs), False

        return ','.join(f"{key},{item}" for key, item in pairs), use_query


def is_list(value: Any) -> bool:
    """
    Tell whether a composite value is a list rather than an associative map.

    Sequences are lists; a mapping is a list only when its keys are exactly
    0..n-1 in insertion order.
    """
    if not isinstance(value, Mapping):
        return True

    return all(key == index and type(key) is int for index, key in enumerate(value))


def parse_expression(expression: str) -> Expression:
    """Parse a single expression. See Expression.parse."""
    return Expression.parse(expression)
