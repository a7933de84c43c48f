"""
Full URI template handling.
Splits a template string into literal and expression runs and expands it.
"""

import logging
import re
from collections.abc import Mapping
from typing import List, Optional, Tuple, Union

from .exceptions import TemplateSyntaxError, TemplateCanNotBeExpanded
from .expression import Expression
from .variables import VariableBag


logger = logging.getLogger(__name__)

Part = Union[str, Expression]


class UriTemplate:
    """
    A URI template such as 'https://example.com/{user}/repos{?page,per_page}'.

    Literal text is kept verbatim; each {...} run is parsed into an Expression.
    Default variables are used for any variable the caller does not supply.
    """

    EXPRESSION_PATTERN = re.compile(r'(\{[^}]*\})')

    def __init__(
        self,
        parts: List[Part],
        default_variables: Union[VariableBag, Mapping, None] = None
    ):
        """
        Initialize from already parsed parts. Use UriTemplate.parse for text.

        Args:
            parts: Literal strings and Expressions in template order
            default_variables: Values used when expand() does not supply them
        """
        self._parts: Tuple[Part, ...] = tuple(parts)
        if isinstance(default_variables, VariableBag):
            self._default_variables = default_variables
        else:
            self._default_variables = VariableBag(default_variables)

        names = {}
        for part in self._parts:
            if isinstance(part, Expression):
                names.update(dict.fromkeys(part.variable_names))
        self._variable_names: Tuple[str, ...] = tuple(names)

    @classmethod
    def parse(
        cls,
        template: str,
        default_variables: Union[VariableBag, Mapping, None] = None
    ) -> 'UriTemplate':
        """
        Parse a template string.

        Args:
            template: Template text
            default_variables: Values used when expand() does not supply them

        Returns:
            Parsed UriTemplate

        Raises:
            TemplateSyntaxError: If a brace is unbalanced or an expression is invalid
        """
        parts: List[Part] = []
        for chunk in cls.EXPRESSION_PATTERN.split(template):
            if not chunk:
                continue
            if chunk.startswith('{') and chunk.endswith('}'):
                parts.append(Expression.parse(chunk))
            elif '{' in chunk or '}' in chunk:
                raise TemplateSyntaxError.malformed_template(template)
            else:
                parts.append(chunk)

        logger.debug(f"Parsed template {template!r} into {len(parts)} part(s)")
        return cls(parts, default_variables)

    @property
    def parts(self) -> Tuple[Part, ...]:
        return self._parts

    @property
    def expressions(self) -> Tuple[Expression, ...]:
        return tuple(part for part in self._parts if isinstance(part, Expression))

    @property
    def variable_names(self) -> Tuple[str, ...]:
        """Names of every variable the template references, in first-use order."""
        return self._variable_names

    @property
    def default_variables(self) -> VariableBag:
        return self._default_variables

    def with_default_variables(self, variables: Union[VariableBag, Mapping, None]) -> 'UriTemplate':
        """Return a copy of this template using the given default variables."""
        return UriTemplate(list(self._parts), variables)

    def to_text(self) -> str:
        return ''.join(str(part) for part in self._parts)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"UriTemplate({self.to_text()!r})"

    def expand(self, variables: Union[VariableBag, Mapping, None] = None) -> str:
        """
        Expand the template.

        Args:
            variables: Values that win over the default variables

        Returns:
            Expanded text; undefined variables expand to nothing

        Raises:
            TemplateCanNotBeExpanded: If a prefix modifier meets a list or map
        """
        return self._expand(self._default_variables.replace(variables))

    def expand_strict(self, variables: Union[VariableBag, Mapping, None] = None) -> str:
        """
        Expand the template, requiring every referenced variable to be defined.

        Raises:
            TemplateCanNotBeExpanded: If any variable is undefined, or a prefix
                modifier meets a list or map
        """
        bag = self._default_variables.replace(variables)
        missing = [name for name in self._variable_names if name not in bag]
        if missing:
            raise TemplateCanNotBeExpanded.missing_variables(missing)

        return self._expand(bag)

    def _expand(self, bag: VariableBag) -> str:
        expanded = []
        for part in self._parts:
            if isinstance(part, Expression):
                expanded.append(part.expand(bag))
            else:
                expanded.append(part)
        return ''.join(expanded)


def expand(template: str, variables: Union[VariableBag, Mapping, None] = None) -> str:
    """Parse and expand a template in one call."""
    return UriTemplate.parse(template).expand(variables)
