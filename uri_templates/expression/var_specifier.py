"""
Variable specifier parsing.
Handles the name, name:N and name* tokens of RFC 6570 sections 2.3 and 2.4.
"""

import re
from dataclasses import dataclass
from enum import Enum

from ..exceptions import TemplateSyntaxError


class Modifier(str, Enum):
    """Value modifier attached to a variable name."""
    NONE = ""
    PREFIX = ":"
    EXPLODE = "*"


@dataclass(frozen=True)
class VarSpecifier:
    """
    A single variable reference inside an expression.

    Attributes:
        name: Variable name (may contain dots and pct-encoded triplets)
        modifier: Prefix, explode or none
        position: Prefix length, 1..9999 when modifier is PREFIX, otherwise 0
    """
    name: str
    modifier: Modifier = Modifier.NONE
    position: int = 0

    # varname = varchar *( ["."] varchar ), prefix max-length = %x31-39 0*3DIGIT
    SPECIFIER_PATTERN = re.compile(
        r'(?P<name>(?:[A-Za-z0-9_]|%[0-9A-Fa-f]{2})(?:\.?(?:[A-Za-z0-9_]|%[0-9A-Fa-f]{2}))*)'
        r'(?:(?P<prefix>:(?P<position>[1-9][0-9]{0,3}))|(?P<explode>\*))?'
    )

    def __post_init__(self):
        if self.is_prefix and not 1 <= self.position <= 9999:
            raise TemplateSyntaxError.malformed_variable_specifier(f"{self.name}:{self.position}")

    @classmethod
    def parse(cls, specification: str) -> 'VarSpecifier':
        """
        Parse a variable specifier token.

        Args:
            specification: Token such as 'var', 'var:3' or 'var*'

        Returns:
            Parsed VarSpecifier

        Raises:
            TemplateSyntaxError: If the name or the prefix length is invalid
        """
        match = cls.SPECIFIER_PATTERN.fullmatch(specification)
        if not match:
            raise TemplateSyntaxError.malformed_variable_specifier(specification)

        if match.group('prefix'):
            return cls(match.group('name'), Modifier.PREFIX, int(match.group('position')))
        if match.group('explode'):
            return cls(match.group('name'), Modifier.EXPLODE)
        return cls(match.group('name'))

    @property
    def is_prefix(self) -> bool:
        return self.modifier is Modifier.PREFIX

    @property
    def is_explode(self) -> bool:
        return self.modifier is Modifier.EXPLODE

    def to_text(self) -> str:
        if self.is_prefix:
            return f"{self.name}:{self.position}"
        return f"{self.name}{self.modifier.value}"

    def __str__(self) -> str:
        return self.to_text()
