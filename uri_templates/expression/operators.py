"""
Expression operators and their expansion behaviour.

Implements the operator table of RFC 6570 Appendix A.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


# Recognised by the expression grammar but reserved for future extensions
RESERVED_OPERATORS = '=,!@|'


class Operator(str, Enum):
    """Expression type selected by the first character after '{'."""
    NONE = ""
    RESERVED = "+"
    FRAGMENT = "#"
    LABEL = "."
    PATH = "/"
    PATH_PARAMETER = ";"
    QUERY = "?"
    QUERY_CONTINUATION = "&"

    @property
    def behavior(self) -> 'OperatorBehavior':
        return OPERATOR_TABLE[self]

    @property
    def prefix(self) -> str:
        return OPERATOR_TABLE[self].prefix

    @property
    def joiner(self) -> str:
        return OPERATOR_TABLE[self].joiner

    @property
    def query(self) -> bool:
        return OPERATOR_TABLE[self].query

    @property
    def allows_reserved(self) -> bool:
        """Whether reserved characters are left unencoded (+ and #)."""
        return self in (Operator.RESERVED, Operator.FRAGMENT)


@dataclass(frozen=True)
class OperatorBehavior:
    """
    How an operator assembles its expansion.

    Attributes:
        prefix: Emitted before a non-empty expansion
        joiner: Placed between expanded members
        query: Whether members are emitted as name=value pairs
    """
    prefix: str
    joiner: str
    query: bool


OPERATOR_TABLE: Dict[Operator, OperatorBehavior] = {
    Operator.NONE: OperatorBehavior(prefix='', joiner=',', query=False),
    Operator.RESERVED: OperatorBehavior(prefix='', joiner=',', query=False),
    Operator.FRAGMENT: OperatorBehavior(prefix='#', joiner=',', query=False),
    Operator.LABEL: OperatorBehavior(prefix='.', joiner='.', query=False),
    Operator.PATH: OperatorBehavior(prefix='/', joiner='/', query=False),
    Operator.PATH_PARAMETER: OperatorBehavior(prefix=';', joiner=';', query=True),
    Operator.QUERY: OperatorBehavior(prefix='?', joiner='&', query=True),
    Operator.QUERY_CONTINUATION: OperatorBehavior(prefix='&', joiner='&', query=True),
}

_missing = set(Operator) - set(OPERATOR_TABLE)
if _missing:
    raise RuntimeError(f"Operator table is missing entries for: {sorted(op.value for op in _missing)}")
