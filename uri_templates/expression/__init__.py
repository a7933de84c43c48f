"""
Expression parsing and expansion for RFC 6570 URI templates.
"""

from .operators import Operator, OperatorBehavior, OPERATOR_TABLE, RESERVED_OPERATORS
from .var_specifier import VarSpecifier, Modifier
from .expression import Expression, parse_expression, is_list


__all__ = [
    "Operator",
    "OperatorBehavior",
    "OPERATOR_TABLE",
    "RESERVED_OPERATORS",
    "VarSpecifier",
    "Modifier",
    "Expression",
    "parse_expression",
    "is_list",
]
