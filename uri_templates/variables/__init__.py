"""
Variable store module.
Holds the values substituted into URI template expressions.
"""

from .bag import VariableBag, Value

__all__ = ['VariableBag', 'Value']
