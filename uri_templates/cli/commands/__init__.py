"""CLI command handlers."""

from .expand import expand_template, list_variables

__all__ = ['expand_template', 'list_variables']
