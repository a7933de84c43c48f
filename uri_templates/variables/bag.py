"""
Variable store consumed by template expansion.
Normalises values into the shapes the expansion engine understands.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional, Union

from ..exceptions import TemplateCanNotBeExpanded


logger = logging.getLogger(__name__)

Scalar = str
Value = Union[None, Scalar, List[Scalar], Dict[Any, Scalar]]


class VariableBag:
    """
    Name-keyed collection of template variables.

    Every stored value is one of:
    - str for scalars (numbers and booleans are converted on assignment)
    - list of str for sequences
    - dict of str for mappings, keys kept as given and order preserved

    Nested composite values are rejected when assigned, so expansion never
    sees them. None means the variable is undefined.
    """

    def __init__(self, variables: Optional[Mapping] = None):
        """
        Initialize the bag.

        Args:
            variables: Initial name -> value mapping
        """
        self._variables: Dict[str, Value] = {}
        for name, value in (variables or {}).items():
            self.assign(name, value)

    def assign(self, name: str, value: Any) -> None:
        """
        Store a variable, normalising its value.

        Args:
            name: Variable name
            value: Scalar, sequence or mapping

        Raises:
            TemplateCanNotBeExpanded: If a list or map member is itself composite
            TypeError: If the value has an unsupported type
            ValueError: If a string can not be encoded as UTF-8
        """
        self._variables[name] = self._normalize(name, value)

    def fetch(self, name: str) -> Value:
        """Return the stored value, or None when the variable is undefined."""
        return self._variables.get(name)

    def _normalize(self, name: str, value: Any) -> Value:
        if value is None:
            return None

        if isinstance(value, (list, tuple)):
            return [self._normalize_member(name, item) for item in value]

        if isinstance(value, Mapping):
            for key in value:
                if isinstance(key, str):
                    self._check_encodable(name, key)
            return {key: self._normalize_member(name, item) for key, item in value.items()}

        return self._normalize_scalar(name, value)

    def _normalize_member(self, name: str, item: Any) -> Scalar:
        if isinstance(item, (list, tuple, Mapping)):
            logger.debug(f"Rejected nested composite value for variable '{name}'")
            raise TemplateCanNotBeExpanded.nested_composite(name)
        if item is None:
            return ''
        return self._normalize_scalar(name, item)

    @staticmethod
    def _normalize_scalar(name: str, value: Any) -> Scalar:
        if isinstance(value, bool):
            return 'true' if value else 'false'
        elif isinstance(value, (int, float, str)):
            return VariableBag._check_encodable(name, str(value))
        else:
            raise TypeError(
                f"Variable '{name}' has unsupported type {type(value).__name__}"
            )

    @staticmethod
    def _check_encodable(name: str, text: str) -> str:
        """Reject text that has no UTF-8 form, such as lone surrogates."""
        try:
            text.encode('utf-8')
        except UnicodeEncodeError:
            raise ValueError(f"Variable '{name}' holds text that can not be encoded as UTF-8") from None
        return text

    def replace(self, variables: Union['VariableBag', Mapping, None]) -> 'VariableBag':
        """
        Return a new bag with the given variables layered over this one.

        Args:
            variables: Values that win over the current ones

        Returns:
            New VariableBag; this bag is left unchanged
        """
        merged = VariableBag()
        merged._variables = dict(self._variables)
        if isinstance(variables, VariableBag):
            merged._variables.update(variables._variables)
        else:
            for name, value in (variables or {}).items():
                merged.assign(name, value)
        return merged

    def as_dict(self) -> Dict[str, Value]:
        return dict(self._variables)

    def is_empty(self) -> bool:
        return not self._variables

    def __contains__(self, name: object) -> bool:
        return self._variables.get(name) is not None

    def __len__(self) -> int:
        return len(self._variables)

    def __iter__(self) -> Iterator[str]:
        return iter(self._variables)

    def __repr__(self) -> str:
        return f"VariableBag({self._variables!r})"
