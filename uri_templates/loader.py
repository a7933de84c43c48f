"""Variables file loader with validation."""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, List, Union
import yaml

from uri_templates.exceptions import ValidationError, VariablesValidationError
from uri_templates.variables import VariableBag


logger = logging.getLogger(__name__)


class PreservingLoader(yaml.SafeLoader):
    """YAML loader that keeps 'on'/'off'/'yes'/'no' as strings instead of booleans."""
    pass


# Remove the implicit bool resolvers for the letters that start yes/no/on/off.
# 'true' and 'false' still resolve to booleans.
PreservingLoader.yaml_implicit_resolvers = dict(PreservingLoader.yaml_implicit_resolvers)
for _first in 'oOyYnN':
    if _first in PreservingLoader.yaml_implicit_resolvers:
        PreservingLoader.yaml_implicit_resolvers[_first] = [
            (tag, regexp) for tag, regexp in PreservingLoader.yaml_implicit_resolvers[_first]
            if tag != 'tag:yaml.org,2002:bool'
        ]


class VariablesLoader:
    """Loads template variables from YAML or JSON files with strict validation."""

    SCALAR_TYPES = (str, int, float, bool)

    def __init__(self):
        self.errors: List[ValidationError] = []

    def load(self, path: Union[str, Path]) -> VariableBag:
        """
        Load and validate a variables file.

        Args:
            path: YAML (.yaml/.yml) or JSON (.json) file holding a mapping

        Returns:
            VariableBag with the file's variables

        Raises:
            FileNotFoundError: If the file does not exist
            VariablesValidationError: If the file can not be parsed or holds
                values that can not be used for expansion
        """
        self.errors = []
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Variables file not found: {path}")

        logger.debug(f"Loading variables from {path}")
        try:
            with open(path, 'r', encoding='utf-8') as f:
                if path.suffix == '.json':
                    data = json.load(f)
                else:
                    data = yaml.load(f, Loader=PreservingLoader)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            self._add_error(f"Failed to load variables: {e}")
            self._raise_validation_errors()

        return self.load_data(data)

    def load_data(self, data: Any) -> VariableBag:
        """
        Validate already decoded data and build a VariableBag from it.

        Raises:
            VariablesValidationError: If any value is invalid
        """
        self.errors = []
        if data is None:
            data = {}

        if not isinstance(data, Mapping):
            self._add_error(f"Variables must be a mapping, got {type(data).__name__}")
            self._raise_validation_errors()

        for name, value in data.items():
            if not isinstance(name, str):
                self._add_error(f"Variable names must be strings, got {type(name).__name__}", str(name))
                continue
            self._validate_value(value, name)

        if self.errors:
            self._raise_validation_errors()

        logger.info(f"Loaded {len(data)} variable(s)")
        return VariableBag(data)

    def _validate_value(self, value: Any, path: str):
        if value is None or isinstance(value, self.SCALAR_TYPES):
            return

        if isinstance(value, list):
            for index, item in enumerate(value):
                self._validate_member(item, f"{path}[{index}]")
        elif isinstance(value, dict):
            for key, item in value.items():
                if not isinstance(key, (str, int)):
                    self._add_error(f"Map keys must be strings or integers, got {type(key).__name__}", f"{path}.{key}")
                    continue
                self._validate_member(item, f"{path}.{key}")
        else:
            self._add_error(f"Unsupported value type {type(value).__name__}", path)

    def _validate_member(self, item: Any, path: str):
        if isinstance(item, (list, dict)):
            self._add_error("Nested lists and maps can not be expanded", path)
        elif item is not None and not isinstance(item, self.SCALAR_TYPES):
            self._add_error(f"Unsupported value type {type(item).__name__}", path)

    def _add_error(self, message: str, path: str = ""):
        self.errors.append(ValidationError(message=message, path=path))

    def _raise_validation_errors(self):
        raise VariablesValidationError(self.errors)


def parse_assignments(pairs: List[str]) -> Dict[str, str]:
    """
    Parse NAME=VALUE strings.

    Raises:
        ValueError: If a pair has no '=' or an empty name
    """
    values: Dict[str, str] = {}
    for pair in pairs or []:
        if '=' not in pair:
            raise ValueError(f"Invalid variable format: {pair}. Expected NAME=VALUE")
        name, value = pair.split('=', 1)
        if not name:
            raise ValueError(f"Invalid variable name in: {pair}")
        values[name] = value
    return values
