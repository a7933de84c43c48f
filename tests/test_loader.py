"""Tests for variables file loading and validation."""

import json
import pytest
import tempfile
import yaml
from pathlib import Path

from uri_templates.loader import VariablesLoader, parse_assignments
from uri_templates.exceptions import VariablesValidationError


class TestVariablesLoader:
    """Test strict validation of variables files."""

    def setup_method(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.workspace = Path(self.temp_dir)
        self.loader = VariablesLoader()

    def write_yaml(self, content) -> Path:
        """Helper to write a YAML variables file."""
        path = self.workspace / "vars.yaml"
        with open(path, 'w') as f:
            yaml.dump(content, f)
        return path

    def test_load_yaml(self):
        path = self.write_yaml({
            'who': 'fred',
            'count': 3,
            'list': ['red', 'green'],
            'keys': {'semi': ';'},
        })

        bag = self.loader.load(path)

        assert bag.fetch('who') == 'fred'
        assert bag.fetch('count') == '3'
        assert bag.fetch('list') == ['red', 'green']
        assert bag.fetch('keys') == {'semi': ';'}

    def test_load_json(self):
        path = self.workspace / "vars.json"
        path.write_text(json.dumps({'x': '1024', 'flag': True}))

        bag = self.loader.load(path)

        assert bag.fetch('x') == '1024'
        assert bag.fetch('flag') == 'true'

    def test_yaml_on_off_stay_strings(self):
        path = self.workspace / "vars.yml"
        path.write_text("mode: on\nanswer: yes\nenabled: true\n")

        bag = self.loader.load(path)

        assert bag.fetch('mode') == 'on'
        assert bag.fetch('answer') == 'yes'
        assert bag.fetch('enabled') == 'true'

    def test_empty_file_gives_empty_bag(self):
        path = self.workspace / "vars.yaml"
        path.write_text("")

        assert self.loader.load(path).is_empty()

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            self.loader.load(self.workspace / "nope.yaml")

    def test_top_level_must_be_mapping(self):
        path = self.write_yaml(['a', 'b'])

        with pytest.raises(VariablesValidationError) as exc_info:
            self.loader.load(path)

        assert exc_info.value.exit_code == 2
        assert any("must be a mapping" in err.message for err in exc_info.value.errors)

    def test_invalid_yaml_reported(self):
        path = self.workspace / "vars.yaml"
        path.write_text("key: [unclosed\n")

        with pytest.raises(VariablesValidationError) as exc_info:
            self.loader.load(path)

        assert "Failed to load variables" in exc_info.value.errors[0].message

    def test_all_errors_collected(self):
        path = self.write_yaml({
            'nested_list': ['a', ['b']],
            'nested_map': {'k': {'inner': 'v'}},
            'ok': 'fine',
        })

        with pytest.raises(VariablesValidationError) as exc_info:
            self.loader.load(path)

        paths = [err.path for err in exc_info.value.errors]
        assert paths == ['nested_list[1]', 'nested_map.k']
        assert "nested_list[1]" in str(exc_info.value)

    def test_non_string_name_rejected(self):
        with pytest.raises(VariablesValidationError) as exc_info:
            self.loader.load_data({1: 'a'})

        assert "Variable names must be strings" in exc_info.value.errors[0].message

    def test_unsupported_value_type(self):
        with pytest.raises(VariablesValidationError) as exc_info:
            self.loader.load_data({'when': object()})

        assert exc_info.value.errors[0].path == 'when'


class TestParseAssignments:
    """Test NAME=VALUE parsing."""

    def test_pairs(self):
        assert parse_assignments(['a=1', 'b=x=y', 'c=']) == {'a': '1', 'b': 'x=y', 'c': ''}

    def test_none_gives_empty(self):
        assert parse_assignments(None) == {}

    def test_missing_equals(self):
        with pytest.raises(ValueError, match="Expected NAME=VALUE"):
            parse_assignments(['novalue'])

    def test_empty_name(self):
        with pytest.raises(ValueError, match="Invalid variable name"):
            parse_assignments(['=value'])
