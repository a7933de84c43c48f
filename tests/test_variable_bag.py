"""Tests for the VariableBag store."""

import pytest

from uri_templates.exceptions import TemplateCanNotBeExpanded, ExpansionErrorKind
from uri_templates.variables import VariableBag


class TestVariableBag:
    """Test value normalisation and lookup."""

    def test_fetch_absent_returns_none(self):
        bag = VariableBag()
        assert bag.fetch('missing') is None
        assert 'missing' not in bag
        assert bag.is_empty()

    def test_scalars_are_converted_to_strings(self):
        bag = VariableBag({'n': 42, 'f': 1.5, 's': 'text', 't': True, 'no': False})

        assert bag.fetch('n') == '42'
        assert bag.fetch('f') == '1.5'
        assert bag.fetch('s') == 'text'
        assert bag.fetch('t') == 'true'
        assert bag.fetch('no') == 'false'

    def test_none_is_undefined(self):
        bag = VariableBag({'undef': None})
        assert bag.fetch('undef') is None
        assert 'undef' not in bag
        assert len(bag) == 1

    def test_sequences_become_lists(self):
        bag = VariableBag({'list': ('a', 1, True)})
        assert bag.fetch('list') == ['a', '1', 'true']

    def test_mappings_keep_order_and_keys(self):
        bag = VariableBag({'keys': {'semi': ';', 'dot': '.', 3: 4}})

        value = bag.fetch('keys')
        assert list(value.items()) == [('semi', ';'), ('dot', '.'), (3, '4')]

    def test_none_member_becomes_empty_string(self):
        bag = VariableBag({'list': ['a', None]})
        assert bag.fetch('list') == ['a', '']

    def test_nested_list_rejected(self):
        with pytest.raises(TemplateCanNotBeExpanded) as exc_info:
            VariableBag({'nested': ['a', ['b']]})

        assert exc_info.value.kind is ExpansionErrorKind.NESTED_COMPOSITE
        assert exc_info.value.detail == 'nested'

    def test_map_of_lists_rejected(self):
        bag = VariableBag()
        with pytest.raises(TemplateCanNotBeExpanded):
            bag.assign('nested', {'a': ['b']})
        assert 'nested' not in bag

    def test_unsupported_type_rejected(self):
        with pytest.raises(TypeError, match="unsupported type object"):
            VariableBag({'obj': object()})

    @pytest.mark.parametrize('value', ['\ud800', ['ok', '\udfff'], {'\ud800': 'v'}, {'k': '\udc00'}])
    def test_text_without_utf8_form_rejected(self, value):
        bag = VariableBag()
        with pytest.raises(ValueError, match="can not be encoded as UTF-8"):
            bag.assign('s', value)
        assert 's' not in bag

    def test_replace_returns_new_bag(self):
        defaults = VariableBag({'a': '1', 'b': '2'})
        merged = defaults.replace({'b': 'two', 'c': ['x']})

        assert merged.as_dict() == {'a': '1', 'b': 'two', 'c': ['x']}
        assert defaults.as_dict() == {'a': '1', 'b': '2'}

    def test_replace_with_bag(self):
        merged = VariableBag({'a': '1'}).replace(VariableBag({'a': '2'}))
        assert merged.fetch('a') == '2'

    def test_iteration_follows_insertion_order(self):
        bag = VariableBag({'z': '1', 'a': '2'})
        assert list(bag) == ['z', 'a']
