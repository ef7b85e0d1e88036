import pytest

from todoview.htmlrender import check_valid_attribute_name, get_key_value, to_html
from todoview.node import FRAGMENT, Node, element
from todoview.parser import parse_html


def test_get_key_value():
    assert get_key_value('type', 'checkbox') == 'type="checkbox"'
    assert get_key_value('checked', True) == 'checked'
    assert get_key_value('checked', False) is None


def test_boolean_and_class_attributes():
    toggle = element('input', classes=['toggle'], type='checkbox', checked=True, disabled=False)
    assert to_html(toggle) == '<input class="toggle" type="checkbox" checked>'


def test_nested():
    tree = element('ul', element('li', element('label', 'First')), element('li'), classes=['todo-list'])
    assert to_html(tree) == '<ul class="todo-list"><li><label>First</label></li><li></li></ul>'


def test_fragment_renders_children_only():
    fragment = Node(FRAGMENT, children=[element('li', 'One'), element('li', 'Two')])
    assert to_html(fragment) == '<li>One</li><li>Two</li>'


def test_sanitize():
    # user input, as a todo text might be
    injection_attempt = '<script>alert("xss");</script>'

    assert to_html(element('label', injection_attempt)) == \
        '<label>&lt;script&gt;alert(&#34;xss&#34;);&lt;/script&gt;</label>'

    assert to_html(element('input', value=injection_attempt)) == \
        '<input value="&lt;script&gt;alert(&#34;xss&#34;);&lt;/script&gt;">'


def test_parse_round_trip_of_filters():
    source = '<ul class="filters"><li><a class="selected" href="#/">All</a></li></ul>'
    assert to_html(parse_html(source)) == source


def test_invalid_tagname():
    with pytest.raises(ValueError) as excinfo:
        to_html(Node('123'))
    assert str(excinfo.value) == "Invalid tag name: '123'"


def test_invalid_attribute_name():
    with pytest.raises(ValueError) as excinfo:
        check_valid_attribute_name('123')
    assert str(excinfo.value) == "Invalid attribute name: '123'"
