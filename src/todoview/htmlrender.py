from collections.abc import Iterable
import re

from markupsafe import Markup, escape

from todoview.node import FRAGMENT, Node


attribute_name_re = re.compile(r'^[a-zA-Z_][a-zA-Z0-9_\-\.:]*$')
tagname_re = re.compile(r'^(?!.*--)(?!-?[0-9])[\w-]+(-[\w-]+|[a-zA-Z])?$')


def check_valid_tagname(tagname: str):
    if not tagname_re.match(tagname):
        raise ValueError(f'Invalid tag name: {tagname!r}')


def check_valid_attribute_name(attribute_name: str):
    if not attribute_name_re.match(attribute_name):
        raise ValueError(f'Invalid attribute name: {attribute_name!r}')


def get_key_value(k: str, v: str | bool) -> Markup | None:
    check_valid_attribute_name(k)
    match v:
        # Only show boolean keys if True
        case True:
            return Markup(k)
        case False | None:
            return None
        case _:
            return Markup('{}="{}"').format(Markup(k), v)


def get_attrs(node: Node) -> Iterable[Markup]:
    if node.classes:
        yield get_key_value('class', ' '.join(node.classes))
    for k, v in node.attrs.items():
        setting = get_key_value(k, v)
        if setting is not None:
            yield setting


def iter_html(node: Node) -> Iterable[Markup]:
    if node.tag != FRAGMENT:
        check_valid_tagname(node.tag)
        attrs = ' '.join(get_attrs(node))
        yield Markup(f'<{node.tag} {attrs}>' if attrs else f'<{node.tag}>')
        if node.is_void:
            return

    for child in node.children:
        match child:
            case Node() as n:
                yield from iter_html(n)
            case _:
                yield escape(child)

    if node.tag != FRAGMENT:
        yield Markup(f'</{node.tag}>')


def to_html(node: Node) -> Markup:
    """Serialize a node tree, escaping all text and attribute values."""
    return Markup('').join(iter_html(node))
