from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

"""
A toolkit-independent stand-in for a DOM element:

tag         'li', 'input', or '#fragment' for a bare list of children
classes     ordered set of class flags, rendered as the class attribute
attrs       everything else; True means a boolean attribute is present,
            False that it is absent (eg checked, disabled)
children    text (str) and nested nodes, in document order

Views receive a Node, mutate its descendants and hand the same Node back,
so tests can query it the way a browser test would query an element.
"""

FRAGMENT = '#fragment'

# Elements that never have content or an end tag
VOID_ELEMENTS = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'source', 'track', 'wbr',
})


@dataclass(eq=True)
class Node:
    tag: str
    classes: list[str] = field(default_factory=list)
    attrs: dict[str, str | bool] = field(default_factory=dict)
    children: list[str | Node] = field(default_factory=list)

    def __post_init__(self):
        # classes behave as a set that remembers insertion order
        self.classes = list(dict.fromkeys(self.classes))

    def __repr__(self) -> str:
        parts = [self.tag]
        parts.extend(f'.{name}' for name in self.classes)
        parts.extend(f'[{k}={v!r}]' for k, v in self.attrs.items())
        return f'<Node {"".join(parts)} children={len(self.children)}>'

    @property
    def is_void(self) -> bool:
        return self.tag in VOID_ELEMENTS

    # class flags

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def add_class(self, name: str) -> None:
        if name not in self.classes:
            self.classes.append(name)

    def remove_class(self, name: str) -> None:
        if name in self.classes:
            self.classes.remove(name)

    def toggle_class(self, name: str, force: bool | None = None) -> bool:
        """Flip a class flag, or set it to ``force`` when given.

        Returns whether the class is present afterwards, like
        ``DOMTokenList.toggle``.
        """
        present = not self.has_class(name) if force is None else force
        if present:
            self.add_class(name)
        else:
            self.remove_class(name)
        return present

    # attributes

    def get_attribute(self, name: str) -> str | bool | None:
        if name == 'class':
            return ' '.join(self.classes) if self.classes else None
        return self.attrs.get(name)

    def set_attribute(self, name: str, value: str | bool) -> None:
        if name == 'class':
            self.classes = list(dict.fromkeys(str(value).split()))
        else:
            self.attrs[name] = value

    @property
    def checked(self) -> bool:
        return self.attrs.get('checked') is True

    @checked.setter
    def checked(self, value: bool) -> None:
        self.attrs['checked'] = bool(value)

    @property
    def value(self) -> str:
        value = self.attrs.get('value')
        return value if isinstance(value, str) else ''

    @value.setter
    def value(self, value: str) -> None:
        self.attrs['value'] = value

    # children

    def append(self, *children: str | Node) -> Node:
        if self.is_void and children:
            raise ValueError(f'Void element {self.tag!r} cannot have children')
        self.children.extend(children)
        return self

    def clear(self) -> None:
        self.children.clear()

    def iter_elements(self) -> Iterator[Node]:
        """Yield every descendant element in document order, excluding self."""
        for child in self.children:
            if isinstance(child, Node):
                yield child
                yield from child.iter_elements()

    @property
    def text_content(self) -> str:
        return ''.join(
            child if isinstance(child, str) else child.text_content
            for child in self.children)

    @text_content.setter
    def text_content(self, text: str) -> None:
        self.children = [text] if text else []

    def clone(self) -> Node:
        """Deep copy of this node and all its descendants."""
        return Node(
            self.tag,
            classes=list(self.classes),
            attrs=dict(self.attrs),
            children=[
                child if isinstance(child, str) else child.clone()
                for child in self.children],
        )


def element(tag: str, *children: str | Node, classes: list[str] | None = None, **attrs: str | bool) -> Node:
    """Shorthand for building nodes: element('label', 'First', classes=['x'])"""
    node = Node(tag, classes=classes or [], attrs=attrs)
    node.append(*children)
    return node
