from __future__ import annotations

import logging
from functools import lru_cache
from html.parser import HTMLParser

from todoview.errors import TemplateError
from todoview.node import FRAGMENT, VOID_ELEMENTS, Node

"""
Turns static HTML fragments into Node trees, eg the filters markup:

<ul class="filters">
    <li><a href="#/">All</a></li>
    ...
</ul>

Whitespace between elements is kept as text children, so the text content
of each anchor is exactly what the markup says.
"""

logger = logging.getLogger(__name__)


class NodeParser(HTMLParser):
    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.root = Node(FRAGMENT)
        self.stack: list[Node] = [self.root]

    def result(self) -> Node:
        self.close()
        if len(self.stack) > 1:
            raise TemplateError(f'Unclosed element {self.stack[-1].tag!r}')
        elements = [child for child in self.root.children if isinstance(child, Node)]
        stray_text = ''.join(child for child in self.root.children if isinstance(child, str))
        match elements:
            case [] if not stray_text.strip():
                raise TemplateError('Nothing to return')
            case [child] if not stray_text.strip():
                return child
            case _:
                return self.root

    def make_node(self, tag: str, attrs: list[tuple[str, str | None]]) -> Node:
        node = Node(tag)
        for k, v in attrs:
            # valueless attributes such as 'checked' are boolean
            node.set_attribute(k, True if v is None else v)
        return node

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        this_node = self.make_node(tag, attrs)
        self.stack[-1].children.append(this_node)
        if not this_node.is_void:
            self.stack.append(this_node)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        # <br/> and <my-widget/> both close immediately
        self.stack[-1].children.append(self.make_node(tag, attrs))

    def handle_endtag(self, tag: str) -> None:
        if tag in VOID_ELEMENTS:
            # void elements were never pushed, so </input> has nothing to close
            return
        if len(self.stack) == 1:
            raise TemplateError(f'End tag {tag!r} without matching start tag')
        node = self.stack.pop()
        if node.tag != tag:
            raise TemplateError(f'Start tag {node.tag!r} does not match end tag {tag!r}')

    def handle_data(self, data: str) -> None:
        children = self.stack[-1].children
        if children and isinstance(children[-1], str):
            children[-1] += data
        else:
            children.append(data)


@lru_cache
def _parse_cached(source: str) -> Node:
    logger.debug('Parsing template (%d chars)', len(source))
    parser = NodeParser()
    parser.feed(source)
    return parser.result()


def parse_html(source: str) -> Node:
    """Parse an HTML fragment into a fresh Node tree.

    A single top-level element is returned directly; anything else is
    wrapped in a '#fragment' node. Parses are cached by source, but each
    call gets its own copy, so callers are free to mutate the result.
    """
    if not isinstance(source, str):
        raise TemplateError(f'Template source must be a str, not {type(source).__name__}')
    return _parse_cached(source).clone()
