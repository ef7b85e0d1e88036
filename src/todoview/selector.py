from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from functools import lru_cache
from typing import NamedTuple

from todoview.errors import SelectorError
from todoview.node import Node

"""
Just enough CSS to inspect rendered views:

li                  tag
.toggle             class
#main               id
[type=checkbox]     attribute, with or without a value
li a.selected       descendant combinator
ul > li             child combinator
label, .edit        selector lists

Matching follows querySelectorAll: results come back in document order and
the node being queried is never itself a result, although it can satisfy
the ancestor part of a selector.
"""

logger = logging.getLogger(__name__)

compound_part_re = re.compile(r'''
    (?P<tag>\*|[a-zA-Z][\w-]*)
  | \.(?P<cls>-?[_a-zA-Z][\w-]*)
  | \#(?P<id>[\w-]+)
  | \[\s*(?P<attr>[^\s=\]]+)\s*(?:=\s*(?P<value>"[^"]*"|'[^']*'|[^\]\s]+)\s*)?\]
''', re.VERBOSE)
combinator_re = re.compile(r'\s*>\s*|\s+')
separator_re = re.compile(r'\s*,\s*')


class Compound(NamedTuple):
    tag: str | None = None
    classes: tuple[str, ...] = ()
    ident: str | None = None
    attrs: tuple[tuple[str, str | None], ...] = ()

    def matches(self, node: Node) -> bool:
        if self.tag is not None and self.tag != node.tag:
            return False
        if not all(node.has_class(name) for name in self.classes):
            return False
        if self.ident is not None and node.get_attribute('id') != self.ident:
            return False
        for name, expected in self.attrs:
            actual = node.get_attribute(name)
            if actual is None or actual is False:
                return False
            if expected is not None and actual != expected:
                return False
        return True


# Each step pairs the combinator joining it to the previous step (None for
# the leftmost) with the compound selector it must match.
Step = tuple[str | None, Compound]


def parse_compound(selector: str, pos: int) -> tuple[Compound, int]:
    tag = ident = None
    classes: list[str] = []
    attrs: list[tuple[str, str | None]] = []
    start = pos
    while m := compound_part_re.match(selector, pos):
        if m['tag'] is not None:
            if pos != start:
                raise SelectorError('Tag name must come first in a compound selector', selector)
            tag = None if m['tag'] == '*' else m['tag'].lower()
        elif m['cls'] is not None:
            classes.append(m['cls'])
        elif m['id'] is not None:
            ident = m['id']
        else:
            value = m['value']
            if value is not None and value[:1] in '"\'':
                value = value[1:-1]
            attrs.append((m['attr'].lower(), value))
        pos = m.end()
    if pos == start:
        raise SelectorError(f'Unexpected character at position {pos}', selector)
    return Compound(tag, tuple(classes), ident, tuple(attrs)), pos


def parse_complex(selector: str, pos: int) -> tuple[tuple[Step, ...], int]:
    """Parse one selector of a list, stopping at the end or before a comma."""
    steps: list[Step] = []
    combinator = None
    while True:
        compound, pos = parse_compound(selector, pos)
        steps.append((combinator, compound))
        if pos == len(selector) or separator_re.match(selector, pos):
            return tuple(steps), pos
        m = combinator_re.match(selector, pos)
        if m is None:
            raise SelectorError(f'Unexpected character at position {pos}', selector)
        combinator = '>' if '>' in m.group() else ' '
        pos = m.end()
        if pos == len(selector):
            raise SelectorError('Selector ends with a combinator', selector)


@lru_cache
def _compile_selector(selector: str) -> tuple[tuple[Step, ...], ...]:
    logger.debug('Compiling selector %r', selector)
    if not selector.strip():
        raise SelectorError('Empty selector', selector)
    selector = selector.strip()
    compiled = []
    pos = 0
    while True:
        steps, pos = parse_complex(selector, pos)
        compiled.append(steps)
        if pos == len(selector):
            return tuple(compiled)
        pos = separator_re.match(selector, pos).end()
        if pos == len(selector):
            raise SelectorError('Selector ends with a comma', selector)


def compile_selector(selector: str) -> tuple[tuple[Step, ...], ...]:
    # checked before the cache, which needs a hashable key
    if not isinstance(selector, str):
        raise SelectorError(f'Selector must be a str, not {type(selector).__name__}', selector)
    return _compile_selector(selector)


def matches_steps(steps: tuple[Step, ...], index: int, node: Node, ancestors: tuple[Node, ...]) -> bool:
    combinator, compound = steps[index]
    if not compound.matches(node):
        return False
    if index == 0:
        return True
    if combinator == '>':
        return bool(ancestors) and matches_steps(steps, index - 1, ancestors[-1], ancestors[:-1])
    return any(
        matches_steps(steps, index - 1, ancestors[i], ancestors[:i])
        for i in range(len(ancestors) - 1, -1, -1))


def walk(node: Node, ancestors: tuple[Node, ...]) -> Iterator[tuple[Node, tuple[Node, ...]]]:
    path = ancestors + (node,)
    for child in node.children:
        if isinstance(child, Node):
            yield child, path
            yield from walk(child, path)


def query_selector_all(root: Node, selector: str) -> list[Node]:
    compiled = compile_selector(selector)
    return [
        node for node, ancestors in walk(root, ())
        if any(matches_steps(steps, len(steps) - 1, node, ancestors) for steps in compiled)
    ]


def query_selector(root: Node, selector: str) -> Node | None:
    compiled = compile_selector(selector)
    for node, ancestors in walk(root, ()):
        if any(matches_steps(steps, len(steps) - 1, node, ancestors) for steps in compiled):
            return node
    return None
