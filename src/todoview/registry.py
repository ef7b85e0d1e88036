"""Render a whole application root from named components.

Markup opts into rendering by naming a registered view:

<section class="todoapp">
    <ul class="todo-list" data-component="todos"></ul>
    <span class="todo-count" data-component="counter"></span>
    <ul class="filters" data-component="filters">...</ul>
</section>

``render_root`` works on a copy of the root, so the caller can compare the
result with what is currently displayed and decide how to apply it.
"""

import logging
from typing import Any, Callable

from todoview.counter import counter_view
from todoview.errors import ContractViolation
from todoview.filters import filters_view
from todoview.node import Node
from todoview.state import AppState, validate_container, validate_state
from todoview.todos import todos_view

logger = logging.getLogger(__name__)

COMPONENT_ATTRIBUTE = 'data-component'

View = Callable[[Node, Any], Node]


class Registry:
    def __init__(self):
        self.components: dict[str, View] = {}

    def __contains__(self, name: str) -> bool:
        return name in self.components

    def add(self, name: str, view: View) -> None:
        if not callable(view):
            raise TypeError(f'Component {name!r} must be callable, not {type(view).__name__}')
        self.components[name] = view

    def get(self, name: str) -> View:
        try:
            return self.components[name]
        except KeyError:
            raise ContractViolation(f'no component registered as {name!r}', view='render_root') from None

    def render_children(self, node: Node, state: AppState) -> None:
        for index, child in enumerate(node.children):
            if not isinstance(child, Node):
                continue
            name = child.attrs.get(COMPONENT_ATTRIBUTE)
            if isinstance(name, str):
                logger.debug('Rendering component %r', name)
                rendered = self.get(name)(child, state)
                # a view may hand back a replacement rather than its container
                node.children[index] = child = rendered
            self.render_children(child, state)

    def render_root(self, root: Node, state: AppState | Any) -> Node:
        root = validate_container(root, 'render_root')
        state = validate_state(AppState, state, 'render_root')

        new_root = root.clone()
        self.render_children(new_root, state)
        return new_root


def default_registry() -> Registry:
    registry = Registry()
    registry.add('todos', todos_view)
    registry.add('filters', filters_view)
    registry.add('counter', counter_view)
    return registry
