"""Todo list rendering.

``render_todo`` stamps out one list item per todo:

<li class="completed">
    <div class="view">
        <input class="toggle" type="checkbox" checked>
        <label>First</label>
        <button class="destroy"></button>
    </div>
    <input class="edit" value="First">
</li>

``todos_view`` rebuilds a list container from scratch with one such item
per todo, in order.
"""

from typing import Any

from todoview.node import Node, element
from todoview.state import Todo, TodosState, validate_container, validate_state

COMPLETED_CLASS = 'completed'


def render_todo(todo: Todo | Any) -> Node:
    todo = validate_state(Todo, todo, 'render_todo')

    item = element(
        'li',
        element(
            'div',
            element('input', classes=['toggle'], type='checkbox', checked=todo.completed),
            element('label', todo.text),
            element('button', classes=['destroy']),
            classes=['view'],
        ),
        element('input', classes=['edit'], value=todo.text),
    )
    item.toggle_class(COMPLETED_CLASS, todo.completed)
    return item


def todos_view(container: Node, state: TodosState | Any) -> Node:
    container = validate_container(container, 'todos_view')
    state = validate_state(TodosState, state, 'todos_view')

    container.clear()
    container.append(*(render_todo(todo) for todo in state.todos))
    return container
