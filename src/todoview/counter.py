from typing import Any

from todoview.node import Node
from todoview.state import TodosState, validate_container, validate_state


def get_todo_count(todos) -> str:
    not_completed = sum(1 for todo in todos if not todo.completed)
    if not_completed == 1:
        return '1 Item left'
    return f'{not_completed} Items left'


def counter_view(container: Node, state: TodosState | Any) -> Node:
    container = validate_container(container, 'counter_view')
    state = validate_state(TodosState, state, 'counter_view')

    container.text_content = get_todo_count(state.todos)
    return container
