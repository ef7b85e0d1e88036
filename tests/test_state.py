from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from todoview.errors import ContractViolation
from todoview.node import Node
from todoview.state import AppState, FiltersState, Todo, TodosState, validate_container, validate_state


def test_todos_state_from_mapping():
    state = validate_state(TodosState, {'todos': [{'text': 'First', 'completed': True}]}, 'todos_view')
    assert state == TodosState(todos=[Todo(text='First', completed=True)])


def test_todos_state_from_objects():
    raw = SimpleNamespace(todos=(
        SimpleNamespace(text='First', completed=True),
        SimpleNamespace(text='Second', completed=False),
    ))
    state = validate_state(TodosState, raw, 'todos_view')
    assert [todo.text for todo in state.todos] == ['First', 'Second']
    assert [todo.completed for todo in state.todos] == [True, False]


def test_models_pass_through():
    state = TodosState(todos=[])
    assert validate_state(TodosState, state, 'todos_view') is state


def test_filters_state_accepts_both_spellings():
    assert validate_state(FiltersState, {'currentFilter': 'Active'}, 'filters_view').current_filter == 'Active'
    assert validate_state(FiltersState, {'current_filter': 'Active'}, 'filters_view').current_filter == 'Active'
    assert validate_state(FiltersState, SimpleNamespace(currentFilter='All'), 'filters_view').current_filter == 'All'
    assert FiltersState(current_filter='Completed').current_filter == 'Completed'


def test_app_state_feeds_every_view():
    app = AppState(todos=[Todo(text='First', completed=False)], currentFilter='Active')
    assert validate_state(TodosState, app, 'todos_view').todos == app.todos
    assert validate_state(FiltersState, app, 'filters_view').current_filter == 'Active'
    assert AppState().current_filter == 'All'


def test_records_are_frozen():
    todo = Todo(text='First', completed=False)
    with pytest.raises(ValidationError):
        todo.completed = True


@pytest.mark.parametrize('raw, location', [
    ({}, 'todos'),
    ({'todos': None}, 'todos'),
    ({'todos': 'First'}, 'todos'),
    ({'todos': [{'text': 'First'}]}, 'todos.0.completed'),
    ({'todos': [{'text': 'First', 'completed': 'yes'}]}, 'todos.0.completed'),
    ({'todos': [{'text': 'First', 'completed': 1}]}, 'todos.0.completed'),
    ({'todos': [{'text': 'Fine', 'completed': False}, {'text': 2, 'completed': False}]}, 'todos.1.text'),
])
def test_malformed_todos_state(raw, location):
    with pytest.raises(ContractViolation) as excinfo:
        validate_state(TodosState, raw, 'todos_view')
    message = str(excinfo.value)
    assert message.startswith('todos_view: invalid TodosState')
    assert f'  - {location}: ' in message
    assert isinstance(excinfo.value.__cause__, ValidationError)
    assert excinfo.value.view == 'todos_view'


def test_missing_state():
    with pytest.raises(ContractViolation) as excinfo:
        validate_state(FiltersState, None, 'filters_view')
    assert str(excinfo.value) == 'filters_view: state is required, expected FiltersState'


def test_contract_violation_is_a_value_error():
    with pytest.raises(ValueError):
        validate_state(FiltersState, {'currentFilter': 3}, 'filters_view')


def test_validate_container():
    node = Node('ul')
    assert validate_container(node, 'todos_view') is node
    with pytest.raises(ContractViolation) as excinfo:
        validate_container('<ul></ul>', 'todos_view')
    assert str(excinfo.value) == 'todos_view: container must be a Node, not str'


def test_void_container_is_rejected():
    with pytest.raises(ContractViolation) as excinfo:
        validate_container(Node('br'), 'counter_view')
    assert str(excinfo.value) == 'counter_view: container <br> cannot hold children'
