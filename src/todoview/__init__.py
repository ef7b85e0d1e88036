from todoview.counter import counter_view
from todoview.errors import ContractViolation, SelectorError, TemplateError, TodoViewError
from todoview.filters import SELECTED_CLASS, filters_view
from todoview.htmlrender import to_html
from todoview.node import Node, element
from todoview.parser import parse_html
from todoview.registry import COMPONENT_ATTRIBUTE, Registry, default_registry
from todoview.selector import query_selector, query_selector_all
from todoview.state import FILTER_LABELS, AppState, FiltersState, Todo, TodosState
from todoview.todos import COMPLETED_CLASS, render_todo, todos_view

__all__ = [
    'AppState',
    'COMPLETED_CLASS',
    'COMPONENT_ATTRIBUTE',
    'ContractViolation',
    'FILTER_LABELS',
    'FiltersState',
    'Node',
    'Registry',
    'SELECTED_CLASS',
    'SelectorError',
    'TemplateError',
    'Todo',
    'TodoViewError',
    'TodosState',
    'counter_view',
    'default_registry',
    'element',
    'filters_view',
    'parse_html',
    'query_selector',
    'query_selector_all',
    'render_todo',
    'to_html',
    'todos_view',
]
