"""State records consumed by the views.

Callers may pass these models directly, plain mappings such as
``{"todos": [{"text": "First", "completed": True}]}``, or any object
exposing the same attributes. Everything is validated here, before a view
touches its container, and rejected input surfaces as ContractViolation.
"""

from typing import Any, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError

from todoview.errors import ContractViolation
from todoview.node import Node

FILTER_LABELS = ('All', 'Active', 'Completed')


class StateModel(BaseModel):
    model_config = ConfigDict(frozen=True, from_attributes=True, extra='ignore')


class Todo(StateModel):
    text: StrictStr
    completed: StrictBool


class TodosState(StateModel):
    todos: list[Todo]


class FiltersState(StateModel):
    current_filter: StrictStr = Field(
        validation_alias=AliasChoices('currentFilter', 'current_filter'))


class AppState(StateModel):
    """Everything the registered components need for one render pass."""

    todos: list[Todo] = Field(default_factory=list)
    current_filter: StrictStr = Field(
        default='All',
        validation_alias=AliasChoices('currentFilter', 'current_filter'))


M = TypeVar('M', bound=StateModel)


def format_errors(exc: ValidationError) -> list[str]:
    errors = []
    for error in exc.errors():
        location = '.'.join(str(part) for part in error['loc']) or '<state>'
        errors.append(f"{location}: {error['msg']}")
    return errors


def validate_state(model: type[M], state: Any, view: str) -> M:
    if isinstance(state, model):
        return state
    if state is None:
        raise ContractViolation(f'state is required, expected {model.__name__}', view=view)
    try:
        return model.model_validate(state)
    except ValidationError as exc:
        raise ContractViolation(
            f'invalid {model.__name__}', view=view, errors=format_errors(exc)) from exc


def validate_container(container: Any, view: str) -> Node:
    if not isinstance(container, Node):
        raise ContractViolation(
            f'container must be a Node, not {type(container).__name__}', view=view)
    if container.is_void:
        raise ContractViolation(
            f'container <{container.tag}> cannot hold children', view=view)
    return container
