import logging
from typing import Any

from todoview.node import Node
from todoview.selector import query_selector_all
from todoview.state import FiltersState, validate_container, validate_state

logger = logging.getLogger(__name__)

SELECTED_CLASS = 'selected'


def filters_view(container: Node, state: FiltersState | Any) -> Node:
    """Mark the filter anchor whose text is the current filter as selected.

    The container must already hold the filter links; nothing is created
    here. Every anchor loses the marker and the first whose text content
    equals ``state.current_filter`` (exactly, case included) gains it, so
    at most one anchor is selected afterwards. Further matches are left
    unmarked and logged; no match at all leaves every anchor unmarked.
    """
    container = validate_container(container, 'filters_view')
    state = validate_state(FiltersState, state, 'filters_view')

    selected = None
    duplicates = 0
    for anchor in query_selector_all(container, 'a'):
        is_match = anchor.text_content == state.current_filter
        if is_match and selected is None:
            selected = anchor
        elif is_match:
            duplicates += 1
        anchor.toggle_class(SELECTED_CLASS, anchor is selected)

    if selected is None:
        logger.debug('No filter anchor matches %r', state.current_filter)
    elif duplicates:
        logger.warning(
            'Filter %r matches %d anchors, only the first is selected',
            state.current_filter, duplicates + 1)
    return container
