from typing import Set

from ..exceptions import InvalidTransition

# is_active: False is the draft-equivalent state, True is published
ALLOWED_PAGE_TRANSITIONS: dict[bool, Set[bool]] = {
    False: {True},
    True: {False},
}


def state_name(is_active: bool) -> str:
    return "active" if is_active else "inactive"


def assert_page_transition(*, from_active: bool, to_active: bool) -> None:
    """
    Guards page visibility transitions.
    Single source of truth for publish/unpublish.
    """
    allowed = ALLOWED_PAGE_TRANSITIONS.get(from_active, set())

    if to_active not in allowed:
        raise InvalidTransition(
            f"Illegal page transition: {state_name(from_active)} → {state_name(to_active)}"
        )
