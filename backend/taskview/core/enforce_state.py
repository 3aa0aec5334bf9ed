"""State Enforcement — cross-field rules over the session/application state.

Invariants:
    - currentTag must be listed in availableTags
    - sessionState.lastActiveTag, when set, must be listed in availableTags
    - lastSwitched must not be strictly after projectMetadata.updatedAt
    - Reads parsed fields only; a rule whose inputs did not parse (None) is skipped
"""

from taskview.core.errors import ReferentialIntegrityError, TemporalOrderError
from taskview.core.graph_protocols import StateLike
from taskview.core.issues import Issue
from taskview.core.primitives import parse_iso_datetime


def check_current_tag_available(state: StateLike) -> list[Issue]:
    if state.current_tag is None or state.available_tags is None:
        return []
    if state.current_tag in state.available_tags:
        return []
    return [ReferentialIntegrityError(
        f"Current tag '{state.current_tag}' must be in available tags",
        value=state.current_tag,
    ).to_issue(("currentTag",))]


def check_last_active_tag_available(state: StateLike) -> list[Issue]:
    if state.session_state is None or state.available_tags is None:
        return []
    last_active = state.session_state.last_active_tag
    if not last_active or last_active in state.available_tags:
        return []
    return [ReferentialIntegrityError(
        f"Last active tag '{last_active}' must be in available tags",
        value=last_active,
    ).to_issue(("sessionState", "lastActiveTag"))]


def check_switch_before_update(state: StateLike) -> list[Issue]:
    if state.project_metadata is None:
        return []
    if not state.last_switched or not state.project_metadata.updated_at:
        return []
    last_switched = parse_iso_datetime(state.last_switched)
    updated_at = parse_iso_datetime(state.project_metadata.updated_at)
    if last_switched > updated_at:
        return [TemporalOrderError(
            "Last switched time cannot be after project updated time",
            value=state.last_switched,
        ).to_issue(("lastSwitched",))]
    return []


def enforce_state_invariants(state: StateLike) -> list[Issue]:
    return (
        check_current_tag_available(state)
        + check_last_active_tag_available(state)
        + check_switch_before_update(state)
    )
