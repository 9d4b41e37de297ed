"""Focus-state commit policy for resolved outcomes."""

from __future__ import annotations

from uinav.api.graph import FocusState, FocusStateCommitter
from uinav.api.navigation import FocusChanged, TransitionOutcome


def commit_outcome(committer: FocusStateCommitter, outcome: TransitionOutcome) -> bool:
    """Apply one outcome; returns whether any state was written.

    The old path is applied before the new one, so a node present on both
    ends up with its new-path state.
    """
    if not isinstance(outcome, FocusChanged):
        return False

    left, *sleeping = outcome.from_path
    committer.set_focus_state(left, FocusState.INERT)
    committer.clear_currently_focused(left)
    for node in sleeping:
        committer.set_focus_state(node, FocusState.DORMANT)
        committer.clear_currently_focused(node)

    focused, *activated = outcome.to_path
    committer.set_focus_state(focused, FocusState.FOCUSED)
    committer.mark_currently_focused(focused)
    for node in activated:
        committer.set_focus_state(node, FocusState.ACTIVE)
    return True
