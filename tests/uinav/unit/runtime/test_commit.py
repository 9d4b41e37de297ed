from __future__ import annotations

from uinav.api.graph import FocusState
from uinav.api.navigation import Cancel, FocusCaught, FocusChanged
from uinav.runtime.commit import commit_outcome


def test_commit_changed_applies_state_machine(menu) -> None:
    graph = menu.graph
    graph.set_focus_state(menu.low, FocusState.FOCUSED)
    graph.mark_currently_focused(menu.low)

    changed = commit_outcome(
        graph,
        FocusChanged(
            from_path=(menu.low, menu.volume, menu.audio, menu.options),
            to_path=(menu.video, menu.options),
        ),
    )

    assert changed
    assert graph.focus_state_of(menu.low) is FocusState.INERT
    assert graph.focus_state_of(menu.volume) is FocusState.DORMANT
    assert graph.focus_state_of(menu.audio) is FocusState.DORMANT
    assert graph.focus_state_of(menu.video) is FocusState.FOCUSED
    # Shared anchor ends up with its new-path state.
    assert graph.focus_state_of(menu.options) is FocusState.ACTIVE
    assert tuple(graph.focused_nodes()) == (menu.video,)


def test_commit_same_leaf_keeps_it_focused(menu) -> None:
    graph = menu.graph
    graph.set_focus_state(menu.play, FocusState.FOCUSED)
    graph.mark_currently_focused(menu.play)

    commit_outcome(graph, FocusChanged((menu.play,), (menu.play,)))

    assert graph.focus_state_of(menu.play) is FocusState.FOCUSED
    assert tuple(graph.focused_nodes()) == (menu.play,)


def test_commit_caught_does_not_mutate(menu) -> None:
    graph = menu.graph
    graph.set_focus_state(menu.play, FocusState.FOCUSED)
    graph.mark_currently_focused(menu.play)
    before = graph.states()

    changed = commit_outcome(graph, FocusCaught(focused=menu.play, request=Cancel()))

    assert not changed
    assert graph.states() == before
    assert tuple(graph.focused_nodes()) == (menu.play,)
