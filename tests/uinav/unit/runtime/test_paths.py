from __future__ import annotations

import pytest

from uinav.api.errors import NavigationCycleError
from uinav.api.graph import FenceData
from uinav.runtime.memory_graph import InMemoryNavGraph
from uinav.runtime.paths import root_path, trim_common_tail, validate_navigation_graph


def test_trim_common_tail_keeps_one_shared_anchor() -> None:
    first, second = trim_common_tail([1, 2, 3, 4, 5, 6, 7], [3, 2, 1, 4, 5, 6, 7])

    assert first == (1, 2, 3, 4)
    assert second == (3, 2, 1, 4)


def test_trim_common_tail_when_one_chain_is_a_suffix_of_the_other() -> None:
    assert trim_common_tail([1, 2, 3, 4], [3, 4]) == ((1, 2, 3), (3,))
    assert trim_common_tail([9], [5, 9]) == ((9,), (5, 9))


def test_trim_common_tail_of_identical_chains_leaves_single_anchor() -> None:
    assert trim_common_tail(["a", "b", "c"], ["a", "b", "c"]) == (("a",), ("a",))


def test_trim_common_tail_without_shared_tail_returns_inputs() -> None:
    assert trim_common_tail([1, 2], [3, 4]) == ((1, 2), (3, 4))


def test_trim_common_tail_rejects_empty_chain() -> None:
    with pytest.raises(ValueError):
        trim_common_tail([], [1])


def test_root_path_follows_entry_points_up_to_root(menu) -> None:
    assert root_path(menu.graph, menu.low) == (
        menu.low,
        menu.volume,
        menu.audio,
        menu.options,
    )
    assert root_path(menu.graph, menu.play) == (menu.play,)


def test_root_path_stops_without_enclosing_fence() -> None:
    graph = InMemoryNavGraph()
    loose = graph.add_focusable(None, (0, 0))

    assert root_path(graph, loose) == (loose,)


def test_root_path_detects_fence_reachable_from_its_own_focusable() -> None:
    graph = InMemoryNavGraph()
    fence = graph.add_fence(None)
    inner = graph.add_focusable(fence, (0, 0))
    graph.set_fence(fence, FenceData.reachable_from(inner))

    with pytest.raises(NavigationCycleError):
        root_path(graph, inner)


def test_root_path_detects_transitive_entry_point_cycle() -> None:
    graph = InMemoryNavGraph()
    first_fence = graph.add_fence(None)
    second_fence = graph.add_fence(None)
    a = graph.add_focusable(first_fence, (0, 0))
    b = graph.add_focusable(second_fence, (0, 0))
    graph.set_fence(first_fence, FenceData.reachable_from(b))
    graph.set_fence(second_fence, FenceData.reachable_from(a))

    with pytest.raises(NavigationCycleError) as info:
        root_path(graph, a)

    assert info.value.path == (a, b)


def test_validate_navigation_graph_counts_focusables(menu) -> None:
    assert validate_navigation_graph(menu.graph) == 11


def test_validate_navigation_graph_surfaces_cycles(menu) -> None:
    menu.graph.set_fence(menu.root, FenceData.reachable_from(menu.low))

    with pytest.raises(NavigationCycleError):
        validate_navigation_graph(menu.graph)
