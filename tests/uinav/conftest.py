from __future__ import annotations

from dataclasses import dataclass

import pytest

from uinav.api.graph import FenceData
from uinav.runtime.memory_graph import InMemoryNavGraph


@dataclass(frozen=True, slots=True)
class MenuGraph:
    """Main menu -> options submenu -> audio tabs -> volume slider."""

    graph: InMemoryNavGraph
    root: int
    play: int
    options: int
    quit: int
    options_fence: int
    row: int
    audio: int
    video: int
    controls: int
    audio_fence: int
    volume: int
    music: int
    sfx: int
    slider_fence: int
    low: int
    high: int


def build_menu_graph() -> MenuGraph:
    graph = InMemoryNavGraph()
    root = graph.add_fence(None, FenceData.root())
    play = graph.add_focusable(root, (0, 2))
    options = graph.add_focusable(root, (0, 1))
    quit_ = graph.add_focusable(root, (0, 0))

    options_fence = graph.add_fence(root, FenceData.reachable_from(options))
    row = graph.add_node(options_fence)
    audio = graph.add_focusable(row, (-1, 1))
    video = graph.add_focusable(row, (1, 1))
    controls = graph.add_focusable(options_fence, (0, 0))

    audio_fence = graph.add_fence(options_fence, FenceData.reachable_from(audio).sequence())
    volume = graph.add_focusable(audio_fence, (0, 0))
    music = graph.add_focusable(audio_fence, (1, 0))
    sfx = graph.add_focusable(audio_fence, (2, 0))

    slider_fence = graph.add_fence(audio_fence, FenceData.reachable_from(volume))
    low = graph.add_focusable(slider_fence, (0, 0))
    high = graph.add_focusable(slider_fence, (1, 0))

    return MenuGraph(
        graph=graph,
        root=root,
        play=play,
        options=options,
        quit=quit_,
        options_fence=options_fence,
        row=row,
        audio=audio,
        video=video,
        controls=controls,
        audio_fence=audio_fence,
        volume=volume,
        music=music,
        sfx=sfx,
        slider_fence=slider_fence,
        low=low,
        high=high,
    )


@pytest.fixture
def menu() -> MenuGraph:
    return build_menu_graph()
