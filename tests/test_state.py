import pytest

from kitree.canvas import Buffer, Position, Rect
from kitree.item import TreeItem
from kitree.state import ExplorerState
from kitree.tree import Tree


def example_items():
    return [
        TreeItem.leaf("a", "Alfa"),
        TreeItem(
            "b",
            "Bravo",
            [
                TreeItem.leaf("c", "Charlie"),
                TreeItem("d", "Delta", [TreeItem.leaf("e", "Echo"), TreeItem.leaf("f", "Foxtrot")]),
                TreeItem.leaf("g", "Golf"),
            ],
        ),
        TreeItem.leaf("h", "Hotel"),
    ]


def rendered_state(width=10, height=10, state=None):
    state = state if state is not None else ExplorerState()
    area = Rect(0, 0, width, height)
    Tree(example_items()).render(area, Buffer.empty(area), state)
    return state


def manual_state(identifiers):
    identifiers = [tuple(i) for i in identifiers]
    return ExplorerState(
        last_identifiers=identifiers,
        last_biggest_index=len(identifiers) - 1,
    )


def test_select_reports_change_and_requests_view():
    state = ExplorerState()
    assert state.select(["a"]) is True
    assert state.selected == ("a",)
    assert state.ensure_selected_in_view_on_next_render is True
    assert state.select(["a"]) is False


def test_expand_and_collapse():
    state = ExplorerState()
    assert state.expand([]) is False
    assert state.expand(["b"]) is True
    assert state.expand(["b"]) is False
    assert ("b",) in state.expanded
    assert state.collapse(["b"]) is True
    assert state.collapse(["b"]) is False
    assert state.expanded == set()


def test_toggle_flips_state():
    state = ExplorerState()
    assert state.toggle([]) is False
    assert state.toggle(["b", "d"]) is True
    assert state.expanded == {("b", "d")}
    assert state.toggle(["b", "d"]) is True
    assert state.expanded == set()


def test_toggle_selected():
    state = ExplorerState()
    assert state.toggle_selected() is False
    state.select(["b"])
    state.ensure_selected_in_view_on_next_render = False
    assert state.toggle_selected() is True
    assert state.expanded == {("b",)}
    assert state.ensure_selected_in_view_on_next_render is True
    assert state.toggle_selected() is True
    assert state.expanded == set()


def test_collapse_all():
    state = ExplorerState()
    assert state.collapse_all() is False
    state.expand(["b"])
    state.expand(["b", "d"])
    assert state.collapse_all() is True
    assert state.expanded == set()


def test_select_first_and_last():
    state = manual_state([["a"], ["b"], ["h"]])
    assert state.select_last() is True
    assert state.selected == ("h",)
    assert state.select_first() is True
    assert state.selected == ("a",)
    assert state.select_first() is False


def test_select_first_without_items_clears_selection():
    state = ExplorerState(selected=("x",))
    assert state.select_first() is True
    assert state.selected == ()
    assert state.select_last() is False


def test_select_next_walks_down_and_stops_at_end():
    state = manual_state([["a"], ["b"], ["h"]])
    assert state.select_next() is True
    assert state.selected == ("a",)
    assert state.select_next() is True
    assert state.select_next() is True
    assert state.selected == ("h",)
    assert state.select_next() is False
    assert state.selected == ("h",)


def test_select_prev_walks_up_and_stops_at_start():
    state = manual_state([["a"], ["b"], ["h"]])
    assert state.select_prev() is True
    assert state.selected == ("h",)
    assert state.select_prev() is True
    assert state.selected == ("b",)
    assert state.select_prev() is True
    assert state.select_prev() is False
    assert state.selected == ("a",)


def test_select_next_and_prev_without_items():
    state = ExplorerState()
    assert state.select_next() is False
    assert state.select_prev() is False
    assert state.selected == ()


def test_select_next_limited_by_biggest_index():
    state = manual_state([["a"], ["b"], ["h"]])
    state.last_biggest_index = 1
    state.select(["b"])
    assert state.select_next() is False
    assert state.selected == ("b",)


def test_flatten_uses_expanded():
    state = ExplorerState()
    state.expand(["b"])
    identifiers = [flat.identifier for flat in state.flatten(example_items())]
    assert identifiers == [("a",), ("b",), ("b", "c"), ("b", "d"), ("b", "g"), ("h",)]


def test_render_records_identifiers():
    state = rendered_state()
    assert state.last_identifiers == [("a",), ("b",), ("h",)]
    assert state.last_rendered_identifiers == [(0, ("a",)), (1, ("b",)), (2, ("h",))]
    assert state.last_area == Rect(0, 0, 10, 10)


def test_rendered_at():
    state = rendered_state()
    assert state.rendered_at(Position(3, 1)) == ("b",)
    assert state.rendered_at(Position(0, 0)) == ("a",)
    assert state.rendered_at(Position(0, 7)) == ("h",)
    assert state.rendered_at(Position(20, 1)) is None


def test_click_at_selects_then_toggles():
    state = rendered_state()
    assert state.click_at(Position(0, 1)) is True
    assert state.selected == ("b",)
    assert state.expanded == set()
    assert state.click_at(Position(0, 1)) is True
    assert state.expanded == {("b",)}
    assert state.click_at(Position(50, 50)) is False


def test_select_next_after_render_follows_expansion():
    state = ExplorerState()
    state.expand(["b"])
    rendered_state(state=state)
    state.select(["b"])
    assert state.select_next() is True
    assert state.selected == ("b", "c")


@pytest.mark.parametrize("lines", [1, 3, 100])
def test_scroll_down_is_capped(lines):
    state = manual_state([["a"], ["b"], ["h"]])
    state.scroll_down(lines)
    assert 0 <= state.offset <= state.last_biggest_index
    assert state.offset == min(lines, state.last_biggest_index)


def test_scroll_up_and_down_report_change():
    state = manual_state([["a"], ["b"], ["h"]])
    assert state.scroll_up(1) is False
    assert state.scroll_down(1) is True
    assert state.offset == 1
    assert state.scroll_up(5) is True
    assert state.offset == 0


def test_scroll_selected_into_view():
    state = ExplorerState()
    state.scroll_selected_into_view()
    assert state.ensure_selected_in_view_on_next_render is True


def test_equality():
    first, second = ExplorerState(), ExplorerState()
    assert first == second
    first.expand(["b"])
    assert not first == second
    second.expand(["b"])
    assert first == second