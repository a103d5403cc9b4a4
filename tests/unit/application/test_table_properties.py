"""Property-based tests for the table view-state engine."""
from __future__ import annotations

from urllib.parse import unquote_plus

from hypothesis import given
from hypothesis import strategies as st

from livetable.application.table import (
    SortDirection,
    SortState,
    build_query_string,
    next_sort_params,
    page_window,
    parse_query_string,
    resolve_sort,
)
from livetable.testing.strategies import (
    pagination_states,
    param_values,
    parameter_maps,
    sort_params,
)


class TestSortProperties:
    @given(st.text(max_size=8))
    def test_defaulting_is_idempotent(self, direction: str) -> None:
        if direction in ("asc", "desc"):
            return
        assert resolve_sort({"sort_direction": direction}, "id") == resolve_sort({}, "id")
        assert resolve_sort({}, "id") == SortState(SortDirection.ASC, "id")

    @given(sort_params())
    def test_toggle_twice_restores_sort(self, params: dict[str, str]) -> None:
        field = params["sort_field"]
        twice = next_sort_params(next_sort_params(params, field), field)
        assert resolve_sort(twice) == resolve_sort(params)

    @given(sort_params())
    def test_toggle_flips_direction(self, params: dict[str, str]) -> None:
        field = params["sort_field"]
        before = resolve_sort(params)
        after = resolve_sort(next_sort_params(params, field))
        assert after.field == field
        assert after.direction is not before.direction

    @given(sort_params(), st.sampled_from(["created_at", "status", "uuid"]))
    def test_new_column_always_descending(self, params: dict[str, str], target: str) -> None:
        result = next_sort_params(params, target)
        assert resolve_sort(result) == SortState(SortDirection.DESC, target)
        assert result.get("page") == params.get("page")


class TestPageWindowProperties:
    @given(pagination_states(), st.integers(min_value=1, max_value=12))
    def test_window_within_bounds(self, state: tuple[int, int], distance: int) -> None:
        current, total = state
        window = page_window(current, total, distance)
        assert window
        assert all(1 <= n <= total for n in window)
        assert current in window

    @given(pagination_states(), st.integers(min_value=1, max_value=12))
    def test_window_is_contiguous_and_bounded_width(self, state: tuple[int, int], distance: int) -> None:
        current, total = state
        window = page_window(current, total, distance)
        assert window == list(range(window[0], window[-1] + 1))
        assert len(window) <= 2 * distance + 1

    @given(st.integers(min_value=1, max_value=1000))
    def test_no_pages_shows_current(self, current: int) -> None:
        assert page_window(current, 0) == [current]


class TestQueryStringProperties:
    @given(parameter_maps())
    def test_round_trip(self, params: dict) -> None:
        assert parse_query_string(build_query_string(params, {})) == params

    @given(parameter_maps())
    def test_keys_sorted(self, params: dict) -> None:
        qs = build_query_string(params)
        keys = [unquote_plus(pair.split("=", 1)[0]) for pair in qs.split("&") if pair]
        assert keys == sorted(keys)

    @given(parameter_maps(), param_values())
    def test_page_override_always_wins(self, params: dict, page: str) -> None:
        parsed = parse_query_string(build_query_string(params, {"page": page}))
        assert parsed["page"] == page
