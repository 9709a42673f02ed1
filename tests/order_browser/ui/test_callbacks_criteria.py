from __future__ import annotations

from order_browser.ui.callbacks.callbacks_criteria import apply_ui_event
from order_browser.ui.ids import IDs
from order_browser.ui.layout.build_layout import initial_criteria_data

PAGE_SIZE = 9


def _inputs(**overrides):
    base = {"type": None, "status": None, "date_mode": "none", "range_from": None, "range_to": None}
    base.update(overrides)
    return base


def _on_page(data: dict, page: int) -> dict:
    return {**data, "current_page": page}


def test_initial_data_matches_defaults():
    data = initial_criteria_data(PAGE_SIZE)

    assert data == {
        "type": "",
        "status": "",
        "date_mode": "none",
        "range_from": None,
        "range_to": None,
        "current_page": 1,
        "page_size": PAGE_SIZE,
    }


def test_filter_change_updates_criteria_and_resets_page():
    data = _on_page(initial_criteria_data(PAGE_SIZE), 3)

    out = apply_ui_event(data, {IDs.Control.TYPE_SELECT}, _inputs(type="Book"), page_size=PAGE_SIZE)

    assert out["type"] == "Book"
    assert out["current_page"] == 1


def test_next_and_prev_only_move_the_page():
    data = {**initial_criteria_data(PAGE_SIZE), "type": "Book"}

    # Control values are ignored on navigation
    after_next = apply_ui_event(data, {IDs.Control.NEXT_BTN}, _inputs(type="Watch"), page_size=PAGE_SIZE)
    after_prev = apply_ui_event(after_next, {IDs.Control.PREV_BTN}, _inputs(), page_size=PAGE_SIZE)
    floored = apply_ui_event(after_prev, {IDs.Control.PREV_BTN}, _inputs(), page_size=PAGE_SIZE)

    assert after_next["current_page"] == 2
    assert after_next["type"] == "Book"
    assert after_prev["current_page"] == 1
    assert floored["current_page"] == 1


def test_reset_wins_over_batched_control_changes():
    data = {
        **_on_page(initial_criteria_data(PAGE_SIZE), 4),
        "type": "Book",
        "status": "Rejected",
        "date_mode": "range",
        "range_from": "2024-01-01",
        "range_to": "2024-02-01",
    }

    out = apply_ui_event(
        data,
        {IDs.Control.RESET_BTN, IDs.Control.TYPE_SELECT},
        _inputs(type="Book"),
        page_size=PAGE_SIZE,
    )

    assert out == initial_criteria_data(PAGE_SIZE)


def test_date_range_inputs_set_both_bounds():
    data = initial_criteria_data(PAGE_SIZE)

    out = apply_ui_event(
        data,
        {IDs.Control.DATE_RANGE},
        _inputs(date_mode="range", range_from="2024-02-01", range_to="2024-03-15"),
        page_size=PAGE_SIZE,
    )

    assert (out["date_mode"], out["range_from"], out["range_to"]) == ("range", "2024-02-01", "2024-03-15")


def test_unchanged_controls_keep_the_current_page():
    data = {**_on_page(initial_criteria_data(PAGE_SIZE), 2), "type": "Book"}

    out = apply_ui_event(data, {IDs.Control.STATUS_SELECT}, _inputs(type="Book"), page_size=PAGE_SIZE)

    assert out == data


def test_missing_store_data_starts_from_defaults():
    out = apply_ui_event(None, {IDs.Control.NEXT_BTN}, _inputs(), page_size=4)

    assert out["current_page"] == 2
    assert out["page_size"] == 4
