# Copyright 2026 icecake0141
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# This file was created or modified with the assistance of an AI (Large Language Model).
# Review required for correctness, security, and licensing.
"""Unit tests for home and detail view construction."""

import pytest

from review_dashboard.app.application.view_renderer import (
    ViewConfig,
    ViewRenderer,
    format_timestamp,
    parse_timestamp,
)
from review_dashboard.app.domain.models import PanelState, StatusFilter
from review_dashboard.app.infrastructure.in_memory_metadata_store import (
    InMemoryMetadataStore,
)
from review_dashboard.app.infrastructure.key_resolvers import (
    DirectKeyResolver,
    IndirectKeyResolver,
)


def make_record(**overrides):
    record = {
        "patch_revision": "abc123",
        "change_id": "100",
        "subject": "Fix bug",
        "time_stamp": "1700000000",
    }
    record.update(overrides)
    return record


def build_renderer(resolver=None) -> ViewRenderer:
    return ViewRenderer(resolver or DirectKeyResolver(), ViewConfig())


@pytest.mark.parametrize(
    "missing", ["patch_revision", "change_id", "subject", "time_stamp"]
)
def test_home_excludes_records_missing_required_fields(missing):
    incomplete = make_record()
    del incomplete[missing]
    empty = make_record(**{missing: ""})
    store = InMemoryMetadataStore(
        {"keep": make_record(), "drop1": incomplete, "drop2": empty}
    )

    view = build_renderer().render_home(store.items())

    assert [row.cells[0].href for row in view.rows] == ["#review/keep"]


def test_home_rows_sorted_newest_first_with_malformed_last():
    store = InMemoryMetadataStore(
        {
            "old": make_record(time_stamp="1600000000"),
            "bad": make_record(time_stamp="yesterday"),
            "new": make_record(time_stamp="1700000500.5"),
            "mid": make_record(time_stamp=1650000000),
        }
    )

    view = build_renderer().render_home(store.items())

    assert [row.cells[0].href for row in view.rows] == [
        "#review/new",
        "#review/mid",
        "#review/old",
        "#review/bad",
    ]


def test_home_keeps_snapshot_order_for_equal_timestamps():
    store = InMemoryMetadataStore(
        {"first": make_record(), "second": make_record(), "third": make_record()}
    )

    view = build_renderer().render_home(store.items())

    assert [row.cells[0].href for row in view.rows] == [
        "#review/first",
        "#review/second",
        "#review/third",
    ]


def test_home_row_cells():
    store = InMemoryMetadataStore(
        {
            "abc123": make_record(
                resultBuild="0",
                enforcedBuild="True",
                resultLint="2",
                total_runtime="5m",
            )
        }
    )

    (row,) = build_renderer().render_home(store.items()).rows
    texts = [cell.text for cell in row.cells]

    assert texts == [
        "Link",
        "Fix bug",
        "abc123",
        "100",
        "11/14/2023, 05:13:20 PM",
        "5m",
        "PASS",
        "FAIL",
    ]
    assert row.cells[6].color == "green"
    assert row.cells[7].color == "red"
    assert row.cells[2].external is True
    assert row.cells[2].href.endswith("/+/abc123")
    assert row.cells[3].href.endswith("/+/100")


def test_home_row_defaults_when_no_results():
    store = InMemoryMetadataStore({"abc123": make_record()})

    (row,) = build_renderer().render_home(store.items()).rows

    assert row.cells[5].text == "N/A"
    assert (row.cells[6].text, row.cells[6].color) == ("N/A", "gray")
    assert (row.cells[7].text, row.cells[7].color) == ("N/A", "gray")


def test_home_defaults_to_all_filters():
    view = build_renderer().render_home([])

    assert view.filters_enabled is True
    assert view.selection == {
        "enforced": StatusFilter.ALL,
        "optional": StatusFilter.ALL,
    }


def test_home_links_use_change_id_in_indirect_mode():
    key = "/var/www/ci-lustre/upstream-patch-review/200_home.html"
    store = InMemoryMetadataStore({key: make_record(change_id="200")})

    (row,) = build_renderer(IndirectKeyResolver()).render_home(store.items()).rows

    assert row.cells[0].href == "#review/200"


def test_detail_view_single_enforced_build():
    record = make_record(resultBuild="0", enforcedBuild="True")

    view = build_renderer().render_detail("abc123", record)

    assert view.title == "Fix bug"
    assert len(view.rows) == 1
    assert [cell.text for cell in view.rows[0].cells] == [
        "Build",
        "Job: Build",
        "Enforced",
        "N/A",
        "PASS",
    ]
    assert view.rows[0].cells[0].log_path == "abc123_build.log"
    assert view.log_panel.state == PanelState.EMPTY
    assert view.selection == {"status": StatusFilter.ALL}


def test_detail_view_abort_is_fail():
    view = build_renderer().render_detail("k", {"resultBuild": "abort"})

    status = view.rows[0].cells[4]
    assert (status.text, status.color) == ("FAIL", "red")
    assert view.title == "Unknown"


def test_detail_log_paths_use_indirect_prefix():
    key = "/var/www/ci-lustre/upstream-patch-review/200_home.html"
    view = build_renderer(IndirectKeyResolver()).render_detail(
        key, make_record(**{"resultSanity Check": "0"})
    )

    assert view.outcomes[0].log_path == "200_sanity_check.log"


def test_log_error_panel_mentions_path():
    panel = build_renderer().render_log_error("boom", "k_build.log", "Build")

    assert panel.state == PanelState.ERROR
    assert panel.text == "Error loading log: boom\nPath: k_build.log"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("1700000000", 1700000000.0),
        (" 1.5e3", 1500.0),
        (12, 12.0),
        ("abc", None),
        (None, None),
        (False, None),
    ],
)
def test_parse_timestamp(value, expected):
    assert parse_timestamp(value) == expected


def test_format_timestamp_uses_configured_zone():
    assert format_timestamp(1700000000, "UTC") == "11/14/2023, 10:13:20 PM"
    assert format_timestamp(None, "UTC") == "N/A"


@pytest.mark.parametrize("zone", ["Mars/Base", ""])
def test_view_config_rejects_unknown_timezone(zone):
    with pytest.raises(ValueError, match="Unknown timezone"):
        ViewConfig(timezone=zone)


def test_format_timestamp_unknown_zone_is_not_available():
    assert format_timestamp(1700000000, "Mars/Base") == "N/A"


def test_indirect_home_lists_only_addressable_keys():
    listed = "/var/www/ci-lustre/upstream-patch-review/200_home.html"
    store = InMemoryMetadataStore(
        {
            "stray-entry": make_record(change_id="200", time_stamp="1800000000"),
            listed: make_record(change_id="200"),
        }
    )

    rows = build_renderer(IndirectKeyResolver()).render_home(store.items()).rows

    assert [row.cells[0].href for row in rows] == ["#review/200"]
    assert rows[0].cells[4].text == "11/14/2023, 05:13:20 PM"
