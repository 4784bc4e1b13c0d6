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
"""Unit tests for HTML markup and escaping."""

from review_dashboard.app.application.filter_controller import DETAIL_FILTER
from review_dashboard.app.application.view_renderer import ViewRenderer
from review_dashboard.app.domain.models import ErrorView, StatusView, PanelState
from review_dashboard.app.infrastructure.html_presenter import HtmlPresenter, escape
from review_dashboard.app.infrastructure.in_memory_metadata_store import (
    InMemoryMetadataStore,
)
from review_dashboard.app.infrastructure.key_resolvers import DirectKeyResolver


def build_renderer() -> ViewRenderer:
    return ViewRenderer(DirectKeyResolver())


def test_escape_encodes_markup_characters():
    assert escape("<a href=\"x\">'&'</a>") == (
        "&lt;a href=&quot;x&quot;&gt;&#x27;&amp;&#x27;&lt;/a&gt;"
    )
    assert escape(None) == ""


def test_script_in_subject_is_escaped_on_home_and_detail():
    record = {
        "patch_revision": "abc123",
        "change_id": "100",
        "subject": "<script>alert(1)</script>",
        "time_stamp": "1700000000",
        "result<b>x</b>": "0",
    }
    store = InMemoryMetadataStore({"abc123": record})
    presenter = HtmlPresenter()

    home = presenter.present(build_renderer().render_home(store.items()))
    detail = presenter.present(build_renderer().render_detail("abc123", record))

    for markup in (home, detail):
        assert "<script>" not in markup
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in markup
    assert "<b>x</b>" not in detail


def test_key_in_link_cannot_break_attribute():
    record = {
        "patch_revision": "r",
        "change_id": "1",
        "subject": "s",
        "time_stamp": "1",
    }
    store = InMemoryMetadataStore({'x" onclick="evil()': record})

    markup = HtmlPresenter().present(build_renderer().render_home(store.items()))

    assert 'onclick="evil()"' not in markup


def test_home_renders_both_filter_groups_with_all_checked():
    markup = HtmlPresenter().present(build_renderer().render_home([]))

    assert 'name="enforcedfilter"' in markup
    assert 'name="optionalfilter"' in markup
    assert markup.count('value="All" checked') == 2


def test_filtered_rows_carry_marker_class():
    view = build_renderer().render_detail("k", {"resultA": "0", "resultB": "1"})
    DETAIL_FILTER.apply_filter(view.rows, {"status": "FAIL"})
    view.selection = DETAIL_FILTER.parse_criteria({"status": "FAIL"})

    markup = HtmlPresenter().present(view)

    assert markup.count('<tr class="filtered">') == 1
    assert 'value="FAIL" checked' in markup
    assert 'data-test-name="A"' in markup
    assert 'id="logPanel"' in markup


def test_status_and_error_views():
    presenter = HtmlPresenter()

    assert presenter.present(StatusView()) == (
        '<div class="loading">Loading status...</div>'
    )
    assert presenter.present(
        StatusView(state=PanelState.READY, text="a < b\n")
    ) == "<pre>a &lt; b\n</pre>"
    assert presenter.present(ErrorView(message="<oops>")) == (
        '<div class="error">&lt;oops&gt;</div>'
    )


def test_log_panel_escapes_text_and_path():
    panel = build_renderer().render_log("<html>log</html>", "k_<x>.log", "x")

    markup = HtmlPresenter().present(panel)

    assert "&lt;html&gt;log&lt;/html&gt;" in markup
    assert "k_&lt;x&gt;.log" in markup
