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
"""HTML markup for dashboard views.

This is the only module that produces markup. Every value that can come from
the metadata store or a fetched file goes through ``escape`` before it is
embedded, attribute values included.
"""

from __future__ import annotations

import html
from typing import Union

from review_dashboard.app.application.filter_controller import (
    DETAIL_FILTER,
    HOME_FILTER,
)
from review_dashboard.app.domain.models import (
    Cell,
    DetailView,
    ErrorView,
    HomeView,
    LogPanel,
    PanelState,
    Row,
    StatusFilter,
    StatusView,
    View,
)

_HOME_HEADERS = (
    "Tests",
    "Subject",
    "Hash",
    "Change ID",
    "Time",
    "Runtime",
    "Enforced",
    "Optional",
)
_DETAIL_HEADERS = ("Test", "Description", "Type", "Runtime", "Status")

_FILTER_LABELS = {
    "status": "Filter by (Status):",
    "enforced": "Filter by (Enforced):",
    "optional": "Filter by (Optional):",
}
_RADIO_LABELS = (
    (StatusFilter.PASS, "Passed"),
    (StatusFilter.FAIL, "Failed"),
    (StatusFilter.ALL, "All"),
)


def escape(value: object) -> str:
    """HTML-escape ``value`` converted to string."""
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


class HtmlPresenter:
    """Converts view models into HTML fragments."""

    def present(self, view: Union[View, LogPanel]) -> str:
        if isinstance(view, HomeView):
            return self.present_home(view)
        if isinstance(view, DetailView):
            return self.present_detail(view)
        if isinstance(view, StatusView):
            return self.present_status(view)
        if isinstance(view, ErrorView):
            return self.present_error(view)
        if isinstance(view, LogPanel):
            return self.present_log_panel(view)
        raise TypeError(f"Cannot present {type(view).__name__}")

    def present_home(self, view: HomeView) -> str:
        parts = [f"<h1>{escape(view.title)}</h1>"]
        if view.filters_enabled:
            parts.append(
                '<div id="filters">'
                + "".join(
                    f"<div>{self._radio_group(axis.name, view.selection)}</div>"
                    for axis in HOME_FILTER.axes
                )
                + "</div>"
            )
        parts.append(self._table(_HOME_HEADERS, view.rows, css_class="home-table"))
        return "".join(parts)

    def present_detail(self, view: DetailView) -> str:
        filters = "".join(
            self._radio_group(axis.name, view.selection) for axis in DETAIL_FILTER.axes
        )
        table = self._table(_DETAIL_HEADERS, view.rows, css_class="test-results-table")
        left = (
            '<a href="#" class="back-link">&larr; Back to Home</a>'
            f"<h1>{escape(view.title)}</h1>"
            f'<div id="filters">{filters}</div>'
            f"{table}"
        )
        return (
            '<div class="split-view">'
            f'<div class="left-panel">{left}</div>'
            f"{self.present_log_panel(view.log_panel)}"
            "</div>"
        )

    def present_status(self, view: StatusView) -> str:
        if view.state == PanelState.LOADING:
            return f'<div class="loading">{escape(view.text)}</div>'
        return f"<pre>{escape(view.text)}</pre>"

    def present_error(self, view: ErrorView) -> str:
        return f'<div class="error">{escape(view.message)}</div>'

    def present_log_panel(self, panel: LogPanel) -> str:
        if panel.state == PanelState.EMPTY:
            return (
                '<div class="right-panel empty" id="logPanel">'
                f"{escape(panel.text)}</div>"
            )
        header = ""
        if panel.log_path:
            header = f'<div class="log-path">{escape(panel.log_path)}</div>'
        return (
            f'<div class="right-panel" id="logPanel" data-state="{panel.state.value}">'
            f'{header}<pre class="log-content">{escape(panel.text)}</pre></div>'
        )

    def _radio_group(self, name: str, selection: dict[str, StatusFilter]) -> str:
        current = selection.get(name, StatusFilter.ALL)
        radios = "".join(
            f'<label><input type="radio" name="{name}filter" '
            f'data-filter-axis="{name}" value="{value.value}"'
            f'{" checked" if value == current else ""}> {label}</label>'
            for value, label in _RADIO_LABELS
        )
        return f"{_FILTER_LABELS[name]} {radios}"

    def _table(self, headers: tuple[str, ...], rows: list[Row], css_class: str) -> str:
        head = "".join(f"<th>{header}</th>" for header in headers)
        body = "".join(self._row(row) for row in rows)
        return (
            f'<table class="{css_class}">'
            f"<thead><tr>{head}</tr></thead>"
            f"<tbody>{body}</tbody></table>"
        )

    def _row(self, row: Row) -> str:
        css = ' class="filtered"' if row.filtered else ""
        return f"<tr{css}>" + "".join(self._cell(cell) for cell in row.cells) + "</tr>"

    def _cell(self, cell: Cell) -> str:
        style = f' style="color:{escape(cell.color)};"' if cell.color else ""
        content = escape(cell.text)
        if cell.log_path is not None:
            content = (
                f'<a href="#" class="log-link" data-test-name="{escape(cell.text)}" '
                f'data-log-path="{escape(cell.log_path)}">{content}</a>'
            )
        elif cell.href is not None:
            target = ' target="_blank" rel="noopener"' if cell.external else ""
            content = f'<a href="{escape(cell.href)}"{target}>{content}</a>'
        return f"<td{style}>{content}</td>"
