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
"""Row visibility filtering over already-rendered tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from review_dashboard.app.domain.models import Row, StatusFilter


@dataclass(frozen=True)
class FilterAxis:
    """One radio group bound to the status column it reads."""

    name: str
    column: int


class FilterController:
    """Applies radio selections to rows by toggling ``Row.filtered``.

    Rows are matched on the text stored in their status cells, so filtering
    never re-derives outcomes or touches the record store.
    """

    def __init__(self, axes: Iterable[FilterAxis]):
        self.axes = tuple(axes)
        self._by_name = {axis.name: axis for axis in self.axes}

    def default_selection(self) -> dict[str, StatusFilter]:
        return {axis.name: StatusFilter.ALL for axis in self.axes}

    def parse_criteria(self, criteria: Mapping[str, str]) -> dict[str, StatusFilter]:
        """Validate axis names and values; absent axes mean "All"."""
        selection = self.default_selection()
        for name, value in criteria.items():
            if name not in self._by_name:
                raise ValueError(f"Unknown filter: {name}")
            try:
                selection[name] = StatusFilter(value)
            except ValueError:
                raise ValueError(f"Invalid filter value for {name}: {value}") from None
        return selection

    def apply_filter(
        self, rows: Iterable[Row], criteria: Mapping[str, str]
    ) -> int:
        """Update row visibility and return the number of visible rows."""
        selection = self.parse_criteria(criteria)
        visible = 0
        for row in rows:
            matched = all(
                selection[axis.name] == StatusFilter.ALL
                or row.cell_text(axis.column) == selection[axis.name].value
                for axis in self.axes
            )
            row.filtered = not matched
            if matched:
                visible += 1
        return visible


# Column indexes follow the rendered table layouts.
DETAIL_STATUS_COLUMN = 4
HOME_ENFORCED_COLUMN = 6
HOME_OPTIONAL_COLUMN = 7

DETAIL_FILTER = FilterController((FilterAxis("status", DETAIL_STATUS_COLUMN),))
HOME_FILTER = FilterController(
    (
        FilterAxis("enforced", HOME_ENFORCED_COLUMN),
        FilterAxis("optional", HOME_OPTIONAL_COLUMN),
    )
)
