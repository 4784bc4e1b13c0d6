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
"""Domain models for the CI review dashboard."""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union
from enum import Enum

Record = Mapping[str, Any]

REQUIRED_FIELDS = ("patch_revision", "change_id", "subject", "time_stamp")


class ViewKind(str, Enum):
    """Top-level views a fragment can select."""

    HOME = "home"
    DETAIL = "detail"
    STATUS = "status"
    ERROR = "error"


class StatusFilter(str, Enum):
    """Radio values shared by every filter group."""

    PASS = "PASS"
    FAIL = "FAIL"
    ALL = "All"


class PanelState(str, Enum):
    """Lifecycle of a panel whose content is fetched separately."""

    EMPTY = "empty"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class ViewState:
    """Result of routing one location fragment."""

    kind: ViewKind
    key: Optional[str] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class Outcome:
    """One named test result derived from a record."""

    name: str
    return_code: int
    enforced: bool
    runtime: str
    description: str
    log_path: str

    @property
    def passed(self) -> bool:
        return self.return_code == 0


@dataclass(frozen=True)
class Summary:
    """Aggregate verdict over a set of outcomes."""

    text: str
    color: str


@dataclass(frozen=True)
class Cell:
    """Single table cell of a rendered row.

    ``href`` marks an in-page or external link, ``log_path`` marks a
    log-load action and ``color`` carries the status colour class.
    """

    text: str
    href: Optional[str] = None
    external: bool = False
    color: Optional[str] = None
    log_path: Optional[str] = None


@dataclass
class Row:
    """Rendered table row; ``filtered`` hides it without touching data."""

    cells: tuple[Cell, ...]
    filtered: bool = False

    def cell_text(self, column: int) -> str:
        if column >= len(self.cells):
            return ""
        return self.cells[column].text.strip()


@dataclass
class LogPanel:
    """Right-hand log viewer of the detail view."""

    state: PanelState = PanelState.EMPTY
    text: str = "Select a test to view logs"
    log_path: Optional[str] = None
    test_name: Optional[str] = None


@dataclass
class HomeView:
    """Testing status listing."""

    rows: list[Row] = field(default_factory=list)
    filters_enabled: bool = True
    selection: dict[str, StatusFilter] = field(default_factory=dict)
    title: str = "Testing Status"
    kind: ViewKind = ViewKind.HOME


@dataclass
class DetailView:
    """Per-record outcome table plus log panel."""

    key: str
    title: str
    outcomes: list[Outcome] = field(default_factory=list)
    rows: list[Row] = field(default_factory=list)
    selection: dict[str, StatusFilter] = field(default_factory=dict)
    log_panel: LogPanel = field(default_factory=LogPanel)
    kind: ViewKind = ViewKind.DETAIL


@dataclass
class StatusView:
    """Verbatim status text."""

    state: PanelState = PanelState.LOADING
    text: str = "Loading status..."
    kind: ViewKind = ViewKind.STATUS


@dataclass(frozen=True)
class ErrorView:
    """In-page error panel."""

    message: str
    kind: ViewKind = ViewKind.ERROR


View = Union[HomeView, DetailView, StatusView, ErrorView]


@dataclass(frozen=True)
class NavigationChanged:
    """Location fragment changed."""

    fragment: str


@dataclass(frozen=True)
class FilterChanged:
    """A radio group in the current view changed."""

    criteria: Mapping[str, str]


@dataclass(frozen=True)
class LogRequested:
    """A test name link in the detail view was clicked."""

    test_name: str


DashboardEvent = Union[NavigationChanged, FilterChanged, LogRequested]
