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
"""Build structured home, detail, status and log views."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable
from urllib.parse import quote
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from review_dashboard.app.application.filter_controller import (
    DETAIL_FILTER,
    HOME_FILTER,
)
from review_dashboard.app.application.result_extractor import extract_outcomes
from review_dashboard.app.application.status_aggregator import summarize_by_class
from review_dashboard.app.domain.models import (
    REQUIRED_FIELDS,
    Cell,
    DetailView,
    ErrorView,
    HomeView,
    LogPanel,
    Outcome,
    PanelState,
    Record,
    Row,
    StatusView,
)
from review_dashboard.app.domain.view_router import REVIEW_PREFIX, KeyResolver

_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass(frozen=True)
class ViewConfig:
    """Rendering options."""

    timezone: str = "America/New_York"
    revision_url: str = (
        "https://review.whamcloud.com/plugins/gitiles/fs/lustre-release/+/{revision}"
    )
    change_url: str = "https://review.whamcloud.com/c/fs/lustre-release/+/{change_id}"
    home_filters_enabled: bool = True

    def __post_init__(self) -> None:
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {self.timezone}") from exc


def parse_timestamp(value: object) -> float | None:
    """Parse epoch seconds; ``None`` when the value is not numeric."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _LEADING_FLOAT.match(value)
        if not match:
            return None
        number = float(match.group(1))
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def format_timestamp(timestamp: float | None, zone: str) -> str:
    """Format like ``11/14/2023, 05:13:20 PM`` in a fixed zone."""
    if timestamp is None:
        return "N/A"
    try:
        moment = datetime.fromtimestamp(timestamp, ZoneInfo(zone))
    except (OverflowError, OSError, ValueError, ZoneInfoNotFoundError):
        return "N/A"
    return moment.strftime("%m/%d/%Y, %I:%M:%S %p")


def is_eligible(record: Record) -> bool:
    """Home listing needs every required field present and non-empty."""
    return all(record.get(name) for name in REQUIRED_FIELDS)


def _text(value: object, default: str = "") -> str:
    if value is None:
        return default
    return str(value)


def _sort_key(item: tuple[str, Record]) -> float:
    timestamp = parse_timestamp(item[1].get("time_stamp"))
    return -math.inf if timestamp is None else timestamp


class ViewRenderer:
    """Turns records into view models; markup is left to a presenter."""

    def __init__(self, resolver: KeyResolver, config: ViewConfig | None = None):
        self.resolver = resolver
        self.config = config or ViewConfig()

    def outcomes_for(self, key: str, record: Record) -> list[Outcome]:
        return extract_outcomes(record, self.resolver.log_prefix(key))

    def render_home(self, records: Iterable[tuple[str, Record]]) -> HomeView:
        """Newest first; records with malformed timestamps sort last."""
        eligible = [
            (key, record)
            for key, record in records
            if self.resolver.is_listed(key) and is_eligible(record)
        ]
        eligible.sort(key=_sort_key, reverse=True)
        rows = [self._home_row(key, record) for key, record in eligible]
        return HomeView(
            rows=rows,
            filters_enabled=self.config.home_filters_enabled,
            selection=HOME_FILTER.default_selection(),
        )

    def _home_row(self, key: str, record: Record) -> Row:
        revision = _text(record.get("patch_revision"))
        change_id = _text(record.get("change_id"))
        enforced, optional = summarize_by_class(self.outcomes_for(key, record))
        review_id = quote(self.resolver.review_id(key, record), safe="")
        return Row(
            cells=(
                Cell("Link", href=f"#{REVIEW_PREFIX}{review_id}"),
                Cell(_text(record.get("subject"))),
                Cell(
                    revision,
                    href=self.config.revision_url.format(
                        revision=quote(revision, safe="")
                    ),
                    external=True,
                ),
                Cell(
                    change_id,
                    href=self.config.change_url.format(
                        change_id=quote(change_id, safe="")
                    ),
                    external=True,
                ),
                Cell(
                    format_timestamp(
                        parse_timestamp(record.get("time_stamp")),
                        self.config.timezone,
                    )
                ),
                Cell(_text(record.get("total_runtime") or "N/A")),
                Cell(enforced.text, color=enforced.color),
                Cell(optional.text, color=optional.color),
            )
        )

    def render_detail(self, key: str, record: Record) -> DetailView:
        """Single combined table of all outcomes plus an empty log panel."""
        outcomes = self.outcomes_for(key, record)
        rows = [
            Row(
                cells=(
                    Cell(outcome.name, log_path=outcome.log_path),
                    Cell(outcome.description),
                    Cell("Enforced" if outcome.enforced else "Optional"),
                    Cell(outcome.runtime),
                    Cell(
                        "PASS" if outcome.passed else "FAIL",
                        color="green" if outcome.passed else "red",
                    ),
                )
            )
            for outcome in outcomes
        ]
        return DetailView(
            key=key,
            title=_text(record.get("subject")) or "Unknown",
            outcomes=outcomes,
            rows=rows,
            selection=DETAIL_FILTER.default_selection(),
            log_panel=LogPanel(),
        )

    def render_status(self, text: str) -> StatusView:
        return StatusView(state=PanelState.READY, text=text)

    def render_status_error(self, reason: str) -> ErrorView:
        return ErrorView(message=f"Failed to load status: {reason}")

    def render_log(self, text: str, log_path: str, test_name: str) -> LogPanel:
        return LogPanel(
            state=PanelState.READY, text=text, log_path=log_path, test_name=test_name
        )

    def render_log_loading(self, log_path: str, test_name: str) -> LogPanel:
        return LogPanel(
            state=PanelState.LOADING,
            text="Loading...",
            log_path=log_path,
            test_name=test_name,
        )

    def render_log_error(self, reason: str, log_path: str, test_name: str) -> LogPanel:
        return LogPanel(
            state=PanelState.ERROR,
            text=f"Error loading log: {reason}\nPath: {log_path}",
            log_path=log_path,
            test_name=test_name,
        )

    def render_error(self, message: str) -> ErrorView:
        return ErrorView(message=message)
