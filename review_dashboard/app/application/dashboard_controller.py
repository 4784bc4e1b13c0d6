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
"""Session controller dispatching navigation, filter and log events."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Union

from review_dashboard.app.application.fetching import STATUS_PATH, ContentFetcher
from review_dashboard.app.application.filter_controller import (
    DETAIL_FILTER,
    HOME_FILTER,
)
from review_dashboard.app.application.snapshot_loader import SnapshotLoader
from review_dashboard.app.application.view_renderer import ViewRenderer
from review_dashboard.app.domain.errors import FetchError, SecondaryFetchFailure
from review_dashboard.app.domain.models import (
    DashboardEvent,
    DetailView,
    FilterChanged,
    HomeView,
    LogPanel,
    LogRequested,
    NavigationChanged,
    StatusView,
    View,
    ViewKind,
    ViewState,
)
from review_dashboard.app.domain.view_router import RecordSource, ViewRouter

logger = logging.getLogger(__name__)

CONTENT_TARGET = "content"
LOG_TARGET = "log"


@dataclass(frozen=True)
class ViewUpdate:
    """Rendered region change emitted by the controller."""

    target: str
    view: Union[View, LogPanel]


class ViewPublisher(Protocol):
    """Receiver of view updates, e.g. a websocket session."""

    async def publish(self, update: ViewUpdate) -> None:
        """Publish one update."""


@dataclass
class AppState:
    """Everything one session knows; the store never changes after start."""

    store: RecordSource
    route: ViewState
    view: View
    version: Optional[str] = None


class DashboardController:
    """Owns one session's AppState and applies events to it."""

    def __init__(
        self,
        store: RecordSource,
        router: ViewRouter,
        renderer: ViewRenderer,
        fetcher: ContentFetcher,
        publisher: ViewPublisher | None = None,
        version: str | None = None,
    ):
        self.router = router
        self.renderer = renderer
        self.fetcher = fetcher
        self.publisher = publisher
        self.state = AppState(
            store=store,
            route=ViewState(kind=ViewKind.HOME),
            view=renderer.render_home(store.items()),
            version=version,
        )

    @classmethod
    async def start(
        cls,
        fetcher: ContentFetcher,
        router: ViewRouter,
        renderer: ViewRenderer,
        publisher: ViewPublisher | None = None,
    ) -> "DashboardController":
        """Load the snapshot; InitializationFailure propagates to the caller."""
        loader = SnapshotLoader(fetcher)
        store = await loader.load()
        version = await loader.load_version()
        return cls(
            store=store,
            router=router,
            renderer=renderer,
            fetcher=fetcher,
            publisher=publisher,
            version=version,
        )

    async def dispatch(self, event: DashboardEvent) -> Union[View, LogPanel, None]:
        if isinstance(event, NavigationChanged):
            return await self.navigate(event.fragment)
        if isinstance(event, FilterChanged):
            return await self.apply_filter(event.criteria)
        if isinstance(event, LogRequested):
            return await self.show_log(event.test_name)
        raise ValueError(f"Unknown event: {event!r}")

    async def navigate(self, fragment: str) -> View:
        """Route a fragment and render the selected view from scratch."""
        route = self.router.route(fragment, self.state.store)
        self.state.route = route
        logger.debug("Navigation %r -> %s", fragment, route.kind.value)

        if route.kind == ViewKind.STATUS:
            return await self._show_status()

        if route.kind == ViewKind.DETAIL and route.key is not None:
            record = self.state.store.get(route.key)
            if record is None:
                view: View = self.renderer.render_error("Test data not found")
            else:
                view = self.renderer.render_detail(route.key, record)
        elif route.kind == ViewKind.ERROR:
            view = self.renderer.render_error(route.message or "Unknown error")
        else:
            view = self.renderer.render_home(self.state.store.items())

        await self._set_view(view)
        return view

    async def apply_filter(self, criteria) -> View:
        """Toggle row visibility in the current view without re-rendering."""
        view = self.state.view
        if isinstance(view, HomeView):
            if not view.filters_enabled:
                raise ValueError("Home filters are disabled")
            controller = HOME_FILTER
        elif isinstance(view, DetailView):
            controller = DETAIL_FILTER
        else:
            raise ValueError(f"No filters on the {view.kind.value} view")

        visible = controller.apply_filter(view.rows, criteria)
        view.selection = controller.parse_criteria(criteria)
        logger.debug("Filter %s left %s/%s row(s)", dict(criteria), visible, len(view.rows))
        await self._publish(CONTENT_TARGET, view)
        return view

    async def show_log(self, test_name: str) -> LogPanel | None:
        """Load one log into the detail view's panel.

        Concurrent requests are not cancelled; whichever fetch resolves last
        owns the panel. A response arriving after navigation only updates the
        detached panel of the old view.
        """
        view = self.state.view
        if not isinstance(view, DetailView):
            return None
        outcome = next((item for item in view.outcomes if item.name == test_name), None)
        if outcome is None:
            raise ValueError(f"Unknown test: {test_name}")

        view.log_panel = self.renderer.render_log_loading(outcome.log_path, outcome.name)
        await self._publish(LOG_TARGET, view.log_panel)

        try:
            text = await self._fetch_secondary(outcome.log_path)
        except SecondaryFetchFailure as exc:
            panel = self.renderer.render_log_error(
                exc.reason, outcome.log_path, outcome.name
            )
        else:
            panel = self.renderer.render_log(text, outcome.log_path, outcome.name)

        view.log_panel = panel
        if view is self.state.view:
            await self._publish(LOG_TARGET, panel)
        return panel

    async def _show_status(self) -> View:
        loading = StatusView()
        await self._set_view(loading)
        try:
            text = await self._fetch_secondary(STATUS_PATH)
        except SecondaryFetchFailure as exc:
            view: View = self.renderer.render_status_error(exc.reason)
        else:
            view = self.renderer.render_status(text)

        if self.state.view is not loading:
            # Navigated elsewhere while the fetch was pending.
            return view
        await self._set_view(view)
        return view

    async def _fetch_secondary(self, path: str) -> str:
        try:
            return await self.fetcher.fetch_text(path)
        except FetchError as exc:
            logger.warning("Fetching %s failed: %s", path, exc)
            raise SecondaryFetchFailure(path, str(exc)) from exc

    async def _set_view(self, view: View) -> None:
        self.state.view = view
        await self._publish(CONTENT_TARGET, view)

    async def _publish(self, target: str, view: Union[View, LogPanel]) -> None:
        if self.publisher is not None:
            await self.publisher.publish(ViewUpdate(target=target, view=view))
