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
"""FastAPI entrypoint for the CI review dashboard."""

import asyncio
import logging
import os

from fastapi import FastAPI, HTTPException
from fastapi import WebSocket, WebSocketDisconnect
from fastapi.responses import HTMLResponse
from pydantic import ValidationError

from review_dashboard.app.api.schemas import (
    FilterMessage,
    LogMessage,
    LogPanelResponse,
    NavigateMessage,
    VersionResponse,
    ViewResponse,
    client_message_adapter,
)
from review_dashboard.app.api.shell import SHELL_PAGE
from review_dashboard.app.application.dashboard_controller import (
    DashboardController,
    ViewPublisher,
    ViewUpdate,
)
from review_dashboard.app.application.fetching import ContentFetcher
from review_dashboard.app.application.snapshot_loader import SnapshotLoader
from review_dashboard.app.application.view_renderer import ViewConfig, ViewRenderer
from review_dashboard.app.domain.errors import InitializationFailure
from review_dashboard.app.domain.models import (
    DashboardEvent,
    DetailView,
    FilterChanged,
    LogPanel,
    LogRequested,
    NavigationChanged,
    ViewKind,
)
from review_dashboard.app.domain.view_router import KeyResolver, ViewRouter
from review_dashboard.app.infrastructure.file_content_fetcher import (
    FileContentFetcher,
)
from review_dashboard.app.infrastructure.html_presenter import HtmlPresenter
from review_dashboard.app.infrastructure.http_content_fetcher import (
    HttpContentFetcher,
)
from review_dashboard.app.infrastructure.key_resolvers import (
    DEFAULT_INSTALL_PREFIX,
    DEFAULT_KEY_SUFFIX,
    DirectKeyResolver,
    IndirectKeyResolver,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="CI Review Dashboard",
    version="0.1.0",
)


def resolve_key_mode() -> str:
    return os.getenv("CI_DASHBOARD_KEY_MODE", "direct").strip().lower()


def resolve_source_mode() -> str:
    return os.getenv("CI_DASHBOARD_SOURCE", "file").strip().lower()


def resolve_home_filters() -> bool:
    value = os.getenv("CI_DASHBOARD_HOME_FILTERS", "1").strip().lower()
    return value not in {"0", "false", "no", "off"}


def build_resolver() -> KeyResolver:
    if resolve_key_mode() == "indirect":
        return IndirectKeyResolver(
            install_prefix=os.getenv(
                "CI_DASHBOARD_INSTALL_PREFIX", DEFAULT_INSTALL_PREFIX
            ),
            key_suffix=os.getenv("CI_DASHBOARD_KEY_SUFFIX", DEFAULT_KEY_SUFFIX),
        )
    return DirectKeyResolver()


def build_fetcher() -> ContentFetcher:
    if resolve_source_mode() == "http":
        base_url = os.getenv("CI_DASHBOARD_BASE_URL", "").strip()
        if not base_url:
            raise RuntimeError("CI_DASHBOARD_BASE_URL is required for http source")
        timeout_raw = os.getenv("CI_DASHBOARD_HTTP_TIMEOUT", "").strip()
        return HttpContentFetcher(
            base_url=base_url, timeout=float(timeout_raw) if timeout_raw else None
        )
    return FileContentFetcher(os.getenv("CI_DASHBOARD_DATA_DIR", "."))


def build_view_config() -> ViewConfig:
    return ViewConfig(
        timezone=os.getenv("CI_DASHBOARD_TIMEZONE", ViewConfig.timezone),
        home_filters_enabled=resolve_home_filters(),
    )


resolver = build_resolver()
fetcher = build_fetcher()
view_config = build_view_config()
presenter = HtmlPresenter()


async def open_session(publisher: ViewPublisher | None = None) -> DashboardController:
    """Start a session with a fresh snapshot, like a page load."""
    return await DashboardController.start(
        fetcher=fetcher,
        router=ViewRouter(resolver),
        renderer=ViewRenderer(resolver, view_config),
        publisher=publisher,
    )


def to_message(update: ViewUpdate) -> dict[str, str]:
    """Convert a controller update to a websocket message."""
    view = update.view
    kind = "log" if isinstance(view, LogPanel) else view.kind.value
    return {
        "type": "render",
        "target": update.target,
        "view": kind,
        "html": presenter.present(view),
    }


def to_event(message: NavigateMessage | FilterMessage | LogMessage) -> DashboardEvent:
    if isinstance(message, NavigateMessage):
        return NavigationChanged(fragment=message.fragment)
    if isinstance(message, FilterMessage):
        return FilterChanged(criteria=message.criteria)
    return LogRequested(test_name=message.test_name)


class WebSocketPublisher(ViewPublisher):
    """Sends controller updates to one browser session."""

    def __init__(self, websocket: WebSocket) -> None:
        self.websocket = websocket

    async def publish(self, update: ViewUpdate) -> None:
        await self.websocket.send_json(to_message(update))


@app.get("/health")
def health() -> dict[str, str]:
    """Simple health endpoint."""
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
def index() -> str:
    """Browser shell page."""
    return SHELL_PAGE


@app.get("/api/version", response_model=VersionResponse)
async def version() -> VersionResponse:
    """Return the published dashboard version, if any."""
    return VersionResponse(version=await SnapshotLoader(fetcher).load_version())


@app.get("/api/view", response_model=ViewResponse)
async def render_view(fragment: str = "") -> ViewResponse:
    """Render the view a fragment selects from a fresh snapshot."""
    try:
        controller = await open_session()
    except InitializationFailure as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc

    view = await controller.navigate(fragment)
    if controller.state.route.kind == ViewKind.ERROR:
        raise HTTPException(status_code=404, detail=controller.state.route.message)
    return ViewResponse(
        view=view.kind.value,
        html=presenter.present(view),
        version=controller.state.version,
    )


@app.get("/api/log", response_model=LogPanelResponse)
async def render_log(fragment: str, test: str) -> LogPanelResponse:
    """Render one test's log panel for a review fragment."""
    try:
        controller = await open_session()
    except InitializationFailure as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc

    view = await controller.navigate(fragment)
    if controller.state.route.kind == ViewKind.ERROR:
        raise HTTPException(status_code=404, detail=controller.state.route.message)
    if not isinstance(view, DetailView):
        raise HTTPException(status_code=400, detail="Logs require a review fragment")
    try:
        panel = await controller.show_log(test)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    if panel is None:
        raise HTTPException(status_code=400, detail="Logs require a review fragment")
    return LogPanelResponse(
        state=panel.state.value,
        test_name=panel.test_name,
        log_path=panel.log_path,
        text=panel.text,
        html=presenter.present_log_panel(panel),
    )


async def _dispatch(
    controller: DashboardController, event: DashboardEvent, websocket: WebSocket
) -> None:
    try:
        await controller.dispatch(event)
    except ValueError as exc:
        await websocket.send_json({"type": "error", "message": str(exc)})
    except Exception:
        logger.exception("Dashboard event %r failed", event)
        await websocket.send_json({"type": "error", "message": "Internal error"})


@app.websocket("/ws/dashboard")
async def ws_dashboard(websocket: WebSocket) -> None:
    """One page-lifetime session driven by browser events."""
    await websocket.accept()
    try:
        controller = await open_session(publisher=WebSocketPublisher(websocket))
    except InitializationFailure as exc:
        await websocket.send_json(
            {
                "type": "render",
                "target": "content",
                "view": ViewKind.ERROR.value,
                "html": presenter.present_error(
                    ViewRenderer(resolver, view_config).render_error(str(exc))
                ),
            }
        )
        await websocket.close()
        return

    logger.info("Dashboard session started")
    await websocket.send_json({"type": "ready", "version": controller.state.version})

    # Events run concurrently; a slow status or log fetch never blocks input.
    pending: set[asyncio.Task] = set()
    try:
        while True:
            raw = await websocket.receive_text()
            try:
                message = client_message_adapter.validate_json(raw)
            except ValidationError as exc:
                await websocket.send_json(
                    {
                        "type": "error",
                        "message": f"Invalid message: {exc.error_count()} error(s)",
                    }
                )
                continue
            task = asyncio.create_task(
                _dispatch(controller, to_event(message), websocket)
            )
            pending.add(task)
            task.add_done_callback(pending.discard)
    except WebSocketDisconnect:
        logger.info("Dashboard session closed")
    finally:
        for task in pending:
            task.cancel()
