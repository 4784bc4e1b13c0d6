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
"""Content fetcher for results published behind a web server."""

from __future__ import annotations

from urllib.parse import quote

import httpx

from review_dashboard.app.application.fetching import ContentFetcher
from review_dashboard.app.domain.errors import FetchError


class HttpContentFetcher(ContentFetcher):
    """Fetches paths relative to ``base_url``."""

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout
        self.transport = transport

    async def fetch_text(self, path: str) -> str:
        # Quoting keeps record-derived paths relative to base_url.
        relative = quote(path.lstrip("/"), safe="/")
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(relative)
        except httpx.HTTPError as exc:
            raise FetchError(path, f"Failed to load {path}: {exc}") from exc
        if not response.is_success:
            raise FetchError(
                path, f"Failed to load {path}: HTTP {response.status_code}"
            )
        return response.text
