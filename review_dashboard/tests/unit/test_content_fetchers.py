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
"""Unit tests for file and HTTP content fetchers."""

import httpx
import pytest

from review_dashboard.app.domain.errors import FetchError
from review_dashboard.app.infrastructure.file_content_fetcher import (
    FileContentFetcher,
)
from review_dashboard.app.infrastructure.http_content_fetcher import (
    HttpContentFetcher,
)


@pytest.mark.asyncio
async def test_file_fetcher_reads_relative_paths(tmp_path):
    (tmp_path / "status.txt").write_text("all good\n", encoding="utf-8")
    fetcher = FileContentFetcher(tmp_path)

    assert await fetcher.fetch_text("status.txt") == "all good\n"
    assert await fetcher.fetch_text("/status.txt") == "all good\n"


@pytest.mark.asyncio
async def test_file_fetcher_missing_file(tmp_path):
    fetcher = FileContentFetcher(tmp_path)

    with pytest.raises(FetchError, match="Failed to load missing.log"):
        await fetcher.fetch_text("missing.log")


@pytest.mark.asyncio
async def test_file_fetcher_refuses_paths_outside_root(tmp_path):
    root = tmp_path / "data"
    root.mkdir()
    (tmp_path / "secret.txt").write_text("secret", encoding="utf-8")
    fetcher = FileContentFetcher(root)

    with pytest.raises(FetchError, match="outside data directory"):
        await fetcher.fetch_text("../secret.txt")


@pytest.mark.asyncio
async def test_file_fetcher_reports_unusable_paths(tmp_path):
    fetcher = FileContentFetcher(tmp_path)

    with pytest.raises(FetchError, match="Failed to load"):
        await fetcher.fetch_text("abc_bu\x00ild.log")


def build_http_fetcher(seen: list[httpx.Request]) -> HttpContentFetcher:
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path == "/ci/status.txt":
            return httpx.Response(200, text="status body")
        return httpx.Response(404, text="not found")

    return HttpContentFetcher(
        "https://ci.example/ci", transport=httpx.MockTransport(handler)
    )


@pytest.mark.asyncio
async def test_http_fetcher_reads_from_base_url():
    seen: list[httpx.Request] = []

    body = await build_http_fetcher(seen).fetch_text("status.txt")

    assert body == "status body"
    assert str(seen[0].url) == "https://ci.example/ci/status.txt"


@pytest.mark.asyncio
async def test_http_fetcher_raises_on_error_status():
    seen: list[httpx.Request] = []

    with pytest.raises(FetchError, match="HTTP 404"):
        await build_http_fetcher(seen).fetch_text("abc_build.log")


@pytest.mark.asyncio
async def test_http_fetcher_keeps_record_paths_on_base_host():
    seen: list[httpx.Request] = []

    with pytest.raises(FetchError):
        await build_http_fetcher(seen).fetch_text("https://evil.example/x y.log")

    assert seen[0].url.host == "ci.example"
    assert seen[0].url.path.startswith("/ci/")
