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
"""Content fetcher reading from a local results directory."""

from __future__ import annotations

import asyncio
from pathlib import Path

from review_dashboard.app.application.fetching import ContentFetcher
from review_dashboard.app.domain.errors import FetchError


class FileContentFetcher(ContentFetcher):
    """Serves paths relative to ``root``; nothing outside it is readable."""

    def __init__(self, root: str | Path):
        self.root = Path(root).resolve()

    def _resolve(self, path: str) -> Path:
        try:
            target = (self.root / path.lstrip("/")).resolve()
        except (OSError, ValueError) as exc:
            raise FetchError(path, f"Failed to load {path}: {exc}") from exc
        if not target.is_relative_to(self.root):
            raise FetchError(path, f"Path outside data directory: {path}")
        return target

    async def fetch_text(self, path: str) -> str:
        target = self._resolve(path)
        try:
            return await asyncio.to_thread(
                target.read_text, encoding="utf-8", errors="replace"
            )
        except FileNotFoundError as exc:
            raise FetchError(path, f"Failed to load {path}") from exc
        except OSError as exc:
            raise FetchError(path, f"Failed to load {path}: {exc.strerror}") from exc
