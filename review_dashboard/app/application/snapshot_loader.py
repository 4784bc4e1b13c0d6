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
"""Snapshot and version loading use-cases."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from review_dashboard.app.application.fetching import (
    METADATA_PATH,
    VERSION_PATH,
    ContentFetcher,
)
from review_dashboard.app.domain.errors import FetchError, InitializationFailure
from review_dashboard.app.infrastructure.in_memory_metadata_store import (
    InMemoryMetadataStore,
)

logger = logging.getLogger(__name__)

_snapshot_adapter = TypeAdapter(dict[str, dict[str, Any]])
_version_adapter = TypeAdapter(dict[str, Any])


class SnapshotLoader:
    """Fetches the metadata snapshot once per session."""

    def __init__(self, fetcher: ContentFetcher, path: str = METADATA_PATH):
        self.fetcher = fetcher
        self.path = path

    async def load(self) -> InMemoryMetadataStore:
        """Build the store or raise InitializationFailure."""
        try:
            body = await self.fetcher.fetch_text(self.path)
        except FetchError as exc:
            raise self._failure(str(exc)) from exc

        try:
            records = _snapshot_adapter.validate_json(body, strict=True)
        except ValidationError as exc:
            raise self._failure(
                f"{self.path} must be an object of objects "
                f"({exc.error_count()} validation error(s))"
            ) from exc

        store = InMemoryMetadataStore(records)
        logger.info("Loaded %s record(s) from %s", len(store), self.path)
        return store

    async def load_version(self) -> str | None:
        """Return ``"<tag> (<commit>)"``; version info is optional."""
        try:
            body = await self.fetcher.fetch_text(VERSION_PATH)
            version = _version_adapter.validate_json(body)
        except (FetchError, ValidationError) as exc:
            logger.debug("Version info unavailable: %s", exc)
            return None
        tag = version.get("tag")
        commit = version.get("commit")
        if not tag or not commit:
            return None
        return f"{tag} ({commit})"

    @staticmethod
    def _failure(reason: str) -> InitializationFailure:
        logger.warning("Snapshot load failed: %s", reason)
        return InitializationFailure(
            f"Failed to initialize application: Could not load metadata: {reason}"
        )
