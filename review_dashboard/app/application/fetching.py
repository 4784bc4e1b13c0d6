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
"""Content source contract and well-known paths."""

from __future__ import annotations

from typing import Protocol

METADATA_PATH = "metadata_store.json"
STATUS_PATH = "status.txt"
VERSION_PATH = "version.json"


class ContentFetcher(Protocol):
    """Fetch-by-path capability for snapshot, status and log files."""

    async def fetch_text(self, path: str) -> str:
        """Return the body at ``path`` or raise FetchError."""
