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
"""In-memory snapshot of the metadata store."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterator, Mapping

from review_dashboard.app.domain.models import Record


class InMemoryMetadataStore:
    """Write-once record snapshot.

    Records are copied on construction and exposed read-only, so no
    locking is needed once the session is running.
    """

    def __init__(self, records: Mapping[str, Mapping[str, Any]]) -> None:
        self._records: Mapping[str, Record] = MappingProxyType(
            {key: MappingProxyType(dict(record)) for key, record in records.items()}
        )

    def get(self, key: str) -> Record | None:
        return self._records.get(key)

    def items(self) -> Iterator[tuple[str, Record]]:
        return iter(self._records.items())

    def keys(self) -> list[str]:
        return list(self._records.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)
