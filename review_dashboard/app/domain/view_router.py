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
"""Fragment router selecting the active view."""

from __future__ import annotations

import logging
from typing import Iterator, Protocol
from urllib.parse import unquote

from .errors import LookupFailure
from .models import Record, ViewKind, ViewState

logger = logging.getLogger(__name__)

REVIEW_PREFIX = "review/"


class RecordSource(Protocol):
    """Read-only record lookup used during routing."""

    def get(self, key: str) -> Record | None:
        """Fetch a record by key."""

    def items(self) -> Iterator[tuple[str, Record]]:
        """Iterate records in snapshot order."""


class KeyResolver(Protocol):
    """Addressing scheme mapping review identifiers to record keys."""

    def resolve(self, identifier: str, store: RecordSource) -> str:
        """Return the record key or raise LookupFailure."""

    def is_listed(self, key: str) -> bool:
        """Whether a record under ``key`` is reachable from a review link."""

    def review_id(self, key: str, record: Record) -> str:
        """Identifier placed in ``#review/<id>`` links for a record."""

    def log_prefix(self, key: str) -> str:
        """Prefix used to build log file paths for a record."""


def normalize_fragment(fragment: str) -> str:
    """Drop the leading ``#`` of a location fragment."""
    fragment = (fragment or "").strip()
    if fragment.startswith("#"):
        fragment = fragment[1:]
    return fragment


class ViewRouter:
    """Maps a location fragment to a view state."""

    _fixed_routes = {
        "": ViewKind.HOME,
        "status": ViewKind.STATUS,
    }

    def __init__(self, resolver: KeyResolver):
        self.resolver = resolver

    def route(self, fragment: str, store: RecordSource) -> ViewState:
        """Select the view for ``fragment``; lookup failures become ERROR."""
        path = normalize_fragment(fragment)
        if path.startswith(REVIEW_PREFIX):
            identifier = unquote(path[len(REVIEW_PREFIX) :])
            try:
                key = self.resolver.resolve(identifier, store)
            except LookupFailure as exc:
                logger.debug("Review %r did not resolve: %s", identifier, exc)
                return ViewState(kind=ViewKind.ERROR, message=exc.message)
            logger.debug("Review %r resolved to %r", identifier, key)
            return ViewState(kind=ViewKind.DETAIL, key=key)

        # Unknown fragments fall back to the listing.
        return ViewState(kind=self._fixed_routes.get(path, ViewKind.HOME))
