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
"""Review identifier addressing schemes."""

from __future__ import annotations

from review_dashboard.app.domain.errors import LookupFailure
from review_dashboard.app.domain.models import Record
from review_dashboard.app.domain.view_router import KeyResolver, RecordSource

DEFAULT_INSTALL_PREFIX = "/var/www/ci-lustre/upstream-patch-review/"
DEFAULT_KEY_SUFFIX = "_home.html"


class DirectKeyResolver(KeyResolver):
    """Identifier is the record key itself, e.g. a commit hash."""

    def resolve(self, identifier: str, store: RecordSource) -> str:
        if identifier and store.get(identifier) is not None:
            return identifier
        raise LookupFailure(
            identifier, f"Review with git hash {identifier} not found"
        )

    def is_listed(self, key: str) -> bool:
        del key
        return True

    def review_id(self, key: str, record: Record) -> str:
        del record
        return key

    def log_prefix(self, key: str) -> str:
        return key


class IndirectKeyResolver(KeyResolver):
    """Identifier is a change ID matched against page-path keys.

    Only keys ending with ``key_suffix`` take part; the first record in
    snapshot order whose ``change_id`` matches wins.
    """

    def __init__(
        self,
        install_prefix: str = DEFAULT_INSTALL_PREFIX,
        key_suffix: str = DEFAULT_KEY_SUFFIX,
    ):
        self.install_prefix = install_prefix
        self.key_suffix = key_suffix

    def resolve(self, identifier: str, store: RecordSource) -> str:
        if identifier:
            for key, record in store.items():
                if not self.is_listed(key):
                    continue
                if _as_text(record.get("change_id")) == identifier:
                    return key
        raise LookupFailure(
            identifier, f"Review with change ID {identifier} not found"
        )

    def is_listed(self, key: str) -> bool:
        return key.endswith(self.key_suffix)

    def review_id(self, key: str, record: Record) -> str:
        change_id = _as_text(record.get("change_id"))
        return change_id or key

    def log_prefix(self, key: str) -> str:
        prefix = key
        if self.install_prefix and prefix.startswith(self.install_prefix):
            prefix = prefix[len(self.install_prefix) :]
        if self.key_suffix and prefix.endswith(self.key_suffix):
            prefix = prefix[: -len(self.key_suffix)]
        return prefix


def _as_text(value: object) -> str:
    if value is None:
        return ""
    return str(value)
