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
"""PASS/FAIL/N/A reduction over outcomes."""

from __future__ import annotations

from typing import Iterable

from review_dashboard.app.domain.models import Outcome, Summary

NOT_AVAILABLE = Summary(text="N/A", color="gray")
PASSED = Summary(text="PASS", color="green")
FAILED = Summary(text="FAIL", color="red")


def summarize(outcomes: Iterable[Outcome]) -> Summary:
    """Reduce a set of outcomes to a single verdict."""
    items = list(outcomes)
    if not items:
        return NOT_AVAILABLE
    if all(item.return_code == 0 for item in items):
        return PASSED
    return FAILED


def summarize_by_class(outcomes: Iterable[Outcome]) -> tuple[Summary, Summary]:
    """Return (enforced, optional) summaries."""
    items = list(outcomes)
    enforced = [item for item in items if item.enforced]
    optional = [item for item in items if not item.enforced]
    return summarize(enforced), summarize(optional)
