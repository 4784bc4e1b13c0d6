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
"""Parse grouped ``result<Name>`` fields of a record into outcomes."""

from __future__ import annotations

import re

from review_dashboard.app.domain.models import Outcome, Record

RESULT_PREFIX = "result"
ENFORCED_PREFIX = "enforced"
RUNTIME_PREFIX = "runtime"
DESCRIPTION_PREFIX = "description"

MISSING_RETURN_CODE = -1

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_return_code(value: object) -> int:
    """Parse a return code, degrading to -1 when it is not numeric."""
    if isinstance(value, bool) or value is None:
        return MISSING_RETURN_CODE
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return MISSING_RETURN_CODE
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    return MISSING_RETURN_CODE


def is_enforced(value: object) -> bool:
    """Only the string ``"True"`` or boolean ``True`` mark enforcement."""
    return value is True or (isinstance(value, str) and value == "True")


def log_file_name(log_prefix: str, name: str) -> str:
    return f"{log_prefix}_{name.replace(' ', '_').lower()}.log"


def extract_outcomes(record: Record, log_prefix: str) -> list[Outcome]:
    """Build outcomes in the record's field order."""
    outcomes: list[Outcome] = []
    for key in record:
        if not key.startswith(RESULT_PREFIX):
            continue
        name = key[len(RESULT_PREFIX) :]
        runtime = record.get(RUNTIME_PREFIX + name)
        description = record.get(DESCRIPTION_PREFIX + name)
        outcomes.append(
            Outcome(
                name=name,
                return_code=parse_return_code(record[key]),
                enforced=is_enforced(record.get(ENFORCED_PREFIX + name)),
                runtime=str(runtime) if runtime else "N/A",
                description=str(description) if description else f"Job: {name}",
                log_path=log_file_name(log_prefix, name),
            )
        )
    return outcomes
