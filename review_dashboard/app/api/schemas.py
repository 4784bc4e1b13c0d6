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
"""API schemas for the dashboard."""

from __future__ import annotations

from typing import Annotated, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter


class ViewResponse(BaseModel):
    """Rendered view payload."""

    view: str
    html: str
    version: Optional[str] = None


class LogPanelResponse(BaseModel):
    """Rendered log panel payload."""

    state: str
    test_name: Optional[str] = None
    log_path: Optional[str] = None
    text: str
    html: str


class VersionResponse(BaseModel):
    """Deployed dashboard version, when published."""

    version: Optional[str] = None


class NavigateMessage(BaseModel):
    """Location fragment changed in the browser."""

    type: Literal["navigate"]
    fragment: str = Field(default="", max_length=2048)


class FilterMessage(BaseModel):
    """Radio selection changed in the current view."""

    type: Literal["filter"]
    criteria: Dict[str, str] = Field(default_factory=dict)


class LogMessage(BaseModel):
    """Test name clicked in the detail view."""

    type: Literal["log"]
    test_name: str = Field(min_length=1, max_length=1024)


ClientMessage = Annotated[
    Union[NavigateMessage, FilterMessage, LogMessage], Field(discriminator="type")
]

client_message_adapter: TypeAdapter[
    Union[NavigateMessage, FilterMessage, LogMessage]
] = TypeAdapter(ClientMessage)
