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
"""Browser shell forwarding fragment, filter and log events to the session."""

SHELL_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Testing Status</title>
<style>
body { font-family: sans-serif; margin: 1em; }
table { border-collapse: collapse; width: 100%; }
th, td { border: 1px solid #ccc; padding: 4px 8px; text-align: left; }
tr.filtered { display: none; }
.split-view { display: flex; gap: 1em; }
.left-panel, .right-panel { flex: 1; min-width: 0; }
.right-panel.empty { color: gray; }
.log-content { white-space: pre-wrap; }
.error { color: red; }
</style>
</head>
<body>
<div id="content"><div class="loading">Loading...</div></div>
<footer><a href="#status">Status</a> <span id="version-info"></span></footer>
<script>
(function () {
  const scheme = location.protocol === "https:" ? "wss://" : "ws://";
  const socket = new WebSocket(scheme + location.host + "/ws/dashboard");
  const send = (message) => socket.send(JSON.stringify(message));
  const content = document.getElementById("content");

  socket.addEventListener("open", () => send({type: "navigate", fragment: location.hash}));
  socket.addEventListener("message", (event) => {
    const message = JSON.parse(event.data);
    if (message.type === "ready" && message.version) {
      document.getElementById("version-info").textContent = message.version;
    } else if (message.type === "render" && message.target === "log") {
      const panel = document.getElementById("logPanel");
      if (panel) panel.outerHTML = message.html;
    } else if (message.type === "render") {
      content.innerHTML = message.html;
    } else if (message.type === "error") {
      console.warn(message.message);
    }
  });

  window.addEventListener("hashchange", () => send({type: "navigate", fragment: location.hash}));

  content.addEventListener("change", (event) => {
    if (!event.target.dataset.filterAxis) return;
    const criteria = {};
    for (const radio of content.querySelectorAll("input[data-filter-axis]:checked")) {
      criteria[radio.dataset.filterAxis] = radio.value;
    }
    send({type: "filter", criteria: criteria});
  });

  content.addEventListener("click", (event) => {
    const link = event.target.closest("a");
    if (!link) return;
    if (link.classList.contains("log-link")) {
      event.preventDefault();
      send({type: "log", test_name: link.dataset.testName});
    } else if (link.classList.contains("back-link")) {
      event.preventDefault();
      if (location.hash) { location.hash = ""; } else { send({type: "navigate", fragment: ""}); }
    }
  });
})();
</script>
</body>
</html>
"""
