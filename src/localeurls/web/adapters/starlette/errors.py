# Copyright 2026 Firefly Software Solutions Inc.
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
"""Exception handler — RFC 7807 inspired JSON error responses."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from starlette.requests import Request
from starlette.responses import JSONResponse

from localeurls.kernel.exceptions import (
    InvalidConfigurationException,
    LocaleUrlsException,
    ResourceNotFoundException,
)

_STATUS_MAP: dict[type, int] = {
    ResourceNotFoundException: 404,
    InvalidConfigurationException: 500,
}


def _get_status_code(exc: Exception) -> int:
    for exc_type, status in _STATUS_MAP.items():
        if isinstance(exc, exc_type):
            return status
    return 500


async def locale_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render *exc* as ``{"error": {...}}`` with the mapped status code."""
    status = _get_status_code(exc)
    error: dict[str, Any] = {
        "message": str(exc),
        "code": (exc.code if isinstance(exc, LocaleUrlsException) else None) or type(exc).__name__,
        "timestamp": datetime.now(UTC).isoformat(),
        "status": status,
        "path": request.url.path,
    }
    transaction_id = getattr(request.state, "transaction_id", None)
    if transaction_id is not None:
        error["transaction_id"] = transaction_id
    if isinstance(exc, LocaleUrlsException) and exc.context:
        error["context"] = exc.context
    return JSONResponse({"error": error}, status_code=status)
