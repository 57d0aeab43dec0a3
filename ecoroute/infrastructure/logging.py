"""Structured logging: one JSON object per line."""

from __future__ import annotations

import json
import sys
import time
import uuid
from typing import Any, Optional


class StructuredLogger:
    """JSON-lines logger bound to a single trace id."""

    def __init__(self, trace_id: Optional[str] = None, output=None):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self._output = output or sys.stderr
        self._timers: dict[str, float] = {}

    def _emit(self, data: dict[str, Any]) -> None:
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        try:
            line = json.dumps(data, ensure_ascii=False, default=str)
            self._output.write(line + "\n")
            self._output.flush()
        except (OSError, ValueError, TypeError) as exc:
            # Last-resort fallback to avoid silent logger failures.
            fallback = {
                "event": "logger_internal_error",
                "trace_id": self.trace_id,
                "timestamp": time.time(),
                "error": str(exc),
            }
            sys.stderr.write(json.dumps(fallback, ensure_ascii=False, default=str) + "\n")
            sys.stderr.flush()

    def estimate_start(self, operation: str, **extra: Any) -> None:
        self._timers[operation] = time.time()
        self._emit({"event": "estimate_start", "operation": operation, **extra})

    def estimate_end(self, operation: str, *, routes_count: int = 0, **extra: Any) -> None:
        start = self._timers.pop(operation, time.time())
        duration_ms = round((time.time() - start) * 1000, 1)
        self._emit({
            "event": "estimate_end",
            "operation": operation,
            "duration_ms": duration_ms,
            "routes_count": routes_count,
            **extra,
        })

    def error(self, operation: str, error: str, **extra: Any) -> None:
        self._timers.pop(operation, None)
        self._emit({"event": "error", "operation": operation, "error": error, **extra})

    def warning(self, operation: str, message: str, **extra: Any) -> None:
        self._emit({"event": "warning", "operation": operation, "message": message, **extra})


def get_logger(trace_id: Optional[str] = None, output=None) -> StructuredLogger:
    return StructuredLogger(trace_id=trace_id, output=output)


__all__ = ["StructuredLogger", "get_logger"]
