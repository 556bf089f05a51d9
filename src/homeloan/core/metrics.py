from __future__ import annotations

import math
import time
from threading import Lock

from fastapi import FastAPI, Request

from homeloan.core.settings import get_settings


class _MetricsStore:
    def __init__(self) -> None:
        self._lock = Lock()
        self._request_counts: dict[tuple[str, str, str], int] = {}
        self._request_seconds: dict[tuple[str, str], tuple[int, float]] = {}
        self._counters: dict[str, float] = {}

    def observe_request(
        self, *, method: str, path: str, status: str, duration_seconds: float
    ) -> None:
        request_key = (method, path, status)
        duration_key = (method, path)

        with self._lock:
            self._request_counts[request_key] = (
                self._request_counts.get(request_key, 0) + 1
            )
            count, total = self._request_seconds.get(duration_key, (0, 0.0))
            self._request_seconds[duration_key] = (count + 1, total + duration_seconds)

    def increment(self, name: str, value: float = 1.0) -> None:
        with self._lock:
            self._counters[name] = self._counters.get(name, 0.0) + value

    def render_prometheus_text(self) -> str:
        lines: list[str] = [
            "# HELP http_requests_total Total HTTP requests",
            "# TYPE http_requests_total counter",
        ]

        with self._lock:
            for (method, path, status), count in sorted(self._request_counts.items()):
                lines.append(
                    "http_requests_total{"
                    f'method="{method}",path="{path}",status="{status}"'
                    f"}} {count}"
                )

            lines.append(
                "# HELP http_request_duration_seconds HTTP request duration in seconds"
            )
            lines.append("# TYPE http_request_duration_seconds summary")
            for (method, path), (count, total) in sorted(
                self._request_seconds.items()
            ):
                labels = f'method="{method}",path="{path}"'
                lines.append(f"http_request_duration_seconds_count{{{labels}}} {count}")
                lines.append(f"http_request_duration_seconds_sum{{{labels}}} {total}")

            if self._counters:
                lines.append("# TYPE homeloan_counter_total counter")
                for name, value in sorted(self._counters.items()):
                    lines.append(f"{name} {value}")

        lines.append("")
        return "\n".join(lines)

    def clear(self) -> None:
        with self._lock:
            self._request_counts.clear()
            self._request_seconds.clear()
            self._counters.clear()


_metrics_store = _MetricsStore()


def render_metrics_text() -> str:
    return _metrics_store.render_prometheus_text()


def clear_metrics() -> None:
    _metrics_store.clear()


def increment_metric(name: str, value: float = 1.0) -> None:
    if not get_settings().metrics_enabled:
        return
    _metrics_store.increment(name, value)


def install_metrics_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def metrics_middleware(request: Request, call_next):
        method = request.method
        path = request.url.path
        started_at = time.perf_counter()

        response = await call_next(request)

        duration = time.perf_counter() - started_at
        if get_settings().metrics_enabled and math.isfinite(duration):
            _metrics_store.observe_request(
                method=method,
                path=path,
                status=str(response.status_code),
                duration_seconds=duration,
            )

        return response
