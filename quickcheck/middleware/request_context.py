import asyncio
import uuid

from starlette.middleware.base import BaseHTTPMiddleware


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        request.state.request_id = str(uuid.uuid4())
        response = await call_next(request)
        response.headers["X-Request-ID"] = request.state.request_id
        return response


class SimulatedLatencyMiddleware(BaseHTTPMiddleware):
    """Delays every request by a fixed amount to mimic a remote backend round trip."""

    def __init__(self, app, latency_ms: int = 0):
        super().__init__(app)
        self.latency = max(latency_ms, 0) / 1000

    async def dispatch(self, request, call_next):
        if self.latency:
            await asyncio.sleep(self.latency)
        return await call_next(request)
