import time
import logging

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

logger = logging.getLogger("timing_middleware")


class TimingMiddleware(BaseHTTPMiddleware):
    """
    Middleware que mide el tiempo de respuesta de cada solicitud y añade
    información de diagnóstico en cabeceras.
    """

    def __init__(self, app: ASGIApp, slow_threshold_ms: float = 1500):
        super().__init__(app)
        self.slow_threshold_ms = slow_threshold_ms

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        process_time = (time.perf_counter() - start_time) * 1000  # En milisegundos

        # Categorizar respuesta por velocidad
        speed_category = "FAST"
        if process_time > 300:
            speed_category = "MEDIUM"
        if process_time > 700:
            speed_category = "SLOW"
        if process_time > self.slow_threshold_ms:
            speed_category = "VERY_SLOW"
            logger.warning(f"Petición lenta {request.method} {request.url.path}: {process_time:.2f}ms")

        response.headers["X-Process-Time"] = f"{process_time:.2f}ms"
        response.headers["X-Process-Speed"] = speed_category
        return response
