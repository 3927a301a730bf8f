from fastapi import FastAPI, Request, Response
from prometheus_client import Counter, generate_latest, CONTENT_TYPE_LATEST
import structlog


HOST = "0.0.0.0"
SERVICE1_PORT = 8080
SERVICE2_PORT = 8081

request_count = Counter("service_requests_total", "Requests handled", ["service", "path"])

logger = structlog.get_logger()


def instrument(app: FastAPI, service: str):
    # === Logging and Counting ===
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info(
            "request_log",
            service=service,
            path=request.url.path,
            method=request.method,
            status=response.status_code
        )
        return response

    @app.middleware("http")
    async def count_requests(request: Request, call_next):
        response = await call_next(request)
        route = request.scope.get("route")
        path = route.path if route is not None else "unmatched"
        request_count.labels(service=service, path=path).inc()
        return response

    @app.get("/health")
    def health():
        return {"service": service, "status": "healthy"}

    @app.get("/metrics")
    def metrics():
        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    return app
