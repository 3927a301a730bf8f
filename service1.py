from typing import NamedTuple, Optional

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
import httpx
import structlog

from common import instrument


SERVICE2_URL = "http://localhost:8081/service2/hello"

logger = structlog.get_logger()
app = instrument(FastAPI(title="Service 1"), "service1")
client = httpx.Client()


class Service2Result(NamedTuple):
    ok: bool
    body: Optional[str] = None
    error: Optional[str] = None


def call_service2() -> Service2Result:
    try:
        response = client.get(SERVICE2_URL)
    except httpx.TransportError as e:
        return Service2Result(ok=False, error=str(e) or type(e).__name__)

    if response.is_client_error:
        return Service2Result(ok=False, error=f"{response.status_code} {response.reason_phrase}")
    if response.is_server_error:
        response.raise_for_status()
    return Service2Result(ok=True, body=response.text)


@app.get("/service1/hello", response_class=PlainTextResponse)
def hello():
    logger.info("service1 hello called")
    result = call_service2()
    if not result.ok:
        logger.error("error communicating with service2", error=result.error)
        return "Error"

    logger.info("service1 called service2", body=result.body)
    return "Hello Service 1"
