from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
import structlog

from common import instrument


logger = structlog.get_logger()
app = instrument(FastAPI(title="Service 2"), "service2")


@app.get("/service2/hello", response_class=PlainTextResponse)
def hello():
    logger.info("service2 hello called")
    return "Hello Service 2"
