import sys, asyncio
import uvicorn
import structlog

from common import HOST, SERVICE1_PORT, SERVICE2_PORT


SERVICES = {
    "service1": ("service1:app", SERVICE1_PORT),
    "service2": ("service2:app", SERVICE2_PORT),
}

logger = structlog.get_logger()


def build_server(name: str) -> uvicorn.Server:
    app, port = SERVICES[name]
    config = uvicorn.Config(app, host=HOST, port=port)
    return uvicorn.Server(config)


async def serve(names):
    servers = [build_server(name) for name in names]
    for name in names:
        logger.info("starting", service=name, port=SERVICES[name][1])
    await asyncio.gather(*(server.serve() for server in servers))


def main(argv=None):
    names = (argv if argv is not None else sys.argv[1:]) or list(SERVICES)
    unknown = [name for name in names if name not in SERVICES]
    if unknown:
        sys.exit(f"usage: main.py [{'|'.join(SERVICES)}] ... (unknown: {', '.join(unknown)})")
    asyncio.run(serve(names))


if __name__ == "__main__":
    main()
