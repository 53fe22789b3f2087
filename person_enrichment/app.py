from contextlib import asynccontextmanager
from http import HTTPStatus

import httpx
from fastapi import FastAPI

from person_enrichment.applications.interfaces.dtos.message import Message
from person_enrichment.infrastructure.adapters.services.http_client import close_http_client, set_http_client
from person_enrichment.infrastructure.config.dependencies import get_logger, get_settings
from person_enrichment.infrastructure.logging.logger import configure_logging
from person_enrichment.infrastructure.persistence.database import create_tables, dispose_engine, get_engine
from person_enrichment.presentation import exception_handlers
from person_enrichment.presentation.middlewares import request_logging_middleware
from person_enrichment.presentation.routers import people


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings)
    engine = get_engine()
    if settings.CREATE_TABLES:
        await create_tables(engine)
    set_http_client(httpx.AsyncClient())
    app.state.logger.info("Server started")
    try:
        yield
    finally:
        await close_http_client()
        await dispose_engine()
        app.state.logger.info("Server gracefully shutdown")


app = FastAPI(lifespan=lifespan)
app.state.logger = get_logger()

app.middleware("http")(request_logging_middleware)
for exc_class, handler in exception_handlers.roster:
    app.add_exception_handler(exc_class, handler)

app.include_router(people.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Hello. This is Enrich Server."}


@app.get("/ping", status_code=HTTPStatus.OK, response_model=Message)
def ping():
    return {"message": "pong"}
