"""Binds a request id and path to every log line emitted while serving a request."""

import uuid

from fastapi import FastAPI, Request

from orgledger.logging_config import bind_request_context


def register_request_context(app: FastAPI) -> None:

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        bind_request_context(request_id=request_id, path=request.url.path)
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response
