from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from petlift import CommandResult, DispatchEngine, configure_from_env


class RiderRequest(BaseModel):
    origin: int
    destination: int
    category: int


class CommandResponse(BaseModel):
    result: str


# Rejections that come from the engine's current state rather than bad input.
_CONFLICTS = {CommandResult.ALREADY_ACTIVE, CommandResult.ALREADY_STOPPING_OR_OFFLINE}


def _respond(result: CommandResult) -> CommandResponse:
    if result.ok:
        return CommandResponse(result=result.name)
    if result in _CONFLICTS:
        raise HTTPException(status_code=409, detail=result.name)
    if result is CommandResult.RESOURCE_EXHAUSTED:
        raise HTTPException(status_code=503, detail=result.name)
    raise HTTPException(status_code=422, detail=result.name)


def create_app(engine: Optional[DispatchEngine] = None) -> FastAPI:
    engine = engine or DispatchEngine()
    app = FastAPI(title="Petlift Elevator API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def on_startup() -> None:
        await engine.launch()

    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        await engine.shutdown()

    @app.post("/start", response_model=CommandResponse)
    async def start() -> CommandResponse:
        return _respond(await engine.start())

    @app.post("/stop", response_model=CommandResponse)
    async def stop() -> CommandResponse:
        return _respond(await engine.request_stop())

    @app.post("/requests", response_model=CommandResponse)
    async def submit_request(request: RiderRequest) -> CommandResponse:
        return _respond(await engine.submit_request(request.origin, request.destination, request.category))

    @app.get("/status", response_class=PlainTextResponse)
    async def status() -> str:
        return await engine.report()

    @app.get("/state")
    async def get_state() -> dict:
        return await engine.snapshot()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    configure_from_env()
    uvicorn.run("server.app:app", host="0.0.0.0", port=8000, reload=False)
