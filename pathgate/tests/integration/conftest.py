"""Integration fixtures — a FastAPI app with gated Starlette-style routes and dependency routes."""

import pytest
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient
from starlette.responses import PlainTextResponse

from pathgate import PathAuthConfig, path_auth, path_auth_dependency, path_auth_with_config


@pytest.fixture
def calls():
  return []


@pytest.fixture
def app(validator, calls):
  app = FastAPI()

  async def endpoint(request):
    calls.append(request.url.path)
    return PlainTextResponse("test")

  def sync_endpoint(request):
    calls.append(request.url.path)
    return PlainTextResponse("sync")

  def failing_endpoint(request):
    raise RuntimeError("handler failed")

  gate = path_auth("apikey", validator)
  app.add_route("/sync/{apikey}", gate(sync_endpoint))
  app.add_route("/fail/{apikey}", gate(failing_endpoint))

  internal = path_auth_with_config(
    PathAuthConfig(
      param="apikey",
      validator=validator,
      skipper=lambda request: request.headers.get("x-internal") == "1",
    )
  )
  app.add_route("/internal/{apikey}", internal(endpoint))
  app.add_route("/internal", internal(endpoint))

  def on_error(error, request):
    return JSONResponse(status_code=error.status_code, content={"error": error.detail})

  custom = path_auth_with_config(PathAuthConfig(param="apikey", validator=validator, error_handler=on_error))
  app.add_route("/custom/{apikey}", custom(endpoint))
  app.add_route("/custom", custom(endpoint))

  dependency = path_auth_dependency("apikey", validator)

  @app.get("/files/{apikey}", dependencies=[Depends(dependency)])
  async def list_files(apikey: str):
    calls.append(f"/files/{apikey}")
    return {"files": ["a.txt"]}

  @app.get("/files", dependencies=[Depends(dependency)])
  async def list_all_files():
    calls.append("/files")
    return {"files": []}

  # Catch-all routes last so they do not shadow the routes above
  app.add_route("/{apikey}", gate(endpoint))
  app.add_route("/", gate(endpoint))

  return app


@pytest.fixture
def client(app):
  return TestClient(app)
