"""Share-link downloads protected by a key in the URL path.

Demonstrates the gate in a FastAPI app:
  1. path_auth             — gate a Starlette-style endpoint on /download/{token}
  2. path_auth_with_config — skipper for health probes, custom error body
  3. path_auth_dependency  — the same check as a FastAPI dependency

Prerequisites:
  pip install 'pathgate[serve]'
  export SHARE_TOKENS=tok-abc,tok-def   # comma-separated valid tokens

Usage:
  python pathgate/examples/01_download_links.py
  curl http://127.0.0.1:8000/download/tok-abc
"""

import logging
import os

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from starlette.responses import PlainTextResponse

from pathgate import PathAuthConfig, path_auth, path_auth_dependency, path_auth_with_config
from pathgate.utils.log import set_log_level_to_debug

TOKENS = {t.strip() for t in os.getenv("SHARE_TOKENS", "tok-abc").split(",") if t.strip()}


class TokenStoreUnavailable(Exception):
  pass


def check_token(token: str, request):
  if not TOKENS:
    return False, TokenStoreUnavailable("no share tokens configured")
  return token in TOKENS, None


def on_error(error, request):
  return JSONResponse(status_code=error.status_code, content={"error": error.detail})


app = FastAPI(title="Share links")


@path_auth("token", check_token)
async def download(request):
  return PlainTextResponse(f"contents for {request.path_params['token'][:4]}...")


status = path_auth_with_config(
  PathAuthConfig(
    param="token",
    validator=check_token,
    skipper=lambda request: request.headers.get("x-health-probe") == "1",
    error_handler=on_error,
  )
)


async def link_status(request):
  return JSONResponse({"status": "active"})


app.add_route("/download/{token}", download)
app.add_route("/status/{token}", status(link_status))


@app.get("/files/{token}", dependencies=[Depends(path_auth_dependency("token", check_token))])
async def list_files(token: str):
  return {"files": ["report.pdf", "notes.txt"]}


if __name__ == "__main__":
  logging.basicConfig(level=logging.INFO)
  set_log_level_to_debug()
  uvicorn.run(app, host="127.0.0.1", port=int(os.getenv("PORT", "8000")), log_level="info")
