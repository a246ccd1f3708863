"""FastAPI dependency form of the path authorization gate."""

from typing import Any, Awaitable, Callable, Optional, Union

from starlette.requests import Request

from pathgate.config import PathAuthConfig, default_config
from pathgate.middleware import evaluate


def path_auth_dependency(
  config: Union[PathAuthConfig, str],
  validator: Optional[Any] = None,
) -> Callable[[Request], Awaitable[None]]:
  """Build a dependency that authorizes the request from a path parameter.

  Accepts either a full :class:`PathAuthConfig` or the ``(param, validator)``
  pair of the simple form. The dependency raises the gate's
  :class:`~pathgate.exceptions.PathAuthError` on failure and FastAPI's
  exception handlers render it. ``error_handler`` is not consulted, since a
  dependency cannot replace the response.

  Example::

    gate = path_auth_dependency("apikey", check_key)

    @app.get("/files/{apikey}", dependencies=[Depends(gate)])
    async def list_files(apikey: str):
      ...
  """
  if not isinstance(config, PathAuthConfig):
    config = default_config(config, validator)
  resolved = config

  async def path_auth_gate(request: Request) -> None:
    decision = await evaluate(resolved, request)
    if not decision.proceed:
      raise decision.error  # type: ignore[misc]

  return path_auth_gate
