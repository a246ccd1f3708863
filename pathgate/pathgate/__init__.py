"""
pathgate — authorize requests by validating a credential carried in a URL path segment.

Quick Start:
    from starlette.routing import Route
    from pathgate import path_auth

    def check_key(key, request):
        return key in API_KEYS, None

    @path_auth("apikey", check_key)
    async def download(request):
        ...

    routes = [Route("/download/{apikey}", download)]

Extended form:
    from pathgate import PathAuthConfig, path_auth_with_config

    gate = path_auth_with_config(PathAuthConfig(
        param="apikey",
        validator=check_key,
        skipper=lambda request: request.method == "OPTIONS",
    ))

FastAPI dependency:
    from pathgate import path_auth_dependency

    @app.get("/files/{apikey}", dependencies=[Depends(path_auth_dependency("apikey", check_key))])
"""

from pathgate.config import PathAuthConfig, default_config, default_skipper
from pathgate.dependencies import path_auth_dependency
from pathgate.exceptions import (
  MissingPathParameterError,
  PathAuthConfigError,
  PathAuthError,
  PathGateError,
)
from pathgate.middleware import (
  AuthDecision,
  Outcome,
  PathAuthMiddleware,
  evaluate,
  path_auth,
  path_auth_with_config,
)
from pathgate.validator import PathValidator, resolve_validation

__version__ = "0.1.0"

__all__ = [
  "PathAuthConfig",
  "default_config",
  "default_skipper",
  "PathValidator",
  "resolve_validation",
  "PathAuthMiddleware",
  "path_auth",
  "path_auth_with_config",
  "path_auth_dependency",
  "evaluate",
  "AuthDecision",
  "Outcome",
  "PathGateError",
  "PathAuthConfigError",
  "PathAuthError",
  "MissingPathParameterError",
]
