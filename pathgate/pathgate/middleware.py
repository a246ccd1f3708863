"""Path authorization gate: middleware that validates a credential taken from a path parameter."""

import inspect
from dataclasses import dataclass
from enum import Enum
from functools import wraps
from typing import Any, Awaitable, Callable, Optional

from starlette.concurrency import run_in_threadpool
from starlette.requests import Request

from pathgate.config import PathAuthConfig, default_config
from pathgate.exceptions import MissingPathParameterError, PathAuthConfigError, PathAuthError
from pathgate.utils.log import log_debug
from pathgate.validator import as_validator_func, resolve_validation

# A Starlette-style endpoint: request -> response (sync or async)
Handler = Callable[[Request], Any]
AsyncHandler = Callable[[Request], Awaitable[Any]]


class Outcome(str, Enum):
  """Result of one gate evaluation."""

  PROCEED = "proceed"
  SKIPPED = "skipped"
  MISSING_PARAMETER = "missing_parameter"
  REJECTED = "rejected"
  VALIDATOR_ERROR = "validator_error"


@dataclass(frozen=True)
class AuthDecision:
  """Decision for a single request.

  Attributes:
    outcome: Which branch of the gate was taken.
    error: The error to surface, or None when the request may continue.
  """

  outcome: Outcome
  error: Optional[PathAuthError] = None

  @property
  def proceed(self) -> bool:
    return self.error is None


async def evaluate(config: PathAuthConfig, request: Request) -> AuthDecision:
  """Run the gate's decision for one request without calling any handler.

  Steps, in order:
    1. A configured skipper returning True lets the request through untouched.
    2. A route whose matched parameters lack ``config.param`` is a 400 with a
       :class:`MissingPathParameterError` cause.
    3. The parameter value goes to the validator. ``(True, None)`` proceeds;
       anything else is a 401 carrying the validator's error, if any.

  Args:
    config: Gate configuration.
    request: The incoming request, already routed.

  Returns:
    A fresh AuthDecision. Nothing is cached between calls.
  """
  if config.skipper is not None:
    skip = config.skipper(request)
    if inspect.isawaitable(skip):
      skip = await skip
    if skip:
      log_debug(f"PathAuth skipped for {request.method} request")
      return AuthDecision(Outcome.SKIPPED)

  path_params = request.path_params
  if config.param not in path_params:
    log_debug(f"PathAuth: route {request.url.path} has no '{config.param}' parameter")
    return AuthDecision(
      Outcome.MISSING_PARAMETER,
      PathAuthError.bad_request(MissingPathParameterError(config.param)),
    )

  value = path_params[config.param]
  value = "" if value is None else str(value)

  validate = as_validator_func(config.validator)
  valid, error = await resolve_validation(validate, value, request)  # type: ignore[arg-type]
  if error is not None:
    log_debug(f"PathAuth: validator failed for '{config.param}': {type(error).__name__}")
    return AuthDecision(Outcome.VALIDATOR_ERROR, PathAuthError.unauthorized(error))
  if not valid:
    log_debug(f"PathAuth: '{config.param}' rejected by validator")
    return AuthDecision(Outcome.REJECTED, PathAuthError.unauthorized())
  return AuthDecision(Outcome.PROCEED)


def _is_async_callable(obj: Any) -> bool:
  return inspect.iscoroutinefunction(obj) or inspect.iscoroutinefunction(getattr(obj, "__call__", None))


async def _call_next(next_handler: Handler, request: Request) -> Any:
  # Sync endpoints run in the threadpool, as Starlette runs them itself
  if _is_async_callable(next_handler):
    result = next_handler(request)
  else:
    result = await run_in_threadpool(next_handler, request)
  if inspect.isawaitable(result):
    result = await result
  return result


class PathAuthMiddleware:
  """
  Gate that authorizes a request by validating one of its path parameters.

  For a valid credential it calls the next handler and returns its result
  unchanged. For an invalid credential it fails with "401 - Unauthorized";
  for a route without the parameter it fails with "400 - Bad Request".
  Failures are raised as :class:`PathAuthError` unless the config has an
  ``error_handler``, whose return value is used instead.

  The instance holds only its immutable config and can serve concurrent
  requests.

  Example:
      from starlette.routing import Route

      gate = PathAuthMiddleware(PathAuthConfig(param="apikey", validator=check_key))
      routes = [Route("/files/{apikey}", gate.wrap(list_files))]
  """

  def __init__(self, config: PathAuthConfig):
    """
    Initialize the gate.

    Args:
        config: A validated PathAuthConfig.

    Raises:
        PathAuthConfigError: If config is not a PathAuthConfig.
    """
    if not isinstance(config, PathAuthConfig):
      raise PathAuthConfigError("PathAuth: requires a PathAuthConfig")
    self.config = config

  async def __call__(self, request: Request, next_handler: Handler) -> Any:
    """Authorize the request, then delegate to next_handler."""
    decision = await evaluate(self.config, request)
    if decision.proceed:
      return await _call_next(next_handler, request)
    return await self._fail(decision.error, request)  # type: ignore[arg-type]

  async def _fail(self, error: PathAuthError, request: Request) -> Any:
    if self.config.error_handler is None:
      raise error
    result = self.config.error_handler(error, request)
    if inspect.isawaitable(result):
      result = await result
    return result

  def wrap(self, next_handler: Handler) -> AsyncHandler:
    """Return an endpoint that runs the gate before next_handler."""

    @wraps(next_handler)
    async def handler(request: Request) -> Any:
      return await self(request, next_handler)

    return handler

  def dependency(self) -> Callable[[Request], Awaitable[None]]:
    """Return the gate as a FastAPI dependency (see :mod:`pathgate.dependencies`)."""
    from pathgate.dependencies import path_auth_dependency

    return path_auth_dependency(self.config)


def path_auth_with_config(config: PathAuthConfig) -> Callable[[Handler], AsyncHandler]:
  """Build a path authorization middleware from a full config.

  Args:
    config: Gate configuration.

  Returns:
    A function wrapping an endpoint into a gated endpoint.
  """
  return PathAuthMiddleware(config).wrap


def path_auth(param: str, validator: Any) -> Callable[[Handler], AsyncHandler]:
  """Build a path authorization middleware with default settings.

  Args:
    param: Name of the path parameter holding the credential.
    validator: Function ``(value, request) -> (valid, error)`` or a
      :class:`~pathgate.validator.PathValidator`.

  Returns:
    A function wrapping an endpoint into a gated endpoint.

  Raises:
    PathAuthConfigError: If validator is missing or param is empty.

  Example::

    @path_auth("apikey", check_key)
    async def download(request):
      ...
  """
  return path_auth_with_config(default_config(param, validator))
