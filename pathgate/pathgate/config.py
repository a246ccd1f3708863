"""Path authorization gate configuration with immutable settings."""

from dataclasses import dataclass, replace
from typing import Any, Awaitable, Callable, Optional, Union

from starlette.requests import Request

from pathgate.exceptions import PathAuthConfigError
from pathgate.validator import as_validator_func

Skipper = Callable[[Request], Union[bool, Awaitable[bool]]]

# (error, request) -> response; may return an awaitable
ErrorHandler = Callable[[Any, Request], Any]


def default_skipper(request: Request) -> bool:
  """Never skip the gate."""
  return False


@dataclass(frozen=True)
class PathAuthConfig:
  """Configuration for the path authorization gate.

  Uses a frozen dataclass so a config can be shared by every request and
  every gate built from it. Validation runs on construction, so an unusable
  config never exists.

  Attributes:
    param: Name of the path parameter holding the credential. Required.
    validator: Function ``(value, request) -> (valid, error)`` or an object
      implementing :class:`~pathgate.validator.PathValidator`. Required.
    skipper: Optional ``(request) -> bool``. Requests it returns True for
      bypass the gate entirely. May be async.
    error_handler: Optional ``(error, request) -> response``. When set, gate
      failures are handed to it and its return value is used as the response
      instead of raising the error.

  Raises:
    PathAuthConfigError: If the validator is missing or the param is empty.

  Example:
    from pathgate import PathAuthConfig

    config = PathAuthConfig(
      param="apikey",
      validator=lambda key, request: (key in KEYS, None),
      skipper=lambda request: request.method == "OPTIONS",
    )
  """

  param: str = ""
  validator: Optional[Any] = None
  skipper: Optional[Skipper] = None
  error_handler: Optional[ErrorHandler] = None

  def __post_init__(self) -> None:
    if as_validator_func(self.validator) is None:
      raise PathAuthConfigError("PathAuth: requires a validator function")
    if not self.param:
      raise PathAuthConfigError("PathAuth: requires a param")
    if self.skipper is not None and not callable(self.skipper):
      raise PathAuthConfigError("PathAuth: skipper must be callable")
    if self.error_handler is not None and not callable(self.error_handler):
      raise PathAuthConfigError("PathAuth: error_handler must be callable")

  def with_updates(self, **kwargs: Any) -> "PathAuthConfig":
    """Create a new config with updated values (immutable pattern).

    Args:
      **kwargs: Fields to update in the new config.

    Returns:
      New PathAuthConfig instance with updated values.
    """
    return replace(self, **kwargs)


def default_config(param: str, validator: Any, **overrides: Any) -> PathAuthConfig:
  """Build a fresh config with the default skipper.

  Args:
    param: Name of the path parameter holding the credential.
    validator: Validator function or object.
    **overrides: Any other :class:`PathAuthConfig` field.

  Returns:
    A new PathAuthConfig. Nothing is shared between calls.
  """
  options = {"skipper": default_skipper}
  options.update(overrides)
  return PathAuthConfig(param=param, validator=validator, **options)
