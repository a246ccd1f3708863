"""Validator protocol and call helpers for the path authorization gate."""

import inspect
from typing import Any, Awaitable, Callable, Optional, Protocol, Tuple, Union, runtime_checkable

from starlette.requests import Request

from pathgate.utils.log import log_error, log_warning

# (valid, error) pair returned by a validator
ValidationResult = Tuple[bool, Optional[BaseException]]

ValidatorFunc = Callable[
  [str, Request],
  Union[ValidationResult, bool, Awaitable[Union[ValidationResult, bool]]],
]


@runtime_checkable
class PathValidator(Protocol):
  """Protocol for pluggable credential validators.

  Implementations define ``validate(value, request)`` which returns a
  ``(valid, error)`` pair. A plain function with the same signature can be
  used wherever a validator is expected.

  The method may be sync or async, and may return a bare ``bool`` instead of
  a pair when it has no error to report.
  """

  def validate(self, value: str, request: Request) -> ValidationResult:
    """Decide whether a path parameter value is an authorized credential.

    Args:
      value: The raw path parameter value ("" when the router matched no value).
      request: The request being authorized.

    Returns:
      ``(True, None)`` to let the request through. Anything else rejects it;
      a non-None error is kept as the internal cause of the 401.
    """
    ...


def as_validator_func(validator: Any) -> Optional[Callable[..., Any]]:
  """Return the callable behind a validator, or None if it is not one.

  Objects implementing :class:`PathValidator` resolve to their bound
  ``validate`` method; any other callable is used as-is. A class is not a
  validator: its ``validate`` would be called unbound.
  """
  if validator is None or isinstance(validator, type):
    return None
  validate = getattr(validator, "validate", None)
  if callable(validate):
    return validate
  if callable(validator):
    return validator
  return None


def _normalize(result: Any) -> ValidationResult:
  if isinstance(result, bool):
    return result, None
  if isinstance(result, tuple) and len(result) == 2:
    valid, error = result
    if error is not None and not isinstance(error, BaseException):
      log_error(f"PathAuth: validator returned a {type(error).__name__} as its error")
      raise TypeError(f"Validator error must be an exception or None, got {type(error).__name__}")
    return bool(valid), error
  log_error(f"PathAuth: validator returned {type(result).__name__}")
  raise TypeError(f"Validator must return a bool or a (bool, error) pair, got {type(result).__name__}")


async def resolve_validation(func: Callable[..., Any], value: str, request: Request) -> ValidationResult:
  """Call a validator and normalize its outcome to a ``(valid, error)`` pair.

  Handles both sync and async validators transparently. An exception raised
  by the validator is reported as ``(False, exc)``, the same as a returned
  error.

  Args:
    func: Validator callable, as returned by :func:`as_validator_func`.
    value: Path parameter value to validate.
    request: The request being authorized.

  Returns:
    Normalized ``(valid, error)`` pair.
  """
  try:
    result = func(value, request)
    if inspect.isawaitable(result):
      result = await result
  except Exception as e:
    log_warning(f"PathAuth: validator raised {type(e).__name__}")
    return False, e
  return _normalize(result)
