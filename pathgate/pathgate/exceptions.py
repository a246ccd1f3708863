"""Exception hierarchy for the path authorization gate."""

from typing import Dict, Optional

from starlette.exceptions import HTTPException


class PathGateError(Exception):
  """Base exception for all pathgate errors."""

  def __init__(self, message: str, status_code: int = 500):
    super().__init__(message)
    self.message = message
    self.status_code = status_code
    self.type = "pathgate_error"
    self.error_id = "pathgate_error"

  def __str__(self) -> str:
    return self.message


class PathAuthConfigError(PathGateError, ValueError):
  """Raised when a gate is built from an invalid configuration."""

  def __init__(self, message: str):
    super().__init__(message, status_code=500)
    self.type = "path_auth_config_error"
    self.error_id = "path_auth_config_error"


class MissingPathParameterError(PathGateError):
  """Internal cause attached when the matched route lacks the gated parameter."""

  def __init__(self, param: str = ""):
    super().__init__("missing key in request", status_code=400)
    self.param = param
    self.type = "missing_path_parameter"
    self.error_id = "missing_path_parameter"


class PathAuthError(HTTPException):
  """HTTP error produced by the gate.

  The client-visible part is ``status_code`` and ``detail``. ``internal`` keeps
  the underlying cause (validator error, missing-parameter sentinel) for
  diagnostics without changing what the client sees.

  Attributes:
    status_code: HTTP status code (400 or 401).
    detail: Human-readable message ("Bad Request" or "Unauthorized").
    internal: Optional wrapped cause.
  """

  def __init__(
    self,
    status_code: int,
    detail: str,
    *,
    internal: Optional[BaseException] = None,
    headers: Optional[Dict[str, str]] = None,
  ) -> None:
    super().__init__(status_code=status_code, detail=detail, headers=headers)
    self.internal = internal
    if internal is not None:
      self.__cause__ = internal

  @classmethod
  def bad_request(cls, internal: Optional[BaseException] = None) -> "PathAuthError":
    return cls(400, "Bad Request", internal=internal)

  @classmethod
  def unauthorized(cls, internal: Optional[BaseException] = None) -> "PathAuthError":
    return cls(401, "Unauthorized", internal=internal)

  def __str__(self) -> str:
    text = f"code={self.status_code}, message={self.detail}"
    if self.internal is not None:
      text += f", internal={self.internal}"
    return text

  def __repr__(self) -> str:
    return f"{self.__class__.__name__}(status_code={self.status_code!r}, detail={self.detail!r}, internal={self.internal!r})"
