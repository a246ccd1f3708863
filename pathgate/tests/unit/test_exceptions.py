"""Unit tests for the pathgate exception hierarchy."""

import pytest
from starlette.exceptions import HTTPException

from pathgate.exceptions import MissingPathParameterError, PathAuthConfigError, PathAuthError, PathGateError


@pytest.mark.unit
class TestPathAuthError:
  def test_is_starlette_http_exception(self):
    assert isinstance(PathAuthError.unauthorized(), HTTPException)

  def test_unauthorized_without_cause(self):
    err = PathAuthError.unauthorized()
    assert err.status_code == 401
    assert err.detail == "Unauthorized"
    assert err.internal is None
    assert err.__cause__ is None
    assert str(err) == "code=401, message=Unauthorized"

  def test_unauthorized_with_cause(self):
    cause = RuntimeError("some user defined error")
    err = PathAuthError.unauthorized(cause)
    assert err.internal is cause
    assert err.__cause__ is cause
    assert str(err) == "code=401, message=Unauthorized, internal=some user defined error"

  def test_bad_request_with_missing_key(self):
    err = PathAuthError.bad_request(MissingPathParameterError("apikey"))
    assert err.status_code == 400
    assert err.detail == "Bad Request"
    assert str(err) == "code=400, message=Bad Request, internal=missing key in request"

  def test_repr(self):
    assert "status_code=401" in repr(PathAuthError.unauthorized())


@pytest.mark.unit
class TestPathGateErrors:
  def test_missing_parameter_sentinel(self):
    err = MissingPathParameterError("apikey")
    assert isinstance(err, PathGateError)
    assert err.param == "apikey"
    assert err.status_code == 400
    assert str(err) == "missing key in request"
    assert err.error_id == "missing_path_parameter"

  def test_config_error(self):
    err = PathAuthConfigError("PathAuth: requires a param")
    assert isinstance(err, PathGateError)
    assert isinstance(err, ValueError)
    assert err.message == "PathAuth: requires a param"
    assert err.type == "path_auth_config_error"
