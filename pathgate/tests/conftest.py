"""
Root conftest — shared fixtures for the pathgate test suite.

Fixture cascade:
  tests/conftest.py              → request factory, reference validator
  tests/integration/conftest.py  → FastAPI app and TestClient
"""

from typing import Any, Dict, Optional

import pytest
from starlette.requests import Request


class UserDefinedError(Exception):
  pass


def key_validator(key: str, request: Any):
  """Validator used across the suite: one good key, one faulting key."""
  if key == "valid-key":
    return True, None
  if key == "error-key":
    return False, UserDefinedError("some user defined error")
  return False, None


def build_request(
  path: str = "/",
  path_params: Optional[Dict[str, Any]] = None,
  method: str = "GET",
) -> Request:
  """Build a routed Starlette request without running a server."""
  scope = {
    "type": "http",
    "method": method,
    "path": path,
    "root_path": "",
    "query_string": b"",
    "headers": [],
    "path_params": path_params if path_params is not None else {},
  }
  return Request(scope)


@pytest.fixture
def make_request():
  return build_request


@pytest.fixture
def validator():
  return key_validator
