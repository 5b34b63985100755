# tests/test_csrf_token_resource.py
"""Tests for the token endpoint resource"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from csrfguard.core.exceptions import SessionRequiredError
from csrfguard.resources.csrf_token import (
    CsrfToken,
    create_csrf_router,
    make_csrf_token_resource,
)


class HostResource:
    """Stand-in for a host framework's resource base class"""

    def describe(self):
        return f"resource:{type(self).__name__}"


class TestCsrfTokenResource:

    def test_returns_new_token(self):
        request = {"session": {}}
        result = CsrfToken().get("target", request)
        assert len(result["token"]) == 64
        assert request["session"]["csrfToken"] == result["token"]

    def test_returns_existing_session_token(self):
        request = {"session": {"csrfToken": "existing-token"}}
        assert CsrfToken().get("target", request) == {"token": "existing-token"}

    def test_requires_session(self):
        with pytest.raises(SessionRequiredError, match="Session required for CSRF protection"):
            CsrfToken().get("target", {})

    def test_collection_level(self):
        assert CsrfToken.load_as_instance is False


class TestMakeCsrfTokenResource:

    def test_builds_over_host_base(self):
        resource_class = make_csrf_token_resource(HostResource)
        instance = resource_class()

        assert issubclass(resource_class, HostResource)
        assert resource_class.__name__ == "CsrfToken"
        assert instance.describe() == "resource:CsrfToken"
        assert instance.get(None, {"session": {"csrfToken": "abc"}}) == {"token": "abc"}

    def test_host_metaclass_and_subclass_hooks(self):
        """Host bases with a preparing metaclass and subclass registry see the endpoint"""

        class RegistryNamespace(dict):
            pass

        class ResourceMeta(type):
            namespaces = []

            @classmethod
            def __prepare__(mcs, name, bases, **kwargs):
                return RegistryNamespace()

            def __new__(mcs, name, bases, namespace, **kwargs):
                mcs.namespaces.append(type(namespace))
                return super().__new__(mcs, name, bases, dict(namespace))

        class RegisteredResource(metaclass=ResourceMeta):
            registry = []

            def __init_subclass__(cls, **kwargs):
                super().__init_subclass__(**kwargs)
                RegisteredResource.registry.append(cls.__name__)

        resource_class = make_csrf_token_resource(RegisteredResource)

        assert type(resource_class) is ResourceMeta
        assert ResourceMeta.namespaces[-1] is RegistryNamespace
        assert RegisteredResource.registry == ["CsrfToken"]
        assert resource_class.load_as_instance is False
        assert resource_class().get(None, {"session": {"csrfToken": "abc"}}) == {"token": "abc"}

    def test_custom_name(self):
        assert make_csrf_token_resource(name="Token").__name__ == "Token"


class TestCsrfRouter:

    def test_without_session_middleware(self):
        app = FastAPI()
        app.include_router(create_csrf_router())
        client = TestClient(app)

        with pytest.raises(SessionRequiredError):
            client.get("/CsrfToken")

    def test_custom_path_and_resource(self):
        class FixedToken:
            def get(self, target, request):
                return {"token": "fixed"}

        app = FastAPI()
        app.include_router(create_csrf_router(path="/csrf", resource=FixedToken()))
        client = TestClient(app)

        assert client.get("/csrf").json() == {"token": "fixed"}
