"""
Tests for RequestBuilder.
"""
import pytest

from fetch_adapter.builders.request_builder import RequestBuilder
from fetch_adapter.models.request import Request
from fetch_adapter.models.request_options import RequestOptions
from fetch_adapter.types import HttpMethod


BASE_URL = "https://api.example.com"


class TestRequestBuilder:
    """Tests for RequestBuilder class."""

    @pytest.fixture
    def builder(self):
        return RequestBuilder(BASE_URL)

    def test_builds_request_with_defaults(self, builder):
        request = builder.build()

        assert isinstance(request, Request)
        assert request.base_url == BASE_URL
        assert request.endpoint == ""
        assert request.method == HttpMethod.POST
        assert request.headers == {"Content-Type": "application/json"}
        assert request.body == {}
        assert request.query_params == {}

    def test_chains_setters(self, builder):
        request = (
            builder.set_endpoint("/users")
            .set_method(HttpMethod.GET)
            .add_header("X-Test", "1")
            .add_query_param("page", "2")
            .build()
        )

        assert request.endpoint == "/users"
        assert request.method == HttpMethod.GET
        assert request.headers["X-Test"] == "1"
        assert request.query_params == {"page": "2"}

    class TestContentType:
        """Tests for content type helpers."""

        def test_as_xml(self):
            request = RequestBuilder(BASE_URL).as_xml().build()
            assert request.headers["Content-Type"] == "text/xml"

        def test_as_form_url_encoded(self):
            request = RequestBuilder(BASE_URL).as_form_url_encoded().build()
            assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"

        def test_as_json_restores_default(self):
            request = RequestBuilder(BASE_URL).as_xml().as_json().build()
            assert request.headers["Content-Type"] == "application/json"

    class TestBody:
        """Tests for body helpers."""

        def test_set_body(self):
            request = RequestBuilder(BASE_URL).set_body({"a": 1}).build()
            assert request.body == {"a": 1}

        def test_set_body_none(self):
            request = RequestBuilder(BASE_URL).set_body(None).build()
            assert request.body is None

        def test_add_body_param(self):
            request = RequestBuilder(BASE_URL).add_body_param("a", 1).add_body_param("b", None).build()
            assert request.body == {"a": 1, "b": None}

        def test_add_body_param_after_none_body(self):
            request = RequestBuilder(BASE_URL).set_body(None).add_body_param("a", 1).build()
            assert request.body == {"a": 1}

        def test_add_body_params_overwrites(self):
            request = (
                RequestBuilder(BASE_URL)
                .set_body({"a": 1, "b": 1})
                .add_body_params({"b": 2, "c": {"d": True}})
                .build()
            )
            assert request.body == {"a": 1, "b": 2, "c": {"d": True}}

        def test_remove_body_param(self):
            request = RequestBuilder(BASE_URL).set_body({"a": 1, "b": 2}).remove_body_param("a").build()
            assert request.body == {"b": 2}

        def test_remove_missing_body_param_is_noop(self):
            request = RequestBuilder(BASE_URL).remove_body_param("missing").build()
            assert request.body == {}

        def test_reset_body_params(self):
            request = RequestBuilder(BASE_URL).set_body({"a": 1}).reset_body_params().build()
            assert request.body == {}

    class TestHeaders:
        """Tests for header helpers."""

        def test_set_headers_replaces(self):
            request = RequestBuilder(BASE_URL).set_headers({"X-Only": "1"}).build()
            assert request.headers == {"X-Only": "1"}

        def test_add_headers_merges(self):
            request = RequestBuilder(BASE_URL).add_headers({"Content-Type": "text/plain", "X-A": "1"}).build()
            assert request.headers == {"Content-Type": "text/plain", "X-A": "1"}

        def test_remove_header(self):
            request = RequestBuilder(BASE_URL).remove_header("Content-Type").build()
            assert request.headers == {}

        def test_reset_headers(self):
            request = RequestBuilder(BASE_URL).add_header("X-A", "1").reset_headers().build()
            assert request.headers == {}

    class TestQueryParams:
        """Tests for query parameter helpers."""

        def test_set_query_params(self):
            request = RequestBuilder(BASE_URL).add_query_param("a", "1").set_query_params({"b": "2"}).build()
            assert request.query_params == {"b": "2"}

        def test_add_query_params(self):
            request = RequestBuilder(BASE_URL).add_query_param("a", "1").add_query_params({"a": "x", "b": "2"}).build()
            assert request.query_params == {"a": "x", "b": "2"}

        def test_remove_query_param(self):
            request = RequestBuilder(BASE_URL).add_query_params({"a": "1", "b": "2"}).remove_query_param("a").build()
            assert request.query_params == {"b": "2"}

        def test_reset_query_params(self):
            request = RequestBuilder(BASE_URL).add_query_param("a", "1").reset_query_params().build()
            assert request.query_params == {}

    class TestOptions:
        """Tests for option helpers."""

        def test_set_timeout(self):
            request = RequestBuilder(BASE_URL).set_timeout(2.5).build()
            assert request.options.timeout == 2.5

        def test_set_options(self):
            options = RequestOptions(timeout=None)
            request = RequestBuilder(BASE_URL).set_options(options).build()
            assert request.options is options

    # State: built requests are snapshots
    def test_later_builder_calls_do_not_affect_built_request(self, builder):
        first = builder.add_header("X-A", "1").add_body_param("k", "v").build()
        builder.add_header("X-B", "2").add_body_param("k", "changed").add_query_param("q", "1")

        assert "X-B" not in first.headers
        assert first.body == {"k": "v"}
        assert first.query_params == {}

    def test_each_build_gets_new_correlation_id(self, builder):
        assert builder.build().system_correlation_id != builder.build().system_correlation_id
