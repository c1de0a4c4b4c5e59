from typing import Any

import httpx
import pytest

from social_http import HttpService
from social_http.models import (
    BodyData,
    HttpMethod,
    HttpRequest,
    InvalidArgumentError,
    QueryParameters,
    ReadOptions,
    SocialHttpError,
    WriteOptions,
)

URL = "https://api.example.com/items"


class FeedOptions(ReadOptions):
    def get_query_parameters(self) -> Any:
        return {"q": "x"}


class PostOptions(WriteOptions):
    def get_query_parameters(self) -> Any:
        return {"q": "x"}

    def get_body_data(self) -> Any:
        return {"f": "y"}


class FailingTransport:
    def __init__(self, error: Exception) -> None:
        self.error = error
        self.calls = 0

    def execute(self, request: HttpRequest) -> Any:
        self.calls += 1
        raise self.error


@pytest.fixture
def service(transport, async_transport) -> HttpService:
    return HttpService(transport, async_transport)


class TestHttpService:
    def test_requires_a_transport(self):
        with pytest.raises(SocialHttpError):
            HttpService()

    class TestSend:
        def test_returns_transport_response_unchanged(self, service, transport):
            response = service.send("GET", URL)

            assert response is transport.response
            assert transport.requests == [HttpRequest(HttpMethod.GET, URL)]

        @pytest.mark.parametrize("method", list(HttpMethod))
        def test_method_and_url_preserved(self, service, transport, method):
            url = "https://api.example.com/a%20b/?x=1#frag"

            service.send(method, url)

            assert transport.requests[0].method is method
            assert transport.requests[0].url == url

        @pytest.mark.parametrize("url", [None, "", "   "])
        def test_blank_url_never_reaches_transport(self, service, transport, url):
            with pytest.raises(InvalidArgumentError):
                service.send("GET", url)

            assert transport.requests == []

        def test_none_options_never_reach_transport(self, service, transport):
            with pytest.raises(InvalidArgumentError) as exc_info:
                service.send("POST", URL, options=None)

            assert exc_info.value.argument == "options"
            assert transport.requests == []

        def test_raw_query_order_preserved(self, service, transport):
            service.send("GET", URL, {"a": "1", "b": "2"})

            query = transport.requests[0].query
            assert query.items() == [("a", "1"), ("b", "2")]
            assert query == QueryParameters.from_input({"a": "1", "b": "2"})

        def test_snapshot_semantics(self, service, transport):
            query = {"a": "1", "b": "2"}
            body = [("f", "x")]

            service.send("POST", URL, query, body)
            query["a"] = "changed"
            query["c"] = "3"
            body.append(("g", "y"))

            request = transport.requests[0]
            assert request.query.items() == [("a", "1"), ("b", "2")]
            assert request.body.items() == [("f", "x")]

        def test_prebuilt_values_are_snapshots(self, service, transport):
            query_pairs = [("a", "1")]
            body_pairs = [("f", "x")]

            service.post(URL, QueryParameters(query_pairs), BodyData(body_pairs))
            query_pairs.append(("b", "2"))
            body_pairs.append(("g", "y"))

            request = transport.requests[0]
            assert request.query.items() == [("a", "1")]
            assert request.body.items() == [("f", "x")]
            assert hash(request) == hash(
                HttpRequest(
                    HttpMethod.POST,
                    URL,
                    QueryParameters((("a", "1"),)),
                    BodyData((("f", "x"),)),
                )
            )

        def test_equivalent_shapes_dispatch_equal_requests(self, service, transport):
            service.send("POST", URL, {"a": "1"}, {"f": "x"})
            service.send(
                HttpMethod.POST,
                URL,
                QueryParameters((("a", "1"),)),
                BodyData((("f", "x"),)),
            )
            service.post(URL, [("a", "1")], [("f", "x")])

            first, second, third = transport.requests
            assert first == second == third

        def test_transport_errors_propagate_unchanged(self):
            error = httpx.ConnectError("boom")
            failing = FailingTransport(error)

            with pytest.raises(httpx.ConnectError) as exc_info:
                HttpService(failing).send("GET", URL)

            assert exc_info.value is error
            assert failing.calls == 1

        def test_missing_sync_transport(self, async_transport):
            with pytest.raises(SocialHttpError):
                HttpService(async_transport=async_transport).send("GET", URL)

        def test_invalid_arguments_checked_before_missing_transport(
            self, async_transport
        ):
            with pytest.raises(InvalidArgumentError):
                HttpService(async_transport=async_transport).send("GET", "")

    class TestAdapters:
        def test_get(self, service, transport):
            service.get(URL, {"q": "x"})

            assert transport.requests == [
                HttpRequest(HttpMethod.GET, URL, QueryParameters((("q", "x"),)))
            ]

        def test_get_with_read_options(self, service, transport):
            service.get(URL, options=FeedOptions())

            assert transport.requests[0].query == QueryParameters((("q", "x"),))

        def test_get_with_write_options_sends_no_body(self, service, transport):
            service.get(URL, PostOptions())

            assert transport.requests[0].query == QueryParameters((("q", "x"),))
            assert transport.requests[0].body is None

        def test_post_with_write_options(self, service, transport):
            service.post(URL, options=PostOptions())

            assert transport.requests == [
                HttpRequest(
                    HttpMethod.POST,
                    URL,
                    QueryParameters((("q", "x"),)),
                    BodyData((("f", "y"),)),
                )
            ]

        def test_post_with_body_only(self, service, transport):
            service.post(URL, body={"f": "y"})

            assert transport.requests[0].query is None
            assert transport.requests[0].body == BodyData((("f", "y"),))

        @pytest.mark.parametrize(
            "name, method",
            [
                ("post", HttpMethod.POST),
                ("put", HttpMethod.PUT),
                ("patch", HttpMethod.PATCH),
                ("delete", HttpMethod.DELETE),
            ],
        )
        def test_write_adapters(self, service, transport, name, method):
            getattr(service, name)(URL, {"a": "1"}, {"f": "x"})

            assert transport.requests == [
                HttpRequest(
                    method,
                    URL,
                    QueryParameters((("a", "1"),)),
                    BodyData((("f", "x"),)),
                )
            ]

        @pytest.mark.parametrize("name", ["get", "post", "put", "patch", "delete"])
        def test_adapters_share_validation(self, service, transport, name):
            with pytest.raises(InvalidArgumentError):
                getattr(service, name)(" ")

            with pytest.raises(InvalidArgumentError):
                getattr(service, name)(URL, options=None)

            assert transport.requests == []

    class TestAsync:
        @pytest.mark.anyio
        async def test_send_async(self, service, async_transport, transport):
            response = await service.send_async("POST", URL, options=PostOptions())

            assert response is async_transport.response
            assert async_transport.requests == [
                HttpRequest(
                    HttpMethod.POST,
                    URL,
                    QueryParameters((("q", "x"),)),
                    BodyData((("f", "y"),)),
                )
            ]
            assert transport.requests == []

        @pytest.mark.anyio
        @pytest.mark.parametrize(
            "name, method",
            [
                ("get_async", HttpMethod.GET),
                ("post_async", HttpMethod.POST),
                ("put_async", HttpMethod.PUT),
                ("patch_async", HttpMethod.PATCH),
                ("delete_async", HttpMethod.DELETE),
            ],
        )
        async def test_async_adapters(self, service, async_transport, name, method):
            await getattr(service, name)(URL, {"a": "1"})

            assert async_transport.requests == [
                HttpRequest(method, URL, QueryParameters((("a", "1"),)))
            ]

        @pytest.mark.anyio
        async def test_sync_and_async_build_equal_requests(
            self, service, transport, async_transport
        ):
            service.post(URL, {"a": "1"}, {"f": "x"})
            await service.post_async(URL, {"a": "1"}, {"f": "x"})

            assert transport.requests == async_transport.requests

        @pytest.mark.anyio
        async def test_blank_url_never_reaches_async_transport(
            self, service, async_transport
        ):
            with pytest.raises(InvalidArgumentError):
                await service.get_async("")

            assert async_transport.requests == []

        @pytest.mark.anyio
        async def test_missing_async_transport(self, transport):
            with pytest.raises(SocialHttpError):
                await HttpService(transport).get_async(URL)
