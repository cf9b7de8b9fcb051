"""Тесты построения URL и запросов"""

import pytest
import requests

from pikks_client.core.request_builder import auth_headers, build_url, json_request, send, upload_request
from pikks_client.schemas.posts import FileUpload, PostVisibility, RawUpload


class TestBuildUrl:
    """Тесты build_url"""

    def test_uses_configured_base_without_trailing_slash(self):
        assert build_url("/posts") == "http://api.test/posts"

    def test_path_without_leading_slash(self):
        assert build_url("health") == "http://api.test/health"

    def test_explicit_base_url(self):
        assert build_url("/posts", base_url="https://example.org/") == "https://example.org/posts"

    def test_empty_values_are_omitted(self):
        url = build_url("/posts", {"page": 1, "q": "", "owner": None, "sort": "popular"})
        assert url == "http://api.test/posts?page=1&sort=popular"
        assert "q=" not in url
        assert "owner" not in url

    def test_zero_and_false_are_kept(self):
        url = build_url("/posts", {"page": 0, "flag": False})
        assert url == "http://api.test/posts?page=0&flag=false"

    def test_insertion_order_is_preserved(self):
        url = build_url("/posts", {"visibility": "public", "page": 2, "per_page": 12})
        assert url.endswith("?visibility=public&page=2&per_page=12")

    def test_values_are_percent_encoded(self):
        url = build_url("/posts", {"q": "cats & dogs", "owner": "a/b"})
        assert url == "http://api.test/posts?q=cats+%26+dogs&owner=a%2Fb"

    def test_enum_uses_value(self):
        url = build_url("/posts", {"visibility": PostVisibility.UNLISTED})
        assert url.endswith("?visibility=unlisted")

    def test_sequence_values_repeat(self):
        url = build_url("/posts", {"tags": ["a", "", "b"], "title": "x"})
        assert url.endswith("?tags=a&tags=b&title=x")

    def test_no_query_string_when_everything_omitted(self):
        assert build_url("/posts", {"q": None, "owner": ""}) == "http://api.test/posts"


class TestAuthHeaders:
    def test_bearer_header_with_token(self):
        assert auth_headers("abc") == {"Authorization": "Bearer abc"}

    @pytest.mark.parametrize("token", [None, ""])
    def test_no_header_without_token(self, token):
        assert auth_headers(token) == {}


class TestJsonRequest:
    def test_json_body_sets_content_type(self):
        request = json_request("POST", "/auth/login", payload={"email": "a@b.c", "password": "x"})
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["Accept"] == "application/json"
        assert request.json == {"email": "a@b.c", "password": "x"}
        assert "Authorization" not in request.headers

    def test_bodyless_request_has_no_content_type(self):
        request = json_request("GET", "/posts", access_token="tok")
        assert "Content-Type" not in request.headers
        assert request.headers["Authorization"] == "Bearer tok"
        assert request.transport_kwargs() == {"headers": request.headers}


class TestUploadRequest:
    fields = {"title": "Sunset", "description": None, "tags": ["a", "b"], "visibility": "public"}

    def test_file_upload_is_multipart(self):
        upload = FileUpload(content=b"\x89PNG", filename="sunset.png", content_type="image/png")
        request = upload_request("POST", "/posts", self.fields, upload, "tok")

        assert request.url == "http://api.test/posts"
        assert request.data == [("title", "Sunset"), ("tags", "a"), ("tags", "b"), ("visibility", "public")]
        assert request.files == [("file", ("sunset.png", b"\x89PNG", "image/png"))]
        assert "Content-Type" not in request.headers
        assert request.headers["Authorization"] == "Bearer tok"

    def test_multipart_body_repeats_tags(self):
        upload = FileUpload(content=b"data", filename="a.bin")
        request = upload_request("POST", "/posts", self.fields, upload, "tok")
        prepared = requests.Request(
            request.method, request.url, headers=request.headers, data=request.data, files=request.files
        ).prepare()

        assert prepared.headers["Content-Type"].startswith("multipart/form-data")
        assert prepared.body.count(b'name="tags"') == 2
        assert b"a,b" not in prepared.body

    def test_raw_upload_uses_query_and_octet_stream(self):
        upload = RawUpload(content=b"bytes", filename="clip.mp4")
        request = upload_request("POST", "/posts", self.fields, upload, "tok")

        assert request.url == (
            "http://api.test/posts?title=Sunset&tags=a&tags=b&visibility=public&filename=clip.mp4"
        )
        assert request.data == b"bytes"
        assert request.files is None
        assert request.headers["Content-Type"] == "application/octet-stream"

    def test_missing_upload_sends_empty_octet_stream(self):
        request = upload_request("POST", "/posts", {"title": "t", "tags": ["a", "b"]}, None, "tok")
        assert request.url == "http://api.test/posts?title=t&tags=a&tags=b"
        assert request.data == b""
        assert request.headers["Content-Type"] == "application/octet-stream"


def test_send_passes_descriptor_to_transport(transport, make_response):
    transport.queue(make_response(204))
    request = json_request("DELETE", "/posts/1", access_token="tok")

    response = send(transport, request)

    assert response.status_code == 204
    call = transport.last_call
    assert call.method == "DELETE"
    assert call.url == "http://api.test/posts/1"
    assert call.kwargs == {"headers": {"Accept": "application/json", "Authorization": "Bearer tok"}}


def test_send_propagates_transport_errors(transport):
    transport.queue(requests.exceptions.ConnectionError("connection refused"))
    with pytest.raises(requests.exceptions.ConnectionError):
        send(transport, json_request("GET", "/posts"))
