"""Testes para normalização dos formatos de resposta da Graph API."""

from __future__ import annotations

import json

from fbgraph.connectors.graph.models import ResponseShape
from fbgraph.connectors.graph.normalizer import (
    image_marker,
    is_image_content,
    normalize,
)
from fbgraph.utils.errors import RemoteApiError, ResponseParseError


class TestStructured:
    """Corpos JSON e já estruturados."""

    def test_json_object(self) -> None:
        outcome = normalize('{"id":"1"}')
        assert outcome.ok
        assert outcome.value == {"id": "1"}
        assert outcome.result.shape is ResponseShape.STRUCTURED

    def test_already_structured_body_skips_parsing(self) -> None:
        body = {"data": [{"id": "1"}]}
        outcome = normalize(body)
        assert outcome.value is body

    def test_json_array_with_objects(self) -> None:
        outcome = normalize('[{"code":200,"body":"{}"}]')
        assert outcome.value == [{"code": 200, "body": "{}"}]

    def test_invalid_json_is_parse_error(self) -> None:
        outcome = normalize("not json {}")
        assert not outcome.ok
        assert isinstance(outcome.error, ResponseParseError)
        assert outcome.error.message == "Error parsing json"
        assert isinstance(outcome.error.cause, json.JSONDecodeError)
        assert outcome.value is None

    def test_deeply_nested_json_is_parse_error(self) -> None:
        outcome = normalize("[" * 100000 + "{}")
        assert isinstance(outcome.error, ResponseParseError)
        assert isinstance(outcome.error.cause, RecursionError)


class TestScalarAndQueryString:
    """Valores soltos e respostas em query string."""

    def test_bare_scalar_is_wrapped(self) -> None:
        outcome = normalize("true")
        assert outcome.value == {"data": "true"}
        assert outcome.result.shape is ResponseShape.SCALAR

    def test_empty_body_is_empty_data(self) -> None:
        assert normalize("").value == {"data": ""}
        assert normalize(None).value == {"data": ""}

    def test_query_string_body(self) -> None:
        outcome = normalize("access_token=abc|def&expires=5183999")
        assert outcome.value == {"access_token": "abc|def", "expires": "5183999"}
        assert outcome.result.shape is ResponseShape.QUERY_STRING

    def test_query_string_with_leading_question_mark(self) -> None:
        assert normalize("?a=1&b=2").value == {"a": "1", "b": "2"}

    def test_query_string_is_url_decoded(self) -> None:
        assert normalize("msg=ol%C3%A1+mundo").value == {"msg": "olá mundo"}

    def test_repeated_keys_become_list(self) -> None:
        assert normalize("a=1&a=2&b=3").value == {"a": ["1", "2"], "b": "3"}

    def test_bytes_body_is_decoded(self) -> None:
        assert normalize(b'{"id":"7"}').value == {"id": "7"}


class TestImage:
    """Content-type de imagem."""

    def test_image_content_type_overrides_body(self) -> None:
        outcome = normalize("\x89PNG{}", content_type="image/png", location="https://cdn/x.png")
        assert outcome.value == {"image": True, "location": "https://cdn/x.png"}
        assert outcome.result.shape is ResponseShape.IMAGE

    def test_image_detection_is_substring(self) -> None:
        assert is_image_content("image/jpeg")
        assert is_image_content("application/x-image-thing")
        assert not is_image_content("application/json")
        assert not is_image_content(None)

    def test_image_marker(self) -> None:
        assert image_marker(None) == {"image": True, "location": None}


class TestRemoteError:
    """Objeto ``error`` dentro de uma resposta recebida."""

    def test_error_object_is_failure(self) -> None:
        outcome = normalize('{"error":{"message":"bad"}}')
        assert not outcome.ok
        assert isinstance(outcome.error, RemoteApiError)
        assert outcome.error.remote_error == {"message": "bad"}
        assert outcome.error.message == "bad"
        assert outcome.value is None

    def test_error_info_is_parsed(self) -> None:
        body = {
            "error": {
                "message": "Invalid OAuth access token.",
                "type": "OAuthException",
                "code": 190,
                "fbtrace_id": "AbC",
            }
        }
        outcome = normalize(body)
        info = outcome.error.info
        assert info.error_type == "OAuthException"
        assert info.error_code == 190
        assert info.fbtrace_id == "AbC"
        assert info.is_permanent is True

    def test_error_in_query_string(self) -> None:
        outcome = normalize("error=denied")
        assert isinstance(outcome.error, RemoteApiError)
        assert outcome.error.remote_error == "denied"

    def test_falsy_error_value_is_success(self) -> None:
        outcome = normalize('{"error":null,"id":"1"}')
        assert outcome.ok
