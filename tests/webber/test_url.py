import pytest

from webber import MalformedURIError, build_url


class TestBuildUrl:
    def test_no_params_keeps_query(self):
        uri = "https://example.com/posts?page=1&sort=desc"

        assert build_url(uri) == uri
        assert build_url(uri, {}) == uri

    def test_adds_params_to_empty_query(self):
        url = build_url("https://example.com/posts", {"Id": "2"})

        assert url == "https://example.com/posts?Id=2"

    def test_preserves_existing_params(self):
        url = build_url("https://example.com/posts?page=1", {"id": "2"})

        assert url == "https://example.com/posts?id=2&page=1"

    def test_adds_instead_of_replacing(self):
        url = build_url("https://example.com/search?q=first", {"q": "second"})

        assert url == "https://example.com/search?q=first&q=second"

    def test_params_are_percent_encoded(self):
        url = build_url(
            "https://example.com/search",
            {"q": "hello world", "filter": "a&b=c", "path": "/x/y"},
        )

        assert url == (
            "https://example.com/search"
            "?filter=a%26b%3Dc&path=%2Fx%2Fy&q=hello+world"
        )

    def test_params_are_ordered_by_key(self):
        url = build_url("https://example.com/", {"b": "2", "a": "1", "c": "3"})

        assert url == "https://example.com/?a=1&b=2&c=3"

    @pytest.mark.parametrize(
        "uri",
        [
            "https://example.com:notaport/posts",
        ],
    )
    def test_malformed_uri(self, uri: str):
        with pytest.raises(MalformedURIError) as exc_info:
            build_url(uri, {"id": "1"})

        assert exc_info.value.uri == uri
