from typing import Mapping, Optional

import httpx

from ..models.errors import MalformedURIError


def build_url(uri: str, params: Optional[Mapping[str, str]] = None) -> str:
    """Builds the final request URL from a base URI and query parameters.

    Parameters are added to the URI's existing query string, never replacing
    pairs that are already there. The resulting query is form-encoded and
    ordered by key, keeping the original order of repeated keys.

    Examples:
        >>> build_url("https://example.com/posts?page=1", {"id": "2"})
        'https://example.com/posts?id=2&page=1'

        >>> build_url("https://example.com/search?q=a", {"q": "b c"})
        'https://example.com/search?q=a&q=b+c'

    Args:
        uri (str): The base URI. May already carry a query string.
        params (Optional[Mapping[str, str]]): Query parameters to add.

    Returns:
        str: The serialized URL.

    Raises:
        MalformedURIError: If the URI cannot be parsed.
    """
    try:
        url = httpx.URL(uri)
    except (httpx.InvalidURL, TypeError) as e:
        raise MalformedURIError(str(uri), str(e)) from e

    if params:
        items = url.params.multi_items() + [(k, v) for k, v in params.items()]
        items.sort(key=lambda item: item[0])
        url = url.copy_with(params=httpx.QueryParams(items))

    return str(url)
