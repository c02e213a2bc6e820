import os
import ssl
from typing import Any, Dict, Union

import certifi


def expand_path(path):
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    path = os.path.expandvars(path)
    path = os.path.expanduser(path)
    return path


def create_ssl_context() -> ssl.SSLContext:
    """Build an SSL context trusting the certifi bundle.

    System certificates are not used unless SSL_CERT_FILE, REQUESTS_CA_BUNDLE
    or SSL_CERT_DIR point at them.
    """
    ssl_cert_file = expand_path(os.environ.get("SSL_CERT_FILE"))
    requests_ca_bundle = expand_path(os.environ.get("REQUESTS_CA_BUNDLE"))
    ssl_cert_dir = expand_path(os.environ.get("SSL_CERT_DIR"))

    return ssl.create_default_context(
        cafile=ssl_cert_file or requests_ca_bundle or certifi.where(),
        capath=ssl_cert_dir,
    )


def get_verify(verify_ssl: bool) -> Union[bool, ssl.SSLContext]:
    return create_ssl_context() if verify_ssl else False


def get_httpx_client_kwargs(
    verify_ssl: bool = True, follow_redirects: bool = True
) -> Dict[str, Any]:
    """Get standardized httpx client configuration."""
    # HTTP_PROXY, HTTPS_PROXY, NO_PROXY are read by httpx itself
    return {
        "follow_redirects": follow_redirects,
        "verify": get_verify(verify_ssl),
    }
