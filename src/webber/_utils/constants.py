# Headers
HEADER_USER_AGENT = "User-Agent"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CONTENT_ENCODING = "Content-Encoding"
HEADER_ACCEPT_ENCODING = "Accept-Encoding"

# Accept-Encoding values
ACCEPT_ENCODING_GZIP = "gzip"
ACCEPT_ENCODING_IDENTITY = "identity"

# Content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM_ENCODED = "application/x-www-form-urlencoded"

# Client identity
USER_AGENT = "paperchain-webber/0.1.0 ( info@paperchain.io )"

# Transport defaults
DEFAULT_TIMEOUT = 1.0  # seconds
DEFAULT_MAX_IDLE_CONNECTIONS = 20

# "agzip" is matched on purpose, some upstreams send it
GZIP_ENCODINGS = ("gzip", "agzip")

# Environment variables
ENV_CONNECT_TIMEOUT = "WEBBER_CONNECT_TIMEOUT"
ENV_TLS_HANDSHAKE_TIMEOUT = "WEBBER_TLS_HANDSHAKE_TIMEOUT"
ENV_REQUEST_TIMEOUT = "WEBBER_REQUEST_TIMEOUT"
ENV_MAX_IDLE_CONNECTIONS = "WEBBER_MAX_IDLE_CONNECTIONS"
ENV_DISABLE_SSL_VERIFY = "WEBBER_DISABLE_SSL_VERIFY"
