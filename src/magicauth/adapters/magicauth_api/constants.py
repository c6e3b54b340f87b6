"""Constants for the MagicAuth API adapter."""

# Authorization scheme expected by the MagicAuth API
AUTHORIZATION_SCHEME = "Authentic"

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}

# API endpoints, relative to the configured base URL
COLLECTIONS_PATH = "/collections"  # POST
COLLECTION_CREDENTIALS_PATH = "/collections/{collection_id}/credentials"  # POST
CREDENTIAL_PATH = "/credentials/{credential_id}"  # PUT
CREDENTIAL_SESSIONS_PATH = "/credentials/{credential_id}/sessions"  # POST
SESSION_PATH = "/sessions/{session_id}"  # GET

# Prefix of credential ids issued by the service
CREDENTIAL_ID_PREFIX = "Auth_U1-"
