API_VERSION_HEADER = "X-API-Version"
REQUEST_ID_HEADER = "X-Request-ID"

# Paths that are never authenticated nor request-logged
HEALTH_PATH_PREFIX = "/health"
