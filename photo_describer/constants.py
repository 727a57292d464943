"""All magic values live here — no inline literals anywhere else."""

# Outbound vision API
DEFAULT_VISION_MODEL = "gpt-4o"
DEFAULT_VISION_TIMEOUT: float = 30.0
DEFAULT_VISION_MAX_TOKENS = 500
VISION_MAX_RETRIES = 0
IMAGE_MIME_TYPE = "image/jpeg"
IMAGE_DESCRIPTION_PROMPT = "Apraksti, kas redzams attēla latviesu valoda. Maksimali 14 vardus."

# Transient image files
TEMP_FILE_PREFIX = "photo_"
TEMP_FILE_SUFFIX = ".jpeg"

# HTTP surface
DEFAULT_ENDPOINT_PATH = "/"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST",
    "Access-Control-Allow-Headers": "Content-Type",
}

# Caller-facing error messages
MSG_ERR_METHOD_NOT_ALLOWED = "Method not allowed"
MSG_ERR_NO_IMAGE = "No image data received"
MSG_ERR_SAVE_FAILED = "Failed to save image"
MSG_ERR_IMAGE_NOT_FOUND = "Image file not found"
MSG_ERR_TRANSPORT = "Transport error: %s"
MSG_ERR_UPSTREAM_STATUS = "API request failed (HTTP %d)"
MSG_ERR_PARSE = "Could not parse API response"
MSG_ERR_INTERNAL = "Internal error"

# Log messages
MSG_SERVER_STARTING = "Starting photo describer on %s:%d%s"
MSG_REQUEST_RECEIVED = "← %d bytes"
MSG_TEMP_CREATED = "Temp file created: %s"
MSG_TEMP_REMOVED = "Temp file removed: %s"
MSG_TEMP_REMOVE_FAILED = "Failed to remove temp file %s"
MSG_DESCRIBE_OK = "✓ Described (%.1fs)"
MSG_DESCRIBE_FAIL = "✗ Description failed (%.1fs): %s"
MSG_UNEXPECTED_FAILURE = "Unexpected failure while describing %s"
MSG_STORE_FAILED = "Could not store upload: %s"

# Latvian diacritics → plain Latin letters
DIACRITIC_FOLDS = {
    "ā": "a",
    "ē": "e",
    "ī": "i",
    "ū": "u",
    "č": "c",
    "ģ": "g",
    "ķ": "k",
    "ļ": "l",
    "ņ": "n",
    "š": "s",
    "ž": "z",
}
