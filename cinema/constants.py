"""Application constants - centralized configuration values."""

# =============================================================================
# Images
# =============================================================================
MAX_IMAGE_SIZE_BYTES = 5 * 1024 * 1024  # 5 MiB hard ceiling on raw payload
IMAGE_NAME_MAX_LENGTH = 255
IMAGE_EXTENSION_MAX_LENGTH = 20

# =============================================================================
# Column limits
# =============================================================================
MOVIE_NAME_MAX_LENGTH = 200
DIRECTOR_NAME_MAX_LENGTH = 200
ACTOR_NAME_MAX_LENGTH = 100
LOOKUP_NAME_MAX_LENGTH = 100

# =============================================================================
# Messages
# =============================================================================
MSG_MOVIE_NOT_FOUND = "The selected movie could not be found."
MSG_IMAGE_TOO_LARGE = "The file is too large. The maximum allowed size is 5MB."
MSG_IMAGE_EMPTY = "The uploaded file is empty."
MSG_ACTOR_NOT_FOUND = "Actor entry {actor_id} could not be found for movie {movie_id}."
MSG_UNEXPECTED = "An unexpected error occurred while processing the request."
