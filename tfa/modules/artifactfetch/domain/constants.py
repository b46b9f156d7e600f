"""Constants shared across artifactfetch domain models."""

DEFAULT_MANAGED_MARKER = "@tfamanaged"

LINE_COMMENT = "//"
BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"
ENTRY_MARKER = "@"
ASSIGN_MARKER = ">="

KEY_GROUP_ID = "groupId"
KEY_ARTEFACT_ID = "artefactId"
KEY_VERSION = "version"
KEY_EXTENSION = "extension"
KEY_URL = "url"
KEY_FILE_NAME = "fileName"

# Order matters: sidecar files are written in this order.
SIDECAR_FIELDS = (KEY_GROUP_ID, KEY_ARTEFACT_ID, KEY_VERSION, KEY_FILE_NAME, KEY_URL)
METADATA_FIELDS = (KEY_URL, KEY_ARTEFACT_ID, KEY_GROUP_ID, KEY_VERSION, KEY_EXTENSION)
