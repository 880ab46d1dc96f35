import os
from dotenv import load_dotenv

load_dotenv()

# Names of the secrets injected by the host environment
QDRANT_URL_SECRET = "QDRANT_URL"
QDRANT_KEY_SECRET = "QDRANT_KEY"
EMBEDDING_URL_SECRET = "EMBEDDING_URL"
SECRET_NAMES = (QDRANT_URL_SECRET, QDRANT_KEY_SECRET, EMBEDDING_URL_SECRET)

COLLECTION_NAME = os.getenv("COLLECTION_NAME", "i")

# Categories whose items are only visible to their owner
PRIVATE_CATEGORIES = frozenset(
    c.strip() for c in os.getenv("PRIVATE_CATEGORIES", "private").split(",") if c.strip()
)

# Well-known point holding the `sc` sequence counter
COUNTER_POINT_ID = os.getenv("COUNTER_POINT_ID", "00000000-0000-0000-0000-000000000000")

VECTOR_SIZE = int(os.getenv("VECTOR_SIZE", 1024))
VECTOR_DISTANCE = os.getenv("VECTOR_DISTANCE", "Cosine")
AUTO_CREATE_COLLECTION = os.getenv("AUTO_CREATE_COLLECTION", "false").strip().lower() in ("1", "true", "yes")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))

# -------------------------
# PROTOCOL CONSTANTS
# -------------------------
RESULT_LIMIT = 7
PAGE_SIZE = 7
GROUP_SIZE = 1
SEARCH_PAYLOAD_FIELDS = ["m", "u"]
MESSAGE_CATEGORY = "m"
CHAT_MESSAGE_CATEGORY = "scm"
CHAT_SUMMARY_CATEGORY = "lucid"
COUNTER_CATEGORY = "sc"
