"""Wire and storage constants shared across the SDK."""
import re

DEFAULT_BASE_URL = "https://app.specify.sh/api"
ADS_PATH = "/ads"

PUBLISHER_KEY_PREFIX = "spk_"
PUBLISHER_KEY_LENGTH = 34

ADDRESS_RE = re.compile(r"^0x[a-fA-F0-9]{40}$")
MAX_ADDRESSES = 50

# Server-issued localId value meaning "forget the stored identifier".
LOCAL_ID_VOID = "void"

LOCAL_ID_KEY = "__specify_local_id"
ADDRESSES_KEY = "__specify_addresses_cache"

SQLITE_FILENAME = "specify_sdk.db"
JSON_FILENAME = "specify_cache.json"
