"""Configuration for the PubChem PUG REST / PUG View client."""

from typing import Optional

# PubChem base URLs
PUG_REST_BASE_URL = "https://pubchem.ncbi.nlm.nih.gov/rest/pug"
PUG_VIEW_BASE_URL = "https://pubchem.ncbi.nlm.nih.gov/rest/pug_view"

# Rate limiting: PubChem allows at most 5 requests/second per client.
# A fixed pause after every request keeps a single client under that cap.
DEFAULT_REQUEST_DELAY = 0.2  # seconds after each request (5 req/sec)

# Request timeout (None leaves it to requests, i.e. wait indefinitely)
REQUEST_TIMEOUT: Optional[float] = None

# Formula search returns at most this many CIDs
FORMULA_MAX_RECORDS = 5

# Message PubChem puts in "Waiting" when a search was queued as a listkey job
PENDING_MESSAGE = "Your request is running"

# Sentinels returned when PubChem answers with a non-OK status
CID_NOT_FOUND = -1
NOT_AVAILABLE = "NA"

USER_AGENT = "PubChem-Client/0.1.0 (Research)"
