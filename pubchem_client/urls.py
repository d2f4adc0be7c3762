"""
URL builders for PubChem PUG REST and PUG View.

Parameters are joined as-is, without percent-encoding: names and formulas
are expected to be alphanumeric with limited punctuation, and anything else
simply produces a request PubChem rejects.
"""

from .config import PUG_REST_BASE_URL, PUG_VIEW_BASE_URL, FORMULA_MAX_RECORDS


def cid_by_name_url(name: str) -> str:
    return f"{PUG_REST_BASE_URL}/compound/name/{name}/cids/JSON"


def cas_url(cid: int) -> str:
    return f"{PUG_VIEW_BASE_URL}/data/compound/{cid}/JSON?heading=CAS"


def properties_url(cid: int) -> str:
    return (
        f"{PUG_REST_BASE_URL}/compound/cid/{cid}"
        f"/property/InChIKey,CanonicalSMILES/JSON"
    )


def sdf_url(cid: int) -> str:
    return f"{PUG_REST_BASE_URL}/compound/cid/{cid}/SDF?record_type=2d"


def formula_search_url(formula: str) -> str:
    return (
        f"{PUG_REST_BASE_URL}/compound/fastformula/{formula}"
        f"/cids/JSON?MaxRecords={FORMULA_MAX_RECORDS}"
    )


def listkey_url(list_key: str) -> str:
    """URL that returns the CIDs of a finished (or still running) listkey job."""
    return f"{PUG_REST_BASE_URL}/compound/listkey/{list_key}/cids/JSON"
