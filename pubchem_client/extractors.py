"""
Extractors that turn PubChem response bodies into flat values.

Every extractor receives the status code and body of one response. A non-OK
status yields the operation's sentinel without looking at the body. An OK
status means the body is parsed and a fixed path of keys and indices is
followed to the wanted field; a body that is not JSON raises ParseError and a
missing hop raises ShapeError.
"""

import json
import logging
from logging import Logger
from typing import Any, List, Optional, Sequence, Tuple, Union

from .config import (
    CID_NOT_FOUND,
    NOT_AVAILABLE,
    PENDING_MESSAGE,
    FORMULA_MAX_RECORDS,
)
from .exceptions import ParseError, ShapeError
from .models import PendingJob

logger: Logger = logging.getLogger(__name__)

HTTP_OK = 200
HTTP_ACCEPTED = 202

Hop = Union[str, int]


def _parse_json(body: str) -> Any:
    try:
        return json.loads(body)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Response body is not valid JSON: {e}") from e


def _step(node: Any, hop: Hop, walked: Sequence[Hop]) -> Any:
    """Take one hop down a parsed body, raising ShapeError if it isn't there."""
    path = list(walked) + [hop]
    if isinstance(hop, int):
        if not isinstance(node, list) or not 0 <= hop < len(node):
            raise ShapeError(f"Missing index [{hop}] at {_format(path)}", path)
        return node[hop]
    if not isinstance(node, dict) or hop not in node:
        raise ShapeError(f"Missing key '{hop}' at {_format(path)}", path)
    return node[hop]


def _walk(node: Any, hops: Sequence[Hop]) -> Any:
    walked: List[Hop] = []
    for hop in hops:
        node = _step(node, hop, walked)
        walked.append(hop)
    return node


def _format(path: Sequence[Hop]) -> str:
    return "".join(f"[{hop}]" if isinstance(hop, int) else f".{hop}" for hop in path)


def _as_text(value: Any) -> str:
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, str):
        return value
    return json.dumps(value)


def extract_cid(status_code: int, body: str) -> int:
    """IdentifierList -> CID -> [0]"""
    if status_code != HTTP_OK:
        logger.info(f"CID lookup returned HTTP {status_code}, no match")
        return CID_NOT_FOUND

    parsed = _parse_json(body)
    cid = _walk(parsed, ["IdentifierList", "CID", 0])
    if not isinstance(cid, int) or isinstance(cid, bool):
        path = ["IdentifierList", "CID", 0]
        raise ShapeError(f"CID at {_format(path)} is not an integer: {cid!r}", path)
    return cid


def extract_cas(status_code: int, body: str) -> str:
    """
    Pull the first CAS number out of a PUG View record.

    Path: Record -> Section[0] -> Section[0] -> Section[0] -> Information[0]
    -> Value -> StringWithMarkup[0] -> String
    """
    if status_code != HTTP_OK:
        logger.info(f"CAS lookup returned HTTP {status_code}, using '{NOT_AVAILABLE}'")
        return NOT_AVAILABLE

    parsed = _parse_json(body)
    cas = _walk(parsed, [
        "Record",
        "Section", 0,
        "Section", 0,
        "Section", 0,
        "Information", 0,
        "Value",
        "StringWithMarkup", 0,
        "String",
    ])
    return _as_text(cas)


def extract_properties(status_code: int, body: str) -> Tuple[str, str]:
    """Return (CanonicalSMILES, InChIKey) from PropertyTable -> Properties[0]."""
    if status_code != HTTP_OK:
        logger.info(
            f"Property lookup returned HTTP {status_code}, "
            f"using '{NOT_AVAILABLE}'"
        )
        return NOT_AVAILABLE, NOT_AVAILABLE

    parsed = _parse_json(body)
    walked: List[Hop] = ["PropertyTable", "Properties", 0]
    properties = _walk(parsed, walked)

    smiles = _step(properties, "CanonicalSMILES", walked)
    inchikey = _step(properties, "InChIKey", walked)
    return _as_text(smiles), _as_text(inchikey)


def extract_sdf(status_code: int, body: str) -> str:
    # Structure data is passed through untouched, whatever the status.
    if status_code != HTTP_OK:
        logger.debug(f"SDF request returned HTTP {status_code}, passing body through")
    return body


def extract_pending_job(status_code: int, body: str) -> Optional[PendingJob]:
    """
    Detect a queued search.

    Returns the job when Waiting.Message is the "request is running" notice,
    otherwise None. PubChem answers queued jobs with 202 Accepted, so that
    status is looked at as well as 200. A 202 body is read leniently: if it
    is not JSON or has no ListKey, there is no job to poll.
    """
    if status_code not in (HTTP_OK, HTTP_ACCEPTED):
        return None

    if status_code == HTTP_OK:
        parsed = _parse_json(body)
    else:
        try:
            parsed = json.loads(body)
        except (TypeError, ValueError):
            logger.info(f"HTTP {status_code} body is not JSON, no pending job")
            return None

    waiting = parsed.get("Waiting") if isinstance(parsed, dict) else None
    if not isinstance(waiting, dict) or waiting.get("Message") != PENDING_MESSAGE:
        return None

    if status_code != HTTP_OK and waiting.get("ListKey") is None:
        logger.info(f"HTTP {status_code} Waiting block has no ListKey, no pending job")
        return None

    list_key = _step(waiting, "ListKey", ["Waiting"])
    if list_key is None:
        raise ShapeError("ListKey at .Waiting.ListKey is null", ["Waiting", "ListKey"])
    return PendingJob(list_key=_as_text(list_key))


def extract_cid_list(status_code: int, body: str) -> List[str]:
    """
    Return up to five CIDs, as text, from IdentifierList -> CID.

    A body with no IdentifierList at all (nothing matched, or the job is
    still running) gives an empty list.
    """
    if status_code != HTTP_OK:
        logger.info(f"Formula search returned HTTP {status_code}, no CIDs")
        return []

    parsed = _parse_json(body)
    if not isinstance(parsed, dict) or "IdentifierList" not in parsed:
        return []

    cids = _step(parsed["IdentifierList"], "CID", ["IdentifierList"])
    if not isinstance(cids, list):
        path = ["IdentifierList", "CID"]
        raise ShapeError(f"Expected a list at {_format(path)}", path)
    return [str(cid) for cid in cids][:FORMULA_MAX_RECORDS]
