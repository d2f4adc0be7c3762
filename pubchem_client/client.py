import logging
from logging import Logger
from typing import Optional, List, Tuple

import requests

from .config import DEFAULT_REQUEST_DELAY, REQUEST_TIMEOUT, USER_AGENT
from .exceptions import ValidationError
from .extractors import (
    extract_cid,
    extract_cas,
    extract_properties,
    extract_sdf,
)
from .formula import FormulaSearch
from .models import HttpResponse, CompoundRecord, FormulaSearchResult
from .rate_limit import RateLimiter, FixedDelayRateLimiter
from .transport import Transport
from .urls import cid_by_name_url, cas_url, properties_url, sdf_url

logger: Logger = logging.getLogger(__name__)


class PubChemClient:
    """
    Client for PubChem PUG REST / PUG View lookups with rate limiting.

    Every request is followed by the rate limiter's wait, whether it succeeded
    or not. Non-OK statuses come back as sentinels (-1, "NA", empty list);
    transport, parse and shape failures are raised.
    """

    def __init__(
        self,
        rate_limiter: Optional[RateLimiter] = None,
        transport: Optional[Transport] = None,
        delay: float = DEFAULT_REQUEST_DELAY,
        timeout: Optional[float] = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize PubChem client.

        Args:
            rate_limiter: Limiter waited on after every request
                (default: FixedDelayRateLimiter(delay))
            transport: Object with a ``get(url) -> HttpResponse`` method
                (default: a requests-based Transport)
            delay: Seconds to pause after each request when no limiter is given
            timeout: Request timeout in seconds when no transport is given
            session: Optional requests session for the default transport
        """
        self.rate_limiter = rate_limiter or FixedDelayRateLimiter(delay)
        self.transport = transport or Transport(
            session=session,
            timeout=timeout,
            user_agent=USER_AGENT,
        )

        logger.info(
            f"Initialized PubChem client "
            f"(rate_limiter={type(self.rate_limiter).__name__}, timeout={timeout})"
        )

    def _request(self, url: str) -> HttpResponse:
        """Issue one GET, then wait on the rate limiter even if it failed."""
        try:
            return self.transport.get(url)
        finally:
            self.rate_limiter.wait()

    def get_cid(self, name: str) -> int:
        """
        Resolve a compound name to its first PubChem CID.

        Returns:
            The CID, or -1 when PubChem has no match
        """
        if not name or not name.strip():
            raise ValidationError("Compound name must be a non-empty string")

        response = self._request(cid_by_name_url(name))
        cid = extract_cid(response.status_code, response.text)

        logger.info(f"CID lookup: name='{name}' -> {cid}")
        return cid

    def get_cas(self, cid: int) -> str:
        """Return the CAS registry number of a compound, or "NA"."""
        response = self._request(cas_url(cid))
        cas = extract_cas(response.status_code, response.text)

        logger.info(f"CAS lookup: cid={cid} -> {cas}")
        return cas

    def get_properties(self, cid: int) -> Tuple[str, str]:
        """
        Fetch canonical SMILES and InChIKey for a compound.

        Returns:
            (smiles, inchikey), both "NA" when PubChem answers with an error
        """
        response = self._request(properties_url(cid))
        smiles, inchikey = extract_properties(response.status_code, response.text)

        logger.info(f"Property lookup: cid={cid} -> {inchikey}")
        return smiles, inchikey

    def get_sdf(self, cid: int) -> str:
        """
        Fetch the 2D structure of a compound as an SDF block.

        The body is returned verbatim whatever the status, so an error page
        or an empty string can come back; callers decide what to do with it.
        """
        response = self._request(sdf_url(cid))
        sdf = extract_sdf(response.status_code, response.text)

        logger.info(f"SDF fetch: cid={cid}, size={len(sdf)} bytes")
        return sdf

    def formula_search(self, formula: str) -> FormulaSearchResult:
        """Run a formula search and return its full result, state included."""
        return FormulaSearch(self._request, formula).run()

    def search_formula(self, formula: str) -> List[str]:
        """
        Find up to five CIDs (as text) matching a molecular formula.

        Returns:
            Matching CIDs, or an empty list when none were found
        """
        return list(self.formula_search(formula).cids)

    def get_record(self, cid: int) -> CompoundRecord:
        """
        Look up CAS number, properties and structure of one compound.

        A CID of -1 (no match) short-circuits to an all-sentinel record
        without touching the network.
        """
        if cid < 0:
            return CompoundRecord(cid=cid)

        cas = self.get_cas(cid)
        smiles, inchikey = self.get_properties(cid)
        sdf = self.get_sdf(cid)

        return CompoundRecord(
            cid=cid,
            cas=cas,
            inchikey=inchikey,
            smiles=smiles,
            sdf=sdf,
        )

    def close(self):
        """Close the underlying transport."""
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()
        logger.info("Closed PubChem client session")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
