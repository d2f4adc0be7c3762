"""
Formula search with PubChem's asynchronous listkey pattern.

A fast formula search normally answers with the CID list straight away. When
PubChem queues the search instead, the first body carries a Waiting block
with a ListKey, and the CIDs have to be fetched from the listkey endpoint.
"""

import logging
from logging import Logger
from typing import Callable, List, Optional

from .exceptions import ValidationError
from .extractors import extract_pending_job, extract_cid_list
from .models import HttpResponse, FormulaSearchResult, PendingJob, SearchState
from .urls import formula_search_url, listkey_url

logger: Logger = logging.getLogger(__name__)

RequestFn = Callable[[str], HttpResponse]


class FormulaSearch:
    """
    One formula search, from submission to its terminal state.

    The search is submitted once. If PubChem queues it, the listkey is polled
    exactly once; a job that is still running at that point is not polled
    again and ends with whatever CIDs (usually none) the poll returned and
    ``complete=False``.

    Args:
        request: Callable issuing one GET and returning the HttpResponse.
            The client passes its rate-limited request method here.
        formula: Molecular formula, e.g. "C9H8O4"
    """

    def __init__(self, request: RequestFn, formula: str):
        if not formula or not formula.strip():
            raise ValidationError("Formula must be a non-empty string")
        self._request = request
        self.formula = formula
        self._result: Optional[FormulaSearchResult] = None

    def run(self) -> FormulaSearchResult:
        if self._result is not None:
            return self._result

        response = self._request(formula_search_url(self.formula))
        job = extract_pending_job(response.status_code, response.text)

        if job is None:
            cids = extract_cid_list(response.status_code, response.text)
            self._result = self._finish(cids, SearchState.RESOLVED_IMMEDIATELY)
        else:
            logger.info(f"Formula search '{self.formula}' queued as listkey {job.list_key}")
            self._result = self._poll(job)

        return self._result

    def _poll(self, job: PendingJob) -> FormulaSearchResult:
        response = self._request(listkey_url(job.list_key))
        complete = extract_pending_job(response.status_code, response.text) is None
        if not complete:
            logger.warning(
                f"Formula search '{self.formula}' still running after poll "
                f"(listkey {job.list_key}), results may be incomplete"
            )

        cids = extract_cid_list(response.status_code, response.text)
        return self._finish(cids, SearchState.RESOLVED_BY_POLL, complete=complete)

    def _finish(
        self,
        cids: List[str],
        state: SearchState,
        complete: bool = True,
    ) -> FormulaSearchResult:
        result = FormulaSearchResult(
            formula=self.formula,
            cids=cids,
            state=state,
            complete=complete,
        )
        logger.info(
            f"Formula search '{self.formula}': {len(result.cids)} CIDs "
            f"({state.value})"
        )
        return result
