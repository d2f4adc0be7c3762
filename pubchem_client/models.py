"""
Pydantic models for PubChem responses and lookup results.

Every model is frozen: a value is built from a single response and never
mutated afterwards.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator, ConfigDict

from .config import FORMULA_MAX_RECORDS, NOT_AVAILABLE, CID_NOT_FOUND


class HttpResponse(BaseModel):
    """Raw status and body of a single GET request."""
    model_config = ConfigDict(frozen=True)

    status_code: int = Field(..., description="HTTP status code")
    text: str = Field(default="", description="Decoded response body")


class PendingJob(BaseModel):
    """
    Listkey issued by PubChem for a search that did not finish synchronously.

    The key is opaque and is consumed by exactly one poll request.
    """
    model_config = ConfigDict(frozen=True)

    list_key: str = Field(..., description="Opaque PubChem listkey")


class CompoundRecord(BaseModel):
    """
    Read-only view of everything looked up for one CID.

    Text fields fall back to "NA" and the structure block to an empty string
    when PubChem had nothing to return.
    """
    model_config = ConfigDict(frozen=True)

    cid: int = Field(..., description="PubChem Compound ID")
    cas: str = Field(default=NOT_AVAILABLE, description="CAS registry number")
    inchikey: str = Field(default=NOT_AVAILABLE, description="InChIKey")
    smiles: str = Field(default=NOT_AVAILABLE, description="Canonical SMILES")
    sdf: str = Field(default="", description="2D structure as an SDF block")

    @property
    def found(self) -> bool:
        return self.cid != CID_NOT_FOUND


class SearchState(str, Enum):
    """Terminal states of a formula search."""
    RESOLVED_IMMEDIATELY = "resolved_immediately"
    RESOLVED_BY_POLL = "resolved_by_poll"


class FormulaSearchResult(BaseModel):
    """CIDs (as text) matching a molecular formula, at most five of them."""
    model_config = ConfigDict(frozen=True)

    formula: str = Field(..., description="Formula that was searched")
    cids: List[str] = Field(default_factory=list, description="Matching CIDs")
    state: SearchState = Field(
        default=SearchState.RESOLVED_IMMEDIATELY,
        description="How the search reached its terminal state",
    )
    complete: bool = Field(
        default=True,
        description="False when the job was still running after the poll",
    )

    @field_validator("cids", mode="before")
    @classmethod
    def cap_and_stringify(cls, v):
        """PubChem returns integer CIDs; keep the first few, as text."""
        return [str(cid) for cid in v][:FORMULA_MAX_RECORDS]

    @property
    def polled(self) -> bool:
        return self.state == SearchState.RESOLVED_BY_POLL

    @property
    def has_results(self) -> bool:
        return len(self.cids) > 0
