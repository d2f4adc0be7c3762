"""Shared fixtures: canned PubChem bodies and a recording fake transport."""

import json
from typing import List

import pytest

from pubchem_client.client import PubChemClient
from pubchem_client.models import HttpResponse
from pubchem_client.rate_limit import NoDelayRateLimiter


CID_BODY = json.dumps({"IdentifierList": {"CID": [2244]}})

CAS_BODY = json.dumps({
    "Record": {
        "RecordType": "CID",
        "RecordNumber": 2244,
        "RecordTitle": "Aspirin",
        "Section": [{
            "TOCHeading": "Names and Identifiers",
            "Section": [{
                "TOCHeading": "Other Identifiers",
                "Section": [{
                    "TOCHeading": "CAS",
                    "Information": [
                        {
                            "ReferenceNumber": 1,
                            "Value": {"StringWithMarkup": [{"String": "50-78-2"}]},
                        },
                        {
                            "ReferenceNumber": 2,
                            "Value": {"StringWithMarkup": [{"String": "11126-35-5"}]},
                        },
                    ],
                }],
            }],
        }],
    }
})

PROPERTIES_BODY = json.dumps({
    "PropertyTable": {
        "Properties": [{
            "CID": 2244,
            "CanonicalSMILES": "CC(=O)OC1=CC=CC=C1C(=O)O",
            "InChIKey": "BSYNRYMUTXBXSQ-UHFFFAOYSA-N",
        }]
    }
})

SDF_BODY = (
    "2244\n  -OEChem-01012500002D\n\n 21 21  0     0  0  0  0  0  0999 V2000\n"
    "M  END\n> <PUBCHEM_COMPOUND_CID>\n2244\n\n$$$$\n"
)

WAITING_BODY = json.dumps({
    "Waiting": {
        "ListKey": "3361982736485120735",
        "Message": "Your request is running",
    }
})

FORMULA_BODY = json.dumps({
    "IdentifierList": {"CID": [2244, 8184, 10745, 11980, 68484, 71587]}
})


class FakeTransport:
    """Returns queued responses in order and records every URL requested."""

    def __init__(self, responses: List[HttpResponse] = None):
        self.responses = list(responses or [])
        self.urls: List[str] = []
        self.closed = False

    def queue(self, status_code: int, text: str = ""):
        self.responses.append(HttpResponse(status_code=status_code, text=text))

    def get(self, url: str) -> HttpResponse:
        self.urls.append(url)
        return self.responses.pop(0)

    def close(self):
        self.closed = True


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def client(fake_transport):
    """Client wired to the fake transport, with no rate-limit delay."""
    with PubChemClient(
        rate_limiter=NoDelayRateLimiter(),
        transport=fake_transport,
    ) as client:
        yield client
