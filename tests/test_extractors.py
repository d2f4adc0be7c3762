"""Tests for response extractors."""

import json
import logging

import pytest

from pubchem_client.exceptions import ParseError, ShapeError
from pubchem_client.extractors import (
    extract_cid,
    extract_cas,
    extract_properties,
    extract_sdf,
    extract_pending_job,
    extract_cid_list,
)
from conftest import (
    CID_BODY,
    CAS_BODY,
    PROPERTIES_BODY,
    SDF_BODY,
    WAITING_BODY,
    FORMULA_BODY,
)


def test_extract_cid():
    assert extract_cid(200, '{"IdentifierList":{"CID":[2244]}}') == 2244


def test_extract_cid_takes_first():
    assert extract_cid(200, json.dumps({"IdentifierList": {"CID": [5, 6, 7]}})) == 5


def test_extract_cas():
    assert extract_cas(200, CAS_BODY) == "50-78-2"


def test_extract_properties():
    smiles, inchikey = extract_properties(200, PROPERTIES_BODY)
    assert smiles == "CC(=O)OC1=CC=CC=C1C(=O)O"
    assert inchikey == "BSYNRYMUTXBXSQ-UHFFFAOYSA-N"


@pytest.mark.parametrize("status", [400, 404, 500, 503])
def test_non_ok_status_gives_sentinels(status):
    """Bodies are not parsed at all when the status is not OK."""
    garbage = "<html>Server Error</html>"
    assert extract_cid(status, garbage) == -1
    assert extract_cas(status, garbage) == "NA"
    assert extract_properties(status, garbage) == ("NA", "NA")
    assert extract_cid_list(status, garbage) == []


@pytest.mark.parametrize("extractor", [
    extract_cid,
    extract_cas,
    extract_properties,
    extract_cid_list,
])
def test_invalid_json_raises_parse_error(extractor):
    with pytest.raises(ParseError):
        extractor(200, "this is not json")


def test_empty_cid_list_raises_shape_error():
    with pytest.raises(ShapeError) as exc_info:
        extract_cid(200, '{"IdentifierList": {"CID": []}}')
    assert exc_info.value.path == ("IdentifierList", "CID", 0)


def test_missing_identifier_list_raises_shape_error():
    with pytest.raises(ShapeError) as exc_info:
        extract_cid(200, '{"Fault": {"Code": "PUGREST.NotFound"}}')
    assert exc_info.value.path == ("IdentifierList",)


def test_cas_missing_nested_section_raises_shape_error():
    body = json.dumps({"Record": {"Section": [{"Section": []}]}})
    with pytest.raises(ShapeError) as exc_info:
        extract_cas(200, body)
    assert exc_info.value.path == ("Record", "Section", 0, "Section", 0)


def test_properties_missing_inchikey_raises_shape_error():
    body = json.dumps({"PropertyTable": {"Properties": [{"CanonicalSMILES": "C"}]}})
    with pytest.raises(ShapeError) as exc_info:
        extract_properties(200, body)
    assert exc_info.value.path == ("PropertyTable", "Properties", 0, "InChIKey")


@pytest.mark.parametrize("status", [200, 404, 500])
def test_sdf_is_passed_through_verbatim(status):
    assert extract_sdf(status, SDF_BODY) == SDF_BODY
    assert extract_sdf(status, "") == ""
    assert extract_sdf(status, "not json {") == "not json {"


def test_extract_pending_job():
    job = extract_pending_job(200, WAITING_BODY)
    assert job is not None
    assert job.list_key == "3361982736485120735"


def test_extract_pending_job_accepts_202():
    assert extract_pending_job(202, WAITING_BODY).list_key == "3361982736485120735"


def test_no_pending_job_without_waiting_block():
    assert extract_pending_job(200, FORMULA_BODY) is None


def test_no_pending_job_for_other_messages():
    body = json.dumps({"Waiting": {"ListKey": "123", "Message": "Something else"}})
    assert extract_pending_job(200, body) is None


def test_no_pending_job_for_error_status():
    assert extract_pending_job(500, WAITING_BODY) is None


def test_pending_job_without_listkey_raises_shape_error():
    body = json.dumps({"Waiting": {"Message": "Your request is running"}})
    with pytest.raises(ShapeError):
        extract_pending_job(200, body)


def test_extract_cid_list_caps_at_five():
    assert extract_cid_list(200, FORMULA_BODY) == [
        "2244", "8184", "10745", "11980", "68484",
    ]


def test_extract_cid_list_without_identifier_list_is_empty():
    assert extract_cid_list(200, WAITING_BODY) == []


def test_extract_cid_list_with_wrong_shape_raises():
    with pytest.raises(ShapeError):
        extract_cid_list(200, json.dumps({"IdentifierList": {"CID": 2244}}))


@pytest.mark.parametrize("body", ["", "<html>busy</html>", "[]"])
def test_accepted_status_with_unusable_body_has_no_pending_job(body):
    assert extract_pending_job(202, body) is None


def test_accepted_status_without_listkey_has_no_pending_job():
    body = json.dumps({"Waiting": {"Message": "Your request is running"}})
    assert extract_pending_job(202, body) is None


@pytest.mark.parametrize("cid", [2244.9, True, "2244", None])
def test_non_integer_cid_raises_shape_error(cid):
    with pytest.raises(ShapeError) as exc_info:
        extract_cid(200, json.dumps({"IdentifierList": {"CID": [cid]}}))
    assert exc_info.value.path == ("IdentifierList", "CID", 0)


def test_null_cas_gives_sentinel():
    body = json.dumps({"Record": {"Section": [{"Section": [{"Section": [{
        "Information": [{"Value": {"StringWithMarkup": [{"String": None}]}}]
    }]}]}]}})
    assert extract_cas(200, body) == "NA"


def test_null_properties_give_sentinels():
    body = json.dumps({"PropertyTable": {"Properties": [
        {"CanonicalSMILES": None, "InChIKey": None}
    ]}})
    assert extract_properties(200, body) == ("NA", "NA")


def test_not_found_is_logged_at_info(caplog):
    with caplog.at_level(logging.INFO, logger="pubchem_client.extractors"):
        extract_cid(404, "")
        extract_cas(404, "")
        extract_properties(404, "")
        extract_cid_list(404, "")

    assert len(caplog.records) == 4
    assert all(r.levelno == logging.INFO for r in caplog.records)
