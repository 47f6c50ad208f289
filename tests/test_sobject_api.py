import pytest

from salesforce_pipeline.api.apex_api import ApexAPI, apex_path
from salesforce_pipeline.api.sobject_api import SObjectAPI, sobject_path
from salesforce_pipeline.models import Lead
from salesforce_pipeline.utils.errors import ResourceCallError
from salesforce_pipeline.utils.http_client import HttpClient

from .helpers import CREATE_RESPONSE, INSTANCE_URL, LEAD_RECORD, make_response


def test_sobject_path():
    assert sobject_path("57.0", "Lead") == "/services/data/v57.0/sobjects/Lead"
    assert sobject_path("v58.0", "Lead", "00Q1") == "/services/data/v58.0/sobjects/Lead/00Q1"


def test_create_lead_parses_create_result(mock_request, session):
    mock_request.return_value = make_response(201, CREATE_RESPONSE)
    lead = Lead(FirstName="John", LastName="Doe", Company="Doe Enterprises")

    with HttpClient(session=session) as client:
        result = SObjectAPI(client).create_lead(lead)

    assert result.id == "00Qxx0000001gP3EAI"
    assert result.success is True
    assert result.errors == []
    assert result.raw == CREATE_RESPONSE
    args, kwargs = mock_request.call_args
    assert args == ("POST", f"{INSTANCE_URL}/services/data/v57.0/sobjects/Lead")
    assert kwargs["json"] == {"FirstName": "John", "LastName": "Doe", "Company": "Doe Enterprises"}


def test_get_lead_with_field_list(mock_request, session):
    mock_request.return_value = make_response(200, LEAD_RECORD)

    with HttpClient(session=session) as client:
        record = SObjectAPI(client, api_version="58.0").get_lead("00Qxx0000001gP3EAI", fields=["FirstName", "LastName"])

    assert record == LEAD_RECORD
    args, kwargs = mock_request.call_args
    assert args == ("GET", f"{INSTANCE_URL}/services/data/v58.0/sobjects/Lead/00Qxx0000001gP3EAI")
    assert kwargs["params"] == {"fields": "FirstName,LastName"}


def test_apex_path_normalisation():
    assert apex_path("LeadInfo") == "/services/apexrest/LeadInfo"
    assert apex_path("/LeadInfo/v1") == "/services/apexrest/LeadInfo/v1"
    assert apex_path("/services/apexrest/LeadInfo") == "/services/apexrest/LeadInfo"


def test_apex_invoke_returns_endpoint_body(mock_request, session):
    mock_request.return_value = make_response(200, {"lastName": "Doe", "company": "Doe Enterprises"})

    with HttpClient(session=session) as client:
        result = ApexAPI(client).invoke("LeadInfo", {"email": "john@doe.example"})

    assert result == {"lastName": "Doe", "company": "Doe Enterprises"}
    args, kwargs = mock_request.call_args
    assert args == ("POST", f"{INSTANCE_URL}/services/apexrest/LeadInfo")
    assert kwargs["json"] == {"email": "john@doe.example"}


def test_create_without_record_id_raises(mock_request, session):
    mock_request.return_value = make_response(201)

    with HttpClient(session=session) as client:
        with pytest.raises(ResourceCallError) as excinfo:
            SObjectAPI(client).create_lead(Lead(LastName="Doe", Company="Doe Enterprises"))

    assert excinfo.value.status_code is None
    assert excinfo.value.path == "/services/data/v57.0/sobjects/Lead"
    assert excinfo.value.errors == [{}]


def test_unsuccessful_create_carries_remote_errors(mock_request, session):
    errors = [{"statusCode": "DUPLICATES_DETECTED", "message": "Use one of these records?"}]
    mock_request.return_value = make_response(201, {"id": "", "success": False, "errors": errors})

    with HttpClient(session=session) as client:
        with pytest.raises(ResourceCallError) as excinfo:
            SObjectAPI(client).create("Lead", {"LastName": "Doe", "Company": "Doe Enterprises"})

    assert excinfo.value.errors == errors
