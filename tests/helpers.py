import json

import requests

INSTANCE_URL = "https://example.my.salesforce.com"
ACCESS_TOKEN = "00Dxx0000000000!AQ0AQFakeToken"

TOKEN_RESPONSE = {
    "access_token": ACCESS_TOKEN,
    "instance_url": INSTANCE_URL,
    "id": "https://login.salesforce.com/id/00Dxx0000000000EAA/005xx000001Sv6eAAC",
    "token_type": "Bearer",
    "issued_at": "1701592800000",
    "signature": "0CmxinZir53Yex7nE0TD+zMpvIWYGb/bdJh6XfOH6EQ=",
}

CREATE_RESPONSE = {"id": "00Qxx0000001gP3EAI", "success": True, "errors": []}

LEAD_RECORD = {
    "attributes": {"type": "Lead", "url": "/services/data/v57.0/sobjects/Lead/00Qxx0000001gP3EAI"},
    "Id": "00Qxx0000001gP3EAI",
    "FirstName": "John",
    "LastName": "Doe",
    "Company": "Doe Enterprises",
    "Status": "Open - Not Contacted",
}

REQUIRED_FIELD_MISSING = {"errors": [{"statusCode": "REQUIRED_FIELD_MISSING", "fields": ["LastName"]}]}


def make_response(status_code, payload=None):
    """Builds a real ``requests.Response`` carrying ``payload`` as JSON."""

    response = requests.Response()
    response.status_code = status_code
    response._content = b"" if payload is None else json.dumps(payload).encode("utf-8")
    response.headers["Content-Type"] = "application/json"
    return response
