"""
HTTP client for the handwriting recognition service.

Two calls per image:
  Submit:  POST {URI_BASE}?mode=Handwritten   body = raw image bytes
           2xx  -> header Operation-Location carries the poll URL
           else -> JSON body {"error": {"code": "...", "message": "..."}}
  Poll:    GET {Operation-Location}           body = JSON text with "status"

One client (one requests.Session) per file; never shared between workers.
"""

from __future__ import annotations

import json
from typing import Optional

import requests

from handwriting2json.models import RecognitionError

SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"
OPERATION_LOCATION_HEADER = "Operation-Location"
OCTET_STREAM = "application/octet-stream"

# Raw substring check on the poll body, matching the service's compact JSON.
SUCCEEDED_MARKER = '"status":"Succeeded"'


def error_code(body: str) -> str:
    """Pull error.code out of a rejected submission body.

    Raises ValueError / KeyError / TypeError when the body is not the
    documented error shape.
    """
    return str(json.loads(body)["error"]["code"])


def is_succeeded(text: str) -> bool:
    return SUCCEEDED_MARKER in text


class VisionClient:
    def __init__(
        self,
        api_key: str,
        submit_url: str,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.submit_url = submit_url
        self.session = session or requests.Session()

    def submit(self, data: bytes) -> requests.Response:
        # No timeout: the submit call waits as long as the service needs.
        return self.session.post(
            self.submit_url,
            data=data,
            headers={
                SUBSCRIPTION_KEY_HEADER: self.api_key,
                "Content-Type": OCTET_STREAM,
            },
        )

    def fetch(self, operation_location: str) -> str:
        resp = self.session.get(
            operation_location, headers={SUBSCRIPTION_KEY_HEADER: self.api_key}
        )
        return resp.text

    @staticmethod
    def operation_location(response: requests.Response) -> str:
        location = response.headers.get(OPERATION_LOCATION_HEADER)
        if not location:
            raise RecognitionError(
                f"{OPERATION_LOCATION_HEADER} header missing from submit response"
            )
        return location

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "VisionClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
