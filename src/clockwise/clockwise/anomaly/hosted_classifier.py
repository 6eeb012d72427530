from __future__ import annotations

import logging
from typing import Optional

import requests

from ..core.constants import DEFAULT_CLASSIFIER_TIMEOUT_SECONDS
from ..core.exceptions import ClassificationError
from .classifier import AnomalyClassifier
from .model import AnomalyVerdict, ShiftInput

logger = logging.getLogger(__name__)


class HostedModelClassifier(AnomalyClassifier):
    """Delegates classification to a hosted language-model endpoint.

    The endpoint receives ``{employeeId, clockInTime, clockOutTime}`` as JSON
    and must answer with a verdict object. One attempt per call, no retries.
    """

    def __init__(
        self,
        url: str,
        *,
        api_key: Optional[str] = None,
        timeout: float = DEFAULT_CLASSIFIER_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        if not url:
            raise ValueError("Hosted classifier requires an endpoint URL")
        self._url = url
        self._api_key = api_key
        self._timeout = float(timeout)
        # Module-level requests unless a session is injected.
        self._http = session or requests

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    def classify(self, shift: ShiftInput) -> AnomalyVerdict:
        payload = shift.to_request()
        try:
            resp = self._http.post(self._url, json=payload, headers=self._headers(), timeout=self._timeout)
            resp.raise_for_status()
            body = resp.json()
        except requests.Timeout as exc:
            logger.error("Anomaly classifier timed out after %ss for employee %s", self._timeout, shift.employee_id)
            raise ClassificationError("Anomaly classifier timed out") from exc
        except requests.JSONDecodeError as exc:
            logger.error("Anomaly classifier returned a non-JSON body for employee %s", shift.employee_id)
            raise ClassificationError("Classifier returned an invalid response") from exc
        except requests.RequestException as exc:
            logger.error("Anomaly classifier request failed for employee %s: %s", shift.employee_id, exc)
            raise ClassificationError("Failed to analyze clocking data") from exc

        try:
            return AnomalyVerdict.from_response(body)
        except ClassificationError:
            logger.error("Anomaly classifier returned a malformed verdict: %r", body)
            raise
