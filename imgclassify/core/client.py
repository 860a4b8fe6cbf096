import logging
import mimetypes
import time
from pathlib import Path
from typing import Any, Dict, Optional, Union

import requests
import urllib3
from requests.auth import HTTPBasicAuth

from .config import CLASSIFIER_FIELD, CLASSIFIER_TIMEOUT
from .models import ClassifierResponse

logger = logging.getLogger(__name__)

def _content_type(path: Path) -> str:
    ctype = mimetypes.guess_type(path.name)[0]
    if not ctype:
        ctype = "image/png" if path.suffix.lower() == ".png" else "image/jpeg"
    return ctype

def _decode_json(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None

def is_failure(payload: Any) -> bool:
    return isinstance(payload, dict) and payload.get("result") == "fail"

def extract_classified(payload: Any) -> Dict[str, Optional[float]]:
    """Return the label -> confidence mapping of a response body, or {} when it has none."""
    if not isinstance(payload, dict):
        return {}
    classified = payload.get("classified")
    if not isinstance(classified, dict):
        return {}
    out: Dict[str, Optional[float]] = {}
    for label, conf in classified.items():
        try:
            out[str(label)] = float(conf)
        except (TypeError, ValueError):
            out[str(label)] = None
    return out

class ClassifierClient:
    def __init__(self, url: str, user: Optional[str] = None, passwd: Optional[str] = None,
                 timeout: float = CLASSIFIER_TIMEOUT, verify_tls: bool = False,
                 field_name: str = CLASSIFIER_FIELD, session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        self.verify_tls = verify_tls
        self.field_name = field_name
        self.session = session or requests.Session()
        if user and passwd:
            self.session.auth = HTTPBasicAuth(user, passwd)
        if not verify_tls:
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def classify_file(self, path: Union[str, Path]) -> ClassifierResponse:
        p = Path(path)
        start = time.perf_counter()
        try:
            with open(p, "rb") as fh:
                files = {self.field_name: (p.name, fh, _content_type(p))}
                resp = self.session.post(self.url, files=files, timeout=self.timeout, verify=self.verify_tls)
        except (requests.RequestException, OSError) as e:
            duration = round((time.perf_counter() - start) * 1000.0, 3)
            logger.warning("Request for %s failed: %s", p.name, e)
            return ClassifierResponse(ok=False, status_code=None, payload=None, duration_ms=duration, error=str(e))
        duration = round((time.perf_counter() - start) * 1000.0, 3)

        payload = _decode_json(resp)
        if resp.status_code >= 400:
            logger.warning("Classifier returned HTTP %s for %s", resp.status_code, p.name)
            return ClassifierResponse(ok=False, status_code=resp.status_code, payload=payload,
                                      duration_ms=duration, error=f"HTTP {resp.status_code}")
        if is_failure(payload):
            reason = payload.get("error") or payload.get("message") or "result=fail"
            logger.warning("Classifier reported failure for %s: %s", p.name, reason)
            return ClassifierResponse(ok=False, status_code=resp.status_code, payload=payload,
                                      duration_ms=duration, error=str(reason))
        # A non-JSON body still counts as success; it just carries no labels
        if payload is None:
            logger.debug("Non-JSON body for %s", p.name)
        return ClassifierResponse(ok=True, status_code=resp.status_code, payload=payload, duration_ms=duration)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
