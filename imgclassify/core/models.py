from dataclasses import dataclass
from typing import Any, Optional

@dataclass
class ClassificationRecord:
    filename: str
    classification: str = ""
    confidence: Optional[float] = None
    duration_ms: Optional[float] = None

    @property
    def is_placeholder(self) -> bool:
        return not self.classification

@dataclass
class ClassifierResponse:
    ok: bool
    status_code: Optional[int]
    payload: Any            # decoded JSON body, None when the body is not JSON
    duration_ms: float
    error: Optional[str] = None
