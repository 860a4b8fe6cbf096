from typing import Optional, Tuple
from .config import NEGATIVE_LABEL, UNCLASSIFIED_LABEL

def normalize_label(label: str, confidence: Optional[float]) -> Tuple[str, Optional[float]]:
    if label.strip().lower() == NEGATIVE_LABEL:
        return UNCLASSIFIED_LABEL, 0.0
    return label, confidence
