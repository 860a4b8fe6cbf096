import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")

CLASSIFIER_TIMEOUT = float(os.getenv("CLASSIFIER_TIMEOUT", "60"))
CLASSIFIER_VERIFY_TLS = _as_bool(os.getenv("CLASSIFIER_VERIFY_TLS", "0"))  # off unless asked for
CLASSIFIER_FIELD = os.getenv("CLASSIFIER_FIELD", "file")                    # multipart field name

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png")
NEGATIVE_LABEL = "negative"
UNCLASSIFIED_LABEL = "unclassified"

@dataclass
class Settings:
    directory: Path
    output: str
    url: str
    user: Optional[str] = None
    passwd: Optional[str] = None
    normalize: bool = False
    timeout: float = CLASSIFIER_TIMEOUT
    verify_tls: bool = CLASSIFIER_VERIFY_TLS
    field_name: str = CLASSIFIER_FIELD
