import logging
from dataclasses import dataclass
from typing import Dict, List, Optional
from tqdm import tqdm

from .client import ClassifierClient, extract_classified
from .config import Settings
from .models import ClassificationRecord, ClassifierResponse
from .normalize import normalize_label
from .scanner import list_images

logger = logging.getLogger(__name__)

@dataclass
class BatchStats:
    total: int
    classified: int
    failed: int

def records_from_response(filename: str, response: ClassifierResponse, normalize: bool = False) -> List[ClassificationRecord]:
    if not response.ok:
        return [ClassificationRecord(filename=filename)]
    classified = extract_classified(response.payload)
    if not classified:
        logger.warning("No classification data for %s", filename)
        return [ClassificationRecord(filename=filename)]
    out: List[ClassificationRecord] = []
    for label, conf in classified.items():
        if normalize:
            label, conf = normalize_label(label, conf)
        out.append(ClassificationRecord(filename=filename, classification=label,
                                        confidence=conf, duration_ms=response.duration_ms))
    return out

def classify_directory(settings: Settings, client: Optional[ClassifierClient] = None,
                       progress: bool = True) -> Dict[str, ClassificationRecord]:
    """Classify every image in ``settings.directory`` one request at a time.

    Returns a mapping of filename -> record. A response with several labels
    overwrites the record once per label, so the last label wins.
    """
    images = list_images(settings.directory)
    logger.info("Found %d image(s) in %s", len(images), settings.directory)

    if client is not None:
        return _classify_all(images, client, settings.normalize, progress)
    with ClassifierClient(settings.url, user=settings.user, passwd=settings.passwd,
                          timeout=settings.timeout, verify_tls=settings.verify_tls,
                          field_name=settings.field_name) as owned:
        return _classify_all(images, owned, settings.normalize, progress)

def _classify_all(images, client, normalize: bool, progress: bool) -> Dict[str, ClassificationRecord]:
    results: Dict[str, ClassificationRecord] = {}
    for path in tqdm(images, desc="Classifying", unit="img", disable=not progress):
        response = client.classify_file(path)
        for rec in records_from_response(path.name, response, normalize=normalize):
            results[rec.filename] = rec
    return results

def summarize(results: Dict[str, ClassificationRecord]) -> BatchStats:
    failed = sum(1 for r in results.values() if r.is_placeholder)
    return BatchStats(total=len(results), classified=len(results) - failed, failed=failed)
