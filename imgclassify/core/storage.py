import csv
from pathlib import Path
from typing import Dict, List, Tuple
from .models import ClassificationRecord

MINIMAL_FIELDS = ["filename", "classification"]
CONFIDENCE_FIELDS = MINIMAL_FIELDS + ["confidence"]
FULL_FIELDS = CONFIDENCE_FIELDS + ["duration"]

def output_paths(base: str) -> Tuple[Path, Path, Path]:
    return Path(f"{base}minimal.csv"), Path(f"{base}confidence.csv"), Path(f"{base}.csv")

def _cell(value) -> str:
    return "" if value is None else str(value)

def _row(rec: ClassificationRecord) -> Dict[str, str]:
    return {
        "filename": rec.filename,
        "classification": rec.classification,
        "confidence": _cell(rec.confidence),
        "duration": _cell(rec.duration_ms),
    }

def _write(path: Path, fields: List[str], rows: List[Dict[str, str]]):
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields, extrasaction="ignore")
        w.writeheader()
        w.writerows(rows)

def write_results(base: str, records: Dict[str, ClassificationRecord]) -> List[Path]:
    rows = [_row(records[k]) for k in sorted(records)]
    minimal, confidence, full = output_paths(base)
    _write(minimal, MINIMAL_FIELDS, rows)
    _write(confidence, CONFIDENCE_FIELDS, rows)
    _write(full, FULL_FIELDS, rows)
    return [minimal, confidence, full]
