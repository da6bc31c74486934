"""
Alumni Dataset Module

Loads the bundled alumni dataset into immutable AlumniRecord objects.

The dataset is an array of objects keyed the way the association's
spreadsheet exports them:

    {"Name": "...", "Course": "MCA", "Batch": "2019-2022", "Occupation": "...",
     "Skill": "...", "Image": "...", "LinkedIn": "https://..."}

Every field is optional. A `.csv` export with the same column names is read
through pandas.
"""

import json
import re
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

logger = logging.getLogger(__name__)

# Non-overlapping runs of four ASCII digits, scanned left to right
_YEAR_RUN_RE = re.compile(r"\d{4}", re.ASCII)


class DatasetError(ValueError):
    """Raised when the alumni dataset exists but cannot be read."""


def extract_year(batch: Any) -> int:
    """Return the largest 4-digit run in a Batch value, or 0 when there is none."""
    if batch is None:
        return 0
    text = str(batch)
    if not text:
        return 0
    years = _YEAR_RUN_RE.findall(text)
    if not years:
        return 0
    return max(int(y) for y in years)


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, float) and pd.isna(value):
        return None
    text = str(value)
    if not text.strip():
        return None
    return text


@dataclass(frozen=True)
class AlumniRecord:
    Name: Optional[str] = None
    Course: Optional[str] = None
    Batch: Optional[str] = None
    Occupation: Optional[str] = None
    Skill: Optional[str] = None
    Image: Optional[str] = None
    LinkedIn: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "AlumniRecord":
        """Build a record from one dataset row, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: _clean(raw.get(key)) for key in known})

    @property
    def year(self) -> int:
        return extract_year(self.Batch)

    @property
    def has_image(self) -> bool:
        return bool(self.Image)

    def to_dict(self) -> Dict[str, str]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


def _read_json(path: Path) -> List[Dict[str, Any]]:
    try:
        with path.open(encoding="utf-8") as fh:
            rows = json.load(fh)
    except UnicodeDecodeError as e:
        raise DatasetError(f"{path} is not UTF-8 encoded: {e}") from e
    except json.JSONDecodeError as e:
        raise DatasetError(f"Malformed JSON in {path}: {e}") from e

    if not isinstance(rows, list):
        raise DatasetError(f"Expected a JSON array of alumni in {path}")
    return rows


def _read_csv(path: Path) -> List[Dict[str, Any]]:
    try:
        df = pd.read_csv(path, dtype=str)
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise DatasetError(f"Unreadable CSV in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise DatasetError(f"{path} is not UTF-8 encoded: {e}") from e
    return df.to_dict(orient="records")


def load_alumni(path) -> List[AlumniRecord]:
    """
    Read the alumni dataset once and return its records in file order.

    A missing file yields an empty list (the directory then shows
    "No alumni data available."). Rows that are not objects are skipped.
    """
    path = Path(path)
    if not path.exists():
        logger.warning(f"Alumni dataset not found at {path}, directory will be empty")
        return []

    if path.suffix.lower() == ".csv":
        rows = _read_csv(path)
    else:
        rows = _read_json(path)

    records = []
    skipped = 0
    for row in rows:
        if not isinstance(row, dict):
            skipped += 1
            continue
        records.append(AlumniRecord.from_dict(row))

    if skipped:
        logger.warning(f"Skipped {skipped} malformed alumni rows in {path}")
    logger.info(f"Loaded {len(records)} alumni records from {path}")
    return records
