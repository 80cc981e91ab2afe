from __future__ import annotations

"""
Loading of the categorized design datasets into in-memory records.

Each category lives in its own CSV file (``<category>.csv``) under the
data directory.  The header row defines column names and every following
row becomes one record: a plain ``Dict[str, str]``.  A missing file only
degrades that category to an empty list, while a file that cannot be
parsed aborts the whole load, because a corrupt source cannot be
partially trusted.
"""

import warnings
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd
from loguru import logger

from .config import CATEGORY_FILES, DATA_DIR, DATA_ENCODING, Category, Record


class DataMissingError(FileNotFoundError):
    """Raised when a category's dataset file does not exist."""

    def __init__(self, category: Category, path: Path):
        super().__init__(f"CSV not found for category '{category.value}': {path}")
        self.category = category
        self.path = path


class DataCorruptError(ValueError):
    """Raised when a category's dataset file exists but cannot be parsed."""

    def __init__(self, category: Category, path: Path, reason: str):
        super().__init__(f"Corrupt CSV for category '{category.value}' ({path}): {reason}")
        self.category = category
        self.path = path
        self.reason = reason


def dataset_path(category: Category, data_dir: Path = DATA_DIR) -> Path:
    return Path(data_dir) / CATEGORY_FILES[category]


def _frame_to_records(df: pd.DataFrame) -> List[Record]:
    """
    Convert a parsed frame into records.  Header names are stripped of
    surrounding whitespace; short rows are padded with empty strings.
    """
    df = df.rename(columns=lambda c: str(c).strip())
    df = df.fillna("")
    return [
        {str(k): str(v) for k, v in row.items()}
        for row in df.to_dict(orient="records")
    ]


def load_category(category: Category, data_dir: Path = DATA_DIR) -> List[Record]:
    """
    Load one category's CSV into a list of records, in file order.

    Raises:
        DataMissingError: the file does not exist.
        DataCorruptError: the file cannot be decoded or tokenised, or a row
            has more fields than the header.
    """
    path = dataset_path(category, data_dir)
    if not path.exists():
        raise DataMissingError(category, path)

    try:
        # index_col=False: a surplus first column must not become an implicit
        # index.  pandas reports the mismatch as a ParserWarning instead.
        with warnings.catch_warnings():
            warnings.simplefilter("error", pd.errors.ParserWarning)
            df = pd.read_csv(
                path,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                index_col=False,
                encoding=DATA_ENCODING,
            )
    except pd.errors.EmptyDataError:
        logger.warning("CSV for category '{}' is empty: {}", category.value, path)
        return []
    except pd.errors.ParserError as e:
        logger.error("Failed to parse CSV for category '{}': {}", category.value, e)
        raise DataCorruptError(category, path, str(e)) from e
    except pd.errors.ParserWarning as e:
        logger.error("Row longer than header in CSV for category '{}': {}", category.value, e)
        raise DataCorruptError(category, path, f"row has more fields than the header ({e})") from e
    except UnicodeDecodeError as e:
        logger.error("CSV for category '{}' is not valid {}: {}", category.value, DATA_ENCODING, e)
        raise DataCorruptError(category, path, str(e)) from e

    records = _frame_to_records(df)
    logger.info("Loaded {} rows for category '{}'", len(records), category.value)
    return records


def load_all(data_dir: Optional[Path] = None) -> Dict[Category, List[Record]]:
    """
    Load every category.  Missing datasets are logged and left empty;
    corrupt datasets propagate ``DataCorruptError``.
    """
    data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
    logger.info("Loading datasets from {}", data_dir)

    raw_data: Dict[Category, List[Record]] = {}
    for category in Category:
        try:
            raw_data[category] = load_category(category, data_dir)
        except DataMissingError as e:
            logger.warning("{}", e)
            raw_data[category] = []

    total = sum(len(v) for v in raw_data.values())
    available = sum(1 for v in raw_data.values() if v)
    logger.info("Loaded {} records across {}/{} categories", total, available, len(raw_data))
    return raw_data
