# src/jamfusage/sheets/writer.py
from __future__ import annotations
import csv, logging, os, pathlib, tempfile
from typing import Any, Dict, Iterable, List, Mapping, Sequence

logger = logging.getLogger(__name__)

OBJECTS_SHEET = "Objects"
REPORT_SHEET = "Report"


def make_headers(rows: Iterable[Mapping[str, Any]]) -> List[str]:
    """Union of keys over all rows, in first-seen order."""
    headers: Dict[str, None] = {}
    for row in rows:
        for key in row:
            headers.setdefault(key, None)
    return list(headers)

def cell(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    return value

def write_csv_atomic(path: pathlib.Path, headers: Sequence[str], rows: Sequence[Mapping[str, Any]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=str(path.parent), prefix="._", suffix=".csv")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            w = csv.writer(fh)
            w.writerow(headers)
            for row in rows:
                w.writerow([cell(row.get(h, "")) for h in headers])
        os.replace(tmp, path)
    except BaseException:
        pathlib.Path(tmp).unlink(missing_ok=True)
        raise


class TableWriter:
    """
    Named tables as CSV files under one directory ("sheets" of a workbook).
    A write replaces the whole table; an empty write leaves it alone.
    """
    def __init__(self, directory: str | os.PathLike):
        self.directory = pathlib.Path(directory)

    def path(self, name: str) -> pathlib.Path:
        return self.directory / f"{name}.csv"

    def write_rows(self, name: str, rows: Sequence[Mapping[str, Any]]) -> bool:
        if not rows:
            logger.info("No rows for %s; table left unchanged", name)
            return False
        headers = make_headers(rows)
        p = self.path(name)
        write_csv_atomic(p, headers, rows)
        logger.info("Wrote %d rows to %s", len(rows), p)
        return True

    def read_rows(self, name: str) -> List[Dict[str, str]]:
        p = self.path(name)
        if not p.exists():
            return []
        with p.open(encoding="utf-8", newline="") as fh:
            return list(csv.DictReader(fh))
