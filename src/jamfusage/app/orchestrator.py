# src/jamfusage/app/orchestrator.py
from __future__ import annotations
import logging
from typing import Callable, List, Optional

from jamfusage.app import event_bus
from jamfusage.config.loader import get_http_config, get_jamf_config, get_output_config
from jamfusage.core import auth
from jamfusage.core.jamf_client import JamfClient
from jamfusage.core.object_service import ObjectCatalog
from jamfusage.core.usage_service import UsageGraphBuilder
from jamfusage.sheets.writer import TableWriter, OBJECTS_SHEET, REPORT_SHEET

logger = logging.getLogger(__name__)


def build_client() -> JamfClient:
    """Settings -> token exchange -> API client. Fails before any data fetch."""
    creds = get_jamf_config()
    http_cfg = get_http_config()
    session = auth.connect(creds, timeout=http_cfg["timeout_seconds"])
    logger.info("Connected to %s", session.server)
    return JamfClient(
        session.base_url,
        session.get_bearer_token,
        timeout=http_cfg["timeout_seconds"],
        page_size=http_cfg["page_size"],
        logger=logging.getLogger("jamfusage.http"),
    )

def default_writer() -> TableWriter:
    return TableWriter(get_output_config()["directory"])


def _refresh(topic: str, sheet: str, build: Callable[[JamfClient], List],
             writer: Optional[TableWriter], client: Optional[JamfClient]) -> int:
    try:
        jamf = client or build_client()
        rows = [item.to_row() for item in build(jamf)]
        (writer or default_writer()).write_rows(sheet, rows)
    except Exception as ex:
        logger.error("%s refresh failed: %s", sheet, ex)
        event_bus.publish(event_bus.failed_topic(topic), {"sheet": sheet, "error": ex})
        raise
    event_bus.publish(event_bus.ready_topic(topic), {"sheet": sheet, "rows": len(rows)})
    return len(rows)

def refresh_objects(writer: Optional[TableWriter] = None, client: Optional[JamfClient] = None) -> int:
    """Rebuild the Objects table (catalog). Returns the number of rows written."""
    logger.info("Update Objects")
    return _refresh("objects", OBJECTS_SHEET, lambda j: ObjectCatalog(j).build(), writer, client)

def refresh_report(writer: Optional[TableWriter] = None, client: Optional[JamfClient] = None) -> int:
    """Rebuild the Report table (usage edges). Returns the number of rows written."""
    logger.info("Update Report")
    return _refresh("report", REPORT_SHEET, lambda j: UsageGraphBuilder(j).build(), writer, client)
