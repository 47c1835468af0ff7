# src/checker/services/check_service.py
import logging
from typing import Dict, Iterable

from soupsieve import SelectorSyntaxError

from checker.dom.models import HTMLDocument
from html_grader.core.services.json_service import to_json

logger = logging.getLogger(__name__)


def check_html(doc: HTMLDocument, checks: Iterable[str]) -> Dict[str, bool]:
    """
    Evaluates every selector against the document.

    Selectors are sorted ascending first, so the report keys always come out
    in the same order whatever order the checks file lists them in.
    Duplicates collapse into one key. A selector that soupsieve cannot parse,
    or parses but does not support (pseudo-elements, at-rules), counts as not
    present; it is never dropped from the report.
    """
    report: Dict[str, bool] = {}
    for selector in sorted(checks):
        try:
            present = doc.count(selector) > 0
        except (SelectorSyntaxError, NotImplementedError) as e:
            logger.warning("Unusable selector %r treated as not present: %s", selector, e)
            present = False
        report[selector] = present
    return report


def render_report(report: Dict[str, bool]) -> str:
    """Serializes the report as 4-space indented JSON, keeping key order."""
    return to_json(report, indent=4)
