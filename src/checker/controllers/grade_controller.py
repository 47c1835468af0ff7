# src/checker/controllers/grade_controller.py
import logging
from pathlib import Path
from typing import Dict, List

from checker.dom.builder import DOMBuilder
from checker.model import FetchError
from checker.services.check_service import check_html
from fetcher.services.generate_default_user_agent_service import generate_default_user_agent
from fetcher.services.http_request_service import HttpRequestService
from html_grader.model import GraderSettings

logger = logging.getLogger(__name__)


class GradeController:
    """
    Resolves one HTML document (local file or URL), parses it and grades it
    against a list of selectors.
    """

    def __init__(self, settings: GraderSettings):
        self.settings = settings
        self.builder = DOMBuilder(features=settings.parser_features)

    def grade_html(self, html: str | bytes, checks: List[str], source: str = "<memory>") -> Dict[str, bool]:
        doc = self.builder.parse_doc(html, source=source)
        report = check_html(doc, checks)
        logger.info(
            "Graded %s: %d/%d checks present.",
            source, sum(report.values()), len(report)
        )
        return report

    def grade_file(self, html_path: str | Path, checks: List[str]) -> Dict[str, bool]:
        """Grades a local HTML file."""
        html = Path(html_path).read_bytes()
        return self.grade_html(html, checks, source=str(html_path))

    async def grade_url(self, url: str, checks: List[str]) -> Dict[str, bool]:
        """
        Fetches url and grades it. Evaluation only starts once the fetch has
        completed successfully.

        Raises:
            FetchError: network failure, timeout or a non-2xx response.
        """
        config = {"session": self.settings.session.model_dump()}
        user_agent = generate_default_user_agent(self.settings.chrome_version)

        async with HttpRequestService(config=config, user_agent=user_agent) as service:
            response = await service.perform_request(url)

        if not HttpRequestService.is_success(response):
            reason = response.get("error") or f"HTTP status {response.get('status')}"
            logger.info("Fetch of %s failed: %s", url, reason)
            raise FetchError(url, reason)

        logger.debug(
            "Fetched %s in %ss (final url: %s).",
            url, response.get("elapsed_time"), response.get("final_url")
        )
        return self.grade_html(response["content"], checks, source=url)
