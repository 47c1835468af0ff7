# src/fetcher/services/http_request_service.py
import asyncio
import logging
import time
from typing import Dict, Optional

import aiohttp

logger = logging.getLogger(__name__)


class HttpRequestService:
    """
    Service for fetching a single HTML document over HTTP.
    Manages the aiohttp session and maps every outcome to a status dict.

    Status codes below zero are local failures:
        -1  network error or timeout
        -2  unexpected internal error
    No request is ever retried.
    """

    def __init__(self, config: Dict, user_agent: str):
        self.config = config
        self.user_agent = user_agent

        session_config = config.get('session', {})
        self.timeout = float(session_config.get('time_out', 30))
        self.max_redirects = int(session_config.get('max_redirects', 10))

        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def initialize(self):
        if not self.session or self.session.closed:
            timeout_obj = aiohttp.ClientTimeout(total=self.timeout)
            default_headers = {
                'Accept': 'text/html,application/xhtml+xml,*/*;q=0.8',
                'Accept-Encoding': 'gzip, deflate',
                'User-Agent': self.user_agent
            }
            self.session = aiohttp.ClientSession(
                timeout=timeout_obj, headers=default_headers
            )
            logger.debug("HttpRequestService: Session initialized.")

    async def close(self):
        if self.session and not self.session.closed:
            await self.session.close()
            logger.debug("HttpRequestService: Session closed.")

    async def perform_request(self, url: str) -> dict:
        """
        Fetches url with a single GET and returns the status dict.
        """
        start_time = time.perf_counter()

        if not self.session or self.session.closed:
            await self.initialize()

        response_data = None

        try:
            response_data = await self._execute_get(url, start_time)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            response_data = {"status": -1, "error": str(e) or type(e).__name__}
        except Exception as e:
            logger.error("Internal fetch error for %s: %s", url, e, exc_info=True)
            response_data = {"status": -2, "error": str(e)}
        finally:
            if response_data:
                total_elapsed = round((time.perf_counter() - start_time), 4)
                response_data["elapsed_time"] = total_elapsed
                response_data.setdefault("timers", {})["total_elapsed"] = round(total_elapsed * 1000, 2)

        return response_data

    async def _execute_get(self, url: str, start_time: float) -> dict:
        """
        Sends the GET (following redirects), then reads the body of any 2xx response.
        """
        timers = {}
        logger.debug("GET %s", url)

        async with self.session.get(
                url,
                allow_redirects=True,
                max_redirects=self.max_redirects
        ) as response:
            status = response.status
            content = None

            timers["initial_request"] = round((time.perf_counter() - start_time) * 1000, 2)

            if 200 <= status < 300:
                content = await self._read_content(response, timers)
            else:
                logger.debug("Non-success status %s for %s", status, url)

            return {
                "status": status,
                "content": content,
                "timers": timers,
                "final_url": str(response.url)
            }

    async def _read_content(self, response, timers) -> str:
        """Helper to read response body text, falling back to lossy UTF-8."""
        read_start = time.perf_counter()
        try:
            return await response.text()
        except UnicodeDecodeError:
            content_bytes = await response.read()
            return content_bytes.decode('utf-8', errors='replace')
        finally:
            timers["read_content"] = round((time.perf_counter() - read_start) * 1000, 2)

    @staticmethod
    def is_success(response_data: dict) -> bool:
        """True for a 2xx response whose body was read."""
        status = response_data.get("status", -99)
        return 200 <= status < 300 and response_data.get("content") is not None
