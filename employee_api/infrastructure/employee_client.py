"""
HTTP client for the upstream mock employee API.

Issues one request per upstream capability and maps upstream status codes
and bodies to domain entities or domain exceptions. Contains no business
logic; the only retry is the alternate request shape for name deletion,
which the upstream accepts inconsistently.
"""

import time
from typing import Any, Dict, List, Optional, Type, TypeVar
from urllib.parse import quote

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from .. import __version__
from ..config import settings
from ..domain.entities import CreateEmployeeCommand, Employee
from ..domain.exceptions import EmployeeNotFoundException, UpstreamUnavailableException
from ..logging_config import get_request_id
from ..metrics import track_upstream_request
from .upstream_models import EmployeeEnvelope, EmployeeListEnvelope

logger = structlog.get_logger(__name__)

EnvelopeT = TypeVar("EnvelopeT", bound=BaseModel)

# Non-5xx statuses on which name deletion is retried with a JSON body
FALLBACK_STATUSES = {405}


class EmployeeClient:
    """
    Client for the upstream employee API.

    All methods are async and share one ``httpx.AsyncClient``. The client
    is either injected (tests, custom transports) or created lazily and
    owned by this instance.

    Attributes:
        base_url: Base URL of the upstream API, without trailing slash
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize the upstream client.

        Args:
            base_url: Base URL of the upstream API (defaults to settings)
            timeout: Request timeout in seconds (defaults to settings)
            http_client: Pre-built HTTP client; when given, its lifecycle
                belongs to the caller
        """
        self.base_url = (base_url or settings.UPSTREAM_BASE_URL).rstrip("/")
        self.timeout = timeout or settings.REQUEST_TIMEOUT
        self._client = http_client
        self._owns_client = http_client is None

        logger.info(
            "Initialized EmployeeClient",
            base_url=self.base_url,
            timeout=self.timeout,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_client = True
            logger.debug("Created new upstream HTTP client")
        return self._client

    async def close(self) -> None:
        """
        Close the HTTP client if this instance owns it.

        Should be called during application shutdown.
        """
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
            logger.debug("Closed upstream HTTP client")

    def _get_request_headers(self) -> Dict[str, str]:
        """Common headers, including the request ID for tracing."""
        headers = {
            "User-Agent": f"employee-api/{__version__}",
            "Accept": "application/json",
        }

        request_id = get_request_id()
        if request_id:
            headers["X-Request-ID"] = request_id

        return headers

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def _send(
        self, operation: str, method: str, path: str, **kwargs: Any
    ) -> httpx.Response:
        """
        Send one request upstream.

        Transport failures are raised as UpstreamUnavailableException; any
        HTTP response, whatever its status, is returned to the caller.
        """
        start_time = time.perf_counter()
        client = await self._get_client()

        try:
            response = await client.request(
                method,
                self._url(path),
                headers=self._get_request_headers(),
                **kwargs,
            )
        except httpx.TimeoutException as error:
            duration = time.perf_counter() - start_time
            track_upstream_request(operation, "timeout", duration)
            logger.error(
                "Upstream request timed out",
                operation=operation,
                method=method,
                path=path,
                timeout=self.timeout,
                duration_ms=round(duration * 1000, 2),
            )
            raise UpstreamUnavailableException(
                operation, f"timed out after {self.timeout}s"
            ) from error
        except httpx.RequestError as error:
            duration = time.perf_counter() - start_time
            track_upstream_request(operation, "connection_error", duration)
            logger.error(
                "Upstream request failed",
                operation=operation,
                method=method,
                path=path,
                error_type=type(error).__name__,
                error=str(error),
                duration_ms=round(duration * 1000, 2),
            )
            raise UpstreamUnavailableException(operation, str(error)) from error

        duration = time.perf_counter() - start_time
        track_upstream_request(operation, str(response.status_code), duration)
        logger.info(
            "Upstream response received",
            operation=operation,
            method=method,
            path=path,
            status_code=response.status_code,
            duration_ms=round(duration * 1000, 2),
        )
        return response

    @staticmethod
    def _json(response: httpx.Response, operation: str) -> Dict[str, Any]:
        """Decode a JSON object body or fail as an upstream error."""
        try:
            payload = response.json()
        except ValueError as error:
            raise UpstreamUnavailableException(
                operation, "response body is not valid JSON", response.status_code
            ) from error
        if not isinstance(payload, dict):
            raise UpstreamUnavailableException(
                operation, "response body is not a JSON object", response.status_code
            )
        return payload

    def _parse(
        self, model: Type[EnvelopeT], response: httpx.Response, operation: str
    ) -> EnvelopeT:
        """Validate an upstream envelope."""
        try:
            return model.model_validate(self._json(response, operation))
        except ValidationError as error:
            logger.error(
                "Malformed upstream payload",
                operation=operation,
                errors=error.errors(include_url=False),
            )
            raise UpstreamUnavailableException(
                operation, "malformed employee payload", response.status_code
            ) from error

    @staticmethod
    def _unexpected_status(
        operation: str, response: httpx.Response
    ) -> UpstreamUnavailableException:
        logger.error(
            "Unexpected upstream status",
            operation=operation,
            status_code=response.status_code,
            response_body=response.text[:500],
        )
        return UpstreamUnavailableException(
            operation,
            f"unexpected status {response.status_code}",
            response.status_code,
        )

    async def list_all(self) -> List[Employee]:
        """
        GET /employee.

        Returns:
            Every employee upstream, in upstream order; empty if upstream
            reports no data

        Raises:
            UpstreamUnavailableException: On transport errors or non-2xx
        """
        response = await self._send("list_all", "GET", "/employee")
        if not response.is_success:
            raise self._unexpected_status("list_all", response)

        envelope = self._parse(EmployeeListEnvelope, response, "list_all")
        employees = [record.to_entity() for record in envelope.data or []]
        logger.debug("Listed employees", count=len(employees))
        return employees

    async def get_by_id(self, employee_id: str) -> Employee:
        """
        GET /employee/{id}.

        Raises:
            EmployeeNotFoundException: On 404 or a null data payload
            UpstreamUnavailableException: On transport errors or other non-2xx
        """
        response = await self._send(
            "get_by_id", "GET", f"/employee/{quote(employee_id, safe='')}"
        )
        if response.status_code == httpx.codes.NOT_FOUND:
            raise EmployeeNotFoundException(employee_id)
        if not response.is_success:
            raise self._unexpected_status("get_by_id", response)

        envelope = self._parse(EmployeeEnvelope, response, "get_by_id")
        if envelope.data is None:
            raise EmployeeNotFoundException(employee_id)
        return envelope.data.to_entity()

    async def create(self, command: CreateEmployeeCommand) -> Employee:
        """
        POST /employee.

        Raises:
            UpstreamUnavailableException: On transport errors, non-2xx or
                a null data payload
        """
        response = await self._send(
            "create", "POST", "/employee", json=command.to_payload()
        )
        if not response.is_success:
            raise self._unexpected_status("create", response)

        envelope = self._parse(EmployeeEnvelope, response, "create")
        if envelope.data is None:
            raise UpstreamUnavailableException(
                "create", "upstream returned no employee", response.status_code
            )
        return envelope.data.to_entity()

    async def delete_by_name(self, name: str) -> bool:
        """
        DELETE /employee/{name}, falling back to DELETE /employee with a
        ``{"name": ...}`` body on 405 or 5xx.

        Returns:
            True only if upstream answers 2xx with ``data`` exactly true;
            False on 404 or an unaffirmed 2xx

        Raises:
            UpstreamUnavailableException: On transport errors or any
                other status
        """
        operation = "delete_by_name"
        response = await self._send(
            operation, "DELETE", f"/employee/{quote(name, safe='')}"
        )
        outcome = self._deletion_outcome(response, operation)
        if outcome is not None:
            return outcome

        if response.status_code in FALLBACK_STATUSES or response.is_server_error:
            logger.warning(
                "Name deletion rejected, retrying with JSON body",
                status_code=response.status_code,
            )
            operation = "delete_by_name_fallback"
            response = await self._send(
                operation, "DELETE", "/employee", json={"name": name}
            )
            outcome = self._deletion_outcome(response, operation)
            if outcome is not None:
                return outcome

        raise self._unexpected_status(operation, response)

    def _deletion_outcome(
        self, response: httpx.Response, operation: str
    ) -> Optional[bool]:
        """Interpret a delete response; None means the status is not decisive."""
        if response.is_success:
            confirmed = self._json(response, operation).get("data") is True
            if not confirmed:
                logger.info("Upstream did not confirm deletion", operation=operation)
            return confirmed
        if response.status_code == httpx.codes.NOT_FOUND:
            logger.info("Nothing to delete upstream", operation=operation)
            return False
        return None

    async def health_check(self) -> bool:
        """
        Check that the upstream API answers.

        Returns:
            True if GET /employee returns 2xx, False otherwise
        """
        try:
            response = await self._send("health_check", "GET", "/employee")
        except UpstreamUnavailableException:
            return False

        if not response.is_success:
            logger.warning(
                "Upstream health check failed", status_code=response.status_code
            )
        return response.is_success
