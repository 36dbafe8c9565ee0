import logging

import requests
from retry.api import retry_call

from balancerv3adapter.exceptions import RetriableUpstreamError, UpstreamError

logger = logging.getLogger(__name__)


class GraphQLClient:
    """Minimal GraphQL-over-HTTP transport: POSTs a query and returns its ``data`` payload."""

    def __init__(self, url: str, timeout: int = 30, retries: int = 3, session=None):
        self.url = url
        self.timeout = timeout
        self.retries = max(retries, 1)
        self.session = session or requests.Session()

    def execute(self, query: str, variables: dict | None = None) -> dict:
        return retry_call(
            self._execute,
            fargs=(query, variables or {}),
            exceptions=RetriableUpstreamError,
            tries=self.retries,
            delay=1,
            backoff=2,
            logger=logger,
        )

    def _execute(self, query: str, variables: dict) -> dict:
        try:
            response = self.session.post(
                self.url,
                json={'query': query, 'variables': variables},
                timeout=self.timeout,
            )
        except (requests.ConnectionError, requests.Timeout) as e:
            raise RetriableUpstreamError(f'GraphQL request to {self.url} failed: {e}') from e
        except requests.RequestException as e:
            raise UpstreamError(f'GraphQL request to {self.url} failed: {e}') from e

        if response.status_code >= 500:
            raise RetriableUpstreamError(
                f'GraphQL endpoint {self.url} responded with {response.status_code}'
            )
        if response.status_code >= 400:
            raise UpstreamError(
                f'GraphQL endpoint {self.url} responded with {response.status_code}'
            )

        try:
            body = response.json()
        except ValueError as e:
            raise UpstreamError(f'GraphQL endpoint {self.url} returned invalid JSON') from e

        errors = body.get('errors')
        if errors:
            messages = '; '.join(
                str(error.get('message', error)) if isinstance(error, dict) else str(error)
                for error in errors
            )
            raise UpstreamError(f'GraphQL query failed: {messages}')

        data = body.get('data')
        if data is None:
            raise UpstreamError('GraphQL response has no data')
        return data
