"""POEditor API client."""

import json
import ssl
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Dict, List

import certifi

from ..core.models import TermRecord
from ..utils.logging import get_logger

# SSL context for secure connections
SSL_CONTEXT = ssl.create_default_context(cafile=certifi.where())

API_URL = 'https://api.poeditor.com/v2'
EXPORT_TYPE = 'json'


class POEditorError(Exception):
    """Raised when terms cannot be retrieved from POEditor."""


class POEditorClient:
    """
    Retrieves term exports from POEditor.

    An export is a two step process: ask the API for an export of a
    language, then download the JSON file it points to.
    """

    def __init__(self, api_token: str, project_id: str, timeout: int = 30):
        """
        Initialize the client.

        Args:
            api_token: POEditor read-only (or higher) API token
            project_id: POEditor project id
            timeout: Socket timeout in seconds
        """
        self.api_token = api_token
        self.project_id = str(project_id)
        self.timeout = timeout

    def _request(self, url: str, data: Dict[str, str] = None) -> Any:
        """Send a request and decode its JSON body."""
        body = urllib.parse.urlencode(data).encode('utf-8') if data is not None else None
        request = urllib.request.Request(url, data=body)

        try:
            with urllib.request.urlopen(request, timeout=self.timeout, context=SSL_CONTEXT) as response:
                return json.loads(response.read().decode('utf-8'))
        except urllib.error.URLError as e:
            raise POEditorError(f"Network error: {e}") from e
        except json.JSONDecodeError as e:
            raise POEditorError(f"Invalid JSON from {url}: {e}") from e

    def export_url(self, language: str) -> str:
        """
        Request an export of a language.

        Args:
            language: POEditor language code

        Returns:
            URL of the exported JSON file
        """
        get_logger().debug(f" - Requesting {language} export of project {self.project_id}")
        payload = self._request(f'{API_URL}/projects/export', {
            'api_token': self.api_token,
            'id': self.project_id,
            'language': language,
            'type': EXPORT_TYPE,
        })

        status = (payload.get('response') or {}) if isinstance(payload, dict) else {}
        if status.get('status') != 'success':
            message = status.get('message', 'unexpected response')
            raise POEditorError(f"POEditor export failed for '{language}': {message}")

        try:
            return payload['result']['url']
        except (KeyError, TypeError) as e:
            raise POEditorError(f"POEditor export for '{language}' has no download URL") from e

    def fetch_terms(self, language: str) -> List[TermRecord]:
        """
        Download the terms of a language.

        Args:
            language: POEditor language code

        Returns:
            Term records in export order
        """
        url = self.export_url(language)
        get_logger().debug(f" - Downloading {url}")
        terms = self._request(url)

        if not isinstance(terms, list):
            raise POEditorError(f"Expected a list of terms for '{language}', got {type(terms).__name__}")

        return [TermRecord.from_dict(term) for term in terms]
