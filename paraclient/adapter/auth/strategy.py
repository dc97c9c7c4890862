"""Authentication strategies applied to every outbound request.

A client authenticates in exactly one of three ways at any time:

- ``SignedAuth``: AWS Signature V4 over the request, using the app's access
  and secret keys
- ``AnonymousAuth``: no secret key, the access key alone identifies the app
- ``BearerAuth``: a JWT access token obtained by signing in

The request pipeline calls ``authenticate()`` on whichever strategy the
client currently holds, right before sending.
"""

from abc import ABC, abstractmethod

import httpx
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials
from botocore.exceptions import BotoCoreError

from paraclient.adapter.error import SigningError

HDR_AUTHORIZATION = "Authorization"
HDR_CONTENT_TYPE = "Content-Type"
HDR_AMZ_DATE = "X-Amz-Date"


class AuthStrategy(ABC):
    """Adds credentials to a request before it is sent."""

    @abstractmethod
    def authenticate(self, request: httpx.Request) -> httpx.Request:
        """Attach credentials to the request in place.

        Args:
            request: Fully built request (URL, query and body are final)

        Returns:
            The same request

        Raises:
            SigningError: If credentials cannot be applied
        """
        ...


class AnonymousAuth(AuthStrategy):
    """Identifies the app by access key only.

    Used when no secret key is configured. The server treats such requests
    as guest requests, subject to the app's resource permissions.
    """

    def __init__(self, access_key: str) -> None:
        self.access_key = access_key

    def authenticate(self, request: httpx.Request) -> httpx.Request:
        request.headers[HDR_AUTHORIZATION] = f"Anonymous {self.access_key}"
        return request


class BearerAuth(AuthStrategy):
    """Sends a JWT access token obtained from the server."""

    def __init__(self, token: str) -> None:
        self.token = token

    def authenticate(self, request: httpx.Request) -> httpx.Request:
        value = self.token
        if not value.startswith("Bearer"):
            value = f"Bearer {value}"
        request.headers[HDR_AUTHORIZATION] = value
        return request


class SignedAuth(AuthStrategy):
    """Signs requests with AWS Signature V4.

    Only the host, content type and date headers are signed, so that headers
    added or rewritten by the transport or by proxies along the way (user
    agent, encodings, connection) do not break verification on the server.
    """

    def __init__(
        self,
        access_key: str,
        secret_key: str,
        service_name: str = "para",
        region: str = "us-east-1",
    ) -> None:
        """Initialize signer.

        Args:
            access_key: App access key (the app id, e.g. "app:myapp")
            secret_key: App secret key
            service_name: Service name in the credential scope
            region: Region in the credential scope
        """
        self.access_key = access_key
        self._signer = SigV4Auth(
            Credentials(access_key, secret_key), service_name, region
        )

    def authenticate(self, request: httpx.Request) -> httpx.Request:
        headers = {}
        if HDR_CONTENT_TYPE in request.headers:
            headers[HDR_CONTENT_TYPE] = request.headers[HDR_CONTENT_TYPE]

        # Decoded query values; the canonical query encodes a space as %20, never +
        aws_request = AWSRequest(
            method=request.method,
            url=_url_without_query(request.url),
            params=list(request.url.params.multi_items()),
            data=request.content or None,
            headers=headers,
        )

        try:
            self._signer.add_auth(aws_request)
        except (BotoCoreError, TypeError, ValueError) as e:
            raise SigningError(
                f"Failed to sign {request.method} {request.url.path}: {e}"
            ) from e

        request.headers[HDR_AMZ_DATE] = aws_request.headers[HDR_AMZ_DATE]
        request.headers[HDR_AUTHORIZATION] = aws_request.headers[HDR_AUTHORIZATION]
        return request


def _url_without_query(url: httpx.URL) -> str:
    path = url.raw_path.split(b"?", 1)[0].decode("ascii")
    return f"{url.scheme}://{url.netloc.decode('ascii')}{path}"
