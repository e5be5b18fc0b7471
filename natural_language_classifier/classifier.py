"""
NaturalLanguageClassifier — main entry point for the client library.

Usage::

    from natural_language_classifier import ClassifyOptions, NaturalLanguageClassifier

    with NaturalLanguageClassifier(username="...", password="...") as nlc:
        result = nlc.classify(
            ClassifyOptions(classifier_id="10D41B-nlc-1", text="is it hot outside?")
        )
        print(result.top_class)
"""

import logging
from typing import Dict, Optional

import httpx

from . import __version__
from .config import ClassifierSettings
from .exceptions import ValidationError
from .options import (
    ClassifyGetOptions,
    ClassifyOptions,
    CreateClassifierOptions,
    DeleteClassifierOptions,
    GetClassifierOptions,
)
from .request_builder import (
    ServiceRequest,
    build_classify_get_request,
    build_classify_request,
    build_create_classifier_request,
    build_delete_classifier_request,
    build_get_classifier_request,
    build_list_classifiers_request,
)
from .responses import materialize, materialize_void
from .types import Classification, Classifier, ClassifierList

logger = logging.getLogger(__name__)

USER_AGENT = f"natural-language-classifier-python/{__version__}"


def _require(options: object, name: str) -> None:
    if options is None:
        raise ValidationError(f"{name} cannot be None")


class _ClassifierConfig:
    """
    Endpoint configuration shared by the sync and async clients.

    Explicit constructor arguments win over ``settings``; ``settings`` is read
    from the environment when not given.  The configuration is read-only once
    requests are in flight: the setters below are not synchronized with
    concurrent calls, so finish configuring before first use.
    """

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        url: Optional[str] = None,
        *,
        default_headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
        settings: Optional[ClassifierSettings] = None,
    ) -> None:
        settings = settings or ClassifierSettings()
        self._url = url.strip() if url and url.strip() else settings.url
        self._username = username if username is not None else settings.username
        self._password = password if password is not None else settings.password
        self._timeout = timeout if timeout is not None else settings.timeout
        self._default_headers: Dict[str, str] = {"User-Agent": USER_AGENT}
        self._default_headers.update(default_headers or {})
        # Only settings the caller passed explicitly are pushed into an injected client.
        self._explicit_url = bool(url and url.strip())
        self._explicit_auth = username is not None and password is not None

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def endpoint(self) -> str:
        return self._url

    @property
    def default_headers(self) -> Dict[str, str]:
        return dict(self._default_headers)

    def _auth(self) -> Optional[httpx.BasicAuth]:
        if self._username is None or self._password is None:
            return None
        return httpx.BasicAuth(self._username, self._password)

    def _client_kwargs(self) -> Dict[str, object]:
        kwargs: Dict[str, object] = {
            "base_url": self._url,
            "headers": self._default_headers,
            "timeout": self._timeout,
        }
        auth = self._auth()
        if auth is not None:
            kwargs["auth"] = auth
        return kwargs

    def _configure_injected(self, client) -> None:
        client.headers.update(self._default_headers)
        if self._explicit_url:
            client.base_url = self._url
        if self._explicit_auth:
            client.auth = self._auth()

    def set_endpoint(self, url: str) -> None:
        """Point the client at a different base URL."""
        if not url or not url.strip():
            raise ValidationError("url cannot be empty")
        self._url = url.strip()
        self._client.base_url = self._url

    def set_username_and_password(self, username: str, password: str) -> None:
        """Replace the basic-auth credentials."""
        if not username or not password:
            raise ValidationError("username and password cannot be empty")
        self._username = username
        self._password = password
        self._client.auth = self._auth()

    def set_default_headers(self, headers: Dict[str, str]) -> None:
        """Add headers sent with every request (e.g. ``X-Watson-Learning-Opt-Out``)."""
        if headers is None:
            raise ValidationError("headers cannot be None")
        self._default_headers.update(headers)
        self._client.headers.update(headers)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoint={self._url!r})"


class NaturalLanguageClassifier(_ClassifierConfig):
    """
    Synchronous client for the Natural Language Classifier service.

    Each method is one independent round trip: validate the options, build
    the request, send it, and materialize the response.  Errors surface as
    :class:`ValidationError`, :class:`ApiError` (and its status subclasses),
    :class:`DecodeError`, or httpx's own transport errors.

    Pass ``client`` to reuse an existing :class:`httpx.Client`; it is then
    left open by :meth:`close`.
    """

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        url: Optional[str] = None,
        *,
        default_headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
        settings: Optional[ClassifierSettings] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        super().__init__(
            username,
            password,
            url,
            default_headers=default_headers,
            timeout=timeout,
            settings=settings,
        )
        if client is None:
            self._client = httpx.Client(**self._client_kwargs())
            self._owns_client = True
        else:
            self._configure_injected(client)
            self._client = client
            self._owns_client = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Release the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "NaturalLanguageClassifier":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _send(self, request: ServiceRequest) -> httpx.Response:
        logger.debug("%s %s", request.method, request.path)
        return self._client.request(
            request.method, request.path, **request.to_httpx_kwargs()
        )

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def classify(self, classify_options: ClassifyOptions) -> Classification:
        """
        Return label information for the input text.

        The classifier status must be ``Available``; use :meth:`get_classifier`
        to check it.

        Raises:
            ValidationError: If ``classify_options`` is None.
            NotFoundError: If the classifier does not exist.
        """
        _require(classify_options, "classify_options")
        response = self._send(build_classify_request(classify_options))
        return materialize(response, Classification)

    def classify_get(self, classify_get_options: ClassifyGetOptions) -> Classification:
        """Classify with a GET request; the text is sent as the ``text`` query parameter."""
        _require(classify_get_options, "classify_get_options")
        response = self._send(build_classify_get_request(classify_get_options))
        return materialize(response, Classification)

    # ------------------------------------------------------------------
    # Classifier management
    # ------------------------------------------------------------------

    def create_classifier(
        self, create_classifier_options: CreateClassifierOptions
    ) -> Classifier:
        """
        Upload training data to create and train a new classifier.

        Both sources in ``create_classifier_options`` are consumed by this
        call, whether or not it succeeds.
        """
        _require(create_classifier_options, "create_classifier_options")
        response = self._send(build_create_classifier_request(create_classifier_options))
        return materialize(response, Classifier)

    def delete_classifier(self, delete_classifier_options: DeleteClassifierOptions) -> None:
        _require(delete_classifier_options, "delete_classifier_options")
        response = self._send(build_delete_classifier_request(delete_classifier_options))
        materialize_void(response)

    def get_classifier(self, get_classifier_options: GetClassifierOptions) -> Classifier:
        """Return status and other information about a classifier."""
        _require(get_classifier_options, "get_classifier_options")
        response = self._send(build_get_classifier_request(get_classifier_options))
        return materialize(response, Classifier)

    def list_classifiers(self) -> ClassifierList:
        """List classifiers; the list is empty when none exist."""
        response = self._send(build_list_classifiers_request())
        return materialize(response, ClassifierList)


class AsyncNaturalLanguageClassifier(_ClassifierConfig):
    """
    Asynchronous counterpart of :class:`NaturalLanguageClassifier`.

    Usage
    -----
    async with AsyncNaturalLanguageClassifier(username, password) as nlc:
        classifiers = await nlc.list_classifiers()
    """

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        url: Optional[str] = None,
        *,
        default_headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
        settings: Optional[ClassifierSettings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(
            username,
            password,
            url,
            default_headers=default_headers,
            timeout=timeout,
            settings=settings,
        )
        if client is None:
            self._client = httpx.AsyncClient(**self._client_kwargs())
            self._owns_client = True
        else:
            self._configure_injected(client)
            self._client = client
            self._owns_client = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncNaturalLanguageClassifier":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _send(self, request: ServiceRequest) -> httpx.Response:
        logger.debug("%s %s", request.method, request.path)
        return await self._client.request(
            request.method, request.path, **request.to_httpx_kwargs()
        )

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    async def classify(self, classify_options: ClassifyOptions) -> Classification:
        _require(classify_options, "classify_options")
        response = await self._send(build_classify_request(classify_options))
        return materialize(response, Classification)

    async def classify_get(self, classify_get_options: ClassifyGetOptions) -> Classification:
        _require(classify_get_options, "classify_get_options")
        response = await self._send(build_classify_get_request(classify_get_options))
        return materialize(response, Classification)

    # ------------------------------------------------------------------
    # Classifier management
    # ------------------------------------------------------------------

    async def create_classifier(
        self, create_classifier_options: CreateClassifierOptions
    ) -> Classifier:
        _require(create_classifier_options, "create_classifier_options")
        response = await self._send(
            build_create_classifier_request(create_classifier_options)
        )
        return materialize(response, Classifier)

    async def delete_classifier(
        self, delete_classifier_options: DeleteClassifierOptions
    ) -> None:
        _require(delete_classifier_options, "delete_classifier_options")
        response = await self._send(
            build_delete_classifier_request(delete_classifier_options)
        )
        materialize_void(response)

    async def get_classifier(self, get_classifier_options: GetClassifierOptions) -> Classifier:
        _require(get_classifier_options, "get_classifier_options")
        response = await self._send(build_get_classifier_request(get_classifier_options))
        return materialize(response, Classifier)

    async def list_classifiers(self) -> ClassifierList:
        response = await self._send(build_list_classifiers_request())
        return materialize(response, ClassifierList)
