"""
Translate option objects into transport-level request descriptors.

A :class:`ServiceRequest` carries everything httpx needs to issue the call;
paths are relative to the service base URL.  Classifier ids are inserted
verbatim, so callers must supply ids the service accepts.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .exceptions import SourceConsumedError, ValidationError
from .options import (
    ClassifyGetOptions,
    ClassifyOptions,
    CreateClassifierOptions,
    DeleteClassifierOptions,
    GetClassifierOptions,
)

CLASSIFIERS_PATH = "/v1/classifiers"

# Both multipart parts go out with a fixed filename and a generic binary type;
# the service reads them by part name.
PART_FILENAME = "filename"
PART_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class ServiceRequest:
    """One HTTP call: method, relative path, and optional query / body."""

    method: str
    path: str
    params: Optional[Dict[str, str]] = None
    json: Optional[Dict[str, Any]] = None
    files: Optional[Dict[str, Tuple[str, Any, str]]] = None

    def to_httpx_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``httpx.Client.request``."""
        kwargs: Dict[str, Any] = {}
        if self.params is not None:
            kwargs["params"] = self.params
        if self.json is not None:
            kwargs["json"] = self.json
        if self.files is not None:
            kwargs["files"] = self.files
        return kwargs


def _require_options(options: Any, name: str) -> None:
    if options is None:
        raise ValidationError(f"{name} cannot be None")


def classifier_path(classifier_id: str) -> str:
    return f"{CLASSIFIERS_PATH}/{classifier_id}"


def build_classify_request(options: ClassifyOptions) -> ServiceRequest:
    _require_options(options, "classify_options")
    return ServiceRequest(
        method="POST",
        path=f"{classifier_path(options.classifier_id)}/classify",
        json={"text": options.text},
    )


def build_classify_get_request(options: ClassifyGetOptions) -> ServiceRequest:
    # No length check: an over-long query surfaces as a transport or server error.
    _require_options(options, "classify_get_options")
    return ServiceRequest(
        method="GET",
        path=f"{classifier_path(options.classifier_id)}/classify",
        params={"text": options.text},
    )


def build_create_classifier_request(options: CreateClassifierOptions) -> ServiceRequest:
    """
    Build the multipart upload that creates and trains a classifier.

    Consumes both training sources: the returned request is the only place
    their payloads live, and the same options cannot be sent again.

    Raises:
        ValidationError: If ``options`` is None.
        SourceConsumedError: If either source was already sent.
    """
    _require_options(options, "create_classifier_options")
    # Check both before consuming either, so a rejected build leaves both sources untouched.
    for source in (options.metadata, options.training_data):
        if source.consumed:
            raise SourceConsumedError(
                f"{source.name} has already been sent; create a new source to retry"
            )
    metadata = options.metadata.consume()
    training_data = options.training_data.consume()
    return ServiceRequest(
        method="POST",
        path=CLASSIFIERS_PATH,
        files={
            "training_metadata": (PART_FILENAME, metadata, PART_CONTENT_TYPE),
            "training_data": (PART_FILENAME, training_data, PART_CONTENT_TYPE),
        },
    )


def build_delete_classifier_request(options: DeleteClassifierOptions) -> ServiceRequest:
    _require_options(options, "delete_classifier_options")
    return ServiceRequest(method="DELETE", path=classifier_path(options.classifier_id))


def build_get_classifier_request(options: GetClassifierOptions) -> ServiceRequest:
    _require_options(options, "get_classifier_options")
    return ServiceRequest(method="GET", path=classifier_path(options.classifier_id))


def build_list_classifiers_request() -> ServiceRequest:
    return ServiceRequest(method="GET", path=CLASSIFIERS_PATH)
