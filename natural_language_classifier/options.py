"""
Option objects for each service operation.

Required fields are constructor arguments and are validated on construction,
so an invalid options object never reaches the network::

    options = ClassifyOptions(classifier_id="10D41B-nlc-1", text="is it hot outside?")
    other = options.copy_with(text="will it rain tomorrow?")
"""

import dataclasses
import io
import json
from typing import Any, BinaryIO, Optional, Union

from .exceptions import SourceConsumedError, ValidationError

# The service rejects training files with more records than this.
MAX_TRAINING_RECORDS = 15000

SourceData = Union[bytes, str, BinaryIO]


class TrainingSource:
    """
    A single-use readable source for one part of a create-classifier upload.

    The payload is handed over once via :meth:`consume`; file-like payloads
    are streamed as-is and cannot be rewound, so a second hand-over raises
    :class:`SourceConsumedError`.
    """

    def __init__(self, data: SourceData, name: str = "source"):
        if data is None:
            raise ValidationError(f"{name} cannot be None")
        if isinstance(data, str):
            data = data.encode("utf-8")
        if not isinstance(data, bytes) and not hasattr(data, "read"):
            raise ValidationError(
                f"{name} must be bytes, str or a binary file-like object, "
                f"got {type(data).__name__}"
            )
        self._data = data
        self._name = name
        self._consumed = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def consumed(self) -> bool:
        return self._consumed

    def consume(self) -> Union[bytes, BinaryIO]:
        """Hand the payload over to the request builder.

        Raises:
            SourceConsumedError: If the payload was already handed over.
        """
        if self._consumed:
            raise SourceConsumedError(
                f"{self._name} has already been sent; create a new source to retry"
            )
        self._consumed = True
        return self._data

    def __repr__(self) -> str:
        kind = "bytes" if isinstance(self._data, bytes) else "stream"
        state = "consumed" if self._consumed else "unread"
        return f"TrainingSource({self._name!r}, {kind}, {state})"


def training_metadata(language: str, name: Optional[str] = None) -> bytes:
    """
    Build the JSON training-metadata document.

    Args:
        language: Language code of the training data (e.g. ``"en"``).
        name: Optional display name for the classifier.

    Returns:
        UTF-8 encoded JSON, e.g. ``b'{"language": "en", "name": "weather"}'``.
    """
    if not language:
        raise ValidationError("language cannot be empty")
    document = {"language": language}
    if name is not None:
        document["name"] = name
    return json.dumps(document).encode("utf-8")


def _require(value: Any, field_name: str) -> None:
    if value is None:
        raise ValidationError(f"{field_name} cannot be None")
    if value == "":
        raise ValidationError(f"{field_name} cannot be empty")


class _Options:
    """Shared behaviour for the frozen option dataclasses."""

    def copy_with(self, **changes: Any):
        """Return a new, re-validated instance with ``changes`` applied."""
        return dataclasses.replace(self, **changes)


@dataclasses.dataclass(frozen=True)
class ClassifyOptions(_Options):
    """Options for ``classify`` (POST)."""

    classifier_id: str
    text: str

    def __post_init__(self) -> None:
        _require(self.classifier_id, "classifier_id")
        _require(self.text, "text")


@dataclasses.dataclass(frozen=True)
class ClassifyGetOptions(_Options):
    """Options for ``classify_get``; the text travels as a query parameter."""

    classifier_id: str
    text: str

    def __post_init__(self) -> None:
        _require(self.classifier_id, "classifier_id")
        _require(self.text, "text")


@dataclasses.dataclass(frozen=True)
class CreateClassifierOptions(_Options):
    """
    Options for ``create_classifier``.

    ``metadata`` is the JSON training-metadata document (see
    :func:`training_metadata`) and ``training_data`` is the CSV training file,
    at most :data:`MAX_TRAINING_RECORDS` records.  Either may be bytes, str, a
    binary file object, or an existing :class:`TrainingSource`.
    """

    metadata: TrainingSource
    training_data: TrainingSource

    def __post_init__(self) -> None:
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "metadata", self._as_source(self.metadata, "metadata"))
        object.__setattr__(
            self, "training_data", self._as_source(self.training_data, "training_data")
        )

    @staticmethod
    def _as_source(value: Any, field_name: str) -> TrainingSource:
        if isinstance(value, TrainingSource):
            return value
        return TrainingSource(value, name=field_name)

    @classmethod
    def from_training_data(
        cls,
        training_data: SourceData,
        language: str,
        name: Optional[str] = None,
    ) -> "CreateClassifierOptions":
        """Build options from the CSV data plus language and optional name."""
        return cls(
            metadata=io.BytesIO(training_metadata(language, name)),
            training_data=training_data,
        )


@dataclasses.dataclass(frozen=True)
class DeleteClassifierOptions(_Options):
    """Options for ``delete_classifier``."""

    classifier_id: str

    def __post_init__(self) -> None:
        _require(self.classifier_id, "classifier_id")


@dataclasses.dataclass(frozen=True)
class GetClassifierOptions(_Options):
    """Options for ``get_classifier``."""

    classifier_id: str

    def __post_init__(self) -> None:
        _require(self.classifier_id, "classifier_id")
