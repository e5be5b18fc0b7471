"""
natural-language-classifier — Python client for the Natural Language
Classifier web service.

Quick start::

    from natural_language_classifier import (
        ClassifyOptions,
        CreateClassifierOptions,
        NaturalLanguageClassifier,
    )

    nlc = NaturalLanguageClassifier(username="...", password="...")

    with open("weather_data_train.csv", "rb") as training_data:
        classifier = nlc.create_classifier(
            CreateClassifierOptions.from_training_data(training_data, language="en", name="weather")
        )
    print(classifier.status)          # ClassifierStatus.TRAINING

    result = nlc.classify(
        ClassifyOptions(classifier_id=classifier.classifier_id, text="is it hot outside?")
    )
    print(result.top_class)           # e.g. "temperature"
"""

__version__ = "1.0.0"

from .classifier import AsyncNaturalLanguageClassifier, NaturalLanguageClassifier
from .config import DEFAULT_URL, ClassifierSettings
from .exceptions import (
    ApiError,
    BadRequestError,
    ConflictError,
    DecodeError,
    ForbiddenError,
    InternalServerError,
    NaturalLanguageClassifierError,
    NotFoundError,
    RequestTooLargeError,
    ServiceUnavailableError,
    SourceConsumedError,
    TooManyRequestsError,
    TransportError,
    UnauthorizedError,
    UnsupportedMediaTypeError,
    ValidationError,
)
from .options import (
    MAX_TRAINING_RECORDS,
    ClassifyGetOptions,
    ClassifyOptions,
    CreateClassifierOptions,
    DeleteClassifierOptions,
    GetClassifierOptions,
    TrainingSource,
    training_metadata,
)
from .types import (
    Classification,
    ClassifiedClass,
    Classifier,
    ClassifierList,
    ClassifierStatus,
)

__all__ = [
    # Clients
    "NaturalLanguageClassifier",
    "AsyncNaturalLanguageClassifier",
    "ClassifierSettings",
    "DEFAULT_URL",
    # Options
    "ClassifyOptions",
    "ClassifyGetOptions",
    "CreateClassifierOptions",
    "DeleteClassifierOptions",
    "GetClassifierOptions",
    "TrainingSource",
    "training_metadata",
    "MAX_TRAINING_RECORDS",
    # Results
    "Classification",
    "ClassifiedClass",
    "Classifier",
    "ClassifierList",
    "ClassifierStatus",
    # Errors
    "NaturalLanguageClassifierError",
    "ValidationError",
    "SourceConsumedError",
    "DecodeError",
    "ApiError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "RequestTooLargeError",
    "UnsupportedMediaTypeError",
    "TooManyRequestsError",
    "InternalServerError",
    "ServiceUnavailableError",
    "TransportError",
]
