"""
Result types for the Natural Language Classifier client.

These models mirror the JSON documents returned by the service.  Unknown keys
are ignored and missing optional keys keep their defaults, so a newer server
that adds fields does not break older clients.
"""

from datetime import datetime
from enum import Enum
from typing import Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ClassifierStatus(str, Enum):
    """Training status of a classifier, as reported by the service."""

    NON_EXISTENT = "Non Existent"
    TRAINING = "Training"
    FAILED = "Failed"
    AVAILABLE = "Available"
    UNAVAILABLE = "Unavailable"


class _ResultModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ClassifiedClass(_ResultModel):
    """One class label and the confidence the classifier assigned to it."""

    class_name: str = Field(..., description="Class label")
    confidence: float = Field(
        ...,
        description="Confidence score for the label (0-1)"
    )


class Classification(_ResultModel):
    """Response from classifying one piece of text."""

    classifier_id: Optional[str] = Field(None, description="Classifier that produced the result")
    url: Optional[str] = Field(None, description="Link to the classifier")
    text: Optional[str] = Field(None, description="The submitted text")
    top_class: Optional[str] = Field(None, description="Label with the highest confidence")
    classes: List[ClassifiedClass] = Field(
        default_factory=list,
        description="Labels ranked by confidence, in server order"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "classifier_id": "10D41B-nlc-1",
                    "url": "https://gateway.watsonplatform.net/natural-language-classifier/api/v1/classifiers/10D41B-nlc-1",
                    "text": "is it hot outside?",
                    "top_class": "temperature",
                    "classes": [
                        {"class_name": "temperature", "confidence": 0.9998},
                        {"class_name": "conditions", "confidence": 0.0002},
                    ],
                }
            ]
        }
    }

    def __repr__(self) -> str:
        return (
            f"Classification("
            f"top_class={self.top_class!r}, "
            f"classes={len(self.classes)}, "
            f"classifier_id={self.classifier_id!r})"
        )


class Classifier(_ResultModel):
    """Metadata about a trained (or training) classifier."""

    classifier_id: str = Field(..., description="Unique classifier identifier")
    name: Optional[str] = Field(None, description="User-supplied classifier name")
    language: Optional[str] = Field(None, description="Language of the training data")
    created: Optional[datetime] = Field(None, description="Creation timestamp")
    status: Optional[ClassifierStatus] = Field(
        None,
        description="Training status; absent in list responses"
    )
    status_description: Optional[str] = Field(
        None,
        description="Human-readable explanation of the status"
    )
    url: Optional[str] = Field(None, description="Link to the classifier")

    @property
    def is_available(self) -> bool:
        """True when the classifier can accept classify calls."""
        return self.status is ClassifierStatus.AVAILABLE


class ClassifierList(_ResultModel):
    """All classifiers visible to the configured credentials."""

    classifiers: List[Classifier] = Field(
        default_factory=list,
        description="Classifiers in server order"
    )

    # Iterates classifiers rather than model field pairs.
    def __iter__(self) -> Iterator[Classifier]:  # type: ignore[override]
        return iter(self.classifiers)

    def __getitem__(self, index: int) -> Classifier:
        return self.classifiers[index]

    def __len__(self) -> int:
        return len(self.classifiers)
