"""
Pytest configuration and fixtures for the client tests.

``fake_service`` is a small FastAPI stand-in for the remote classifier
service; ``nlc`` is a client wired to it through FastAPI's TestClient, which
is itself an ``httpx.Client``.
"""

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest
from fastapi import FastAPI, File, UploadFile
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient
from pydantic import BaseModel

from natural_language_classifier import DEFAULT_URL, NaturalLanguageClassifier

CREATED = "2017-06-01T12:00:00.000Z"


class ClassifyBody(BaseModel):
    text: str


def _not_found() -> JSONResponse:
    return JSONResponse(status_code=404, content={"code": 404, "error": "Not found"})


def _classify(classifier_id: str, text: str, base_url: str) -> Dict[str, Any]:
    top = "temperature" if any(w in text for w in ("hot", "cold")) else "conditions"
    other = "conditions" if top == "temperature" else "temperature"
    return {
        "classifier_id": classifier_id,
        "url": f"{base_url}/v1/classifiers/{classifier_id}",
        "text": text,
        "top_class": top,
        "classes": [
            {"class_name": top, "confidence": 0.95},
            {"class_name": other, "confidence": 0.05},
        ],
    }


def create_fake_service() -> FastAPI:
    """Build an in-memory fake of the classifier REST API."""
    app = FastAPI()
    app.state.classifiers = {}
    app.state.uploads = []
    app.state.counter = 0

    def url_for(classifier_id: str) -> str:
        return f"http://testserver/v1/classifiers/{classifier_id}"

    @app.post("/v1/classifiers")
    async def create_classifier(
        training_metadata: UploadFile = File(...),
        training_data: UploadFile = File(...),
    ):
        metadata_bytes = await training_metadata.read()
        data_bytes = await training_data.read()
        app.state.uploads.append(
            {"training_metadata": metadata_bytes, "training_data": data_bytes}
        )
        try:
            metadata = json.loads(metadata_bytes)
        except ValueError:
            return JSONResponse(
                status_code=400,
                content={"code": 400, "error": "Invalid training metadata"},
            )
        if "language" not in metadata:
            return JSONResponse(
                status_code=400,
                content={"code": 400, "error": "Missing language in training metadata"},
            )

        app.state.counter += 1
        classifier_id = f"10D41B-nlc-{app.state.counter}"
        record = {
            "classifier_id": classifier_id,
            "name": metadata.get("name"),
            "language": metadata["language"],
            "created": CREATED,
            "url": url_for(classifier_id),
            "status": "Training",
            "status_description": "The classifier instance is in its training phase",
        }
        app.state.classifiers[classifier_id] = record
        return record

    @app.get("/v1/classifiers")
    async def list_classifiers():
        # The real service leaves status out of list entries.
        return {
            "classifiers": [
                {k: v for k, v in record.items() if k not in ("status", "status_description")}
                for record in app.state.classifiers.values()
            ]
        }

    @app.get("/v1/classifiers/{classifier_id}")
    async def get_classifier(classifier_id: str):
        record = app.state.classifiers.get(classifier_id)
        if record is None:
            return _not_found()
        return record

    @app.delete("/v1/classifiers/{classifier_id}")
    async def delete_classifier(classifier_id: str):
        if app.state.classifiers.pop(classifier_id, None) is None:
            return _not_found()
        return {}

    def classify_or_error(classifier_id: str, text: str):
        record = app.state.classifiers.get(classifier_id)
        if record is None:
            return _not_found()
        if record["status"] != "Available":
            return JSONResponse(
                status_code=409,
                content={"code": 409, "error": "Classifier not yet ready"},
            )
        return _classify(classifier_id, text, "http://testserver")

    @app.post("/v1/classifiers/{classifier_id}/classify")
    async def classify(classifier_id: str, body: ClassifyBody):
        return classify_or_error(classifier_id, body.text)

    @app.get("/v1/classifiers/{classifier_id}/classify")
    async def classify_get(classifier_id: str, text: str):
        return classify_or_error(classifier_id, text)

    return app


@pytest.fixture
def fake_service() -> FastAPI:
    return create_fake_service()


@pytest.fixture
def nlc(fake_service):
    """Client wired to the fake service."""
    with TestClient(fake_service) as client:
        yield NaturalLanguageClassifier(username="user", password="secret", client=client)


class RecordingTransport:
    """Collects every request and answers with a canned response."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []
        self._handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def make_client():
    """
    Factory for a client over ``httpx.MockTransport``.

    Returns ``(client, recorder)``; ``recorder.requests`` holds every request
    the client sent.
    """
    opened = []

    def factory(status_code: int = 200, **response_kwargs):
        recorder = RecordingTransport(
            lambda request: httpx.Response(status_code, **response_kwargs)
        )
        http_client = httpx.Client(
            transport=httpx.MockTransport(recorder), base_url=DEFAULT_URL
        )
        opened.append(http_client)
        client = NaturalLanguageClassifier(username="user", password="secret", client=http_client)
        return client, recorder

    yield factory

    for http_client in opened:
        http_client.close()
