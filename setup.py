"""
pip-installable setup for the natural-language-classifier client.

Install (editable, from the repository root)::

    pip install -e .

Run the test suite against the bundled fake service::

    pip install -e ".[test]"
    pytest
"""

from setuptools import find_packages, setup

setup(
    name="natural-language-classifier",
    version="1.0.0",
    description="Python client for the Natural Language Classifier web service",
    long_description=(
        "A client binding that builds requests for the Natural Language Classifier "
        "REST API (classify, create, get, list and delete classifiers), sends them "
        "with httpx and materializes the JSON responses into typed pydantic models."
    ),
    python_requires=">=3.10",
    packages=find_packages(
        include=[
            "natural_language_classifier",
            "natural_language_classifier.*",
        ]
    ),
    install_requires=[
        "httpx>=0.27.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
    ],
    extras_require={
        # Fake service used by the test suite
        "test": [
            "pytest>=7.4.0",
            "fastapi>=0.109.0",
            "python-multipart>=0.0.6",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
        "Topic :: Text Processing :: Linguistic",
    ],
)
