"""
Basic usage examples for the natural-language-classifier client.

Run from the repository root after installing and exporting credentials:

    pip install -e .
    export NATURAL_LANGUAGE_CLASSIFIER_USERNAME=...
    export NATURAL_LANGUAGE_CLASSIFIER_PASSWORD=...
    python examples/basic_usage.py weather_data_train.csv
"""

import sys

from natural_language_classifier import (
    ClassifierStatus,
    ClassifyOptions,
    CreateClassifierOptions,
    DeleteClassifierOptions,
    GetClassifierOptions,
    NaturalLanguageClassifier,
    NotFoundError,
)


def main(training_csv: str):
    with NaturalLanguageClassifier() as nlc:
        print(f"Client ready: {nlc}\n")

        # ------------------------------------------------------------------
        # 1. Create a classifier from CSV training data
        # ------------------------------------------------------------------
        print("=== Create Classifier ===")
        with open(training_csv, "rb") as training_data:
            options = CreateClassifierOptions.from_training_data(
                training_data, language="en", name="weather"
            )
            classifier = nlc.create_classifier(options)
        print(f"  Id          : {classifier.classifier_id}")
        print(f"  Status      : {classifier.status.value if classifier.status else 'N/A'}")
        print()

        # ------------------------------------------------------------------
        # 2. Check its status
        # ------------------------------------------------------------------
        print("=== Get Classifier ===")
        classifier = nlc.get_classifier(GetClassifierOptions(classifier.classifier_id))
        print(f"  Status      : {classifier.status.value if classifier.status else 'N/A'}")
        print(f"  Description : {classifier.status_description}")
        print()

        # ------------------------------------------------------------------
        # 3. Classify (only once training has finished)
        # ------------------------------------------------------------------
        if classifier.status is ClassifierStatus.AVAILABLE:
            print("=== Classify ===")
            result = nlc.classify(
                ClassifyOptions(classifier.classifier_id, "is it hot outside?")
            )
            print(f"  Top class   : {result.top_class}")
            for cls in result.classes:
                print(f"    {cls.class_name}: {cls.confidence:.2%}")
            print()
        else:
            print("Classifier still training; skipping classify.\n")

        # ------------------------------------------------------------------
        # 4. List and clean up
        # ------------------------------------------------------------------
        print("=== List Classifiers ===")
        for item in nlc.list_classifiers().classifiers:
            print(f"  {item.classifier_id}  {item.name or ''}")
        print()

        try:
            nlc.delete_classifier(DeleteClassifierOptions(classifier.classifier_id))
            print(f"Deleted {classifier.classifier_id}")
        except NotFoundError as exc:
            print(f"Already gone: {exc.message}")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        sys.exit("usage: python examples/basic_usage.py TRAINING_CSV")
    main(sys.argv[1])
