"""Offline generation client.

Returns canned content without network calls. Used for local runs and tests,
and as a template when adding new provider adapters: implement
BaseGenerationClient and register the provider in GenerationClientFactory.
"""

import copy
from typing import ClassVar

from indenture.generation.client_base import BaseGenerationClient


class ExampleClientAdapter(BaseGenerationClient):
    """Generation client that answers every call with fixed, schema-valid content."""

    DEFAULT_ANALYSIS: ClassVar[str] = (
        "The indenture governs senior unsecured notes issued by Example Corp. "
        "Interest accrues at a fixed rate payable semi-annually. The notes rank "
        "pari passu with all existing and future senior unsecured indebtedness."
    )

    DEFAULT_SUMMARY: ClassVar[dict[str, object]] = {
        "seniority": {
            "bondRanking": "Senior Unsecured",
            "securityDetails": "Unsecured general obligation of the issuer",
            "capTablePosition": "Above subordinated debt and equity, below secured debt",
            "subordinationDetails": "Pari passu with other senior unsecured indebtedness",
            "guaranteeStructure": "Not specified",
        },
        "issuer": "Example Corp.",
        "bondType": "Corporate Bond",
        "principalAmount": "$100,000,000",
        "interestRate": "4.25% per annum",
        "maturityDate": "December 15, 2030",
        "keyTerms": ["Semi-annual interest payments", "Optional redemption after 2027"],
        "covenants": ["Limitation on liens", "Merger and consolidation restrictions"],
        "defaultProvisions": ["Failure to pay interest for 30 days", "Acceleration by holders of 25%"],
        "executiveSummary": "Example Corp. issued senior unsecured notes due 2030.",
    }

    def __init__(
        self,
        analysis: str | None = None,
        summary: object | None = None,
    ) -> None:
        self._analysis = self.DEFAULT_ANALYSIS if analysis is None else analysis
        self._summary = self.DEFAULT_SUMMARY if summary is None else summary

    def generate_text(
        self,
        *,
        prompt: str,
        model: str,
        max_output_tokens: int,
    ) -> str:
        _ = prompt, model, max_output_tokens
        return self._analysis

    def generate_object(
        self,
        *,
        prompt: str,
        model: str,
        json_schema: dict[str, object],
    ) -> object:
        _ = prompt, model, json_schema
        return copy.deepcopy(self._summary)
