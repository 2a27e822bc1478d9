"""Shared typed models for the pipeline."""

from __future__ import annotations

from dataclasses import dataclass

FULL_ABSTRACT_LABEL = "Full Abstract:"
SUMMARY_LABEL = "Summary:"


@dataclass(frozen=True, slots=True)
class PipelineOutput:
    """Final text of one run and the label it is printed under."""

    label: str
    text: str

    def render(self) -> str:
        return f"{self.label}\n{self.text}\n"
