from collections.abc import Callable
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any

from app.database.repositories.rates_repository import RatesRepository
from app.extraction.exceptions import EmptyDocumentError
from app.extraction.factory import TextExtractorFactory
from app.extraction.file_loader import FileLoader
from app.logging.logger import Log
from app.processor.pipeline import PipelineContext, PipelineStep
from app.rates.exceptions import NoRatesFoundError
from app.rates.extractor import RateExtractor
from app.rates.models import RateCandidate
from app.rates.validator import validate_candidates

EXTRACTION_METHOD = "ai_powered"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ExtractTextStep(PipelineStep):
    def __init__(
        self,
        file_loader: FileLoader,
        extractor_factory: TextExtractorFactory,
    ) -> None:
        self._file_loader = file_loader
        self._extractor_factory = extractor_factory

    def run(self, context: PipelineContext) -> PipelineContext:
        document = context.document
        context.raw_bytes = self._file_loader.load(document)
        extractor = self._extractor_factory.for_format(document.format)
        context.extracted_text = extractor.extract(context.raw_bytes)
        Log.info(
            f"Extracted {len(context.extracted_text)} chars from {document.filename} "
            f"({document.format.value})"
        )
        if not context.extracted_text.strip():
            raise EmptyDocumentError("No text could be extracted from the file")
        return context


class ExtractRatesStep(PipelineStep):
    def __init__(self, rate_extractor: RateExtractor) -> None:
        self._rate_extractor = rate_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.raw_candidates = self._rate_extractor.extract(context.extracted_text)
        if not context.raw_candidates:
            raise NoRatesFoundError("No valid rate data could be extracted from the file")
        return context


class ValidateRatesStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.candidates = validate_candidates(context.raw_candidates)
        Log.info(f"Validated {len(context.candidates)} rates from {context.document.filename}")
        return context


class PersistRatesStep(PipelineStep):
    def __init__(
        self,
        rates_repo: RatesRepository,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._rates_repo = rates_repo
        self._clock = clock

    def run(self, context: PipelineContext) -> PipelineContext:
        details = {
            "imported_from": context.document.filename,
            "imported_at": self._clock().isoformat(),
            "extraction_method": EXTRACTION_METHOD,
        }
        rows = [
            _candidate_to_row(candidate, context.agent_id, details)
            for candidate in context.candidates
        ]
        context.records = self._rates_repo.insert_many(rows)
        Log.info(f"Stored {len(context.records)} rates for agent {context.agent_id}")
        return context


def _candidate_to_row(
    candidate: RateCandidate,
    agent_id: str,
    details: dict[str, str],
) -> dict[str, Any]:
    row = asdict(candidate)
    row["rate_type"] = candidate.rate_type.value
    row["agent_id"] = agent_id
    row["details"] = dict(details)
    return row
