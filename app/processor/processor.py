from collections.abc import Sequence
from pathlib import Path

from app.config.settings import Settings
from app.database.connection import Database
from app.database.models import RateRecord
from app.database.repositories.rates_repository import RatesRepository
from app.extraction.factory import TextExtractorFactory
from app.extraction.file_loader import FileLoader
from app.intake.exceptions import MissingAgentError
from app.intake.guard import FormatGuard
from app.intake.models import IncomingUpload
from app.intake.staging import DocumentStager
from app.logging.logger import Log
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.steps import (
    ExtractRatesStep,
    ExtractTextStep,
    PersistRatesStep,
    ValidateRatesStep,
)
from app.rates.extractor import RateExtractor
from app.rates.factory import RateExtractorFactory


class Processor:
    """Orchestrates rate ingestion for one uploaded document.

    Pipeline: guard -> stage -> extract text -> extract rates -> validate -> persist.
    The staged file is released on every exit path.
    """

    def __init__(
        self,
        *,
        guard: FormatGuard,
        stager: DocumentStager,
        steps: Sequence[PipelineStep],
        default_agent_id: str = "",
    ) -> None:
        self._guard = guard
        self._stager = stager
        self._steps = list(steps)
        self._default_agent_id = default_agent_id

    @property
    def max_upload_size_bytes(self) -> int:
        return self._guard.max_size_bytes

    def process(self, upload: IncomingUpload) -> list[RateRecord]:
        """Run the full pipeline and return the stored rate records."""
        Log.info(
            f"Processing upload {upload.filename} "
            f"({upload.content_type}, {upload.size_bytes} bytes)"
        )
        self._guard.check(upload.filename, upload.size_bytes)
        agent_id = self._resolve_agent_id(upload)

        try:
            with self._stager.stage(upload) as document:
                context = PipelineContext(
                    upload=upload,
                    agent_id=agent_id,
                    document=document,
                )
                for step in self._steps:
                    context = step.run(context)
        except Exception as exc:
            Log.error(f"Upload {upload.filename} failed: {exc}")
            raise

        Log.info(f"Upload {upload.filename} imported {len(context.records)} rates")
        return context.records

    def _resolve_agent_id(self, upload: IncomingUpload) -> str:
        agent_id = (upload.agent_id or "").strip() or self._default_agent_id
        if not agent_id:
            raise MissingAgentError("agent_id is required")
        return agent_id


def build_processor(
    settings: Settings,
    database: Database,
    rate_extractor: RateExtractor | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    if rate_extractor is None:
        rate_extractor = RateExtractorFactory.create(settings)
    upload_dir = Path(settings.upload_dir) if settings.upload_dir else None
    steps: list[PipelineStep] = [
        ExtractTextStep(
            file_loader=FileLoader(),
            extractor_factory=TextExtractorFactory.create(settings),
        ),
        ExtractRatesStep(rate_extractor=rate_extractor),
        ValidateRatesStep(),
        PersistRatesStep(rates_repo=RatesRepository(database)),
    ]
    return Processor(
        guard=FormatGuard.from_settings(settings),
        stager=DocumentStager(upload_dir=upload_dir),
        steps=steps,
        default_agent_id=settings.default_agent_id,
    )
