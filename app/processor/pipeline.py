from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from app.database.models import RateRecord
from app.intake.models import IncomingUpload, UploadedDocument
from app.rates.models import RateCandidate


@dataclass(slots=True)
class PipelineContext:
    upload: IncomingUpload
    agent_id: str
    document: UploadedDocument
    raw_bytes: bytes = b""
    extracted_text: str = ""
    raw_candidates: list[Any] = field(default_factory=list)
    candidates: list[RateCandidate] = field(default_factory=list)
    records: list[RateRecord] = field(default_factory=list)


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
