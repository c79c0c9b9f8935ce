from app.config.settings import Settings
from app.extraction.base import BaseTextExtractor
from app.extraction.docx_adapter import DocxAdapter
from app.extraction.pdfplumber_adapter import PdfPlumberAdapter
from app.extraction.pymupdf_adapter import PyMuPdfAdapter
from app.extraction.xlsx_adapter import XlsxAdapter
from app.intake.formats import DocumentFormat


class TextExtractorFactory:
    """Maps each document format to exactly one extraction adapter."""

    PDF_ADAPTERS: dict[str, type[BaseTextExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    def __init__(self, extractors: dict[DocumentFormat, BaseTextExtractor]) -> None:
        self._extractors = extractors

    @classmethod
    def create(cls, settings: Settings) -> "TextExtractorFactory":
        engine = settings.pdf_engine.lower()
        pdf_adapter_cls = cls.PDF_ADAPTERS.get(engine)
        if pdf_adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ADAPTERS)}"
            )
        return cls(
            {
                DocumentFormat.PDF: pdf_adapter_cls(),
                DocumentFormat.DOCX: DocxAdapter(),
                DocumentFormat.XLSX: XlsxAdapter(),
            }
        )

    def for_format(self, fmt: DocumentFormat) -> BaseTextExtractor:
        extractor = self._extractors.get(fmt)
        if extractor is None:
            raise ValueError(f"No extractor registered for format '{fmt.value}'")
        return extractor
