import io

import docx

from app.extraction.base import BaseTextExtractor
from app.extraction.exceptions import ExtractionError


class DocxAdapter(BaseTextExtractor):
    """Extracts raw text from Word documents using python-docx.

    Paragraph text comes first, then each table row with cells joined by tabs.
    """

    def extract(self, data: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(data))
            lines = [p.text for p in document.paragraphs]
            for table in document.tables:
                for row in table.rows:
                    cells = [cell.text.strip() for cell in row.cells]
                    if any(cells):
                        lines.append("\t".join(cells))
            return "\n".join(lines).strip()
        except Exception as exc:
            raise ExtractionError(f"python-docx extraction failed: {exc}") from exc
