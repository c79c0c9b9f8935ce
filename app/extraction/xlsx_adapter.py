import csv
import io
from datetime import date, datetime

import openpyxl

from app.extraction.base import BaseTextExtractor
from app.extraction.exceptions import ExtractionError


class XlsxAdapter(BaseTextExtractor):
    """Serializes every worksheet to CSV text using openpyxl.

    Sheets keep workbook order and are separated by a line break.
    """

    def extract(self, data: bytes) -> str:
        try:
            workbook = openpyxl.load_workbook(io.BytesIO(data), data_only=True, read_only=True)
        except Exception as exc:
            raise ExtractionError(f"openpyxl extraction failed: {exc}") from exc
        try:
            sheets = [self._sheet_to_csv(ws) for ws in workbook.worksheets]
        except Exception as exc:
            raise ExtractionError(f"openpyxl extraction failed: {exc}") from exc
        finally:
            workbook.close()
        return "\n".join(sheets)

    @staticmethod
    def _sheet_to_csv(worksheet: object) -> str:
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        for row in worksheet.iter_rows(values_only=True):  # type: ignore[attr-defined]
            writer.writerow([_cell_to_str(value) for value in row])
        return buf.getvalue()


def _cell_to_str(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        if value.time() == datetime.min.time():
            return value.date().isoformat()
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
