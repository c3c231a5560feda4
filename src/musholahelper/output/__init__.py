"""Output generation for schedules (PDF, text)."""

from musholahelper.output.pdf_generator import PDFGenerator
from musholahelper.output.report_generator import ReportGenerator

__all__ = [
    "PDFGenerator",
    "ReportGenerator",
]
