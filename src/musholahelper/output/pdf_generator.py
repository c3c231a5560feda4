"""PDF generation for Ramadan schedules.

This module creates printable PDFs showing:
- The tarawih imam/bilal roster for all 30 nights
- Tadarus progress with a per-day reading chart
- The four snack provider weeks
"""

from io import BytesIO
from pathlib import Path
from typing import Optional, Union

from musholahelper.domain.models import (
    SnackProviderYearlySchedule,
    TadarusYearlySchedule,
    TarawihYearlySchedule,
)
from musholahelper.scheduling.snack import assigned_count
from musholahelper.scheduling.tadarus import chart_data

# Color definitions (RGB tuples, 0-1 scale)
COLORS = {
    "male": (0.3, 0.5, 0.8),  # Blue
    "female": (0.8, 0.4, 0.6),  # Rose
    "header": (0.2, 0.45, 0.35),  # Mosque green
    "row_alt": (0.94, 0.97, 0.95),
    "empty": (0.6, 0.6, 0.6),
}


class PDFGenerator:
    """Generates printable PDF schedules.

    Example:
        >>> generator = PDFGenerator()
        >>> generator.generate("ramadan.pdf", tarawih=schedule)
    """

    def __init__(
        self,
        page_width: float = 595,  # A4 portrait width
        page_height: float = 842,  # A4 portrait height
        margin: float = 36,  # 0.5 inch margins
    ):
        self.page_width = page_width
        self.page_height = page_height
        self.margin = margin

    def generate(
        self,
        output_path: Union[str, Path],
        tarawih: Optional[TarawihYearlySchedule] = None,
        tadarus: Optional[TadarusYearlySchedule] = None,
        snack: Optional[SnackProviderYearlySchedule] = None,
    ) -> None:
        """Generate the PDF and save it to a file.

        Args:
            output_path: Path to save the PDF.
            tarawih: Tarawih schedule to render, if any.
            tadarus: Tadarus schedule to render, if any.
            snack: Snack provider schedule to render, if any.
        """
        canvas = self._canvas_module()
        c = canvas.Canvas(str(output_path), pagesize=(self.page_width, self.page_height))
        self._draw_pages(c, tarawih, tadarus, snack)
        c.save()

    def generate_to_buffer(
        self,
        tarawih: Optional[TarawihYearlySchedule] = None,
        tadarus: Optional[TadarusYearlySchedule] = None,
        snack: Optional[SnackProviderYearlySchedule] = None,
    ) -> BytesIO:
        """Generate the PDF and return it as a bytes buffer."""
        canvas = self._canvas_module()
        buffer = BytesIO()
        c = canvas.Canvas(buffer, pagesize=(self.page_width, self.page_height))
        self._draw_pages(c, tarawih, tadarus, snack)
        c.save()
        buffer.seek(0)
        return buffer

    def _canvas_module(self):
        try:
            from reportlab.pdfgen import canvas
        except ImportError:
            raise ImportError(
                "reportlab is required for PDF generation. "
                "Install with: pip install reportlab"
            )
        return canvas

    def _draw_pages(self, c, tarawih, tadarus, snack) -> None:
        if tarawih is not None:
            self._draw_tarawih_page(c, tarawih)
        if tadarus is not None:
            self._draw_tadarus_page(c, tadarus)
        if snack is not None:
            self._draw_snack_page(c, snack)

    def _draw_title(self, c, title: str, subtitle: str) -> float:
        """Draw page title and return the y position below it."""
        c.setFillColorRGB(*COLORS["header"])
        c.setFont("Helvetica-Bold", 16)
        c.drawString(self.margin, self.page_height - self.margin - 20, title)
        c.setFillColorRGB(0, 0, 0)
        c.setFont("Helvetica", 10)
        c.drawString(self.margin, self.page_height - self.margin - 36, subtitle)
        return self.page_height - self.margin - 60

    def _draw_tarawih_page(self, c, schedule: TarawihYearlySchedule) -> None:
        y = self._draw_title(
            c,
            f"Jadwal Imam & Bilal Tarawih {schedule.year}",
            f"Ramadan mulai {schedule.ramadan_start_date.strftime('%d %B %Y')}",
        )

        columns = [self.margin, self.margin + 40, self.margin + 130, self.margin + 330]
        c.setFont("Helvetica-Bold", 10)
        for x, label in zip(columns, ["Hari", "Tanggal", "Imam", "Bilal"]):
            c.drawString(x, y, label)
        y -= 6
        c.line(self.margin, y, self.page_width - self.margin, y)

        row_height = 22
        c.setFont("Helvetica", 9)
        for index, day in enumerate(schedule.daily_schedules):
            y -= row_height
            if index % 2 == 1:
                c.setFillColorRGB(*COLORS["row_alt"])
                c.rect(self.margin, y - 6, self.page_width - 2 * self.margin, row_height, fill=1, stroke=0)
            c.setFillColorRGB(0, 0, 0)
            c.drawString(columns[0], y, str(day.ramadan_day))
            c.drawString(columns[1], y, day.date.strftime("%d/%m/%Y"))
            self._draw_name(c, columns[2], y, day.imam_name)
            self._draw_name(c, columns[3], y, day.bilal_name)

        c.showPage()

    def _draw_name(self, c, x: float, y: float, name: str) -> None:
        if name:
            c.drawString(x, y, name[:32])
        else:
            c.setFillColorRGB(*COLORS["empty"])
            c.drawString(x, y, "belum ditentukan")
            c.setFillColorRGB(0, 0, 0)

    def _draw_tadarus_page(self, c, schedule: TadarusYearlySchedule) -> None:
        progress = schedule.progress
        y = self._draw_title(
            c,
            f"Progres Tadarus {schedule.year}",
            f"Capaian {progress.completion_percentage}% dari target 2 khatam",
        )

        c.setFont("Helvetica", 10)
        stats = [
            f"Total juz: {progress.total_juz:g}",
            f"Jamaah laki-laki: {progress.total_male_juz:g} juz, {progress.male_khatam_count} khatam",
            f"Jamaah perempuan: {progress.total_female_juz:g} juz, {progress.female_khatam_count} khatam",
            f"Hari terisi: {progress.days_completed}, sisa {progress.days_remaining} hari",
        ]
        for stat in stats:
            c.drawString(self.margin + 10, y, stat)
            y -= 15

        y -= 20
        self._draw_reading_chart(
            c, schedule, self.margin + 20, y - 220, self.page_width - 2 * self.margin - 30, 200
        )
        c.showPage()

    def _draw_reading_chart(
        self,
        c,
        schedule: TadarusYearlySchedule,
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> None:
        """Draw stacked male/female bars for each Ramadan day."""
        points = chart_data(schedule)
        if not points:
            return

        max_total = max(max(p.total for p in points), 1)
        bar_width = width / len(points)

        c.setStrokeColorRGB(0, 0, 0)
        c.setLineWidth(1)
        c.line(x, y, x, y + height)  # Y axis
        c.line(x, y, x + width, y)  # X axis

        for i, point in enumerate(points):
            bar_x = x + i * bar_width
            male_h = (point.male / max_total) * height
            female_h = (point.female / max_total) * height
            c.setFillColorRGB(*COLORS["male"])
            c.rect(bar_x, y, bar_width - 2, male_h, fill=1, stroke=0)
            c.setFillColorRGB(*COLORS["female"])
            c.rect(bar_x, y + male_h, bar_width - 2, female_h, fill=1, stroke=0)

        c.setFillColorRGB(0, 0, 0)
        c.setFont("Helvetica", 7)
        c.drawRightString(x - 5, y, "0")
        c.drawRightString(x - 5, y + height - 5, f"{max_total:g}")
        for i, point in enumerate(points):
            if point.day % 5 == 0 or point.day == 1:
                c.drawCentredString(x + i * bar_width + bar_width / 2, y - 12, str(point.day))

        # Legend
        legend_y = y - 30
        for offset, (key, label) in enumerate([("male", "Laki-laki"), ("female", "Perempuan")]):
            lx = x + offset * 90
            c.setFillColorRGB(*COLORS[key])
            c.rect(lx, legend_y - 2, 12, 10, fill=1, stroke=1)
            c.setFillColorRGB(0, 0, 0)
            c.drawString(lx + 15, legend_y, label)

    def _draw_snack_page(self, c, schedule: SnackProviderYearlySchedule) -> None:
        y = self._draw_title(
            c,
            f"Penyedia Takjil {schedule.year}",
            f"{len(schedule.providers)} penyedia terdaftar",
        )

        for week in sorted(schedule.weekly_schedules):
            c.setFont("Helvetica-Bold", 11)
            c.drawString(
                self.margin, y, f"Minggu {week} ({assigned_count(schedule, week)}/14 slot)"
            )
            y -= 16
            c.setFont("Helvetica", 9)
            for day in schedule.weekly_schedules[week]:
                c.drawString(self.margin + 10, y, day.day)
                c.drawString(self.margin + 60, y, day.date.strftime("%d/%m"))
                self._draw_name(c, self.margin + 110, y, day.provider1.name if day.provider1 else "")
                self._draw_name(c, self.margin + 300, y, day.provider2.name if day.provider2 else "")
                y -= 14
            y -= 12

        c.showPage()
