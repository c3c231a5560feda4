"""Plain-text reports for a Ramadan season.

Renders the tarawih roster, the tadarus progress with a per-day histogram,
and the snack provider weeks as fixed-width text.
"""

from pathlib import Path
from typing import Optional, Union

from musholahelper.domain.models import (
    SnackProviderYearlySchedule,
    TadarusYearlySchedule,
    TarawihYearlySchedule,
)
from musholahelper.scheduling.snack import assigned_count
from musholahelper.scheduling.tadarus import chart_data
from musholahelper.scheduling.tarawih import nights_per_person

WIDTH = 72


class ReportGenerator:
    """Generates text reports for yearly schedules.

    Any of the three schedules may be omitted; only the given sections are
    rendered.

    Example:
        >>> generator = ReportGenerator()
        >>> print(generator.generate_to_string(tarawih=schedule))
    """

    def generate(
        self,
        output_path: Union[str, Path],
        tarawih: Optional[TarawihYearlySchedule] = None,
        tadarus: Optional[TadarusYearlySchedule] = None,
        snack: Optional[SnackProviderYearlySchedule] = None,
    ) -> str:
        """Generate the report and save it to a file.

        Returns:
            The generated text content.
        """
        content = self.generate_to_string(tarawih, tadarus, snack)
        Path(output_path).write_text(content, encoding="utf-8")
        return content

    def generate_to_string(
        self,
        tarawih: Optional[TarawihYearlySchedule] = None,
        tadarus: Optional[TadarusYearlySchedule] = None,
        snack: Optional[SnackProviderYearlySchedule] = None,
    ) -> str:
        lines: list[str] = []
        if tarawih is not None:
            lines.extend(self.tarawih_lines(tarawih))
        if tadarus is not None:
            lines.extend(self.tadarus_lines(tadarus))
        if snack is not None:
            lines.extend(self.snack_lines(snack))
        return "\n".join(lines) + "\n"

    def tarawih_lines(self, schedule: TarawihYearlySchedule) -> list[str]:
        lines = [
            "=" * WIDTH,
            f"JADWAL TARAWIH {schedule.year} (mulai {schedule.ramadan_start_date})",
            "=" * WIDTH,
            f"{'Hari':>4} {'Tanggal':<11} {'Imam':<24} {'Bilal':<24}",
            "-" * WIDTH,
        ]
        for day in schedule.daily_schedules:
            imam = day.imam_name or "-"
            bilal = day.bilal_name or "-"
            lines.append(
                f"{day.ramadan_day:>4} {day.date.isoformat():<11} {imam[:24]:<24} {bilal[:24]:<24}"
            )

        counts = nights_per_person(schedule)
        lines.append("-" * WIDTH)
        lines.append("Malam per petugas:")
        for person in schedule.imams + schedule.bilals:
            status = "" if person.is_active else " (nonaktif)"
            lines.append(
                f"  {person.role.value:<6} {person.name:<24} {counts.get(person.id, 0):>3}{status}"
            )
        lines.append("")
        return lines

    def tadarus_lines(self, schedule: TadarusYearlySchedule) -> list[str]:
        progress = schedule.progress
        lines = [
            "=" * WIDTH,
            f"PROGRES TADARUS {schedule.year}",
            "=" * WIDTH,
            f"Total juz: {progress.total_juz:g} "
            f"(laki-laki {progress.total_male_juz:g}, perempuan {progress.total_female_juz:g})",
            f"Khatam: {progress.total_khatam_count} "
            f"(laki-laki {progress.male_khatam_count}, perempuan {progress.female_khatam_count})",
            f"Capaian: {progress.completion_percentage}%",
            f"Hari terisi: {progress.days_completed}, sisa: {progress.days_remaining}",
            "-" * WIDTH,
        ]
        for point in chart_data(schedule):
            bar = "#" * int(round(point.total))
            lines.append(
                f"{point.day:>4} L{point.male:>5g} P{point.female:>5g} |{bar or '.'}"
            )
        lines.append("")
        return lines

    def snack_lines(self, schedule: SnackProviderYearlySchedule) -> list[str]:
        lines = [
            "=" * WIDTH,
            f"PENYEDIA TAKJIL {schedule.year}",
            "=" * WIDTH,
        ]
        for week in sorted(schedule.weekly_schedules):
            lines.append(
                f"Minggu {week} ({assigned_count(schedule, week)}/14 slot terisi)"
            )
            for day in schedule.weekly_schedules[week]:
                p1 = day.provider1.name if day.provider1 else "-"
                p2 = day.provider2.name if day.provider2 else "-"
                lines.append(f"  {day.day:<7} {day.date.isoformat():<11} {p1:<22} {p2:<22}")
        lines.append("")
        return lines
