"""
Plan Export Service

Exports generated workout plans for use outside the generator.

Supported formats:
- CSV (spreadsheet compatible, one row per exercise or rest activity)
- JSON (full plan structure for programmatic access)
"""

import csv
import io
import json
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from core.exceptions import ExportError

from .constants import DAY_NAMES
from .models import WorkoutPlan, WorkoutWeek

logger = logging.getLogger(__name__)

CSV_HEADERS = [
    "Week",
    "Focus",
    "Day",
    "Entry Type",
    "Workout",
    "Exercise",
    "Sets",
    "Reps",
    "Rest (s)",
    "Tempo",
    "Duration (min)",
    "Intensity",
    "Notes",
]


@dataclass
class ExportResult:
    """Result of a plan export operation."""
    success: bool
    format: str
    filename: str
    content: str  # The actual file content
    content_type: str  # MIME type
    row_count: int
    error: Optional[str] = None


def resolve_current_week(plan: WorkoutPlan) -> Optional[WorkoutWeek]:
    """
    Week matching plan.current_week, else the first week.

    Returns None only for a plan without weeks.
    """
    week = plan.get_week(plan.current_week)
    if week is None and plan.weeks:
        return plan.weeks[0]
    return week


def export_plan_to_csv(plan: WorkoutPlan, week: Optional[int] = None) -> ExportResult:
    """
    Export a plan to CSV.

    Args:
        plan: Generated plan
        week: Export only this week number. None exports every week.

    Returns:
        ExportResult with CSV content. An unknown week number is reported
        as an unsuccessful result.
    """
    if week is None:
        weeks = plan.weeks
    else:
        selected = plan.get_week(week)
        if selected is None:
            return ExportResult(
                success=False,
                format="csv",
                filename="",
                content="",
                content_type="text/csv",
                row_count=0,
                error=f"Week {week} not found in plan",
            )
        weeks = [selected]

    output = io.StringIO()
    writer = csv.writer(output)

    # Plan metadata header
    writer.writerow([f"# {plan.name}"])
    writer.writerow([f"# {plan.description}"])
    writer.writerow([f"# Exported: {datetime.now().strftime('%Y-%m-%d %H:%M')}"])
    writer.writerow([])

    writer.writerow(CSV_HEADERS)

    row_count = 0
    for plan_week in weeks:
        for workout in plan_week.workouts:
            day_name = DAY_NAMES[workout.day_of_week] if 0 <= workout.day_of_week <= 6 else ""
            for exercise in workout.exercises:
                writer.writerow([
                    plan_week.week_number,
                    plan_week.focus,
                    day_name,
                    "Workout",
                    workout.name,
                    exercise.name,
                    exercise.sets,
                    exercise.reps,
                    exercise.rest_between_sets or "",
                    exercise.tempo or "",
                    workout.time_per_exercise,
                    workout.intensity,
                    _clean_text(workout.notes),
                ])
                row_count += 1

        for activity in plan_week.rest_day_activities:
            writer.writerow([
                plan_week.week_number,
                plan_week.focus,
                "",
                "Rest Day",
                activity.name,
                "",
                "",
                "",
                "",
                "",
                activity.duration,
                activity.intensity,
                _clean_text(activity.notes),
            ])
            row_count += 1

    content = output.getvalue()
    output.close()

    suffix = f"_week{week}" if week is not None else ""
    filename = f"{_sanitize_filename(plan.name)}{suffix}_{date.today().strftime('%Y%m%d')}.csv"

    logger.info(f"Exported plan '{plan.name}' to CSV: {row_count} rows")

    return ExportResult(
        success=True,
        format="csv",
        filename=filename,
        content=content,
        content_type="text/csv; charset=utf-8",
        row_count=row_count,
    )


def export_plan_to_json(plan: WorkoutPlan) -> ExportResult:
    """
    Export a plan to JSON.

    The content wraps plan.to_dict() with export metadata.
    """
    export_data = {
        "export_version": "1.0",
        "exported_at": datetime.now().isoformat(),
        "plan": plan.to_dict(),
    }
    content = json.dumps(export_data, indent=2, ensure_ascii=False)
    workout_count = sum(len(w.workouts) for w in plan.weeks)

    filename = f"{_sanitize_filename(plan.name)}_{date.today().strftime('%Y%m%d')}.json"

    logger.info(f"Exported plan '{plan.name}' to JSON: {workout_count} workouts")

    return ExportResult(
        success=True,
        format="json",
        filename=filename,
        content=content,
        content_type="application/json; charset=utf-8",
        row_count=workout_count,
    )


EXPORTERS = {
    "csv": export_plan_to_csv,
    "json": export_plan_to_json,
}


def export_plan(plan: WorkoutPlan, fmt: str) -> ExportResult:
    """
    Export a plan in the named format.

    Raises:
        ExportError: unsupported format
    """
    exporter = EXPORTERS.get(fmt.lower())
    if exporter is None:
        raise ExportError(fmt, f"unsupported format, expected one of {sorted(EXPORTERS)}")
    return exporter(plan)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _clean_text(text: Optional[str]) -> str:
    """Flatten text for a CSV cell."""
    if not text:
        return ""
    return " ".join(text.split())


def _sanitize_filename(name: str) -> str:
    """Sanitize a string for use as a filename."""
    invalid_chars = '<>:"/\\|?*'
    result = name
    for char in invalid_chars:
        result = result.replace(char, "_")

    result = result.replace(" ", "_")
    result = result.strip("_")

    if len(result) > 50:
        result = result[:50]

    return result or "workout_plan"
