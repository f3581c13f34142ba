# counselor roster aggregation
# roster-wide averages and risk breakdown. an empty roster is a valid state
# and resolves to all-zero statistics.

import logging
from typing import Any, Iterable

import pandas as pd

from dropout_client.errors import UnknownRiskLabel
from dropout_client.models.counselor import (
    CounselorAnalytics,
    CounselorDashboard,
    CounselorProfile,
    CounselorRiskDistribution,
    RiskCounts,
    RosterEntry,
)
from dropout_client.services.dashboard_aggregator import round_half_up
from dropout_client.services.risk import RiskLevel, classify_roster_status

logger = logging.getLogger(__name__)


def _as_roster(roster: Iterable[Any]) -> list[RosterEntry]:
    return [r if isinstance(r, RosterEntry) else RosterEntry.model_validate(r) for r in roster]


def transform(roster: Iterable[Any]) -> CounselorAnalytics:
    """aggregate a counselor's roster into summary statistics"""
    students = _as_roster(roster)
    if not students:
        return CounselorAnalytics()

    levels = []
    unclassified = 0
    for student in students:
        try:
            levels.append(classify_roster_status(student.current_risk_status).value)
        except UnknownRiskLabel as e:
            logger.warning(f"{e} for student {student.student_id}, left out of risk counts")
            unclassified += 1

    df = pd.DataFrame({
        "gpa": [s.current_gpa for s in students],
        "attendance": [s.current_attendance for s in students],
    })
    gpa = pd.to_numeric(df["gpa"], errors="coerce").fillna(0.0)
    attendance = pd.to_numeric(df["attendance"], errors="coerce").fillna(0.0)

    total = len(students)
    counts = pd.Series(levels, dtype=object).value_counts()
    risk_counts = RiskCounts(
        safe=int(counts.get(RiskLevel.SAFE.value, 0)),
        warning=int(counts.get(RiskLevel.WARNING.value, 0)),
        atRisk=int(counts.get(RiskLevel.AT_RISK.value, 0)),
    )

    return CounselorAnalytics(
        totalStudents=total,
        avgGpa=round_half_up(float(gpa.mean()), 2),
        avgAttendance=int(round_half_up(float(attendance.mean()))),
        riskCounts=risk_counts,
        riskDistribution=CounselorRiskDistribution(
            safe=round_half_up(risk_counts.safe / total * 100, 1),
            warning=round_half_up(risk_counts.warning / total * 100, 1),
            atRisk=round_half_up(risk_counts.at_risk / total * 100, 1),
        ),
        unclassified=unclassified,
    )


def transform_payload(payload: Any) -> CounselorDashboard:
    """shape-tolerant: a pre-shaped {counselor, students, summary} is validated and
    kept, a raw roster ({counselor, students} or a bare list) is aggregated here"""
    if isinstance(payload, list):
        students = _as_roster(payload)
        return CounselorDashboard(students=students, summary=transform(students))

    if not isinstance(payload, dict):
        raise ValueError(f"Unexpected counselor dashboard payload: {type(payload).__name__}")

    if payload.get("summary"):
        return CounselorDashboard.model_validate(payload)

    students = _as_roster(payload.get("students") or [])
    counselor = CounselorProfile.model_validate(payload.get("counselor") or {})
    return CounselorDashboard(counselor=counselor, students=students, summary=transform(students))
