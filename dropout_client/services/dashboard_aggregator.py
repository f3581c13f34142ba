# student dashboard aggregation
# turns one student's semester records into summary stats, a risk breakdown
# and a per-semester trend series. pure: same records in, same analytics out.

import logging
import math
from typing import Any, Iterable, Optional

import pandas as pd

from dropout_client.errors import EmptyInputError
from dropout_client.models.dashboard import (
    DashboardAnalytics,
    RiskDistribution,
    SemesterRecord,
    StudentDashboardPayload,
    StudentProfile,
    TrendPoint,
)
from dropout_client.services.risk import RiskLevel, RISK_SCORES, classify_semester_status

logger = logging.getLogger(__name__)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """round to ndigits with halves going up (77.5 -> 78, -2.5 -> -2)"""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def _percent_change(values: pd.Series) -> float:
    """percent change between the last two values by position.
    zero when there is no previous value or it is zero."""
    if len(values) < 2:
        return 0.0
    latest = float(values.iloc[-1])
    previous = float(values.iloc[-2])
    if previous == 0:
        return 0.0
    return round_half_up((latest - previous) / previous * 100, 1)


def _as_records(records: Iterable[Any]) -> list[SemesterRecord]:
    return [r if isinstance(r, SemesterRecord) else SemesterRecord.model_validate(r) for r in records]


def transform(records: Iterable[Any], student: Optional[StudentProfile] = None) -> DashboardAnalytics:
    """aggregate semester records (oldest first) into dashboard analytics.
    absent gpa/attendance values count as zero and stay in the denominator."""
    semesters = _as_records(records)
    if not semesters:
        raise EmptyInputError("No semester records reported")

    df = pd.DataFrame({
        "semester": [s.semester for s in semesters],
        "gpa": [s.gpa for s in semesters],
        "attendance": [s.attendance_percentage for s in semesters],
        "risk_level": [classify_semester_status(s.risk_status).value for s in semesters],
    })
    gpa = pd.to_numeric(df["gpa"], errors="coerce").fillna(0.0)
    attendance = pd.to_numeric(df["attendance"], errors="coerce").fillna(0.0)

    # risk breakdown as a share of all semesters, no renormalisation
    total = len(df)
    counts = df["risk_level"].value_counts()
    distribution = RiskDistribution(
        low=round_half_up(int(counts.get(RiskLevel.SAFE.value, 0)) / total * 100, 1),
        medium=round_half_up(int(counts.get(RiskLevel.WARNING.value, 0)) / total * 100, 1),
        high=round_half_up(int(counts.get(RiskLevel.AT_RISK.value, 0)) / total * 100, 1),
    )

    trends = [
        TrendPoint(
            month=f"Sem {semester}",
            gpa=float(g),
            attendance=float(a),
            riskScore=RISK_SCORES[RiskLevel(level)],
        )
        for semester, g, a, level in zip(df["semester"], gpa, attendance, df["risk_level"])
    ]

    return DashboardAnalytics(
        avgGpa=round_half_up(float(gpa.mean()), 2),
        avgAttendance=int(round_half_up(float(attendance.mean()))),
        gpaChange=_percent_change(gpa),
        attendanceChange=_percent_change(attendance),
        riskDistribution=distribution,
        monthlyTrends=trends,
        student=student,
        rawDashboard=semesters,
    )


def transform_payload(payload: Any) -> DashboardAnalytics:
    """aggregate a GET /api/dashboard/student/{userId} body ({student, dashboard})
    or a bare list of semester records"""
    if isinstance(payload, list):
        return transform(payload)

    parsed = StudentDashboardPayload.model_validate(payload)
    logger.info(f"Aggregating {len(parsed.dashboard)} semester records")
    return transform(parsed.dashboard, student=parsed.student)
