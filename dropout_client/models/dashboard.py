# dashboard models — semester records in, student analytics out
# wire format is the backend's camelCase json

from typing import Optional
from pydantic import BaseModel, Field


class SemesterRecord(BaseModel):
    """one reporting period's academic metrics for a student (backend-owned)"""
    semester: int = Field(..., ge=1)
    gpa: Optional[float] = Field(None, ge=0.0, le=4.0)
    cgpa: Optional[float] = None
    attendance_percentage: Optional[float] = Field(None, alias="attendancePercentage", ge=0.0, le=100.0)
    backlogs: int = Field(0, ge=0)
    risk_status: Optional[str] = Field("", alias="riskStatus")

    model_config = {"populate_by_name": True}


class StudentProfile(BaseModel):
    student_id: Optional[str] = Field(None, alias="studentId")
    name: str = ""
    course: Optional[str] = None
    year: Optional[int] = None

    model_config = {"populate_by_name": True, "extra": "allow"}


class RiskDistribution(BaseModel):
    """percentage of semesters per risk bucket"""
    low: float = Field(0.0, alias="Low")
    medium: float = Field(0.0, alias="Medium")
    high: float = Field(0.0, alias="High")

    model_config = {"populate_by_name": True}

    def total(self) -> float:
        return self.low + self.medium + self.high


class TrendPoint(BaseModel):
    """one semester on the trend chart"""
    month: str
    gpa: float
    attendance: float
    risk_score: int = Field(..., alias="riskScore")

    model_config = {"populate_by_name": True}


class DashboardAnalytics(BaseModel):
    """derived per-load student analytics, never persisted"""
    avg_gpa: float = Field(0.0, alias="avgGpa")
    avg_attendance: int = Field(0, alias="avgAttendance")
    gpa_change: float = Field(0.0, alias="gpaChange")
    attendance_change: float = Field(0.0, alias="attendanceChange")
    risk_distribution: RiskDistribution = Field(default_factory=RiskDistribution, alias="riskDistribution")
    monthly_trends: list[TrendPoint] = Field(default_factory=list, alias="monthlyTrends")
    student: Optional[StudentProfile] = None
    raw_dashboard: list[SemesterRecord] = Field(default_factory=list, alias="rawDashboard")

    model_config = {"populate_by_name": True}

    @property
    def latest(self) -> Optional[SemesterRecord]:
        """latest record by position, not by semester number"""
        return self.raw_dashboard[-1] if self.raw_dashboard else None


class StudentDashboardPayload(BaseModel):
    """body of GET /api/dashboard/student/{userId}"""
    student: Optional[StudentProfile] = None
    dashboard: list[SemesterRecord] = Field(default_factory=list)

    model_config = {"populate_by_name": True, "extra": "ignore"}
