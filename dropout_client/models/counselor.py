# counselor models — roster entries in, roster-wide analytics out

from typing import Optional
from pydantic import BaseModel, Field


class RosterEntry(BaseModel):
    """one student assigned to a counselor"""
    student_id: str = Field(..., alias="studentId")
    name: str
    course: str = ""
    year: int = 0
    current_semester: int = Field(0, alias="currentSemester")
    current_gpa: Optional[float] = Field(None, alias="currentGpa")
    current_attendance: Optional[float] = Field(None, alias="currentAttendance")
    current_backlogs: int = Field(0, alias="currentBacklogs")
    current_risk_status: Optional[str] = Field("", alias="currentRiskStatus")
    total_semesters: int = Field(0, alias="totalSemesters")

    model_config = {"populate_by_name": True}


class CounselorProfile(BaseModel):
    user_id: str = Field("", alias="userId")
    name: str = ""
    department: Optional[str] = None

    model_config = {"populate_by_name": True, "extra": "allow"}


class RiskCounts(BaseModel):
    safe: int = 0
    warning: int = 0
    at_risk: int = Field(0, alias="atRisk")

    model_config = {"populate_by_name": True}


class CounselorRiskDistribution(BaseModel):
    safe: float = 0.0
    warning: float = 0.0
    at_risk: float = Field(0.0, alias="atRisk")

    model_config = {"populate_by_name": True}


class CounselorAnalytics(BaseModel):
    """roster-wide summary statistics"""
    total_students: int = Field(0, alias="totalStudents")
    avg_gpa: float = Field(0.0, alias="avgGpa")
    avg_attendance: int = Field(0, alias="avgAttendance")
    risk_counts: RiskCounts = Field(default_factory=RiskCounts, alias="riskCounts")
    risk_distribution: CounselorRiskDistribution = Field(
        default_factory=CounselorRiskDistribution, alias="riskDistribution"
    )
    unclassified: int = 0

    model_config = {"populate_by_name": True}


class CounselorDashboard(BaseModel):
    """everything the counselor screen renders"""
    counselor: CounselorProfile = Field(default_factory=CounselorProfile)
    students: list[RosterEntry] = Field(default_factory=list)
    summary: CounselorAnalytics = Field(default_factory=CounselorAnalytics)
