# demo datasets shown when the backend cannot be reached
# hand-authored snapshots of plausible values. built fresh on every call so
# a screen session can never mutate a shared copy.

from dropout_client.models.counselor import CounselorDashboard
from dropout_client.models.dashboard import DashboardAnalytics


def demo_dashboard() -> DashboardAnalytics:
    return DashboardAnalytics.model_validate({
        "avgGpa": 3.42,
        "avgAttendance": 87,
        "gpaChange": 2.3,
        "attendanceChange": -1.5,
        "riskDistribution": {"Low": 62.7, "Medium": 18.0, "High": 19.3},
        "monthlyTrends": [
            {"month": "Jan", "gpa": 3.2, "attendance": 85, "riskScore": 25},
            {"month": "Feb", "gpa": 3.3, "attendance": 87, "riskScore": 23},
            {"month": "Mar", "gpa": 3.1, "attendance": 82, "riskScore": 28},
            {"month": "Apr", "gpa": 3.4, "attendance": 89, "riskScore": 21},
            {"month": "May", "gpa": 3.5, "attendance": 91, "riskScore": 19},
            {"month": "Jun", "gpa": 3.3, "attendance": 88, "riskScore": 22},
        ],
        "student": {"name": "Demo Student"},
        "rawDashboard": [],
    })


def demo_counselor_dashboard() -> CounselorDashboard:
    return CounselorDashboard.model_validate({
        "counselor": {
            "userId": "CNS001",
            "name": "Dr. Sarah Wilson",
            "department": "Computer Science",
        },
        "students": [
            {
                "studentId": "STU2024001", "name": "Sarah Johnson", "course": "Computer Science",
                "year": 2, "currentSemester": 3, "currentGpa": 2.3, "currentAttendance": 65,
                "currentBacklogs": 2, "currentRiskStatus": "High Risk", "totalSemesters": 3,
            },
            {
                "studentId": "STU2024002", "name": "Michael Chen", "course": "Business Admin",
                "year": 1, "currentSemester": 2, "currentGpa": 2.8, "currentAttendance": 78,
                "currentBacklogs": 1, "currentRiskStatus": "Medium Risk", "totalSemesters": 2,
            },
            {
                "studentId": "STU2024003", "name": "Emma Wilson", "course": "Engineering",
                "year": 2, "currentSemester": 4, "currentGpa": 3.7, "currentAttendance": 95,
                "currentBacklogs": 0, "currentRiskStatus": "Low Risk", "totalSemesters": 4,
            },
            {
                "studentId": "STU2024004", "name": "David Rodriguez", "course": "Mathematics",
                "year": 1, "currentSemester": 1, "currentGpa": 1.9, "currentAttendance": 45,
                "currentBacklogs": 3, "currentRiskStatus": "High Risk", "totalSemesters": 1,
            },
            {
                "studentId": "STU2024005", "name": "Lisa Park", "course": "Physics",
                "year": 2, "currentSemester": 3, "currentGpa": 3.1, "currentAttendance": 82,
                "currentBacklogs": 0, "currentRiskStatus": "Medium Risk", "totalSemesters": 3,
            },
        ],
        "summary": {
            "totalStudents": 5,
            "avgGpa": 2.76,
            "avgAttendance": 73,
            "riskCounts": {"safe": 1, "warning": 2, "atRisk": 2},
            "riskDistribution": {"safe": 20.0, "warning": 40.0, "atRisk": 40.0},
        },
    })
