# shared fixtures for client tests
# provides a fake backend (fastapi app served over httpx ASGITransport),
# sqlite storage in tmp_path, and fully wired clients

import pytest
import pytest_asyncio
from dataclasses import dataclass, field
from typing import Any, Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from dropout_client.main import DropoutClient
from dropout_client.models.user import UserProfile
from dropout_client.services.gateway import RemoteGateway
from dropout_client.services.session_store import SessionStore
from dropout_client.services.storage import LocalStorage


# test accounts

STUDENT_ID = "STU2024001"
COUNSELOR_ID = "CNS001"
STUDENT_TOKEN = "student-token"
COUNSELOR_TOKEN = "counselor-token"
PASSWORD = "Demo123!"

STUDENT_USER = {"userId": STUDENT_ID, "name": "Sarah Johnson", "role": "student", "email": "sarah@student.com"}
COUNSELOR_USER = {"userId": COUNSELOR_ID, "name": "Dr. Sarah Wilson", "role": "counselor", "email": "wilson@uni.edu"}


# sample data

SEMESTERS = [
    {"semester": 1, "gpa": 3.2, "cgpa": 3.2, "attendancePercentage": 85, "backlogs": 0, "riskStatus": "Safe"},
    {"semester": 2, "gpa": 2.8, "cgpa": 3.0, "attendancePercentage": 70, "backlogs": 1, "riskStatus": "Warning"},
]

ROSTER = [
    {
        "studentId": "STU2024001", "name": "Sarah Johnson", "course": "Computer Science",
        "year": 2, "currentSemester": 3, "currentGpa": 2.4, "currentAttendance": 65,
        "currentBacklogs": 2, "currentRiskStatus": "High Risk", "totalSemesters": 3,
    },
    {
        "studentId": "STU2024002", "name": "Michael Chen", "course": "Business Admin",
        "year": 1, "currentSemester": 2, "currentGpa": 2.8, "currentAttendance": 78,
        "currentBacklogs": 1, "currentRiskStatus": "Warning", "totalSemesters": 2,
    },
    {
        "studentId": "STU2024003", "name": "Emma Wilson", "course": "Engineering",
        "year": 2, "currentSemester": 4, "currentGpa": 3.6, "currentAttendance": 95,
        "currentBacklogs": 0, "currentRiskStatus": "Safe", "totalSemesters": 4,
    },
    {
        "studentId": "STU2024004", "name": "David Rodriguez", "course": "Mathematics",
        "year": 1, "currentSemester": 1, "currentGpa": 2.0, "currentAttendance": 46,
        "currentBacklogs": 3, "currentRiskStatus": "at risk", "totalSemesters": 1,
    },
]


def semester(n: int, gpa: Optional[float] = 3.0, attendance: Optional[float] = 80, risk: Optional[str] = "Safe") -> dict:
    """build one semester record dict"""
    return {"semester": n, "gpa": gpa, "attendancePercentage": attendance, "backlogs": 0, "riskStatus": risk}


def roster_entry(student_id: str, gpa=3.0, attendance=80, risk="Safe") -> dict:
    """build one roster entry dict"""
    return {
        "studentId": student_id, "name": f"Student {student_id}", "course": "Physics",
        "year": 1, "currentSemester": 1, "currentGpa": gpa, "currentAttendance": attendance,
        "currentBacklogs": 0, "currentRiskStatus": risk, "totalSemesters": 1,
    }


# fake backend

@dataclass
class BackendState:
    """knobs and recordings for the fake backend"""
    dashboards: dict = field(default_factory=lambda: {STUDENT_ID: {"student": {"studentId": STUDENT_ID, "name": "Sarah Johnson"}, "dashboard": list(SEMESTERS)}})
    counselor_payload: Any = field(default_factory=lambda: {"counselor": {"userId": COUNSELOR_ID, "name": "Dr. Sarah Wilson"}, "students": list(ROSTER)})
    dashboard_status: int = 200
    logout_status: int = 200
    chat_status: int = 200
    reset_token: Optional[str] = "reset-abc"
    calls: list = field(default_factory=list)


def _error(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"message": message})


def build_backend(state: BackendState) -> FastAPI:
    app = FastAPI()
    tokens = {STUDENT_TOKEN: STUDENT_USER, COUNSELOR_TOKEN: COUNSELOR_USER}

    def bearer_user(request: Request):
        header = request.headers.get("authorization", "")
        return tokens.get(header.removeprefix("Bearer ").strip())

    @app.middleware("http")
    async def record_calls(request: Request, call_next):
        state.calls.append((request.method, request.url.path, request.url.hostname))
        return await call_next(request)

    @app.post("/auth/signin")
    async def signin(request: Request):
        body = await request.json()
        if body.get("password") != PASSWORD:
            return _error(401, "Invalid credentials")
        if body.get("email") == COUNSELOR_USER["email"] or body.get("userId") == COUNSELOR_ID:
            return {"message": "Login successful", "user": COUNSELOR_USER, "token": COUNSELOR_TOKEN}
        if body.get("email") == STUDENT_USER["email"] or body.get("userId") == STUDENT_ID:
            return {"message": "Login successful", "user": STUDENT_USER, "token": STUDENT_TOKEN}
        return _error(404, "User not found")

    @app.post("/auth/signup")
    async def signup(request: Request):
        body = await request.json()
        return JSONResponse(status_code=201, content={"message": "User created", "userId": "STU9", "role": body.get("role")})

    @app.post("/auth/logout")
    async def logout(request: Request):
        if state.logout_status != 200:
            return _error(state.logout_status, "Logout failed")
        return {"message": "Logged out"}

    @app.get("/auth/profile")
    async def profile(request: Request):
        user = bearer_user(request)
        if user is None:
            return _error(401, "Invalid token")
        return {"user": user}

    @app.post("/auth/forgot-password")
    async def forgot_password(request: Request):
        body = await request.json()
        if "@" not in body.get("email", ""):
            return JSONResponse(status_code=400, content={"error": "Invalid email"})
        content = {"message": "Reset email sent"}
        if state.reset_token:
            content["resetToken"] = state.reset_token
        return content

    @app.post("/auth/reset-password")
    async def reset_password(request: Request):
        body = await request.json()
        if body.get("token") != state.reset_token:
            return _error(400, "Reset token is invalid or expired")
        return {"message": "Password updated"}

    @app.get("/api/dashboard/student/{user_id}")
    async def student_dashboard(user_id: str, request: Request):
        if bearer_user(request) is None:
            return _error(401, "Invalid token")
        if state.dashboard_status != 200:
            return _error(state.dashboard_status, "Dashboard unavailable")
        if user_id not in state.dashboards:
            return _error(404, "Student not found")
        return state.dashboards[user_id]

    @app.get("/api/counselor/dashboard")
    async def counselor_dashboard(request: Request):
        user = bearer_user(request)
        if user is None or user["role"] != "counselor":
            return _error(403, "Counselor access required")
        if state.dashboard_status != 200:
            return _error(state.dashboard_status, "Dashboard unavailable")
        return state.counselor_payload

    @app.post("/chat")
    async def chat(request: Request):
        body = await request.json()
        if state.chat_status != 200:
            return JSONResponse(status_code=state.chat_status, content={"error": "Chatbot offline"})
        return {"reply": f"You said: {body['message']}"}

    return app


@pytest.fixture
def backend_state():
    """fresh fake backend state for each test"""
    return BackendState()


@pytest.fixture
def transport(backend_state):
    return httpx.ASGITransport(app=build_backend(backend_state))


# storage and stores

@pytest_asyncio.fixture
async def storage(tmp_path):
    """sqlite storage in a temp dir, closed after the test"""
    store = LocalStorage(str(tmp_path / "storage.db"))
    await store.connect()
    yield store
    await store.close()


@pytest.fixture
def session(storage):
    return SessionStore(storage)


@pytest_asyncio.fixture
async def gateway(session, transport):
    """gateway talking to the fake backend"""
    gw = RemoteGateway(session, api_base_url="http://api.test", chat_base_url="http://chat.test", transport=transport)
    await gw.connect()
    yield gw
    await gw.close()


@pytest_asyncio.fixture
async def student_session(session):
    """session store signed in as the test student"""
    await session.save(STUDENT_TOKEN, UserProfile.model_validate(STUDENT_USER))
    return session


@pytest_asyncio.fixture
async def counselor_session(session):
    """session store signed in as the test counselor"""
    await session.save(COUNSELOR_TOKEN, UserProfile.model_validate(COUNSELOR_USER))
    return session


@pytest_asyncio.fixture
async def client(tmp_path, transport):
    """fully wired client against the fake backend, notices collected in client.notices"""
    notices = []
    app_client = DropoutClient(
        storage_path=str(tmp_path / "client.db"),
        api_base_url="http://api.test",
        chat_base_url="http://chat.test",
        transport=transport,
        notify=notices.append,
    )
    app_client.notices = notices
    await app_client.start()
    yield app_client
    await app_client.shutdown()
