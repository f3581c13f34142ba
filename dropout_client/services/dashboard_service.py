# dashboard loaders — bind gateway fetches and aggregators to the resilience shim
# one loader per dashboard screen; each screen session gets its own shim and fallback

import logging
from typing import Callable, Optional

from dropout_client import demo_data
from dropout_client.errors import Unauthenticated
from dropout_client.models.counselor import CounselorDashboard
from dropout_client.models.dashboard import DashboardAnalytics
from dropout_client.services import counselor_aggregator, dashboard_aggregator
from dropout_client.services.gateway import RemoteGateway
from dropout_client.services.resilience import AnalyticsView, LoadResult, Notice, ResilienceShim
from dropout_client.services.session_store import SessionStore

logger = logging.getLogger(__name__)


class DashboardService:

    def __init__(
        self,
        gateway: RemoteGateway,
        session: SessionStore,
        notify: Optional[Callable[[Notice], None]] = None,
    ):
        self.gateway = gateway
        self.session = session
        self.notify = notify

    # fetchers

    async def fetch_student_dashboard(self):
        profile = await self.session.load_profile()
        if profile is None:
            raise Unauthenticated("No signed-in student profile found")
        return await self.gateway.get_student_dashboard(profile.user_id)

    async def fetch_counselor_dashboard(self):
        return await self.gateway.get_counselor_dashboard()

    # screen sessions

    def student_view(self, fallback: Optional[DashboardAnalytics] = None) -> AnalyticsView[DashboardAnalytics]:
        shim = ResilienceShim(
            fallback if fallback is not None else demo_data.demo_dashboard(), notify=self.notify,
        )
        return AnalyticsView(shim, self.fetch_student_dashboard, dashboard_aggregator.transform_payload)

    def counselor_view(self, fallback: Optional[CounselorDashboard] = None) -> AnalyticsView[CounselorDashboard]:
        shim = ResilienceShim(
            fallback if fallback is not None else demo_data.demo_counselor_dashboard(), notify=self.notify,
        )
        return AnalyticsView(shim, self.fetch_counselor_dashboard, counselor_aggregator.transform_payload)

    # one-shot loads

    async def load_student(self) -> LoadResult[DashboardAnalytics]:
        view = self.student_view()
        return await view.shim.load(view.fetcher, view.transformer)

    async def load_counselor(self) -> LoadResult[CounselorDashboard]:
        view = self.counselor_view()
        return await view.shim.load(view.fetcher, view.transformer)
