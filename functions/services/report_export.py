"""CSV export for analytics reports."""

import csv
import io
from typing import Iterable

from models.analytics import AdminDashboardMetrics, UserActivityReport

TIME_SERIES_COLUMNS = ["date", "users", "searches", "enquiries", "revenue"]
USER_ACTIVITY_COLUMNS = [
    "userId",
    "role",
    "totalLogins",
    "lastLogin",
    "totalSearches",
    "totalEnquiries",
    "totalPayments",
    "totalSpent",
]


def export_time_series_csv(metrics: AdminDashboardMetrics) -> str:
    """Dashboard time series as CSV, one row per day."""
    series = metrics.time_series
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(TIME_SERIES_COLUMNS)

    for users, searches, enquiries, revenue in zip(
        series.users, series.searches, series.enquiries, series.revenue
    ):
        writer.writerow([
            users.date,
            users.value,
            searches.value,
            enquiries.value,
            revenue.value,
        ])

    return buffer.getvalue()


def export_user_activity_csv(reports: Iterable[UserActivityReport]) -> str:
    """User activity reports as CSV, one row per user."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(USER_ACTIVITY_COLUMNS)

    for report in reports:
        writer.writerow([
            report.user_id,
            report.role or "",
            report.total_logins,
            report.last_login.isoformat() if report.last_login else "",
            report.total_searches,
            report.total_enquiries,
            report.total_payments,
            report.total_spent,
        ])

    return buffer.getvalue()
