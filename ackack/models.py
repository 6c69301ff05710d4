"""Request and response bodies of the ackack.io API.

Optional fields default to None and are left out of request bodies, so an
update only carries the fields that were set.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class APIModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value, info: ValidationInfo):
        # The API sends empty collections and absent objects as null
        if value is None:
            field = cls.model_fields[info.field_name]
            if not field.is_required():
                return field.get_default(call_default_factory=True)
        return value


class ErrorResponse(APIModel):
    error: Optional[str] = None
    message: Optional[str] = None


# Monitors

class MonitorFields(APIModel):
    """Fields shared by monitors and their create/update requests"""
    is_enabled: Optional[bool] = None
    frequency_seconds: Optional[int] = None
    timeout_ms: Optional[int] = None
    retries: Optional[int] = None
    general_region: Optional[str] = None
    specific_region: Optional[str] = None

    # HTTP
    url: Optional[str] = None
    expected_status_code: Optional[int] = None
    validate_status: Optional[bool] = None
    validate_body: Optional[bool] = None
    body_pattern: Optional[str] = None
    headers: Optional[str] = None

    # DNS
    dns_record_type: Optional[str] = None
    expected_value: Optional[str] = None
    nameserver: Optional[str] = None

    # TCP
    host: Optional[str] = None
    port: Optional[int] = None

    # SSL
    domain: Optional[str] = None
    check_expiration_threshold: Optional[bool] = None
    expiration_threshold: Optional[int] = None
    check_protocol_version: Optional[bool] = None
    minimum_protocol: Optional[str] = None


class Monitor(MonitorFields):
    id: Optional[str] = None
    user_id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    uptime_percentage: Optional[float] = None
    last_checked: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class CreateMonitorRequest(MonitorFields):
    name: str
    type: str


class UpdateMonitorRequest(MonitorFields):
    name: Optional[str] = None
    type: Optional[str] = None


class ListMonitorsResponse(APIModel):
    monitors: List[Monitor] = Field(default_factory=list)
    total: int = 0


class MonitorResult(APIModel):
    id: Optional[int] = None
    monitor_id: Optional[str] = None
    status: Optional[str] = None
    response_time: Optional[int] = None
    response_size_bytes: Optional[int] = None
    timestamp: Optional[str] = None
    region: Optional[str] = None
    worker_id: Optional[str] = None
    message: Optional[str] = None
    error_type: Optional[str] = None
    status_code: Optional[int] = None
    dns_response: Optional[str] = None
    tls_version: Optional[str] = None
    certificate_expiration_days: Optional[int] = None


class GetResultsResponse(APIModel):
    results: List[MonitorResult] = Field(default_factory=list)
    total: int = 0


class GetUptimeResponse(APIModel):
    monitor_id: str = ""
    hours: int = 0
    uptime: float = 0.0


class Incident(APIModel):
    id: Optional[str] = None
    monitor_id: Optional[str] = None
    status: Optional[str] = None
    severity: Optional[str] = None
    summary: Optional[str] = None
    details: Optional[str] = None
    first_error_id: Optional[str] = None
    started_at: Optional[str] = None
    resolved_at: Optional[str] = None
    duration_seconds: Optional[int] = None
    notified: Optional[bool] = None


class GetIncidentsResponse(APIModel):
    incidents: List[Incident] = Field(default_factory=list)


class MonitorHealthInfo(APIModel):
    monitor_id: Optional[str] = None
    monitor_name: Optional[str] = None
    is_in_flight: Optional[bool] = None
    in_flight_seconds: Optional[float] = None
    throttled: Optional[bool] = None
    throttle_reason: Optional[str] = None
    dampening_level: Optional[int] = None
    dampening_name: Optional[str] = None
    dampening_reason: Optional[str] = None
    failure_rate: Optional[float] = None
    p95_latency_ms: Optional[int] = None
    stuck_count: Optional[int] = None


class UserHealthSummary(APIModel):
    plan: Optional[str] = None
    in_flight_count: Optional[int] = None
    in_flight_limit: Optional[int] = None
    at_limit: Optional[bool] = None
    throttled_count: Optional[int] = None
    dampened_count: Optional[int] = None


class MonitorHealthResponse(APIModel):
    monitors: List[MonitorHealthInfo] = Field(default_factory=list)
    user: UserHealthSummary = Field(default_factory=UserHealthSummary)


# Alerts

class Alert(APIModel):
    id: Optional[str] = None
    user_id: Optional[str] = None
    monitor_id: Optional[str] = None
    type: Optional[str] = None
    target: Optional[str] = None
    is_enabled: Optional[bool] = None
    trigger_threshold: Optional[int] = None
    recovery_threshold: Optional[int] = None
    min_interval_minutes: Optional[int] = None
    custom_message: Optional[str] = None
    include_details: Optional[bool] = None
    last_triggered_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class UpdateAlertRequest(APIModel):
    target: Optional[str] = None
    is_enabled: Optional[bool] = None
    trigger_threshold: Optional[int] = None
    recovery_threshold: Optional[int] = None
    min_interval_minutes: Optional[int] = None
    custom_message: Optional[str] = None
    include_details: Optional[bool] = None


class CreateAlertRequest(UpdateAlertRequest):
    monitor_id: str
    type: str
    target: str


class ListAlertsResponse(APIModel):
    alerts: List[Alert] = Field(default_factory=list)


# Systems

class ExternalLink(APIModel):
    name: Optional[str] = None
    url: Optional[str] = None


class System(APIModel):
    id: Optional[str] = None
    user_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    status: Optional[str] = None
    external_links: Optional[List[ExternalLink]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class SystemWithStats(System):
    monitor_count: Optional[int] = None
    healthy_count: Optional[int] = None
    degraded_count: Optional[int] = None
    error_count: Optional[int] = None
    warning_count: Optional[int] = None
    overall_uptime: Optional[float] = None


class UpdateSystemRequest(APIModel):
    name: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    external_links: Optional[List[ExternalLink]] = None


class CreateSystemRequest(UpdateSystemRequest):
    name: str
    # Always sent, even when empty
    monitor_ids: List[str] = Field(default_factory=list)


class ListSystemsResponse(APIModel):
    systems: List[SystemWithStats] = Field(default_factory=list)
    total: int = 0


class ModifyMonitorsRequest(APIModel):
    monitor_ids: List[str]


# Reports

class Report(APIModel):
    id: Optional[str] = None
    user_id: Optional[str] = None
    name: Optional[str] = None
    report_type: Optional[str] = None
    format: Optional[str] = None
    status: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    monitor_ids: Optional[List[str]] = None
    metrics: Optional[str] = None
    data: Optional[str] = None
    file_path: Optional[str] = None
    file_size_bytes: Optional[int] = None
    error_message: Optional[str] = None
    completed_at: Optional[str] = None
    created_at: Optional[str] = None


class CreateReportRequest(APIModel):
    name: str
    report_type: str
    format: str
    start_time: str
    end_time: str
    monitor_ids: Optional[List[str]] = None
    system_ids: Optional[List[str]] = None
    metrics: Optional[str] = None


class PageInfo(APIModel):
    total: int = 0
    page: int = 0
    page_size: int = Field(default=0, alias="pageSize")
    pages: int = 0


class ListReportsResponse(PageInfo):
    reports: List[Report] = Field(default_factory=list)


# Notifications

class NotificationHistory(APIModel):
    id: Optional[str] = None
    user_id: Optional[str] = None
    monitor_id: Optional[str] = None
    alert_id: Optional[str] = None
    incident_id: Optional[str] = None
    notification_type: Optional[str] = None
    event_type: Optional[str] = None
    destination: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None
    details: Optional[str] = None
    status: Optional[str] = None
    error_message: Optional[str] = None
    response_code: Optional[int] = None
    response_body: Optional[str] = None
    delivery_attempts: Optional[int] = None
    sent_at: Optional[str] = None
    last_attempt_at: Optional[str] = None
    created_at: Optional[str] = None


class ListNotificationHistoryResponse(PageInfo):
    notifications: List[NotificationHistory] = Field(default_factory=list)
