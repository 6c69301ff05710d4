from .api import AckAckClient
from .auth import AuthStrategy, BearerTokenAuth, HeaderAuth
from .client import APIClient
from .config import DEFAULT_BASE_URL, APIConfig
from .exceptions import (
    AckAckError, APIError, ClientError, ConfigurationError, MaxRetriesExceededError, PaginationError,
    RateLimitError, RequestEncodeError, RequestFailedError, ResponseDecodeError, ServerError,
    is_bad_request_error, is_forbidden_error, is_not_found_error, is_rate_limit_error, is_unauthorized_error,
)
from .logging_config import configure_structlog
from .models import (
    Alert, CreateAlertRequest, CreateMonitorRequest, CreateReportRequest, CreateSystemRequest, ExternalLink,
    GetUptimeResponse, Incident, ListNotificationHistoryResponse, ListReportsResponse, Monitor, MonitorHealthInfo,
    MonitorHealthResponse, MonitorResult, NotificationHistory, Report, System, SystemWithStats, UpdateAlertRequest,
    UpdateMonitorRequest, UpdateSystemRequest,
)

__version__ = "0.1.0"
