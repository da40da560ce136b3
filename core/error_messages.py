"""
Canonical error messages

Fixed vocabulary keyed by operation. Service errors are built as
``"<message> with status <code>: <reason>"`` so a failing test names the
endpoint and the condition at a glance.
"""


class ErrorMessages:
    """Error message vocabulary grouped by operation"""

    class AUTH:
        FAILED = "Authentication failed"
        NO_TOKEN = "No token received in authentication response"
        SETUP_FAILED = "Authentication setup failed"

    class HEALTH:
        FAILED = "Health check failed"

    class BOOKING:
        GET_FAILED = "Failed to get booking"
        GET_IDS_FAILED = "Failed to get booking IDs"
        CREATE_FAILED = "Failed to create booking"
        UPDATE_FAILED = "Failed to update booking"
        PARTIAL_UPDATE_FAILED = "Failed to partially update booking"
        DELETE_FAILED = "Failed to delete booking"
        SCHEMA_INVALID = "Booking response failed schema validation"
        # Body the booker API sends with its 500 responses
        INTERNAL_SERVER_ERROR = "Internal Server Error"

    class GENERIC:
        UNKNOWN = "Unknown error occurred"


def format_status_error(message: str, status_code: int, status_text: str) -> str:
    """Build the message carried by a failed-status service error"""
    return f"{message} with status {status_code}: {status_text}"


__all__ = ["ErrorMessages", "format_status_error"]
