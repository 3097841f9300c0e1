# This project was developed with assistance from AI tools.
"""RFC 7807 Problem Details error response schema.

Every non-2xx response from the service carries this body; the business
condition (``"empty cache"``, ``"choose program"``, ...) is in ``detail``.
"""

from pydantic import BaseModel, Field

_HTTP_STATUS_TITLES: dict[int, str] = {
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
}


class ErrorResponse(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    See https://datatracker.ietf.org/doc/html/rfc7807
    """

    type: str = Field(
        default="about:blank",
        description="URI reference identifying the problem type.",
    )
    title: str = Field(description="Short human-readable summary of the problem.")
    status: int = Field(description="HTTP status code.")
    detail: str = Field(
        default="",
        description="Human-readable explanation specific to this occurrence.",
    )
    request_id: str = Field(
        default="",
        description="Correlation ID for tracing this request in logs.",
    )
    instance: str = Field(
        default="",
        description="Request path that produced the problem.",
    )

    @classmethod
    def for_status(
        cls, status_code: int, detail: str, *, request_id: str, instance: str = ""
    ) -> "ErrorResponse":
        return cls(
            title=_HTTP_STATUS_TITLES.get(status_code, "Error"),
            status=status_code,
            detail=detail,
            request_id=request_id,
            instance=instance,
        )
