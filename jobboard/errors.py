"""Error taxonomy for the job intake endpoint.

Every error carries the HTTP status it maps to and a message that is safe to
show to the poster. Internal details stay in the server log.
"""


class IntakeError(Exception):
    status_code = 500
    kind = "InternalError"
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MalformedPayload(IntakeError):
    status_code = 400
    kind = "MalformedPayload"
    default_message = "Malformed job submission payload."


class CaptchaFailed(IntakeError):
    status_code = 400
    kind = "CaptchaFailed"
    default_message = "Incorrect math answer. Please try again."


class ValidationFailed(IntakeError):
    status_code = 400
    kind = "ValidationFailed"

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(f"Missing or invalid fields: {', '.join(fields)}")


class RateLimited(IntakeError):
    status_code = 429
    kind = "RateLimited"
    default_message = "Rate limit exceeded. Please wait an hour before posting again."

    def __init__(self, retry_after_seconds: int | None = None):
        self.retry_after_seconds = retry_after_seconds
        super().__init__()


class PersistenceFailed(IntakeError):
    status_code = 500
    kind = "PersistenceFailed"
    default_message = "Failed to post job. Please try again."


class MethodNotAllowed(IntakeError):
    status_code = 405
    kind = "MethodNotAllowed"
    default_message = "Method not allowed"


class InternalError(IntakeError):
    pass
