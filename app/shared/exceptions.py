from fastapi import HTTPException, status


class CredentialsException(HTTPException):
    """Exception for invalid credentials."""

    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class NotFoundException(HTTPException):
    """Exception for resource not found."""

    def __init__(self, detail: str = "Resource not found"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )


class BadRequestException(HTTPException):
    """Exception for bad request."""

    def __init__(self, detail: str = "Bad request"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )


class ConflictException(HTTPException):
    """Exception for resource conflict."""

    def __init__(self, detail: str = "Resource already exists"):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
        )


# ============ REPORT ANALYSIS ERRORS ============

class AnalysisError(Exception):
    """Base class for failures inside the report analysis pipeline."""

    stage = "analysis"


class IngestionError(AnalysisError):
    """The uploaded file could not be read or encoded."""

    stage = "ingestion"


class InferenceError(AnalysisError):
    """The inference service could not be called or returned nothing."""

    stage = "invocation"


class ExtractionError(AnalysisError):
    """No JSON-like span was found in the model output."""

    stage = "extraction"


class ResponseParseError(AnalysisError):
    """The extracted span is not well-formed JSON."""

    stage = "parse"


class ResponseValidationError(AnalysisError):
    """The parsed value does not match the analysis result schema."""

    stage = "validation"


class AnalysisClientError(Exception):
    """The analysis endpoint could not be reached or sent an unreadable reply."""
