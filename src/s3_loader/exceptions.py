"""Custom exceptions for the S3 document loader."""


class S3LoaderError(Exception):
    """Base exception for all s3-loader errors."""

    def __init__(self, message: str, request_id: str | None = None):
        self.message = message
        self.request_id = request_id
        super().__init__(message)

    def __str__(self) -> str:
        if self.request_id:
            return f"{self.message} (request_id: {self.request_id})"
        return self.message


class ClientInitializationError(S3LoaderError):
    """Storage client, region or credential configuration could not be resolved."""
    pass


class ObjectFetchError(S3LoaderError):
    """The get-object call failed (missing object, access denied, network)."""

    def __init__(
        self,
        message: str,
        bucket: str | None = None,
        key: str | None = None,
        error_code: str | None = None,
        request_id: str | None = None,
    ):
        super().__init__(message, request_id)
        self.bucket = bucket
        self.key = key
        self.error_code = error_code


class ObjectNotFoundError(ObjectFetchError):
    """Bucket or key does not exist (404)."""
    pass


class ObjectAccessDeniedError(ObjectFetchError):
    """Access to the bucket or key was denied (403)."""
    pass


class UnsupportedFormatError(S3LoaderError):
    """Object key suffix has no registered document loader."""

    def __init__(self, message: str, key: str, supported: list[str] | None = None):
        super().__init__(message)
        self.key = key
        self.supported = supported or []


class BodyReadError(S3LoaderError):
    """Reading the object body failed mid-transfer."""
    pass


class DocumentParseError(S3LoaderError):
    """The document loader could not extract text from the payload."""
    pass


NOT_FOUND_CODES = frozenset({"NoSuchKey", "NoSuchBucket", "NotFound", "404"})
ACCESS_DENIED_CODES = frozenset({"AccessDenied", "Forbidden", "403"})


def raise_for_error_code(
    error_code: str,
    message: str,
    bucket: str | None = None,
    key: str | None = None,
    request_id: str | None = None,
) -> None:
    """Raise the fetch exception matching an S3 error code."""
    if error_code in NOT_FOUND_CODES:
        raise ObjectNotFoundError(message, bucket, key, error_code, request_id)
    elif error_code in ACCESS_DENIED_CODES:
        raise ObjectAccessDeniedError(message, bucket, key, error_code, request_id)
    raise ObjectFetchError(message, bucket, key, error_code, request_id)
