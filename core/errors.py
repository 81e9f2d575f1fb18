"""Custom errors with tracking IDs."""

import uuid

from utils.timestamp import format_timestamp


class GLIDError(Exception):
    """Base error with unique ID and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.message = message
        self.error_id = uuid.uuid4().hex
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {self.message}"


class ValidationError(GLIDError):
    """Rejected caller input. Returned in a MakeResult, not raised by make()."""

    def __init__(self, message, value=None, **kwargs):
        context = kwargs.pop("context", {})
        context["value"] = value
        super().__init__(message, context=context, **kwargs)
        self.value = value


class InvalidBlockID(ValidationError):
    """block_id outside (0, 100)."""

    def __init__(self, value=None, **kwargs):
        super().__init__("block_id must be in the range (0,100)", value=value, **kwargs)


class InvalidTimestamp(ValidationError):
    """unixtime not an integer or not representable as a calendar time."""

    def __init__(self, value=None, **kwargs):
        super().__init__("unixtime is invalid", value=value, **kwargs)


class NamespaceNotInitialized(GLIDError, KeyError):
    """Seed requested for a namespace whose counter was never created."""

    def __init__(self, namespace, **kwargs):
        context = kwargs.pop("context", {})
        context["namespace"] = repr(namespace)
        super().__init__(f"namespace {namespace!r} was not initialized", context=context, **kwargs)
        self.namespace = namespace
