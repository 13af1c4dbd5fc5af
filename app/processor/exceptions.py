class ReportPipelineError(Exception):
    """Base exception for all report pipeline errors."""


class InputError(ReportPipelineError):
    """Raised when the caller sent no document or a malformed one."""


class ConfigurationError(ReportPipelineError):
    """Raised when the deployment is missing something the pipeline needs."""


class ExtractionError(ReportPipelineError):
    """Raised when a document yields neither usable text nor an image."""
