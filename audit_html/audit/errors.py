"""Exceptions raised while turning an audit document into an HTML report.

Core functions raise these; only the CLI turns them into log lines and
process exit codes.
"""


class AuditReportError(Exception):
    pass


class AuditParseError(AuditReportError, ValueError):
    """Input text is not valid JSON."""


class OutputFolderNotFoundError(AuditReportError):
    def __init__(self, folder: str):
        super().__init__(f"The provided folder does not exist: {folder}")
        self.folder = folder


class ReportWriteError(AuditReportError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Unable to write to file {path}: {reason}")
        self.path = path
        self.reason = reason
