from .opened_log import OpenedLogService, opened_logs

__all__ = ["OpenedLogService", "opened_logs"]
