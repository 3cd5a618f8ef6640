"""Projects, their tasks, plain-text reports and an interactive console menu."""

__version__ = "0.1.0"
__all__ = ["tasks", "projects", "report", "cli"]