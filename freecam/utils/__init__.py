# --- FILE: freecam/utils/__init__.py
"""
Utilities package marker: settings, config loading, logging and crash reports.
"""
__all__ = ["settings", "config", "logging_setup", "error_report"]
