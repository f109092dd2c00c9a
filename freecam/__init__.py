# --- FILE: freecam/__init__.py
"""
Top-level package marker for freecam, a 2D viewport camera controller.

Having an __init__ here ensures imports like
`from freecam.utils.settings import ...` work consistently on all environments,
including tools and test runners that don't inject the project root to sys.path.
"""
__all__ = ["core", "utils"]
