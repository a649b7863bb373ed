"""Number menus, prompts, package target splitting, orphan detection and stdio redirection."""

__version__ = "0.1.0"