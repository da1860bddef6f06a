"""cmdrepair package: command-line repair and dispatch in front of the native launcher.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
