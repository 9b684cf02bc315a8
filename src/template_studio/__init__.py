"""template-studio -- template-driven marketing asset generation sessions."""

__version__ = '0.1.0'
