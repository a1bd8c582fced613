"""Scale the power readings in TCX activity files."""

__version__ = '1.0.0'
