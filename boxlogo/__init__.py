"""Box logo batch generator: CSV rows -> two-layer PNG logos."""

__version__ = "0.1.0"
