"""Generate C4 architecture documents, diagrams and reports from module documentation."""

__version__ = "0.3.0"