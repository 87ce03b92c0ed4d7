"""AgroAdvisor — crop, treatment and soil-health advisory engine."""

__version__ = "0.1.0"
