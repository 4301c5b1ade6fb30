"""Investment growth calculator: historical CAGR, projections and chart data for a fund."""

__version__ = "1.0.0"
