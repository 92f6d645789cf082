"""Classic algorithms: sorting and its timing, greedy selection, graphs, peaks and maths routines."""

__version__ = "0.1.0"

__all__ = ["benchmark", "graphs", "greedy", "maths", "peaks", "sorting"]