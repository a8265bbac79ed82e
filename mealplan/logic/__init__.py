"""Core planning logic.

Subpackages:
- prompting: generation prompt and household age summary
- parsing: repair/normalization of model output
- calendar: day entries -> all-day events, sequential submission
- planning: generation and submission cycles wiring the above together

Nothing here imports the web layer or performs I/O on its own.
"""
__all__ = ["prompting", "parsing", "calendar", "planning"]
