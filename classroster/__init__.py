"""Class rosters of students, loaded from CSV text and sortable by perm number."""

__version__ = "0.1.0"
__all__ = ["roster", "student"]