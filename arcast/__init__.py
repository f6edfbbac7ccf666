"""Read podcast RSS feeds and give their episodes tidy, dated filenames."""

__version__ = "0.1.0"