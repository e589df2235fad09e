"""gootrago - translate text and CSV files with Google Cloud Translation."""

__version__ = "0.1.0"
