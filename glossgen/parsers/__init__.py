"""Glossary record sources."""
from .record_parser import TextRecordSource, FileRecordSource, parse_records

__all__ = ["TextRecordSource", "FileRecordSource", "parse_records"]
