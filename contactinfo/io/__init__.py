"""Input/output helpers for contactinfo.

This package reads raw records from disk and renders JSON output.
"""

from .storage import dump_json, load_raw_record

__all__ = ["dump_json", "load_raw_record"]
