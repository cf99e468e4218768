"""Quota request tables: validity filtering, masking, bilingual projection and export."""

__version__ = "0.1.0"
