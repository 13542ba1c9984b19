"""
Infrastructure package for crackbench.

Centralizes output concerns (CSV export, S3 upload). Keep this layer focused on
I/O, decoupled from searcher/orchestrator logic.
"""

from crackbench.infrastructure.csv_store import results_filename, save_results_csv
from crackbench.infrastructure.s3_upload import (
    UploadConfig,
    make_s3_client,
    persist_and_upload,
    upload_file,
)

__all__ = [
    "UploadConfig",
    "make_s3_client",
    "persist_and_upload",
    "results_filename",
    "save_results_csv",
    "upload_file",
]
