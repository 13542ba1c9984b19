"""
Optional upload of exported results to Amazon S3.

Upload is strictly downstream of the benchmark: a failed upload is logged and
never invalidates the records or the local CSV that were already produced.
Credentials and bucket come from an explicit UploadConfig; when no static keys
are given, boto3's default credential chain is used.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Sequence

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from botocore.exceptions import ConnectionError as BotoConnectionError
from pydantic import BaseModel, Field
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

from crackbench.domain.models import ResultRecord
from crackbench.infrastructure.csv_store import save_results_csv
from crackbench.utils.logging import get_logger

log = get_logger(__name__)

TRANSIENT_ERROR_CODES = frozenset(
    {
        "InternalError",
        "RequestLimitExceeded",
        "RequestTimeout",
        "ServiceUnavailable",
        "SlowDown",
        "Throttling",
        "ThrottlingException",
    }
)


class UploadConfig(BaseModel):
    """Destination and credentials for result uploads."""

    bucket: str = Field(..., min_length=1)
    region: str = Field(..., min_length=1)
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None

    model_config = {"frozen": True}


def make_s3_client(config: UploadConfig) -> Any:
    """
    Build an S3 client for `config`.

    Static credentials are used only when both key id and secret are set.
    """
    kwargs: dict[str, Any] = {"region_name": config.region}
    if config.access_key_id and config.secret_access_key:
        kwargs["aws_access_key_id"] = config.access_key_id
        kwargs["aws_secret_access_key"] = config.secret_access_key
    return boto3.client("s3", **kwargs)


def _is_transient(exc: BaseException) -> bool:
    """True for failures worth retrying: lost connections, throttling and 5xx."""
    if isinstance(exc, BotoConnectionError):
        return True
    if isinstance(exc, ClientError):
        if exc.response.get("Error", {}).get("Code") in TRANSIENT_ERROR_CODES:
            return True
        status = exc.response.get("ResponseMetadata", {}).get("HTTPStatusCode") or 0
        return status >= 500
    return False


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    retry=retry_if_exception(_is_transient),
    reraise=True,
)
def _put_object(client: Any, bucket: str, key: str, path: Path) -> None:
    with path.open("rb") as body:
        client.put_object(Bucket=bucket, Key=key, Body=body)


def upload_file(path: Path | str, config: UploadConfig, client: Any = None) -> str:
    """
    Upload `path` to the configured bucket, keyed by its file name.

    Makes up to 3 attempts with exponential backoff when the failure is
    transient: connection errors, S3 throttling codes or 5xx responses.
    Permanent errors such as AccessDenied fail on the first attempt.

    Returns
    -------
    str
        The object key.

    Raises
    ------
    botocore.exceptions.BotoCoreError, botocore.exceptions.ClientError
        If the upload fails after all retry attempts.
    """
    file_path = Path(path)
    key = file_path.name
    s3 = client if client is not None else make_s3_client(config)
    _put_object(s3, config.bucket, key, file_path)
    log.info(
        f"[UPLOAD] Uploaded {key} to S3 bucket {config.bucket}",
        extra={"bucket": config.bucket, "key": key},
    )
    return key


def persist_and_upload(
    records: Sequence[ResultRecord],
    path: Path | str,
    upload_config: Optional[UploadConfig] = None,
    client: Any = None,
) -> Optional[Path]:
    """
    Save `records` as CSV and, when configured, upload the file.

    Returns the CSV path (None if there were no records). Upload errors are
    logged and do not propagate.
    """
    saved = save_results_csv(records, path)
    if saved is None or upload_config is None:
        return saved

    try:
        upload_file(saved, upload_config, client=client)
    except (BotoCoreError, ClientError, OSError):
        log.exception(
            f"[UPLOAD FAILED] Could not upload {saved.name}; local results are kept",
            extra={"bucket": upload_config.bucket, "path": str(saved)},
        )
    return saved


__all__ = ["UploadConfig", "make_s3_client", "persist_and_upload", "upload_file"]
