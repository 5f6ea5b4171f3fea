# assets.py
from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from typing import List

from .aws.s3_client import ObjectStore
from .dsl import HIVE_SCRIPTS


@dataclass
class AssetStagingError(Exception):
    """A bundled Hive script could not be read or uploaded."""
    script: str
    message: str

    def __str__(self) -> str:
        return f"{self.script}: {self.message}"


def read_hive_script(name: str) -> bytes:
    """Contents of a Hive script shipped in ngramminer/hive_scripts."""
    path = resources.files("ngramminer").joinpath("hive_scripts").joinpath(name)
    try:
        return path.read_bytes()
    except OSError as e:
        raise AssetStagingError(script=name, message=f"bundled script not readable ({e})") from e


def upload_hive_scripts(store: ObjectStore, bucket: str, prefix: str) -> List[str]:
    """
    Upload every Hive script verbatim to s3://bucket/prefix<name>.

    Returns:
        The S3 URIs of the uploaded scripts, in upload order.

    Raises:
        AssetStagingError: On the first script that can't be read or uploaded
    """
    uploaded: List[str] = []
    for name in HIVE_SCRIPTS:
        body = read_hive_script(name)
        result = store.put_object(bucket, prefix + name, body)
        if not result.ok:
            raise AssetStagingError(script=name, message=f"upload failed: {result.error.message}")
        uploaded.append(result.value)
    return uploaded
