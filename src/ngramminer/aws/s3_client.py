# aws/s3_client.py
from __future__ import annotations

from typing import List, Optional

import boto3

from .. import settings
from ..ui.console import Console, get_console
from .models import REMOTE_ERRORS, RemoteFailure, RemoteResult, report_failure


def make_session(profile: Optional[str] = None, region: Optional[str] = None) -> boto3.session.Session:
    """
    Create the boto3 session shared by the S3 and EMR clients.

    Args:
        profile: Named profile from the AWS credentials file (None: default chain)
        region: AWS region (defaults to settings.REGION)
    """
    return boto3.session.Session(
        profile_name=profile if profile is not None else settings.PROFILE,
        region_name=region or settings.REGION,
    )


class ObjectStore:
    """S3 operations needed to stage a run and browse the n-gram corpus."""

    def __init__(self, client, region: str = settings.REGION, console: Optional[Console] = None):
        """
        Initialize the store.

        Args:
            client: A boto3 S3 client
            region: Region the client talks to, used for new buckets
            console: Where progress and failures are reported
        """
        self.client = client
        self.region = region
        self.console = console or get_console()

    @classmethod
    def from_session(cls, session: boto3.session.Session, console: Optional[Console] = None) -> ObjectStore:
        region = session.region_name or settings.REGION
        return cls(session.client("s3", region_name=region), region=region, console=console)

    def _failed(self, operation: str, exc: Exception) -> RemoteResult:
        failure = RemoteFailure.from_exception(operation, exc)
        report_failure(self.console, failure)
        return RemoteResult.failure(failure)

    def create_bucket(self, bucket: str) -> RemoteResult[str]:
        """Create a bucket. Bucket names are global, so it must be unique."""
        self.console.print_info("")
        self.console.print_info(f"Creating a bucket with name: {bucket}")

        kwargs = {"Bucket": bucket}
        # us-east-1 is the default location and rejects an explicit constraint
        if self.region != "us-east-1":
            kwargs["CreateBucketConfiguration"] = {"LocationConstraint": self.region}
        try:
            self.client.create_bucket(**kwargs)
        except REMOTE_ERRORS as e:
            return self._failed("CreateBucket", e)
        return RemoteResult.success(bucket)

    def put_object(self, bucket: str, key: str, body: bytes) -> RemoteResult[str]:
        """Upload `body` as s3://bucket/key."""
        self.console.print_info("")
        self.console.print_info(f"Uploading file {key.rsplit('/', 1)[-1]} ...")
        self.console.print_info(f"Path on S3: s3://{bucket}/{key}")
        try:
            self.client.put_object(Bucket=bucket, Key=key, Body=body)
        except REMOTE_ERRORS as e:
            return self._failed("PutObject", e)
        return RemoteResult.success(f"s3://{bucket}/{key}")

    def list_common_prefixes(self, bucket: str, prefix: str, delimiter: str = "/") -> RemoteResult[List[str]]:
        """The "directories" right below `prefix`, grouped by `delimiter`."""
        prefixes: List[str] = []
        try:
            paginator = self.client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=bucket, Prefix=prefix, Delimiter=delimiter):
                prefixes.extend(p["Prefix"] for p in page.get("CommonPrefixes", []))
        except REMOTE_ERRORS as e:
            return self._failed("ListObjectsV2", e)
        return RemoteResult.success(prefixes)

    def list_languages(self) -> RemoteResult[List[str]]:
        """Language ids available in the corpus, e.g. eng-all."""
        result = self.list_common_prefixes(settings.CORPUS_BUCKET, settings.CORPUS_PREFIX)
        if not result.ok:
            return result
        return RemoteResult.success([language_name(p) for p in result.value])


def language_name(prefix: str) -> str:
    """Strip the corpus root and the trailing slash: ngrams/.../eng-all/ -> eng-all."""
    name = prefix[len(settings.CORPUS_PREFIX):] if prefix.startswith(settings.CORPUS_PREFIX) else prefix
    return name.rstrip("/")
