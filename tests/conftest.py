from __future__ import annotations

import io

import pytest

from ngramminer.aws.models import RemoteFailure, RemoteResult
from ngramminer.model import RunParameters
from ngramminer.ui.console import Console


class FakeStore:
    """In-memory stand-in for ObjectStore."""

    def __init__(self, languages=None, fail=None):
        self.languages = list(languages or ["eng-all", "fre-all", "ger-all"])
        self.fail = set(fail or [])
        self.buckets: list[str] = []
        self.objects: dict[tuple[str, str], bytes] = {}

    def _failure(self, operation):
        return RemoteResult.failure(
            RemoteFailure(kind="service", operation=operation, message="denied", status_code=403)
        )

    def create_bucket(self, bucket):
        if "create_bucket" in self.fail:
            return self._failure("CreateBucket")
        self.buckets.append(bucket)
        return RemoteResult.success(bucket)

    def put_object(self, bucket, key, body):
        if "put_object" in self.fail:
            return self._failure("PutObject")
        self.objects[(bucket, key)] = body
        return RemoteResult.success(f"s3://{bucket}/{key}")

    def list_languages(self):
        if "list_languages" in self.fail:
            return self._failure("ListObjectsV2")
        return RemoteResult.success(list(self.languages))


class FakeCluster:
    """In-memory stand-in for ClusterClient."""

    def __init__(self, job_flow_id="j-TESTCLUSTER", fail=False):
        self.job_flow_id = job_flow_id
        self.fail = fail
        self.requests = []

    def run_job_flow(self, request):
        self.requests.append(request)
        if self.fail:
            return RemoteResult.failure(
                RemoteFailure(kind="client", operation="RunJobFlow", message="network down")
            )
        return RemoteResult.success(self.job_flow_id)


def make_console(text: str = "", debug: bool = False) -> Console:
    return Console(
        debug=debug,
        stdin=io.StringIO(text),
        stdout=io.StringIO(),
        stderr=io.StringIO(),
    )


@pytest.fixture
def console():
    return make_console()


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def cluster():
    return FakeCluster()


@pytest.fixture
def params():
    return RunParameters(
        language1="eng-all",
        language2="eng-all",
        from_year=1800,
        to_year=1805,
        window_size=5,
        percent_of_years=0.8,
    )


@pytest.fixture
def cross_params(params):
    return RunParameters(
        language1="eng-all",
        language2="fre-all",
        from_year=params.from_year,
        to_year=params.to_year,
        window_size=params.window_size,
        percent_of_years=params.percent_of_years,
    )
