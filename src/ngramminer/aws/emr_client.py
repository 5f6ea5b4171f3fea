# aws/emr_client.py
from __future__ import annotations

from typing import Optional

import boto3

from .. import settings
from ..model import JobRequest
from ..ui.console import Console, get_console
from .models import REMOTE_ERRORS, RemoteFailure, RemoteResult, report_failure


class ClusterClient:
    """Submits job flows to Elastic MapReduce."""

    def __init__(self, client, console: Optional[Console] = None):
        self.client = client
        self.console = console or get_console()

    @classmethod
    def from_session(cls, session: boto3.session.Session, console: Optional[Console] = None) -> ClusterClient:
        return cls(session.client("emr", region_name=session.region_name or settings.REGION), console=console)

    def run_job_flow(self, request: JobRequest) -> RemoteResult[str]:
        """
        Launch a cluster that runs the request's steps and then terminates.

        Returns:
            The job flow id on success.
        """
        payload = request.to_request()
        self.console.print_debug(
            f"RunJobFlow {payload['Name']} with {len(payload['Steps'])} steps, "
            f"{payload['Instances']['InstanceCount']} instances"
        )
        try:
            response = self.client.run_job_flow(**payload)
        except REMOTE_ERRORS as e:
            failure = RemoteFailure.from_exception("RunJobFlow", e)
            report_failure(self.console, failure)
            return RemoteResult.failure(failure)
        return RemoteResult.success(response["JobFlowId"])
