# runner.py
from __future__ import annotations

import uuid
from typing import List, Optional

from . import settings
from .assets import upload_hive_scripts
from .aws.emr_client import ClusterClient
from .aws.menus import select_instance_type, select_language
from .aws.models import RemoteCallFailed
from .aws.s3_client import ObjectStore
from .dsl import StepSequenceBuilder
from .model import InstanceTopology, JobRequest, RunParameters, Step
from .ui.console import Console
from .validation import validate_cluster_size, validate_run_parameters


def new_bucket_name() -> str:
    return f"{settings.BUCKET_PREFIX}{uuid.uuid4()}"


class RunPaths:
    """Where a run keeps its scripts, outputs and logs inside its bucket."""

    def __init__(self, bucket: str):
        self.bucket = bucket
        self.scripts_prefix = settings.SCRIPTS_PREFIX
        self.scripts = f"s3://{bucket}/{settings.SCRIPTS_PREFIX}"
        self.output = f"s3://{bucket}/{settings.OUTPUT_PREFIX}"
        self.logs = f"s3://{bucket}/{settings.LOGS_PREFIX}"


def plan_steps(params: RunParameters, bucket: str) -> List[Step]:
    """
    Validate the parameters and build the steps of a run, without any AWS call.

    Raises:
        ValidationError: If a parameter rule is broken or there are too many steps
    """
    validate_run_parameters(params)
    paths = RunPaths(bucket)
    return StepSequenceBuilder(paths.scripts, paths.output).build(params)


class Analyzer:
    """
    Drives one analysis: asks the user for the parameters, stages the Hive
    scripts and launches an EMR cluster that runs them.
    """

    def __init__(
        self,
        console: Console,
        store: ObjectStore,
        cluster: ClusterClient,
        bucket: Optional[str] = None,
    ):
        self.console = console
        self.store = store
        self.cluster = cluster
        self.paths = RunPaths(bucket or new_bucket_name())

    @property
    def bucket(self) -> str:
        return self.paths.bucket

    def run(self, with_ec2_key: bool = False) -> str:
        """
        Full interactive session.

        Returns:
            The id of the launched job flow.

        Raises:
            RemoteCallFailed: If the bucket, the language list or the launch fail
            AssetStagingError: If the Hive scripts can't be uploaded
            ValidationError: On an invalid menu option or parameter
            InputExhausted: If the input ends before all answers are read
        """
        created = self.store.create_bucket(self.bucket)
        if not created.ok:
            raise RemoteCallFailed(created.error)

        language1 = select_language(
            self.console, self.store, "Select the main language to analyze:"
        )
        language2 = select_language(
            self.console,
            self.store,
            "Select the language from which to extract the foreignisms, or the same as "
            "before if you are only interested in neologisms:",
        )
        master = select_instance_type(self.console, "Select master instance type:")
        slave = select_instance_type(self.console, "Select slave instance type:")

        upload_hive_scripts(self.store, self.bucket, self.paths.scripts_prefix)

        self.console.ask(
            f"Insert the year from which to start the analysis, between {settings.MIN_YEAR} "
            f"and {settings.MAX_YEAR} (e.g., 1800):"
        )
        from_year = self.console.read_integer()
        self.console.ask(
            f"Insert the year to end the analysis, between the previous selected number "
            f"and {settings.MAX_YEAR} (e.g., 1820):"
        )
        to_year = self.console.read_integer()
        self.console.ask(
            "Insert the size of the window, which must be smaller than the difference "
            "of the years (e.g., 5):"
        )
        window_size = self.console.read_integer()
        self.console.ask(
            f"Insert the percent of years needed for a gram, between "
            f"{settings.MIN_PERCENT_OF_YEARS} and {settings.MAX_PERCENT_OF_YEARS} (e.g., 0.8):"
        )
        percent_of_years = self.console.read_decimal()

        params = RunParameters(
            language1=language1,
            language2=language2,
            from_year=from_year,
            to_year=to_year,
            window_size=window_size,
            percent_of_years=percent_of_years,
        )
        return self.launch(params, master, slave, with_ec2_key=with_ec2_key)

    def launch(
        self,
        params: RunParameters,
        master_instance_type: str,
        slave_instance_type: str,
        with_ec2_key: bool = False,
    ) -> str:
        """
        Build the job flow for `params` and submit it.

        The parameters are checked before anything is asked or submitted.
        """
        steps = plan_steps(params, self.bucket)
        self.console.print_debug(f"Built {len(steps)} steps for {params.table1}")

        self.console.ask(
            f"Insert the size of the cluster, between {settings.MIN_CLUSTER_SIZE} "
            f"and {settings.MAX_CLUSTER_SIZE} (e.g., 10):"
        )
        cluster_size = self.console.read_integer()
        validate_cluster_size(cluster_size)

        ec2_key_name = None
        if with_ec2_key:
            self.console.ask("Insert the name of the ec2-key (e.g., my-key):")
            ec2_key_name = self.console.read_word()

        request = JobRequest(
            steps=tuple(steps),
            instances=InstanceTopology(
                instance_count=cluster_size,
                master_instance_type=master_instance_type,
                slave_instance_type=slave_instance_type,
                ec2_key_name=ec2_key_name,
            ),
            log_uri=self.paths.logs,
        )

        result = self.cluster.run_job_flow(request)
        if not result.ok:
            raise RemoteCallFailed(result.error)

        self.console.print_job_launched(result.value)
        return result.value
