# model.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from . import settings

TERMINATE_CLUSTER = "TERMINATE_CLUSTER"


@dataclass(frozen=True)
class Step:
    """A single Hive script (step) inside an EMR job flow."""
    name: str
    script: str
    args: Tuple[Tuple[str, str], ...] = ()
    action_on_failure: str = TERMINATE_CLUSTER

    def hive_args(self) -> list[str]:
        """Hive needs `-d` in front of every `key=value` definition."""
        out: list[str] = []
        for key, value in self.args:
            out.extend(["-d", f"{key}={value}"])
        return out

    def param(self, key: str) -> Optional[str]:
        for k, v in self.args:
            if k == key:
                return v
        return None

    def to_request(self) -> Dict[str, Any]:
        return {
            "Name": self.name,
            "ActionOnFailure": self.action_on_failure,
            "HadoopJarStep": {
                "Jar": "command-runner.jar",
                "Args": [
                    "hive-script",
                    "--run-hive-script",
                    "--args",
                    "-f",
                    self.script,
                    *self.hive_args(),
                ],
            },
        }


@dataclass(frozen=True)
class RunParameters:
    """The scalars collected from the user for one analysis."""
    language1: str
    language2: str
    from_year: int
    to_year: int
    window_size: int
    percent_of_years: float

    @staticmethod
    def table_name(language: str) -> str:
        # Hive table names can not contain '-'
        return language.replace("-", "_")

    @property
    def table1(self) -> str:
        return self.table_name(self.language1)

    @property
    def table2(self) -> str:
        return self.table_name(self.language2)

    @property
    def cross_language(self) -> bool:
        return self.language1 != self.language2


@dataclass(frozen=True)
class InstanceTopology:
    """
    Instances of the job flow: one master and `instance_count - 1` slaves.

    The cluster terminates when it runs out of steps or a step fails.
    """
    instance_count: int
    master_instance_type: str
    slave_instance_type: str
    ec2_key_name: str | None = None

    def to_request(self) -> Dict[str, Any]:
        instances: Dict[str, Any] = {
            "InstanceCount": self.instance_count,
            "MasterInstanceType": self.master_instance_type,
            "SlaveInstanceType": self.slave_instance_type,
            "KeepJobFlowAliveWhenNoSteps": False,
        }
        if self.ec2_key_name:
            instances["Ec2KeyName"] = self.ec2_key_name
        return instances


def default_applications() -> List[Dict[str, str]]:
    return [{"Name": name} for name in settings.APPLICATIONS]


def default_configurations() -> List[Dict[str, Any]]:
    """Split and read the n-gram sequence files as plain Hive input."""
    return [
        {
            "Classification": "hive-site",
            "Properties": {
                "hive.input.format": settings.HIVE_INPUT_FORMAT,
                "mapred.min.split.size": str(settings.MIN_SPLIT_SIZE),
            },
        }
    ]


@dataclass(frozen=True)
class JobRequest:
    """
    Everything submitted to EMR in a single run_job_flow call.

    Built once per run and never mutated or resubmitted.
    """
    steps: Tuple[Step, ...]
    instances: InstanceTopology
    log_uri: str

    name: str = settings.JOB_FLOW_NAME
    release_label: str = settings.RELEASE_LABEL
    service_role: str = settings.SERVICE_ROLE
    job_flow_role: str = settings.JOB_FLOW_ROLE
    applications: List[Dict[str, str]] = field(default_factory=default_applications)
    configurations: List[Dict[str, Any]] = field(default_factory=default_configurations)

    def to_request(self) -> Dict[str, Any]:
        """Keyword arguments for `EMR.Client.run_job_flow`."""
        return {
            "Name": self.name,
            "ReleaseLabel": self.release_label,
            "Applications": list(self.applications),
            "Configurations": list(self.configurations),
            "Steps": [s.to_request() for s in self.steps],
            "LogUri": self.log_uri,
            "ServiceRole": self.service_role,
            "JobFlowRole": self.job_flow_role,
            "Instances": self.instances.to_request(),
        }
