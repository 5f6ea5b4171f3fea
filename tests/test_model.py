from __future__ import annotations

from ngramminer import settings
from ngramminer.model import InstanceTopology, JobRequest, RunParameters, Step


def test_step_hive_args_prefix_each_definition():
    step = Step("Step-001", "s3://b/CreateWindow.q", (("ngramsTable", "eng_all"), ("fromYear", "1800")))
    assert step.hive_args() == ["-d", "ngramsTable=eng_all", "-d", "fromYear=1800"]


def test_step_request_runs_hive_script_and_terminates_on_failure():
    step = Step("Step-002", "s3://b/ShiftWindow.q", (("newYear", "1806"),))
    assert step.to_request() == {
        "Name": "Step-002",
        "ActionOnFailure": "TERMINATE_CLUSTER",
        "HadoopJarStep": {
            "Jar": "command-runner.jar",
            "Args": [
                "hive-script",
                "--run-hive-script",
                "--args",
                "-f",
                "s3://b/ShiftWindow.q",
                "-d",
                "newYear=1806",
            ],
        },
    }


def test_step_param_lookup():
    step = Step("Step-001", "s", (("a", "1"),))
    assert step.param("a") == "1"
    assert step.param("missing") is None


def test_run_parameters_tables():
    params = RunParameters("eng-us-all", "eng-all", 1800, 1810, 2, 0.5)
    assert params.table1 == "eng_us_all"
    assert params.table2 == "eng_all"
    assert params.cross_language


def test_run_parameters_same_language():
    params = RunParameters("fre-all", "fre-all", 1800, 1810, 2, 0.5)
    assert not params.cross_language


def test_instances_one_master_rest_slaves():
    topology = InstanceTopology(5, "m4.large", "m3.xlarge")
    assert topology.to_request() == {
        "InstanceCount": 5,
        "MasterInstanceType": "m4.large",
        "SlaveInstanceType": "m3.xlarge",
        "KeepJobFlowAliveWhenNoSteps": False,
    }


def test_instances_with_key_pair():
    topology = InstanceTopology(1, "m1.large", "m1.large", ec2_key_name="my-key")
    assert topology.to_request()["Ec2KeyName"] == "my-key"


def test_job_request_payload():
    steps = (
        Step("Step-001", "s3://b/ImportNgrams.q"),
        Step("Step-002", "s3://b/CreateWindow.q"),
    )
    request = JobRequest(
        steps=steps,
        instances=InstanceTopology(3, "c3.xlarge", "m1.xlarge"),
        log_uri="s3://b/EMR/Logs/",
    )
    payload = request.to_request()

    assert payload["Name"] == settings.JOB_FLOW_NAME
    assert payload["ReleaseLabel"] == settings.RELEASE_LABEL
    assert payload["Applications"] == [{"Name": "Hive"}, {"Name": "Hadoop"}]
    assert payload["Configurations"] == [
        {
            "Classification": "hive-site",
            "Properties": {
                "hive.input.format": "org.apache.hadoop.hive.ql.io.HiveInputFormat",
                "mapred.min.split.size": "134217728",
            },
        }
    ]
    assert [s["Name"] for s in payload["Steps"]] == ["Step-001", "Step-002"]
    assert payload["LogUri"] == "s3://b/EMR/Logs/"
    assert payload["ServiceRole"] == "EMR_DefaultRole"
    assert payload["JobFlowRole"] == "EMR_EC2_DefaultRole"
    assert payload["Instances"]["InstanceCount"] == 3
