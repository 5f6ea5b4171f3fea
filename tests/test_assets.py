from __future__ import annotations

import re

import pytest

from conftest import FakeStore
from ngramminer.assets import AssetStagingError, read_hive_script, upload_hive_scripts
from ngramminer.dsl import HIVE_SCRIPTS, StepSequenceBuilder
from ngramminer.model import RunParameters

PREFIX = "EMR/HiveScripts/"


def hive_variables(script: str) -> set[str]:
    return set(re.findall(r"\$\{(\w+)\}", read_hive_script(script).decode("utf-8")))


def test_every_script_is_bundled():
    for name in HIVE_SCRIPTS:
        assert read_hive_script(name).strip()


def test_missing_script():
    with pytest.raises(AssetStagingError) as info:
        read_hive_script("Nope.q")
    assert info.value.script == "Nope.q"


def test_upload_all_scripts_verbatim():
    store = FakeStore()
    uploaded = upload_hive_scripts(store, "ana-1", PREFIX)

    assert uploaded == [f"s3://ana-1/{PREFIX}{name}" for name in HIVE_SCRIPTS]
    assert len(store.objects) == 7
    for name in HIVE_SCRIPTS:
        assert store.objects[("ana-1", PREFIX + name)] == read_hive_script(name)


def test_failed_upload_raises():
    store = FakeStore(fail=["put_object"])
    with pytest.raises(AssetStagingError) as info:
        upload_hive_scripts(store, "ana-1", PREFIX)
    assert info.value.script == HIVE_SCRIPTS[0]
    assert "denied" in str(info.value)


def test_steps_define_every_variable_their_script_uses():
    builder = StepSequenceBuilder("s3://b/" + PREFIX, "s3://b/EMR/Output/")
    steps = builder.build(RunParameters("eng-all", "fre-all", 1800, 1807, 5, 0.8))

    for step in steps:
        script = step.script.rsplit("/", 1)[-1]
        defined = {key for key, _ in step.args}
        assert hive_variables(script) == defined, script
