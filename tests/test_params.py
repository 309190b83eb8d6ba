from dataclasses import fields

import pytest

from nacos_kit.model import Instance
from nacos_kit.params import (
    ConfigParam,
    DeregisterInstanceParam,
    GetAllServiceInfoParam,
    GetServiceParam,
    RegisterInstanceParam,
    SearchConfigParam,
    SelectAllInstancesParam,
    SelectInstancesParam,
    SelectOneHealthInstanceParam,
    SubscribeParam,
    UpdateInstanceParam,
)


def _tags(obj) -> dict[str, str]:
    return {f.name: f.metadata["param"] for f in fields(obj) if "param" in f.metadata}


def test_config_param_tags_exclude_callback():
    param = ConfigParam(data_id="d", group="g")
    assert param.data_id == "d"
    assert param.group == "g"
    tags = _tags(param)
    assert tags["data_id"] == "dataId"
    assert tags["encrypted_data_key"] == "encryptedDataKey"
    assert "on_change" not in tags


def test_config_param_on_change_is_callable():
    seen = []
    param = ConfigParam(data_id="d", group="g", on_change=lambda *a: seen.append(a))
    param.on_change("ns", "g", "d", "data")
    assert seen == [("ns", "g", "d", "data")]


def test_register_and_update_share_tags():
    register = RegisterInstanceParam(ip="10.0.0.1", port=80, service_name="demo")
    update = UpdateInstanceParam(ip="10.0.0.1", port=80, service_name="demo")
    assert (register.ip, register.port, register.service_name) == (
        update.ip,
        update.port,
        update.service_name,
    )
    assert _tags(register) == _tags(update)
    assert _tags(register)["enable"] == "enabled"


def test_register_defaults():
    param = RegisterInstanceParam(ip="10.0.0.1", port=80, service_name="demo")
    assert param.metadata is None
    assert param.weight == 0.0
    assert param.group_name == ""


def test_deregister_uses_cluster_tag():
    param = DeregisterInstanceParam(cluster="c1")
    assert param.cluster == "c1"
    assert _tags(param)["cluster"] == "cluster"


@pytest.mark.parametrize(
    "cls",
    [GetServiceParam, SelectAllInstancesParam, SelectInstancesParam, SelectOneHealthInstanceParam],
)
def test_cluster_lists_are_independent(cls):
    a = cls()
    a.clusters.append("x")
    assert cls().clusters == []
    assert _tags(cls)["clusters"] == "clusters"


def test_select_instances_healthy_only_tag():
    assert _tags(SelectInstancesParam)["healthy_only"] == "healthyOnly"
    assert SelectInstancesParam().healthy_only is False


def test_subscribe_callback_receives_instances():
    received = []
    param = SubscribeParam(
        service_name="demo",
        subscribe_callback=lambda services, err: received.append((services, err)),
    )
    inst = Instance(ip="10.0.0.1")
    param.subscribe_callback([inst], None)
    assert received == [([inst], None)]
    assert "subscribe_callback" not in _tags(SubscribeParam)


def test_paging_tags():
    assert _tags(SearchConfigParam)["page_no"] == "pageNo"
    assert _tags(GetAllServiceInfoParam)["name_space"] == "nameSpace"
    assert GetAllServiceInfoParam().page_size == 0