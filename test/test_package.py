import importlib

import pytest

from rttbench.components.messages import PathRequest, PathResponse


@pytest.mark.parametrize(
    "module",
    [
        "rttbench",
        "rttbench.__main__",
        "rttbench.components",
        "rttbench.components.messages",
        "rttbench.components.config_parser",
    ],
)
def test_import(module: str):
    assert importlib.import_module(module) is not None


def test_parse_accepts_text(identity):
    data = f'{{"ori":"A","dest":"E","client_uuid":"{identity.routing_key}"}}'

    assert PathRequest.parse(data).client_uuid == identity.value
    assert PathResponse.parse('{"path":["A","E"]}').ok is True
