import pytest

from infra_vision.lib.azure.base import AzureModule
from infra_vision.module_manager import MODULES, get_module
from infra_vision.modules.azure.vision_api import VisionApi
from infra_vision.modules.azure.vision_api.config import VisionApiConfig


def test_vision_api_is_the_only_module():
    assert MODULES == {"vision-api": VisionApi}


def test_get_module():
    assert get_module("vision-api") is VisionApi


def test_get_unknown_module():
    with pytest.raises(ModuleNotFoundError, match="no module for stack `storage`, expected one of \\['vision-api'\\]"):
        get_module("storage")


def test_config_type_comes_from_build_hint():
    assert VisionApi.get_config_type() is VisionApiConfig


def test_config_type_hint_is_required():
    class Untyped(AzureModule):
        def build(self, config):
            return None

    with pytest.raises(TypeError):
        Untyped.get_config_type()
