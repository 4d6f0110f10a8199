# tests/unit/test_providers_base.py
import pytest
from conventional_review.platforms.base import GitPlatform
from conventional_review.providers.base import LLMProvider


@pytest.mark.unit
def test_provider_is_abstract():
    with pytest.raises(TypeError):
        LLMProvider()


@pytest.mark.unit
def test_platform_is_abstract():
    with pytest.raises(TypeError):
        GitPlatform()
