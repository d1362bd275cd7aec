import json
from pathlib import Path

import pydantic
import pytest

from helpers.wordle.config import HelperConfig, Language, load_config


def test_defaults():
    config = HelperConfig()
    assert config.lang == Language.EN
    assert config.dictionary_dir is None
    assert config.color
    assert config.seed is None


def test_load_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"lang": "es", "dictionary_dir": "/tmp/words", "color": False, "seed": 3}))

    config = load_config(path)
    assert config.lang == Language.ES
    assert config.dictionary_dir == Path("/tmp/words")
    assert not config.color
    assert config.seed == 3


def test_load_config_invalid(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"lang": "fr"}))
    with pytest.raises(pydantic.ValidationError):
        load_config(path)

    path.write_text(json.dumps({"language": "en"}))
    with pytest.raises(pydantic.ValidationError):
        load_config(path)


def test_language_display_name():
    assert Language.EN.display_name == "English"
    assert Language.ES.display_name == "Spanish"
