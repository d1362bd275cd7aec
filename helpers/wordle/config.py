import enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class Language(enum.StrEnum):
    EN = "en"
    ES = "es"

    @property
    def display_name(self) -> str:
        return {Language.EN: "English", Language.ES: "Spanish"}[self]


class HelperConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    lang: Language = Language.EN
    # Directory holding dictionary_<lang>.txt files. Defaults to the bundled ones.
    dictionary_dir: Path | None = None
    color: bool = True
    seed: int | None = None
    prompt: str = "wordle> "


def load_config(path: str | Path) -> HelperConfig:
    with open(path, "r") as f:
        return HelperConfig.model_validate_json(f.read())
