from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _ensure_utf8(value: str) -> str:
    # JSON allows lone surrogate escapes ("\ud800"); the database driver and hashing do not.
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ValueError("text contains characters that cannot be encoded as UTF-8") from exc
    return value


# Client-supplied text that is stored, queried or hashed.
Text = Annotated[str, AfterValidator(_ensure_utf8)]


class CamelModel(BaseModel):
    """Snake-case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
