import enum
from typing_extensions import override

from pydantic import BaseModel, ConfigDict, field_serializer

from ..params import PLENGTH
from ..utilities import h2


class GenericConfig(BaseModel):
    """
    Generic configuration base class using Pydantic for validation and serialization.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_default=True,
        use_attribute_docstrings=True,
    )

    @override
    def __str__(self) -> str:
        lines: list[str] = []
        lines.append(h2(f"{self.__class__.__name__.split('Config')[0].upper()} SETTINGS"))
        for name, value in self:
            if isinstance(value, BaseModel):
                continue
            display_value = value.value if isinstance(value, enum.Enum) else value
            lines.append(f"{name:>{PLENGTH // 2 - 2}} : {display_value}")

        return str("\n".join(lines))

    @field_serializer("*", when_used="json-unless-none")
    def serialize_enums(self, value):
        """
        Serialize enum values to their string representation for JSON output.

        :param value: The value to serialize.
        :return: The serialized value, with enums converted to their values.
        """
        if isinstance(value, enum.Enum):
            return value.value
        return value
