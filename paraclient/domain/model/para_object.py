"""Generic domain object exchanged with the API server.

Every server-side entity is represented by the same class: a handful of
core fields shared by all types, plus an open mapping of custom properties.
"""

from typing import Any, Iterator, Mapping

from pydantic import ConfigDict, field_validator

from paraclient.domain.model.common import DomainModel
from paraclient.domain.value.types import DEFAULT_TYPE


class ParaObject(DomainModel):
    """A server-side entity as a property bag.

    Known fields are typed attributes. Any other key is a custom property,
    reachable with item access:

        >>> dog = ParaObject(type="dog")
        >>> dog["sound"] = "bark"
        >>> dog["sound"]
        'bark'
        >>> dog.get_object_uri()
        '/dogs'
    """

    model_config = ConfigDict(
        extra="allow",  # Custom properties live in the model extras
        populate_by_name=True,
    )

    id: str | None = None
    timestamp: int | None = None
    type: str = DEFAULT_TYPE
    appid: str | None = None
    parentid: str | None = None
    creatorid: str | None = None
    updated: int | None = None
    name: str = "ParaObject"
    tags: list[str] | None = None
    votes: int = 0
    version: int | None = None
    stored: bool = True
    indexed: bool = True
    cached: bool = True

    @field_validator("type", mode="before")
    @classmethod
    def default_blank_type(cls, v: Any) -> Any:
        """Fall back to the sentinel type when none is given."""
        return v or DEFAULT_TYPE

    def __init__(self, id: str | None = None, type: str | None = None, **data: Any):
        """Create an object, optionally with an id and a type.

        Args:
            id: Object id, assigned by the server when omitted
            type: Object type, ``"sysprop"`` when omitted
            **data: Other core fields or custom properties
        """
        if id is not None:
            data["id"] = id
        if type is not None:
            data["type"] = type
        super().__init__(**data)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "ParaObject":
        """Build an object from a decoded JSON mapping."""
        return cls().set_fields(data)

    @property
    def properties(self) -> dict[str, Any]:
        """Custom properties, keyed by name."""
        if self.__pydantic_extra__ is None:
            self.__pydantic_extra__ = {}
        return self.__pydantic_extra__

    def __getitem__(self, name: str) -> Any:
        if name in type(self).model_fields:
            return getattr(self, name)
        return self.properties.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        if name in type(self).model_fields:
            setattr(self, name, value)
        else:
            self.properties[name] = value

    def __delitem__(self, name: str) -> None:
        self.properties.pop(name, None)

    def __contains__(self, name: object) -> bool:
        return name in self.properties

    def set_fields(self, data: Mapping[str, Any] | None) -> "ParaObject":
        """Copy a mapping into this object.

        Keys naming a core field are assigned to that field, everything else
        becomes a custom property.

        Args:
            data: Decoded JSON object, ignored when None

        Returns:
            This object
        """
        if data:
            fields = type(self).model_fields
            for key, value in data.items():
                if key in fields:
                    if key == "type":
                        value = value or DEFAULT_TYPE
                    setattr(self, key, value)
                else:
                    self.properties[key] = value
        return self

    def get_plural(self) -> str:
        """Plural form of the type, as used in object URIs."""
        t = self.type
        if t.endswith("s"):
            return t + "es"
        if t.endswith("y"):
            return t[:-1] + "ies"
        return t + "s"

    def get_object_uri(self) -> str:
        """Resource path of this object relative to the API path."""
        uri = "/" + self.get_plural()
        return f"{uri}/{self.id}" if self.id else uri

    def to_dict(self) -> dict[str, Any]:
        """Full JSON body for create calls."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_patch_dict(self) -> dict[str, Any]:
        """Partial JSON body for update calls.

        Only core fields given explicitly, in the constructor or by assignment,
        are sent along with the id, the type and the custom properties. An
        update therefore never resets core fields the caller did not touch.
        """
        fields = type(self).model_fields
        body = {
            key: value
            for key, value in self.model_dump(mode="json", exclude_none=True).items()
            if key not in fields or key in self.model_fields_set
        }
        body["type"] = self.type
        if self.id:
            body["id"] = self.id
        return body

    def __str__(self) -> str:
        return self.model_dump_json(indent=2, exclude_none=True)
