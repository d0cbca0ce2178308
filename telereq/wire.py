import copy
import json
import logging
from enum import Enum
from typing import Any, Callable, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationInfo,
    field_validator,
    model_serializer,
)

logger = logging.getLogger(__name__)

OmitPredicate = Callable[[Any], bool]

# (model class, field name) -> predicate evaluated on the in-memory value;
# the field is left out of the wire object whenever the predicate holds
OMISSION_POLICY: dict[tuple[type, str], OmitPredicate] = {}


def wire_name(name: str) -> str:
    """Blanket naming policy: every key is lower-cased on the wire."""
    return name.lower()


def variant_name(cls: type) -> str:
    return cls.__name__.lower()


def omit_when(predicate: OmitPredicate, *fields: str):
    """
    Class decorator registering an omission predicate in OMISSION_POLICY.

    Args:
        predicate: Callable taking the field value, True means "leave it out".
        fields: Names of the decorated model's fields the predicate applies to.

    Raises:
        TypeError: If the model declares no field with one of the given names.
    """

    def register(cls):
        for name in fields:
            if name not in cls.model_fields:
                raise TypeError(f"{cls.__name__} has no field {name!r}")
            OMISSION_POLICY[(cls, name)] = predicate
        return cls

    return register


def omission_predicate(cls: type, name: str) -> OmitPredicate | None:
    for klass in cls.__mro__:
        predicate = OMISSION_POLICY.get((klass, name))
        if predicate is not None:
            return predicate
    return None


class WireModel(BaseModel):
    """
    Base for every value that travels to the Bot API.

    Attributes:
        wire_tag: Discriminator key for tagged union alternatives.
            When set, the lower-cased class name is emitted under it
            ahead of the model's own fields.
        api_method: Bot API method name for top-level request bodies.
    """

    wire_tag: ClassVar[str | None] = None
    api_method: ClassVar[str | None] = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    def _evolve(self, **changes: Any):
        # deep copy, so a mutator never hands out a value sharing state
        # with its receiver; strict, so mutators never coerce
        data = {**copy.deepcopy(self.__dict__), **changes}
        return type(self).model_validate(data, strict=True, context={"evolve": True})

    @field_validator("*", mode="before")
    @classmethod
    def _built_values_only(cls, value: Any, info: ValidationInfo) -> Any:
        # mutators take already built models, never raw mappings
        if info.context and info.context.get("evolve") and isinstance(value, dict):
            raise ValueError(f"{info.field_name} expects a built value, not a mapping")
        return value

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return encode_model(self)

    def to_wire(self) -> dict[str, Any]:
        return encode_model(self)


def encode_model(model: WireModel) -> dict[str, Any]:
    """
    Encode a single model into a wire object.

    Fields are visited in declaration order. A field is skipped when it
    holds None or when its registered omission predicate holds; otherwise
    it is emitted under its wire name with a recursively encoded value.
    """
    cls = type(model)
    wire: dict[str, Any] = {}
    if cls.wire_tag is not None:
        wire[cls.wire_tag] = variant_name(cls)
    for name in cls.model_fields:
        value = getattr(model, name)
        if value is None:
            continue
        predicate = omission_predicate(cls, name)
        if predicate is not None and predicate(value):
            continue
        wire[wire_name(name)] = encode(value)
    return wire


def encode(value: Any) -> Any:
    if isinstance(value, WireModel):
        return encode_model(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [encode(item) for item in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    raise TypeError(f"Cannot encode {type(value).__name__} for the wire")


def to_wire(value: Any) -> Any:
    return encode(value)


def dumps(value: Any) -> bytes:
    """
    Serialize a value graph into the compact UTF-8 JSON request body.

    Args:
        value: A WireModel (or a sequence of them).

    Returns:
        The encoded body, identical for identical inputs.
    """
    body = json.dumps(to_wire(value), ensure_ascii=False, separators=(",", ":"))
    if isinstance(value, WireModel):
        logger.debug(f"Encoded {type(value).__name__} into {len(body)} characters")
    return body.encode("utf-8")
