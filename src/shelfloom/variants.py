"""Decoding of polymorphic payloads identified by a string tag.

Several BookStack endpoints return arrays whose elements have different shapes,
told apart only by a string field inside each element (``"type": "chapter"``).
A ``VariantFamily`` holds the table from tag to model class for one such family.
It can decode a raw mapping directly, and it also produces a pydantic annotation
so that models can declare fields of the family type.

The tag lookahead only reads the top level of the parsed mapping and never
modifies it, so the same mapping can be fully decoded afterwards.
"""

from collections.abc import Mapping
from typing import Annotated, Any, Generic, TypeVar, Union

from pydantic import BaseModel, Discriminator, Tag, ValidationError

from .exceptions import DecodeError
from .log_config import logger

ModelT = TypeVar("ModelT", bound=BaseModel)


def find_property_string(raw: Mapping[str, Any], name: str) -> str | None:
    """Return the top-level string value of ``name``, or None.

    Nested objects are not searched. Non-string values count as absent.
    """
    value = raw.get(name)
    return value if isinstance(value, str) else None


class VariantFamily(Generic[ModelT]):
    """A closed set of model classes selected by a discriminator field.

    Attributes:
        name: Human readable family name used in error messages.
        discriminator: Name of the top-level field holding the tag.
        default_tag: Tag assumed when the discriminator is missing or not a
            string. None means such payloads are rejected.
    """

    def __init__(
        self,
        name: str,
        variants: Mapping[str, type[ModelT]],
        *,
        discriminator: str = "type",
        default_tag: str | None = None,
    ):
        if default_tag is not None and default_tag not in variants:
            raise ValueError(
                f"Default tag '{default_tag}' is not a variant of {name}"
            )
        self.name = name
        self.discriminator = discriminator
        self.default_tag = default_tag
        self._variants: dict[str, type[ModelT]] = {
            tag.lower(): model for tag, model in variants.items()
        }
        self._tags: dict[type[ModelT], str] = {
            model: tag for tag, model in self._variants.items()
        }

    @property
    def variants(self) -> Mapping[str, type[ModelT]]:
        return dict(self._variants)

    def lookup_tag(
        self, raw: Mapping[str, Any], fallback_tag: str | None = None
    ) -> str | None:
        """Read the lower-cased tag of ``raw`` without validating it.

        Falls back to ``fallback_tag`` and then to the family default when the
        discriminator is absent or not a string.
        """
        tag = find_property_string(raw, self.discriminator)
        if tag is None:
            tag = fallback_tag if fallback_tag is not None else self.default_tag
        return tag.lower() if tag is not None else None

    def resolve(
        self, raw: Mapping[str, Any], fallback_tag: str | None = None
    ) -> type[ModelT]:
        """Pick the model class for ``raw``.

        Raises:
            DecodeError: If no tag can be determined or the tag is unknown.
        """
        tag = self.lookup_tag(raw, fallback_tag)
        if tag is None:
            raise DecodeError(
                f"Missing '{self.discriminator}' discriminator for {self.name}"
            )
        try:
            return self._variants[tag]
        except KeyError:
            raise DecodeError(
                f"unrecognized variant tag '{tag}' for {self.name}"
            ) from None

    def decode(self, raw: Any, *, fallback_tag: str | None = None) -> ModelT:
        """Decode a parsed JSON object into the matching variant model.

        Args:
            raw: The parsed JSON object.
            fallback_tag: Tag to use when the object carries none, taking
                precedence over the family default.

        Returns:
            The decoded variant instance.

        Raises:
            DecodeError: If ``raw`` is not an object, its tag cannot be
                resolved, or it does not fit the selected variant.
        """
        if not isinstance(raw, Mapping):
            raise DecodeError(
                f"Expected a JSON object for {self.name}, got {type(raw).__name__}"
            )
        model = self.resolve(raw, fallback_tag)
        try:
            return model.model_validate(raw)
        except ValidationError as e:
            raise DecodeError(f"Invalid {model.__name__} payload", e) from e

    def tag_of(self, value: ModelT) -> str:
        """Return the tag of a decoded value, based on its runtime type."""
        try:
            return self._tags[type(value)]
        except KeyError:
            raise DecodeError(
                f"{type(value).__name__} is not a variant of {self.name}"
            ) from None

    def _discriminate(self, value: Any) -> str | None:
        if isinstance(value, BaseModel):
            return self._tags.get(type(value))
        if isinstance(value, Mapping):
            return self.lookup_tag(value)
        logger.debug(
            f"Cannot discriminate {self.name} from {type(value).__name__} value"
        )
        return None

    @property
    def annotation(self) -> Any:
        """A pydantic type for fields holding one member of this family.

        Validation selects the variant from the payload's tag. Serialization
        selects it from the runtime type of the value.
        """
        members = tuple(
            Annotated[model, Tag(tag)] for tag, model in self._variants.items()
        )
        return Annotated[
            Union[members],  # noqa: UP007
            Discriminator(
                self._discriminate,
                custom_error_type="unrecognized_variant_tag",
                custom_error_message=f"Unrecognized or missing {self.name} variant tag",
            ),
        ]
