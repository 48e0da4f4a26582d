"""
Random Data Generator — random primitives and composite fixtures.

Produces random strings, integers, and objects/arrays whose values follow an
item kind plus an optional content specification (ordered slots).

Item kinds:
    string       random string, or the slots concatenated when content is given
    number       random integer in [0, random_number_length]
    array        list with one value per slot
    custom       deep copy of ``custom_item``
    customArray  like ``array``, but literal slots without a value hold a
                 deep copy of ``custom_item``

Slot modes:
    randomString  random string of ``random_string_length``
    literal       the slot's literal value
    randomNumber  random integer in [0, random_number_length]
    ascending     position of the item, prefixed by the literal when given
"""
import copy
import logging
from typing import Any, Dict, List, Optional, Sequence, Union

import numpy as np
from jsonschema import ValidationError, validate

from helpkit.config import settings
from helpkit.config.constants import (
    DEFAULT_ARRAY_LENGTH,
    DEFAULT_KEY_COUNT,
    DEFAULT_RANDOM_INT_MAX,
    DEFAULT_RANDOM_STRING_LENGTH,
    RANDOM_ALPHABET,
)
from helpkit.config.schemas import ITEM_CONTENT_SCHEMA
from helpkit.models.random_spec import ContentMode, ContentSlot, GeneratorOptions, ItemKind

logger = logging.getLogger(__name__)

OptionsInput = Optional[Union[GeneratorOptions, dict]]
ContentInput = Optional[Sequence[Any]]


def _coerce_options(options: OptionsInput) -> GeneratorOptions:
    if options is None:
        return GeneratorOptions()
    if isinstance(options, GeneratorOptions):
        return options
    return GeneratorOptions(**options)


def _coerce_content(item_content: ContentInput) -> List[ContentSlot]:
    if not item_content:
        return []
    if all(isinstance(slot, ContentSlot) for slot in item_content):
        return list(item_content)

    # jsonschema only treats lists as arrays
    raw = [list(slot) if isinstance(slot, tuple) else slot for slot in item_content]
    try:
        validate(instance=raw, schema=ITEM_CONTENT_SCHEMA)
    except ValidationError as e:
        raise ValueError(f"Invalid item content: {e.message}") from e
    return [ContentSlot.from_raw(slot) for slot in raw]


class RandomGenerator:
    """
    Random value factory backed by a numpy ``Generator``.

    Pass a seed to get reproducible output.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def random_string(self, length: int = DEFAULT_RANDOM_STRING_LENGTH) -> str:
        """Random string of ASCII letters and digits."""
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        indices = self._rng.integers(0, len(RANDOM_ALPHABET), size=length)
        return "".join(RANDOM_ALPHABET[i] for i in indices)

    def random_int(self, max_value: int = DEFAULT_RANDOM_INT_MAX) -> int:
        """Random integer in ``[0, max_value]``."""
        if max_value < 0:
            raise ValueError(f"max_value must be non-negative, got {max_value}")
        return int(self._rng.integers(0, max_value, endpoint=True))

    # ------------------------------------------------------------------
    # Composites
    # ------------------------------------------------------------------

    def random_object(
        self,
        key_count: int = DEFAULT_KEY_COUNT,
        item_kind: Union[ItemKind, str] = ItemKind.STRING,
        custom_item: Any = None,
        item_content: ContentInput = None,
        options: OptionsInput = None,
    ) -> Dict[str, Any]:
        """
        Generate a mapping with *key_count* entries.

        Keys are random strings of ``key_length`` (unique), or the item
        index when ``use_index_as_key`` is set.
        """
        if key_count < 0:
            raise ValueError(f"key_count must be non-negative, got {key_count}")
        kind = ItemKind(item_kind)
        slots = _coerce_content(item_content)
        opts = _coerce_options(options)

        if not opts.use_index_as_key and key_count > len(RANDOM_ALPHABET) ** opts.key_length:
            raise ValueError(
                f"cannot generate {key_count} unique keys of length {opts.key_length}"
            )

        result: Dict[str, Any] = {}
        for index in range(key_count):
            if opts.use_index_as_key:
                key = str(index)
            else:
                key = self.random_string(opts.key_length)
                while key in result:
                    key = self.random_string(opts.key_length)
            result[key] = self._build_item(index, kind, custom_item, slots, opts)

        logger.debug("Generated random object: %d keys, kind=%s", key_count, kind.value)
        return result

    def random_array(
        self,
        length: int = DEFAULT_ARRAY_LENGTH,
        item_kind: Union[ItemKind, str] = ItemKind.STRING,
        custom_item: Any = None,
        item_content: ContentInput = None,
        options: OptionsInput = None,
    ) -> List[Any]:
        """Generate a list of *length* items; ``use_index_as_key`` is ignored."""
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        kind = ItemKind(item_kind)
        slots = _coerce_content(item_content)
        opts = _coerce_options(options)

        items = [self._build_item(index, kind, custom_item, slots, opts) for index in range(length)]
        logger.debug("Generated random array: %d items, kind=%s", length, kind.value)
        return items

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _build_item(
        self,
        index: int,
        kind: ItemKind,
        custom_item: Any,
        slots: List[ContentSlot],
        opts: GeneratorOptions,
    ) -> Any:
        if kind is ItemKind.STRING:
            if slots:
                return "".join(str(self._fill_slot(slot, index, opts)) for slot in slots)
            return self.random_string(opts.random_string_length)

        if kind is ItemKind.NUMBER:
            return self.random_int(opts.random_number_length)

        if kind is ItemKind.CUSTOM:
            return copy.deepcopy(custom_item)

        if kind is ItemKind.ARRAY:
            if not slots:
                slots = [ContentSlot(mode=ContentMode.RANDOM_STRING)]
            return [self._fill_slot(slot, index, opts) for slot in slots]

        # customArray
        if not slots:
            return [copy.deepcopy(custom_item)]
        return [
            copy.deepcopy(custom_item)
            if slot.mode is ContentMode.LITERAL and slot.literal is None
            else self._fill_slot(slot, index, opts)
            for slot in slots
        ]

    def _fill_slot(self, slot: ContentSlot, index: int, opts: GeneratorOptions) -> Any:
        if slot.mode is ContentMode.RANDOM_STRING:
            return self.random_string(opts.random_string_length)
        if slot.mode is ContentMode.RANDOM_NUMBER:
            return self.random_int(opts.random_number_length)
        if slot.mode is ContentMode.ASCENDING:
            return f"{slot.literal}{index}" if slot.literal else index
        return slot.literal


# ==========================================================================
# Module-level helpers backed by a shared generator
# ==========================================================================
_default_generator = RandomGenerator(settings.RANDOM_SEED)


def random_string(length: int = DEFAULT_RANDOM_STRING_LENGTH) -> str:
    return _default_generator.random_string(length)


def random_int(max_value: int = DEFAULT_RANDOM_INT_MAX) -> int:
    return _default_generator.random_int(max_value)


def random_object(
    key_count: int = DEFAULT_KEY_COUNT,
    item_kind: Union[ItemKind, str] = ItemKind.STRING,
    custom_item: Any = None,
    item_content: ContentInput = None,
    options: OptionsInput = None,
) -> Dict[str, Any]:
    return _default_generator.random_object(key_count, item_kind, custom_item, item_content, options)


def random_array(
    length: int = DEFAULT_ARRAY_LENGTH,
    item_kind: Union[ItemKind, str] = ItemKind.STRING,
    custom_item: Any = None,
    item_content: ContentInput = None,
    options: OptionsInput = None,
) -> List[Any]:
    return _default_generator.random_array(length, item_kind, custom_item, item_content, options)
