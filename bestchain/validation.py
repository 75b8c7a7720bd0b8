from typing import (
    Any,
    Sequence,
    Union,
)

from eth_typing import (
    Hash32,
)
from eth_utils import (
    ValidationError,
)

from bestchain.constants import (
    HASH_SIZE,
    INT_32_MAX,
    UINT_32_MAX,
)


def validate_is_bytes(value: bytes, title: str = "Value") -> None:
    if not isinstance(value, bytes):
        raise ValidationError(f"{title} must be a byte string.  Got: {type(value)}")


def validate_is_integer(value: Union[int, bool], title: str = "Value") -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"{title} must be a an integer.  Got: {type(value)}")


def validate_length(value: Sequence[Any], length: int, title: str = "Value") -> None:
    if not len(value) == length:
        raise ValidationError(
            f"{title} must be of length {length}.  Got {value!r} of length {len(value)}"
        )


def validate_gte(value: int, minimum: int, title: str = "Value") -> None:
    validate_is_integer(value, title=title)
    if value < minimum:
        raise ValidationError(
            f"{title} {value} is not greater than or equal to {minimum}"
        )


def validate_lte(value: int, maximum: int, title: str = "Value") -> None:
    validate_is_integer(value, title=title)
    if value > maximum:
        raise ValidationError(f"{title} {value} is not less than or equal to {maximum}")


def validate_word(value: Hash32, title: str = "Value") -> None:
    if not isinstance(value, bytes):
        raise ValidationError(
            f"{title} is not a valid word. Must be of bytes type: Got: {type(value)}"
        )
    elif not len(value) == HASH_SIZE:
        raise ValidationError(
            f"{title} is not a valid word. Must be {HASH_SIZE} bytes in length: "
            f"Got: {len(value)}"
        )


def validate_uint32(value: int, title: str = "Value") -> None:
    validate_gte(value, 0, title=title)
    validate_lte(value, UINT_32_MAX, title=title)


def validate_height(height: int, title: str = "Height") -> None:
    validate_gte(height, 0, title=title)
    validate_lte(height, INT_32_MAX, title=title)
