from .key_token import KeyKind, KeyToken, classify_key
from .value_kind import ValueKind, type_tag
