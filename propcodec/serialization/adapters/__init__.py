from .generic_adapter import GenericDeserializerAdapter
from .max_chars import MaxCharsDeserializer, MaxCharsExceededError

__all__ = [
    'GenericDeserializerAdapter',
    'MaxCharsDeserializer',
    'MaxCharsExceededError',
]
