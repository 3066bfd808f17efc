from .normalize import coerce_choice, coerce_value, coerce_values

__all__ = ["coerce_choice", "coerce_value", "coerce_values"]
