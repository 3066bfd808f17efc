from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal
from enum import Enum
from typing import Any, TypeVar

import numpy as np

from cellplot.errors import InvalidArgumentError, UnsupportedConfigurationError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


E = TypeVar("E", bound=Enum)


def coerce_values(values: Any) -> np.ndarray:
    """Flatten a batch of samples into a 1-D float64 array.

    Accepts python sequences, numpy arrays, pandas Series and torch tensors.
    Missing entries (``None``) become NaN so they cut the drawn line instead of
    failing the whole batch.
    """
    if torch is not None and isinstance(values, torch.Tensor):
        tensor = values.detach()
        if tensor.ndim != 1:
            raise InvalidArgumentError("series values must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(values, pd.Series):
        return _coerce_ndarray(values.to_numpy())

    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise InvalidArgumentError("series values must be 1-D")
        return _coerce_ndarray(values)

    if isinstance(values, (str, bytes, bytearray)):
        raise InvalidArgumentError(f"unsupported series input type: {type(values)!r}")

    if isinstance(values, Sequence):
        return _coerce_ndarray(np.asarray(list(values), dtype=object))

    if isinstance(values, Iterable):
        return _coerce_ndarray(np.asarray(list(values), dtype=object))

    raise InvalidArgumentError(f"unsupported series input type: {type(values)!r}")


def coerce_value(value: Any) -> float:
    if value is None:
        return float("nan")
    if isinstance(value, (str, bytes, bytearray)):
        raise InvalidArgumentError(f"series value must be numeric: {value!r}")
    if torch is not None and isinstance(value, torch.Tensor):
        if value.numel() != 1:
            raise InvalidArgumentError("series value tensor must hold a single element")
        return float(value.item())
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"series value must be numeric: {value!r}") from exc


def coerce_choice(kind: type[E], value: Any, *, label: str) -> E:
    """Resolve an enum member from a member, its name or its raw value."""
    if isinstance(value, kind):
        return value
    if isinstance(value, str):
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        if key in kind.__members__:
            return kind.__members__[key]
    try:
        return kind(value)
    except (ValueError, TypeError):
        raise UnsupportedConfigurationError(f"unsupported {label}: {value!r}") from None


def _coerce_ndarray(arr: np.ndarray) -> np.ndarray:
    if arr.ndim != 1:
        raise InvalidArgumentError("series values must be 1-D")
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=True)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        if isinstance(raw, (str, bytes, bytearray)):
            raise InvalidArgumentError(f"series contains non-numeric value at index {i}: {raw!r}")
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"series contains non-numeric value at index {i}: {raw!r}") from exc
    return out
