"""JSON encoding of data samples for the plotting client."""

import json

from dataplot.errors import EncodingError
from dataplot.models import DataSample


def encode(data_sample: DataSample) -> bytes:
    """Serialize ``data_sample`` into the wire document.

    The document has exactly two members, ``series`` and ``regressionLine``.
    NaN and infinities have no JSON representation and raise
    :class:`EncodingError`.
    """
    payload = data_sample.model_dump(by_alias=True)
    try:
        text = json.dumps(payload, allow_nan=False, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"Unable to encode data sample: {exc}") from exc
    return text.encode("utf-8")
