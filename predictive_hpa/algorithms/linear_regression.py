"""
Linear regression forecasting algorithm.

Reads a JSON document from stdin::

    {"lookAhead": 10000, "evaluations": [{"id": 1, "created": "...",
      "evaluation": {"targetReplicas": 3}}, ...]}

fits an ordinary least squares line of target replicas over creation time
and prints the replica count predicted ``lookAhead`` milliseconds after the
latest evaluation, rounded half up and floored at zero.
"""

import json
import math
import sys
from datetime import datetime
from typing import Any, Dict

import numpy as np
from sklearn.linear_model import LinearRegression


def _timestamp_ms(value: str) -> float:
    return datetime.fromisoformat(value.replace("Z", "+00:00")).timestamp() * 1000


def predict(payload: Dict[str, Any]) -> int:
    look_ahead = float(payload["lookAhead"])
    points = sorted(
        (
            (_timestamp_ms(item["created"]), int(item["id"]), item)
            for item in payload["evaluations"]
        ),
        key=lambda point: (point[0], point[1]),
    )
    if not points:
        raise ValueError("no evaluations provided")

    latest = points[-1][0]
    # Offsets from the latest point keep the design matrix well conditioned.
    x = np.array([[timestamp - latest] for timestamp, _, _ in points])
    y = np.array(
        [float(item["evaluation"]["targetReplicas"]) for _, _, item in points]
    )

    regression = LinearRegression().fit(x, y)
    prediction = float(regression.predict(np.array([[look_ahead]]))[0])
    return max(0, math.floor(prediction + 0.5))


def main() -> int:
    try:
        payload = json.loads(sys.stdin.read())
        result = predict(payload)
    except (ValueError, KeyError, TypeError) as exc:
        print(f"Invalid input for linear regression: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(str(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
