"""
Keysmith Report Generator
==========================

Machine-readable JSON output for generated secrets, suitable for scripts
and other tools that consume Keysmith's result.

Payload shape::

    {
      "kind": "password",
      "secret": "...",
      "length": 12,
      "classes": ["letters", "digits"],
      "seed": 0,
      "analysis": {
        "strength": "strong",
        "guesses": "10^12",
        "crack_times": {"100/h": "...", "10/s": "...", ...}
      }
    }

``seed`` is ``null`` for non-deterministic runs and ``analysis`` is only
present when a report was requested.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from keysmith.core.models import GeneratedSecret, StrengthReport


class KeysmithReportGenerator:
    """Serialises a secret and optional strength report to JSON."""

    def build_payload(
        self,
        secret: GeneratedSecret,
        report: Optional[StrengthReport] = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "kind": secret.kind.value,
            "secret": secret.value,
            "length": secret.length,
            "classes": [cls.value for cls in secret.classes],
            "seed": secret.seed,
        }
        if report is not None:
            payload["analysis"] = report.summary()
        return payload

    def to_json(
        self,
        secret: GeneratedSecret,
        report: Optional[StrengthReport] = None,
    ) -> str:
        return json.dumps(
            self.build_payload(secret, report),
            indent=2,
            ensure_ascii=False,
        )

    def generate_json(
        self,
        secret: GeneratedSecret,
        output_path: Path,
        report: Optional[StrengthReport] = None,
    ) -> Path:
        """Write the JSON report to *output_path* and return the path.

        Parent directories are created as needed.
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.to_json(secret, report) + "\n", encoding="utf-8")
        return output_path
