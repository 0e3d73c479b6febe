"""
Password Strength Analyzer
===========================

Scores a generated secret with zxcvbn and maps the result onto
:class:`~keysmith.core.models.StrengthReport`.

zxcvbn matches the input against dictionaries, keyboard walks, dates,
repeats and sequences, then estimates the guess count of the cheapest
decomposition. Crack times are reported for four attack rates:

- Online, throttled:     100 guesses/hour
- Online, unthrottled:   10 guesses/second
- Offline, slow hash:    10^4 guesses/second
- Offline, fast hash:    10^10 guesses/second

References:
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security Symposium.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from zxcvbn import zxcvbn

from keysmith.core.errors import AnalysisError
from keysmith.core.models import CrackTimeEstimate, StrengthLevel, StrengthReport

Scorer = Callable[[str], dict[str, Any]]

# (zxcvbn key, rate label, report description)
_CRACK_TIME_RATES: list[tuple[str, str, str]] = [
    ("online_throttling_100_per_hour", "100/h", "100 attempts/hour"),
    ("online_no_throttling_10_per_second", "10/s", "10 attempts/second"),
    ("offline_slow_hashing_1e4_per_second", "10^4/s", "10^4 attempts/second"),
    ("offline_fast_hashing_1e10_per_second", "10^10/s", "10^10 attempts/second"),
]


def _score_with_zxcvbn(secret: str) -> dict[str, Any]:
    # zxcvbn rejects input above max_length, which defaults to 72
    return zxcvbn(secret, max_length=len(secret))


class StrengthAnalyzer:
    """Estimates the strength of a secret.

    Usage::

        analyzer = StrengthAnalyzer()
        report = analyzer.analyze("s`4V~74HzxOA")
        print(report.strength.value, report.guesses_display)

    Args:
        scorer: Callable returning a zxcvbn-shaped result dict. Defaults
            to :func:`zxcvbn.zxcvbn` with no length cap.
    """

    def __init__(self, scorer: Optional[Scorer] = None) -> None:
        self._scorer = scorer or _score_with_zxcvbn

    def analyze(self, secret: str) -> StrengthReport:
        """Score *secret*.

        Raises:
            AnalysisError: If *secret* is empty or the scorer fails.
        """
        if not secret:
            raise AnalysisError("unable to analyze an empty password")

        try:
            raw = self._scorer(secret)
            score = int(raw["score"])
            crack_times = [
                CrackTimeEstimate(
                    rate_label=label,
                    description=description,
                    seconds=float(raw["crack_times_seconds"][key]),
                    display=str(raw["crack_times_display"][key]),
                )
                for key, label, description in _CRACK_TIME_RATES
            ]
            guesses_log10 = float(raw["guesses_log10"])
        except (KeyError, TypeError, ValueError) as exc:
            raise AnalysisError(f"unable to analyze password: {exc}") from exc

        return StrengthReport(
            score=score,
            strength=StrengthLevel.from_score(score),
            guesses_log10=guesses_log10,
            crack_times=crack_times,
        )
