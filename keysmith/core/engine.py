"""
Keysmith Engine
================

Central orchestrator for secret generation. :class:`KeysmithEngine`
resolves policies from explicit arguments and configuration defaults,
drives the generators with a single random source, and exposes strength
analysis and clipboard export behind one facade.

One engine owns one random source. Two engines built with the same seed
and asked for the same sequence of secrets produce identical output.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
"""

from __future__ import annotations

from typing import Callable, Optional

from shared.config import KeysmithConfig
from shared.logger import KeysmithLogger

from keysmith.analyzers.strength import StrengthAnalyzer
from keysmith.core.errors import InvalidConfigurationError, LengthValidationError
from keysmith.core.models import (
    GeneratedSecret,
    PasswordPolicy,
    PinPolicy,
    SecretKind,
    StrengthReport,
)
from keysmith.generators.password import generate_password
from keysmith.generators.pin import generate_pin_number
from keysmith.generators.random_source import RandomSource, create_random_source
from keysmith.output.clipboard import copy_to_clipboard
from keysmith.parsers.length_parser import parse_password_length, parse_pin_length


class KeysmithEngine:
    """Generates, analyses, and exports secrets.

    Usage::

        engine = KeysmithEngine(seed=0)
        policy = engine.password_policy(length=16, numbers=True)
        secret = engine.generate_password(policy)
        report = engine.analyze(secret)

    Attributes:
        config: Keysmith configuration instance.
        seed: Seed of the random source, or ``None`` when non-deterministic.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[KeysmithConfig] = None,
        *,
        seed: Optional[int] = None,
        random_source: Optional[RandomSource] = None,
        analyzer: Optional[StrengthAnalyzer] = None,
    ) -> None:
        self.config = config or KeysmithConfig()
        settings = self.config.global_settings
        self.logger = KeysmithLogger(
            "engine",
            log_level=settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
        )
        self.seed = seed
        self._rng = random_source or create_random_source(seed)
        self._analyzer = analyzer or StrengthAnalyzer()

    # ------------------------------------------------------------------ #
    #  Policy resolution
    # ------------------------------------------------------------------ #

    def password_policy(
        self,
        length: Optional[int] = None,
        numbers: bool = False,
        symbols: bool = False,
        require_each_class: bool = False,
    ) -> PasswordPolicy:
        """Build a password policy, filling gaps from the configuration.

        Flags can only switch a class on; a class enabled in the
        configuration stays enabled.
        """
        defaults = self.config.generator
        if length is None:
            length = self._default_length(defaults.password_length, parse_password_length)
        return PasswordPolicy(
            length=length,
            include_numbers=numbers or defaults.include_numbers,
            include_symbols=symbols or defaults.include_symbols,
            require_each_class=require_each_class or defaults.require_each_class,
        )

    def pin_policy(self, length: Optional[int] = None) -> PinPolicy:
        if length is None:
            length = self._default_length(self.config.generator.pin_length, parse_pin_length)
        return PinPolicy(length=length)

    @staticmethod
    def _default_length(value: int, parser: Callable[[str], int]) -> int:
        try:
            return parser(str(value))
        except LengthValidationError as exc:
            raise InvalidConfigurationError(
                f"invalid default length {value!r} in configuration: {exc.message}"
            ) from exc

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def generate_password(self, policy: PasswordPolicy) -> GeneratedSecret:
        classes = policy.active_classes()
        with self.logger.operation("generate_password"):
            self.logger.debug(
                "Generating password",
                length=policy.length,
                classes=[cls.value for cls in classes],
                seeded=self.seed is not None,
            )
            value = generate_password(
                self._rng,
                policy.length,
                numbers=policy.include_numbers,
                symbols=policy.include_symbols,
                require_each_class=policy.require_each_class,
            )
        return GeneratedSecret(
            kind=SecretKind.PASSWORD,
            value=value,
            length=policy.length,
            seed=self.seed,
            classes=classes,
        )

    def generate_pin(self, policy: PinPolicy) -> GeneratedSecret:
        with self.logger.operation("generate_pin"):
            self.logger.debug(
                "Generating PIN",
                length=policy.length,
                seeded=self.seed is not None,
            )
            value = generate_pin_number(self._rng, policy.length)
        return GeneratedSecret(
            kind=SecretKind.PIN,
            value=value,
            length=policy.length,
            seed=self.seed,
        )

    # ------------------------------------------------------------------ #
    #  Analysis and export
    # ------------------------------------------------------------------ #

    def analyze(self, secret: GeneratedSecret) -> StrengthReport:
        """Score *secret* with the strength analyzer.

        Raises:
            AnalysisError: If the secret cannot be scored.
        """
        with self.logger.operation("analyze"), self.logger.timed("strength analysis"):
            report = self._analyzer.analyze(secret.value)
        self.logger.info(
            "Strength analysis complete",
            kind=secret.kind.value,
            score=report.score,
        )
        return report

    def copy(self, secret: GeneratedSecret) -> None:
        """Copy *secret* to the system clipboard.

        Raises:
            ClipboardError: If the clipboard is unavailable.
        """
        with self.logger.operation("copy"):
            copy_to_clipboard(secret.value)
            self.logger.info("Copied secret to clipboard", kind=secret.kind.value)
