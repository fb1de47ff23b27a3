"""Linter configuration and its command-line options."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field

from testifylint.expected_actual import DEFAULT_EXPECTED_VAR_PATTERN
from testifylint.flag_values import EnumValue, KnownCheckersValue, RegexpValue
from testifylint.registry import enabled_by_default
from testifylint.suite_extra_assert_call import DEFAULT_SUITE_EXTRA_ASSERT_CALL_MODE, SuiteExtraAssertCallMode

_SUITE_EXTRA_ASSERT_CALL_MODES = {
    "remove": SuiteExtraAssertCallMode.REMOVE,
    "require": SuiteExtraAssertCallMode.REQUIRE,
}


@dataclass
class ExpectedActualConfig:
    exp_var_pattern: RegexpValue = field(default_factory=RegexpValue)


@dataclass
class SuiteExtraAssertCallConfig:
    mode: SuiteExtraAssertCallMode = DEFAULT_SUITE_EXTRA_ASSERT_CALL_MODE


@dataclass
class Config:
    enable_all: bool = False
    enabled_checkers: KnownCheckersValue = field(default_factory=KnownCheckersValue)
    expected_actual: ExpectedActualConfig = field(default_factory=ExpectedActualConfig)
    suite_extra_assert_call: SuiteExtraAssertCallConfig = field(default_factory=SuiteExtraAssertCallConfig)


def new_default() -> Config:
    """The default configuration."""
    return Config(
        enable_all=False,
        enabled_checkers=KnownCheckersValue(enabled_by_default()),
        expected_actual=ExpectedActualConfig(RegexpValue(DEFAULT_EXPECTED_VAR_PATTERN)),
        suite_extra_assert_call=SuiteExtraAssertCallConfig(DEFAULT_SUITE_EXTRA_ASSERT_CALL_MODE),
    )


class _ApplyAction(argparse.Action):
    """Hands the option's value to a function that stores it in the configuration."""

    def __init__(self, option_strings, dest, apply, **kwargs):
        super().__init__(option_strings, dest, **kwargs)
        self.apply = apply

    def __call__(self, parser, namespace, values, option_string=None):
        try:
            result = self.apply(values)
        except ValueError as exc:
            raise argparse.ArgumentError(self, str(exc)) from exc
        setattr(namespace, self.dest, result)


def bind_to_flags(cfg: Config, parser: argparse.ArgumentParser) -> None:
    """Add options to parser that write into cfg when parsed."""
    cfg.enable_all = False

    def enable_all(_values):
        cfg.enable_all = True
        return True

    def enable(values: str) -> str:
        cfg.enabled_checkers.set(values)
        return str(cfg.enabled_checkers)

    def pattern(values: str) -> str:
        cfg.expected_actual.exp_var_pattern.set(values)
        return str(cfg.expected_actual.exp_var_pattern)

    def mode(values: str) -> str:
        enum = EnumValue(_SUITE_EXTRA_ASSERT_CALL_MODES, cfg.suite_extra_assert_call.mode)
        enum.set(values)
        cfg.suite_extra_assert_call.mode = enum.value
        return str(enum)

    parser.add_argument(
        "--enable-all", dest="enable_all", action=_ApplyAction, apply=enable_all,
        nargs=0, default=False, help="enable all checkers",
    )
    parser.add_argument(
        "--enable", dest="enable", action=_ApplyAction, apply=enable,
        default=str(cfg.enabled_checkers), help="comma separated list of enabled checkers",
    )
    parser.add_argument(
        "--expected-actual.pattern", dest="expected_actual_pattern", action=_ApplyAction, apply=pattern,
        default=str(cfg.expected_actual.exp_var_pattern), help="regexp for expected variable name",
    )
    parser.add_argument(
        "--suite-extra-assert-call.mode", dest="suite_extra_assert_call_mode", action=_ApplyAction, apply=mode,
        default=str(EnumValue(_SUITE_EXTRA_ASSERT_CALL_MODES, cfg.suite_extra_assert_call.mode)),
        help="to require or remove extra Assert() call",
    )