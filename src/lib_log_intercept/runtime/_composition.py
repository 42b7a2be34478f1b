"""Runtime composition helpers wiring domain, application, and adapters.

Purpose
-------
Translate a resolved :class:`RuntimeConfig` into the live
:class:`InterceptRuntime` singleton: filter configuration, gate, formatter,
sinks, hook, and the named settings that drive them.

System Role
-----------
Anchors the clean-architecture boundary: adapters are chosen here, while
``lib_log_intercept.runtime`` exposes only the façade.
"""

from __future__ import annotations

from lib_log_intercept.adapters import OsProcessIdentity, RichConsoleSink, SeverityFileSink, SystemClock
from lib_log_intercept.application.ports import ClockPort, InterceptHost, ProcessIdentityPort
from lib_log_intercept.application.use_cases import (
    ConfigurationGate,
    InterceptHook,
    MessageFormatter,
    RecordWriter,
)
from lib_log_intercept.domain import FilterConfig
from lib_log_intercept.domain.levels import DISABLED_SETTING

from ._settings import (
    LOG_DIRECTORY_SETTING,
    LOG_LEVEL_SETTING,
    LOG_TIMEZONE_SETTING,
    RuntimeConfig,
    Setting,
    SettingsRegistry,
    parse_level_setting,
    parse_timezone_setting,
)
from ._state import InterceptRuntime


__all__ = ["build_runtime", "build_settings_registry"]


def build_runtime(
    host: InterceptHost,
    settings: RuntimeConfig,
    *,
    clock: ClockPort | None = None,
    process_id: ProcessIdentityPort | None = None,
) -> InterceptRuntime:
    """Assemble the runtime and apply ``settings``; the hook is not installed yet.

    Invalid settings raise :class:`~lib_log_intercept.domain.ConfigError`
    before anything touches ``host``.
    """

    filter_config = FilterConfig()
    gate = ConfigurationGate(filter_config, host)
    formatter = MessageFormatter(
        clock=clock if clock is not None else SystemClock(),
        process_id=process_id if process_id is not None else OsProcessIdentity(),
        statements=host,
    )
    console = _create_console(settings)
    writer = RecordWriter(console=console, file_sink_factory=SeverityFileSink)
    hook = InterceptHook(config=filter_config, formatter=formatter, writer=writer)
    registry = build_settings_registry(gate, formatter)

    registry.set(LOG_TIMEZONE_SETTING, settings.log_timezone)
    registry.set(LOG_DIRECTORY_SETTING, settings.log_directory)
    registry.set(LOG_LEVEL_SETTING, settings.log_level)

    return InterceptRuntime(
        host=host,
        hook=hook,
        gate=gate,
        filter_config=filter_config,
        formatter=formatter,
        console=console,
        settings=registry,
    )


def build_settings_registry(gate: ConfigurationGate, formatter: MessageFormatter) -> SettingsRegistry:
    """Define the public settings, each validated through ``gate``."""

    def _apply_level(value: str) -> None:
        gate.set_filter_level(parse_level_setting(value))

    def _apply_timezone(value: str) -> None:
        formatter.zone = parse_timezone_setting(value)

    registry = SettingsRegistry()
    registry.define(
        Setting(
            name=LOG_LEVEL_SETTING,
            default=DISABLED_SETTING,
            short_description="Log level to intercept.",
            long_description=f'Ensure that the host emits logs at "{LOG_LEVEL_SETTING}" via its "log_min_messages" setting.',
            apply=_apply_level,
        )
    )
    registry.define(
        Setting(
            name=LOG_DIRECTORY_SETTING,
            default="",
            short_description="Destination directory to store intercepted log messages into a file.",
            long_description='Log file name will be of the form "LOG_LEVEL.log"; empty writes to standard error.',
            apply=gate.set_output_directory,
        )
    )
    registry.define(
        Setting(
            name=LOG_TIMEZONE_SETTING,
            default="",
            short_description="Time zone used for intercepted record timestamps.",
            long_description="IANA time zone name; empty uses the local time zone.",
            apply=_apply_timezone,
        )
    )
    return registry


def _create_console(settings: RuntimeConfig) -> RichConsoleSink:
    return RichConsoleSink(
        console=settings.console,
        colorize=settings.colorize,
        force_color=settings.force_color,
        no_color=settings.no_color,
    )
