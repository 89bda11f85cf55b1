"""comptrace's own log components.

The command traces itself with log_lib, the same way any application
would: one component per area, enabled through --log or $COMPTRACE_LOG.

    comptrace --log 'comptrace.config=level_debug' check 'A=warn'

Usage:
    from comptrace.components import define_components
    comps = define_components(registry)
    comps.cli.debug("dispatching {cmd}", cmd=name)
"""

from dataclasses import dataclass

from comptrace.lib.log_lib import ComponentRegistry, LogComponent


CLI_COMPONENT = 'comptrace.cli'
CONFIG_COMPONENT = 'comptrace.config'

COMPONENT_DESCRIPTIONS = {
    CLI_COMPONENT:    'Argument parsing and command dispatch',
    CONFIG_COMPONENT: 'Configuration resolution',
}


@dataclass
class AppComponents:
    cli: LogComponent
    config: LogComponent


def define_components(registry: ComponentRegistry) -> AppComponents:
    """Define the command's components in ``registry``.

    Call once per registry, right after creating it.
    """
    return AppComponents(
        cli=LogComponent(CLI_COMPONENT, registry),
        config=LogComponent(CONFIG_COMPONENT, registry),
    )


def format_component_list() -> str:
    """Format the command's components for bare --log listing."""
    lines = ["Available components:"]
    max_name = max(len(name) for name in COMPONENT_DESCRIPTIONS)
    for name in sorted(COMPONENT_DESCRIPTIONS):
        lines.append(f"  {name:<{max_name}}  {COMPONENT_DESCRIPTIONS[name]}")
    return "\n".join(lines)
