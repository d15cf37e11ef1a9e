"""Configuration resolver for the provider block.

Merges declared values with the process environment. Resolution runs in two
phases: unknown values are rejected first, before any environment lookup,
because falling back on a value that may still change during planning would
be incorrect. Only then is the environment consulted and every field that
is still empty reported at once.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from .diagnostics import Diagnostics
from .models import DeclaredConfig, ProviderConfig, is_unknown
from .settings import ENV_PREFIX, env_lookup

logger = logging.getLogger(__name__)

EnvLookup = Callable[[str], str | None]


@dataclass(frozen=True)
class _Field:
    name: str
    unknown_summary: str
    missing_summary: str

    @property
    def env_var(self) -> str:
        return f"{ENV_PREFIX}{self.name.upper()}"


FIELDS = (
    _Field("username", "Unknown Username", "Missing username"),
    _Field("password", "Unknown Password value", "Missing Password"),
    _Field("baseurl", "Unknown Base Url value", "Missing baseurl"),
)


@dataclass
class ResolveResult:
    """Either a resolved config or the diagnostics explaining why not."""

    config: ProviderConfig | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    @property
    def ok(self) -> bool:
        return self.config is not None and not self.diagnostics.has_error()


def resolve(declared: DeclaredConfig, env: EnvLookup | None = None) -> ResolveResult:
    """
    Resolve the provider configuration.

    Args:
        declared: Values from the provider block
        env: Environment lookup, defaults to the process environment
            read through ProviderSettings

    Returns:
        ResolveResult with a ProviderConfig, or with one diagnostic per
        unknown field, or with one diagnostic per missing field
    """
    env = env or env_lookup
    diags = Diagnostics()

    for f in FIELDS:
        if is_unknown(getattr(declared, f.name)):
            diags.add_error(
                f.unknown_summary,
                "The provider cannot create the Custom Example client as there "
                f"is an unknown configuration value for the {f.name}. Either "
                "target apply the source of the value first, set the value "
                f"statically in the configuration, or use the {f.env_var} "
                "environment variable.",
                attribute=f.name,
            )
    if diags.has_error():
        logger.debug(f"Configuration has {len(diags)} unknown value(s)")
        return ResolveResult(diagnostics=diags)

    values: dict[str, str] = {}
    for f in FIELDS:
        declared_value = getattr(declared, f.name)
        if declared_value is not None:
            values[f.name] = declared_value
        else:
            values[f.name] = env(f.env_var) or ""

    for f in FIELDS:
        if not values[f.name]:
            diags.add_error(
                f.missing_summary,
                "The provider cannot create the Custom Example client as there "
                f"is a missing or empty value for the {f.name}. Set the {f.name} "
                f"value in the configuration or use the {f.env_var} environment "
                "variable. If either is already set, ensure the value is not "
                "empty.",
                attribute=f.name,
            )
    if diags.has_error():
        logger.debug(f"Configuration is missing {len(diags)} value(s)")
        return ResolveResult(diagnostics=diags)

    config = ProviderConfig(
        username=values["username"],
        password=values["password"],
        baseurl=values["baseurl"],
    )
    logger.info(f"Resolved provider configuration for {config.baseurl}")
    return ResolveResult(config=config)
