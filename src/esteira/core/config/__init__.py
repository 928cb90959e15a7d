# src/esteira/core/config/__init__.py
"""
Camada de configuração da Esteira.

Responsabilidades do pacote:
    - Carregar defaults + overrides locais (YAML ou JSON)
    - Resolver a configuração final via deep-merge determinístico
    - Derivar hooks de trace a partir da seção `engine.trace`
"""
from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidTraceConfigError,
    UnsupportedConfigFormatError,
)
from .hooks import TraceSettings, hooks_from_config, trace_recorder_from_config, trace_settings
from .loader import load_config
from .merge import deep_merge

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidTraceConfigError",
    "UnsupportedConfigFormatError",
    "TraceSettings",
    "deep_merge",
    "hooks_from_config",
    "load_config",
    "trace_recorder_from_config",
    "trace_settings",
]
