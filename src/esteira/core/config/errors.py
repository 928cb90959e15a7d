# src/esteira/core/config/errors.py
"""
Exceções da camada de configuração da Esteira.

Estas exceções representam falhas estruturais ao carregar, mesclar ou
interpretar configuração. Elas nunca são usadas para falhas de Steps ou
hooks, que propagam sem encapsulamento.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
"""


class ConfigError(Exception):
    """Base para erros de configuração."""


class DefaultsNotFoundError(ConfigError):
    """
    O arquivo de defaults não existe no caminho informado.

    O arquivo de defaults é obrigatório; a Esteira não cria nem infere
    defaults implicitamente.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Extensão de arquivo não suportada.

    Formatos aceitos: `.yaml`, `.yml`, `.json`. O formato nunca é
    inferido pelo conteúdo.
    """


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz do arquivo não é um mapa chave-valor."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo:
        - base:     {"engine": {"trace": {"enabled": false}}}
        - override: {"engine": "DEBUG"}
    """


class InvalidTraceConfigError(ConfigError):
    """A seção `engine.trace` possui tipo ou valor inválido."""
