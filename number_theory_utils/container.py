from dependency_injector import containers, providers

from .calculator import NumberTheoryCalculator
from .config import NumberTheoryConfig


class Container(containers.DeclarativeContainer):
    """DI Container for the calculator and its settings."""

    config = providers.Singleton(NumberTheoryConfig.from_env)

    calculator = providers.Singleton(NumberTheoryCalculator, config=config)
