"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from federate.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Every mockable component (``oauth2``, ``twitter``, ``persistence``) gets
    its production implementation. Settings are loaded from the environment
    when first requested.

    Returns:
        DI container wired for FastAPI
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app.

    The container is stored on ``app.state.dishka_container`` and closed by
    the app lifespan, which disposes the database engine.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
