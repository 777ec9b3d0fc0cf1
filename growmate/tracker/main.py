"""GrowMate - Main application entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from growmate.shared.core.configuration import ValidationLevel, get_config_manager
from growmate.shared.core.event_bus import EventBus
from growmate.shared.core.logging_setup import configure_logging
from growmate.shared.domain.plants.repository import PlantRepository
from growmate.shared.domain.plants.seed import demo_plants
from growmate.shared.infrastructure.auth.gateway import AuthGateway, LocalAuthGateway
from growmate.tracker.state import Store

PROJECT_ROOT = Path(__file__).parent.parent.parent.resolve()

logger = logging.getLogger(__name__)


def bootstrap(
    config_dir: Optional[Path] = None,
    auth_gateway: Optional[AuthGateway] = None,
    setup_logging: bool = True,
) -> Store:
    """Build the store from configuration.

    Args:
        config_dir: Directory holding defaults.yaml / user.yaml
            (default: <project root>/config)
        auth_gateway: Login/signup provider (default: LocalAuthGateway)
        setup_logging: Install the rotating file and console handlers

    Returns:
        The initialized global store
    """
    # Load environment variables from .env file in project root
    load_dotenv(dotenv_path=PROJECT_ROOT / ".env")

    config = get_config_manager(config_dir or PROJECT_ROOT / "config").get_config(ValidationLevel.STRICT)

    if setup_logging:
        configure_logging(config.logging, base_dir=PROJECT_ROOT)

    repository = PlantRepository(demo_plants() if config.seed.demo_plants else ())
    logger.info(f"Repository seeded with {len(repository)} plant(s)")

    store = Store.initialize(
        EventBus(),
        repository=repository,
        auth_gateway=auth_gateway or LocalAuthGateway(),
        ui_config=config.ui,
    )
    logger.info("AppStateController initialized")
    return store


def main() -> None:
    store = bootstrap()
    snapshot = store.app.snapshot()
    logger.info(
        f"GrowMate ready: {len(snapshot.plants)} plant(s), "
        f"auth view '{snapshot.auth_view.value}', main view '{snapshot.main_view.value}'"
    )


if __name__ == "__main__":
    main()
