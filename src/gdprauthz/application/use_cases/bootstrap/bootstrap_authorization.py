"""Bootstrap use case - seed role defaults and validate stored references."""

import logging
from collections.abc import Mapping

from gdprauthz.application.services.catalog import PermissionCatalog
from gdprauthz.domain.value_objects import Role

logger = logging.getLogger(__name__)


class BootstrapAuthorizationUseCase:
    """Run once at startup, before the first request is served."""

    def __init__(
        self,
        unit_of_work_factory: type,
        catalog: PermissionCatalog,
        role_defaults: Mapping[Role, frozenset[str]],
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._catalog = catalog
        self._role_defaults = role_defaults

    async def execute(self) -> int:
        """Seed the role table when empty, then fail fast on unknown ids.

        Returns the number of seeded rows. Raises ConfigurationError if a
        seed, stored role default or stored override names a permission
        outside the catalog.
        """
        for ids in self._role_defaults.values():
            self._catalog.require(ids)

        seeded = 0
        async with self._uow_factory() as uow:
            existing = await uow.role_defaults.list_all()
            if not existing:
                for role, ids in self._role_defaults.items():
                    for pid in sorted(ids):
                        await uow.role_defaults.set_default(role, pid, True)
                        seeded += 1
                existing = await uow.role_defaults.list_all()
            override_ids = await uow.overrides.list_permission_ids()

        self._catalog.require({d.permission_id for d in existing})
        self._catalog.require(override_ids)
        if seeded:
            logger.info("Seeded %d role default(s)", seeded)
        logger.info(
            "Authorization bootstrapped: %d permissions, %d role default rows",
            len(self._catalog),
            len(existing),
        )
        return seeded
